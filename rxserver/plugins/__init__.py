"""Atom, font and cursor registries, plugin errors and the plugin registry."""

__all__ = ["atom_registry", "cursor_manager", "errors", "font_manager", "registry"]