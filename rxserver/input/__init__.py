"""Keyboard and mouse input state."""

__all__ = ["keyboard", "mouse"]