"""Graphics types, graphics contexts and the software renderer."""

__all__ = ["context", "renderer", "types"]