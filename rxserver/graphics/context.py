"""Graphics contexts: the drawing parameters used by the renderer."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import Any

from rxserver.graphics.types import (
    CapStyle,
    Color,
    FillStyle,
    Function,
    JoinStyle,
    LineStyle,
    Rectangle,
)


class _Keep:
    """Marker for an update field that leaves the current value alone."""

    _instance: "_Keep | None" = None

    def __new__(cls) -> "_Keep":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "KEEP"


KEEP = _Keep()


@dataclass
class GraphicsContext:
    """Drawing parameters: colours, line and fill styles, clipping."""

    id: int = 0
    foreground: Color = field(default_factory=lambda: Color.BLACK)
    background: Color = field(default_factory=lambda: Color.WHITE)
    line_width: int = 0
    line_style: LineStyle = LineStyle.SOLID
    cap_style: CapStyle = CapStyle.BUTT
    join_style: JoinStyle = JoinStyle.MITER
    fill_style: FillStyle = FillStyle.SOLID
    function: Function = Function.COPY
    plane_mask: int = 0xFFFFFFFF
    clip_region: Rectangle | None = None


@dataclass
class GCUpdates:
    """Partial update of a graphics context.

    Fields left as None are not changed. ``clip_region`` defaults to KEEP;
    set it to a rectangle to clip, or to None to remove clipping.
    """

    foreground: Color | None = None
    background: Color | None = None
    line_width: int | None = None
    line_style: LineStyle | None = None
    cap_style: CapStyle | None = None
    join_style: JoinStyle | None = None
    fill_style: FillStyle | None = None
    function: Function | None = None
    plane_mask: int | None = None
    clip_region: Any = KEEP

    def changes(self) -> dict[str, Any]:
        """The attributes this update sets, with their new values."""
        result = {
            f.name: getattr(self, f.name)
            for f in dataclasses.fields(self)
            if f.name != "clip_region" and getattr(self, f.name) is not None
        }
        if self.clip_region is not KEEP:
            result["clip_region"] = self.clip_region
        return result


# Bits of the copy mask and the attribute each one selects.
_COPY_MASK_BITS: tuple[tuple[int, str], ...] = (
    (0x01, "function"),
    (0x02, "plane_mask"),
    (0x04, "foreground"),
    (0x08, "background"),
    (0x10, "line_width"),
    (0x20, "line_style"),
    (0x40, "cap_style"),
    (0x80, "join_style"),
    (0x100, "fill_style"),
)


class GraphicsContextManager:
    """Owns graphics contexts and hands out their identifiers.

    Operations on an unknown identifier are silently ignored.
    """

    def __init__(self) -> None:
        self._contexts: dict[int, GraphicsContext] = {}
        self._next_id = 1

    def __len__(self) -> int:
        return len(self._contexts)

    def __contains__(self, gc_id: object) -> bool:
        return gc_id in self._contexts

    def _allocate_id(self) -> int:
        gc_id = self._next_id
        self._next_id += 1
        return gc_id

    def create_gc(self) -> int:
        """Create a context with default values and return its id."""
        gc_id = self._allocate_id()
        self._contexts[gc_id] = GraphicsContext(id=gc_id)
        return gc_id

    def create_gc_from(self, template: GraphicsContext) -> int:
        """Create a context copying every value of *template* except its id."""
        gc_id = self._allocate_id()
        self._contexts[gc_id] = dataclasses.replace(template, id=gc_id)
        return gc_id

    def get_gc(self, gc_id: int) -> GraphicsContext | None:
        """The live context for *gc_id*, or None."""
        return self._contexts.get(gc_id)

    def update_gc(self, gc_id: int, updates: GCUpdates) -> None:
        """Apply the fields set in *updates*."""
        gc = self._contexts.get(gc_id)
        if gc is None:
            return
        for name, value in updates.changes().items():
            setattr(gc, name, value)

    def copy_gc(self, src_id: int, dst_id: int, mask: int) -> None:
        """Copy the values selected by *mask* from one context to another."""
        src = self._contexts.get(src_id)
        dst = self._contexts.get(dst_id)
        if src is None or dst is None:
            return
        for bit, name in _COPY_MASK_BITS:
            if mask & bit:
                setattr(dst, name, getattr(src, name))

    def free_gc(self, gc_id: int) -> None:
        """Forget a context."""
        self._contexts.pop(gc_id, None)

    def set_clip_region(self, gc_id: int, region: Rectangle | None) -> None:
        """Set or clear the clipping rectangle."""
        gc = self._contexts.get(gc_id)
        if gc is not None:
            gc.clip_region = region