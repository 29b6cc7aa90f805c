"""Cursor resources, loaded by name and cached."""

from __future__ import annotations

from dataclasses import dataclass, field

_CURSOR_SIZE = 16

DEFAULT_CURSORS: tuple[str, ...] = (
    "arrow",
    "cross",
    "hand",
    "ibeam",
    "wait",
    "resize_ns",
    "resize_ew",
    "resize_nwse",
    "resize_nesw",
)


def _blank_bitmap() -> bytes:
    return bytes(_CURSOR_SIZE * _CURSOR_SIZE // 8)


@dataclass
class Cursor:
    """A cursor image with one bit per pixel."""

    id: int
    name: str
    width: int = _CURSOR_SIZE
    height: int = _CURSOR_SIZE
    hotspot_x: int = _CURSOR_SIZE // 2
    hotspot_y: int = _CURSOR_SIZE // 2
    data: bytes = field(default_factory=_blank_bitmap)


class CursorManager:
    """Loads cursors by name; the default cursors are loaded up front."""

    def __init__(self) -> None:
        self._cursors: dict[int, Cursor] = {}
        self._by_name: dict[str, int] = {}
        self._next_id = 1
        for name in DEFAULT_CURSORS:
            self.load_cursor(name)

    def __len__(self) -> int:
        return len(self._cursors)

    def load_cursor(self, name: str) -> int:
        """Return the id of cursor *name*, creating it if not yet loaded."""
        cursor_id = self._by_name.get(name)
        if cursor_id is not None:
            return cursor_id
        cursor_id = self._next_id
        self._next_id += 1
        self._cursors[cursor_id] = Cursor(id=cursor_id, name=name)
        self._by_name[name] = cursor_id
        return cursor_id

    def get_cursor(self, cursor_id: int) -> Cursor | None:
        return self._cursors.get(cursor_id)

    def unload_cursor(self, cursor_id: int) -> None:
        """Forget a cursor; unknown ids are ignored."""
        cursor = self._cursors.pop(cursor_id, None)
        if cursor is not None:
            self._by_name.pop(cursor.name, None)

    def list_cursors(self) -> list[Cursor]:
        return list(self._cursors.values())

    def is_cursor_loaded(self, cursor_id: int) -> bool:
        return cursor_id in self._cursors