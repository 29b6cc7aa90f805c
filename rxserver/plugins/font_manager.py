"""Font resources, loaded by name and cached."""

from __future__ import annotations

from dataclasses import dataclass, field

_DEFAULT_SIZE = 12


@dataclass(frozen=True)
class FontStyle:
    """Style flags of a font."""

    bold: bool = False
    italic: bool = False
    underline: bool = False


@dataclass
class Font:
    """A loaded font."""

    id: int
    name: str
    size: int = _DEFAULT_SIZE
    style: FontStyle = field(default_factory=FontStyle)


class FontManager:
    """Loads fonts by name and hands out their identifiers."""

    def __init__(self) -> None:
        self._fonts: dict[int, Font] = {}
        self._by_name: dict[str, int] = {}
        self._next_id = 1

    def __len__(self) -> int:
        return len(self._fonts)

    def load_font(self, name: str) -> int:
        """Return the id of font *name*, creating it if not yet loaded."""
        font_id = self._by_name.get(name)
        if font_id is not None:
            return font_id
        font_id = self._next_id
        self._next_id += 1
        self._fonts[font_id] = Font(id=font_id, name=name)
        self._by_name[name] = font_id
        return font_id

    def get_font(self, font_id: int) -> Font | None:
        return self._fonts.get(font_id)

    def unload_font(self, font_id: int) -> None:
        """Forget a font; unknown ids are ignored."""
        font = self._fonts.pop(font_id, None)
        if font is not None:
            self._by_name.pop(font.name, None)

    def list_fonts(self) -> list[Font]:
        return list(self._fonts.values())

    def is_font_loaded(self, font_id: int) -> bool:
        return font_id in self._fonts