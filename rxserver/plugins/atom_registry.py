"""Registry of atoms: interned strings identified by small integers."""

from __future__ import annotations

NONE = 0
"""The reserved atom meaning "no atom"."""

_PREDEFINED: tuple[str, ...] = (
    "PRIMARY",
    "SECONDARY",
    "ARC",
    "ATOM",
    "BITMAP",
    "CARDINAL",
    "COLORMAP",
    "CURSOR",
    "CUT_BUFFER0",
    "CUT_BUFFER1",
    "CUT_BUFFER2",
    "CUT_BUFFER3",
    "CUT_BUFFER4",
    "CUT_BUFFER5",
    "CUT_BUFFER6",
    "CUT_BUFFER7",
    "DRAWABLE",
    "FONT",
    "INTEGER",
    "PIXMAP",
    "POINT",
    "RECTANGLE",
    "RESOURCE_MANAGER",
    "RGB_COLOR_MAP",
    "RGB_BEST_MAP",
    "RGB_BLUE_MAP",
    "RGB_DEFAULT_MAP",
    "RGB_GRAY_MAP",
    "RGB_GREEN_MAP",
    "RGB_RED_MAP",
    "STRING",
    "VISUALID",
    "WINDOW",
    "WM_COMMAND",
    "WM_HINTS",
    "WM_CLIENT_MACHINE",
    "WM_ICON_NAME",
    "WM_ICON_SIZE",
    "WM_NAME",
    "WM_NORMAL_HINTS",
    "WM_SIZE_HINTS",
    "WM_ZOOM_HINTS",
    "MIN_SPACE",
    "NORM_SPACE",
    "MAX_SPACE",
    "END_SPACE",
    "SUPERSCRIPT_X",
    "SUPERSCRIPT_Y",
    "SUBSCRIPT_X",
    "SUBSCRIPT_Y",
    "UNDERLINE_POSITION",
    "UNDERLINE_THICKNESS",
    "STRIKEOUT_ASCENT",
    "STRIKEOUT_DESCENT",
    "ITALIC_ANGLE",
    "X_HEIGHT",
    "QUAD_WIDTH",
    "WEIGHT",
    "POINT_SIZE",
    "RESOLUTION",
    "COPYRIGHT",
    "NOTICE",
    "FONT_NAME",
    "FAMILY_NAME",
    "FULL_NAME",
    "CAP_HEIGHT",
    "WM_CLASS",
    "WM_TRANSIENT_FOR",
)

PREDEFINED_ATOMS: tuple[str, ...] = _PREDEFINED
"""Names registered in every new registry, in id order starting at 1."""


class AtomRegistry:
    """Maps names to atoms and back; the predefined atoms are registered first."""

    def __init__(self) -> None:
        self._atoms: dict[str, int] = {}
        self._names: dict[int, str] = {}
        self._next_id = NONE + 1
        for name in _PREDEFINED:
            self.intern(name)

    def __len__(self) -> int:
        return len(self._atoms)

    def __contains__(self, name: object) -> bool:
        return name in self._atoms

    def intern(self, name: str) -> int:
        """Return the atom for *name*, registering it if it is new."""
        atom = self._atoms.get(name)
        if atom is not None:
            return atom
        atom = self._next_id
        self._next_id += 1
        self._atoms[name] = atom
        self._names[atom] = name
        return atom

    def get_name(self, atom: int) -> str | None:
        """The name of *atom*, or None if it is not registered."""
        return self._names.get(atom)

    def get_atom(self, name: str) -> int | None:
        """The atom for *name*, or None if it has not been interned."""
        return self._atoms.get(name)

    def is_valid_atom(self, atom: int) -> bool:
        """True for a registered atom other than NONE."""
        return atom != NONE and atom in self._names