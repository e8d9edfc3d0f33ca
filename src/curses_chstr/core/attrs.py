"""Attribute and color bit constants, and the masks that split them."""

from __future__ import annotations

from dataclasses import dataclass

from curses_chstr.errors import ChstrError, InvalidArgument

ATTR_BITS = 32
ATTR_LIMIT = 1 << ATTR_BITS

# ncurses layout: low byte is the character, next byte the color pair,
# attribute flags above that.
_SHIFT = 8

A_NORMAL = 0
A_CHARTEXT = (1 << _SHIFT) - 1
A_COLOR = ((1 << 8) - 1) << _SHIFT
A_ATTRIBUTES = (ATTR_LIMIT - 1) & ~A_CHARTEXT

A_STANDOUT = 1 << (_SHIFT + 8)
A_UNDERLINE = 1 << (_SHIFT + 9)
A_REVERSE = 1 << (_SHIFT + 10)
A_BLINK = 1 << (_SHIFT + 11)
A_DIM = 1 << (_SHIFT + 12)
A_BOLD = 1 << (_SHIFT + 13)
A_ALTCHARSET = 1 << (_SHIFT + 14)
A_INVIS = 1 << (_SHIFT + 15)
A_PROTECT = 1 << (_SHIFT + 16)
A_ITALIC = 1 << (_SHIFT + 23)

ATTR_NAMES: dict[str, int] = {
    "normal": A_NORMAL,
    "standout": A_STANDOUT,
    "underline": A_UNDERLINE,
    "reverse": A_REVERSE,
    "blink": A_BLINK,
    "dim": A_DIM,
    "bold": A_BOLD,
    "altcharset": A_ALTCHARSET,
    "invis": A_INVIS,
    "protect": A_PROTECT,
    "italic": A_ITALIC,
}


def color_pair(n: int) -> int:
    """Return the attribute bits selecting color pair *n*."""
    return (n << _SHIFT) & A_COLOR


def pair_number(attr: int) -> int:
    """Return the color pair number encoded in *attr*."""
    return (attr & A_COLOR) >> _SHIFT


def check_attr(attr: object) -> int:
    """Validate an attribute value and return it as an int."""
    if isinstance(attr, bool) or not isinstance(attr, int):
        raise InvalidArgument(f"attr must be an int, got {type(attr).__name__}")
    if not 0 <= attr < ATTR_LIMIT:
        raise InvalidArgument(f"attr must fit in {ATTR_BITS} bits, got {attr:#x}")
    return attr


def parse_attr(spec: str) -> int:
    """
    Parse an attribute description such as ``"bold|underline|pair:3"``.

    Names are case-insensitive; ``pair:N`` selects color pair N and a bare
    integer (decimal or ``0x`` hex) is taken as raw bits.
    """
    attr = A_NORMAL
    for part in spec.replace(",", "|").split("|"):
        name = part.strip().lower()
        if not name:
            continue
        if name.startswith("pair:"):
            try:
                attr |= color_pair(int(name[5:], 0))
            except ValueError:
                raise InvalidArgument(f"bad color pair: {part.strip()!r}") from None
        elif name in ATTR_NAMES:
            attr |= ATTR_NAMES[name]
        else:
            try:
                attr |= int(name, 0)
            except ValueError:
                raise InvalidArgument(f"unknown attribute: {part.strip()!r}") from None
    return check_attr(attr)


@dataclass(frozen=True, slots=True)
class AttrMasks:
    """
    The two masks partitioning an attribute value.

    Supplied by the display library; ``get()`` uses them to return the
    attribute bits and the color bits of a cell separately.
    """
    attributes: int
    color: int

    @classmethod
    def ncurses(cls) -> "AttrMasks":
        """Masks matching the ncurses layout defined in this module."""
        return cls(attributes=A_ATTRIBUTES, color=A_COLOR)

    @classmethod
    def from_curses(cls) -> "AttrMasks":
        """Masks read from the standard library curses module."""
        try:
            import curses
        except ImportError as exc:
            raise ChstrError(f"curses is not available on this platform: {exc}") from exc
        return cls(
            attributes=curses.A_ATTRIBUTES & (ATTR_LIMIT - 1),
            color=curses.A_COLOR & (ATTR_LIMIT - 1),
        )

    def split(self, attr: int) -> tuple[int, int]:
        """Return ``(attr & attributes, attr & color)``."""
        return attr & self.attributes, attr & self.color

    def pair_number(self, attr: int) -> int:
        """Return the color bits of *attr* shifted down to a pair number."""
        if not self.color:
            return 0
        shift = (self.color & -self.color).bit_length() - 1
        return (attr & self.color) >> shift
