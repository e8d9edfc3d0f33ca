"""Cell - atomic unit of an attributed character buffer."""

from dataclasses import dataclass

from curses_chstr.core.attrs import A_NORMAL

BLANK = 0x20


@dataclass(slots=True)
class Cell:
    """
    A single codepoint paired with its attribute/color bits.

    The attribute value is opaque here: it is stored and returned whole,
    and only split by an AttrMasks on the way out.
    """
    codepoint: int = BLANK
    attr: int = A_NORMAL

    @property
    def char(self) -> str:
        """The codepoint as a one-character string."""
        return chr(self.codepoint)

    def copy(self) -> "Cell":
        """Create a copy of this cell."""
        return Cell(codepoint=self.codepoint, attr=self.attr)

    def is_blank(self) -> bool:
        """Check if this cell is a space with normal attributes."""
        return self.codepoint == BLANK and self.attr == A_NORMAL
