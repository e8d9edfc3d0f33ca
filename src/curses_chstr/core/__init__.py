"""Core data structures for attributed character buffers."""

from curses_chstr.core.attrs import AttrMasks
from curses_chstr.core.cell import Cell
from curses_chstr.core.chstr import AttrBuffer, stamp

__all__ = ["AttrBuffer", "AttrMasks", "Cell", "stamp"]
