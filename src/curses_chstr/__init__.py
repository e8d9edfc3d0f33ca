"""
curses-chstr: attributed character buffers for curses

An array of characters, plus associated curses attributes and colors at
each position, ready to be painted onto a line of terminal cells.

Quick Start:
    >>> import curses_chstr as cs
    >>> buf = cs.chstr("hi,世界", cs.A_BOLD)
    >>> buf.len()
    5
    >>> buf.set_str(4, "XY", cs.A_UNDERLINE, 3).len()
    9
    >>> buf.get(1)
    (104, 2097152, 0)

Features:
    - Build from a cell count (blank) or UTF-8 text (one cell per codepoint)
    - Substring writes with repeat counts that grow the buffer on demand
    - Single character writes that keep existing attributes
    - Attribute/color split through injectable masks
"""

__version__ = "0.1.0"

from typing import Optional, Union

# Core types
from curses_chstr.core.attrs import (
    A_ALTCHARSET,
    A_ATTRIBUTES,
    A_BLINK,
    A_BOLD,
    A_CHARTEXT,
    A_COLOR,
    A_DIM,
    A_INVIS,
    A_ITALIC,
    A_NORMAL,
    A_PROTECT,
    A_REVERSE,
    A_STANDOUT,
    A_UNDERLINE,
    AttrMasks,
    color_pair,
    pair_number,
    parse_attr,
)
from curses_chstr.core.cell import Cell
from curses_chstr.core.chstr import AttrBuffer
from curses_chstr.codec.utf8 import TextLike

# Configuration
from curses_chstr.config import ChstrConfig, default_config, set_default_config

# Errors
from curses_chstr.errors import (
    AllocationError,
    BufferReleasedError,
    ChstrError,
    IndexOutOfRange,
    InvalidArgument,
    InvalidEncoding,
)


def chstr(
    arg: Union[int, TextLike],
    attr: Optional[int] = None,
    *,
    config: Optional[ChstrConfig] = None,
) -> AttrBuffer:
    """
    Create a buffer from a cell count or from UTF-8 text.

    An int builds a blank buffer of that many cells; text builds one cell
    per codepoint with *attr* (default ``A_NORMAL``).
    """
    if isinstance(arg, bool):
        raise InvalidArgument("bad argument: expected a size or a string, got bool")
    if isinstance(arg, int):
        if attr is not None:
            raise InvalidArgument("attr is only accepted with a string")
        return AttrBuffer.by_size(arg, config=config)
    if isinstance(arg, (str, bytes, bytearray, memoryview)):
        return AttrBuffer.from_text(arg, A_NORMAL if attr is None else attr, config=config)
    raise InvalidArgument(f"bad argument: expected a size or a string, got {type(arg).__name__}")


__all__ = [
    # Version
    "__version__",
    # Core types
    "AttrBuffer",
    "AttrMasks",
    "Cell",
    "chstr",
    # Attributes
    "A_ALTCHARSET",
    "A_ATTRIBUTES",
    "A_BLINK",
    "A_BOLD",
    "A_CHARTEXT",
    "A_COLOR",
    "A_DIM",
    "A_INVIS",
    "A_ITALIC",
    "A_NORMAL",
    "A_PROTECT",
    "A_REVERSE",
    "A_STANDOUT",
    "A_UNDERLINE",
    "color_pair",
    "pair_number",
    "parse_attr",
    # Configuration
    "ChstrConfig",
    "default_config",
    "set_default_config",
    # Errors
    "ChstrError",
    "InvalidArgument",
    "IndexOutOfRange",
    "InvalidEncoding",
    "AllocationError",
    "BufferReleasedError",
]
