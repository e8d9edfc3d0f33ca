"""AttrBuffer - a growable array of attributed character cells.

A buffer holds ``size`` allocated cells of which the first ``len`` are in
use. Offsets are 1-based, like ``string.byte()`` in curses bindings, and
every read or write is checked against ``len``.
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, Optional, Sequence, Union

from curses_chstr.codec.utf8 import TextLike, decode_all, to_codepoint
from curses_chstr.config import ChstrConfig, default_config
from curses_chstr.core.attrs import A_NORMAL, check_attr
from curses_chstr.core.cell import Cell
from curses_chstr.errors import (
    AllocationError,
    BufferReleasedError,
    IndexOutOfRange,
    InvalidArgument,
)

logger = logging.getLogger(__name__)


def _check_int(value: object, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgument(f"{name} must be an int, got {type(value).__name__}")
    return value


def _allocate(count: int) -> list[Cell]:
    """Return *count* blank cells."""
    try:
        return [Cell() for _ in range(count)]
    except MemoryError:
        raise AllocationError(f"cannot allocate {count} cells") from None


def stamp(
    cells: list[Cell],
    start: int,
    pattern: Sequence[int],
    rep: int,
    attr: Optional[int],
) -> None:
    """
    Write *pattern* into *cells* *rep* times, starting at index *start*.

    Every touched cell gets the pattern's codepoint. When *attr* is None
    the cell keeps its attribute, otherwise it is overwritten. The caller
    guarantees ``start + len(pattern) * rep <= len(cells)``.
    """
    pos = start
    for _ in range(rep):
        for codepoint in pattern:
            cell = cells[pos]
            cell.codepoint = codepoint
            if attr is not None:
                cell.attr = attr
            pos += 1


class AttrBuffer:
    """
    An array of characters plus the curses attributes and color at each
    position.

    Built with :meth:`by_size` (blank cells) or :meth:`from_text` (decoded
    UTF-8 with one attribute). :meth:`set_str` may grow the buffer,
    :meth:`set_ch` never does. Storage is private: readers get copies, so
    growth never leaves a caller holding stale cells.

    A buffer is not safe for concurrent mutation; it belongs to one owner
    and sharing it across threads needs external locking.
    """

    __slots__ = ("_cells", "_len", "_config")

    def __init__(
        self,
        cells: Iterable[Cell],
        length: Optional[int] = None,
        config: Optional[ChstrConfig] = None,
    ):
        """
        Build a buffer from copies of *cells*; the first *length* are in use.

        *length* defaults to all of them. The caller's cells are copied, so
        the buffer never shares storage with anyone.
        """
        copied: list[Cell] = []
        for i, cell in enumerate(cells):
            if not isinstance(cell, Cell):
                raise InvalidArgument(f"cell {i} is not a Cell, got {type(cell).__name__}")
            to_codepoint(_check_int(cell.codepoint, f"cell {i} codepoint"))
            check_attr(cell.attr)
            copied.append(cell.copy())
        if length is None:
            length = len(copied)
        self._init(copied, _check_int(length, "length"), config)

    def _init(self, cells: list[Cell], length: int, config: Optional[ChstrConfig]) -> None:
        if not cells:
            raise InvalidArgument("a buffer needs at least one cell")
        if not 0 < length <= len(cells):
            raise InvalidArgument(f"length {length} outside [1, {len(cells)}]")
        self._config = config or default_config()
        self._config.check_capacity(len(cells))
        self._cells: Optional[list[Cell]] = cells
        self._len = length

    @classmethod
    def _adopt(cls, cells: list[Cell], length: int, config: Optional[ChstrConfig]) -> "AttrBuffer":
        """Take ownership of a freshly built *cells* list without copying."""
        buf = cls.__new__(cls)
        buf._init(cells, length, config)
        return buf

    # -- construction -------------------------------------------------------

    @classmethod
    def by_size(cls, size: int, *, config: Optional[ChstrConfig] = None) -> "AttrBuffer":
        """Create a buffer of *size* blank cells with normal attributes."""
        size = _check_int(size, "size")
        if size < 1:
            raise InvalidArgument(f"bad len: size must be >= 1, got {size}")
        config = config or default_config()
        config.check_capacity(size)
        buf = cls._adopt(_allocate(size), size, config)
        logger.debug("Created buffer of %d blank cells", size)
        return buf

    @classmethod
    def from_text(
        cls,
        text: TextLike,
        attr: int = A_NORMAL,
        *,
        config: Optional[ChstrConfig] = None,
    ) -> "AttrBuffer":
        """
        Create a buffer holding *text* with a uniform attribute.

        The buffer has one cell per decoded codepoint, not per byte.
        """
        attr = check_attr(attr)
        codepoints = decode_all(text)
        if not codepoints:
            raise InvalidArgument("empty string")
        config = config or default_config()
        config.check_capacity(len(codepoints))
        try:
            cells = [Cell(codepoint=cp, attr=attr) for cp in codepoints]
        except MemoryError:
            raise AllocationError(f"cannot allocate {len(codepoints)} cells") from None
        buf = cls._adopt(cells, len(cells), config)
        logger.debug("Created buffer from %d codepoints (attr=%#x)", len(cells), attr)
        return buf

    # -- internals ----------------------------------------------------------

    def _live(self) -> list[Cell]:
        if self._cells is None:
            raise BufferReleasedError("buffer has been released")
        return self._cells

    def _check_offset(self, offset: object) -> int:
        offset = _check_int(offset, "offset")
        length = self._len
        if not 0 < offset <= length:
            raise IndexOutOfRange(f"bad index {offset}, range: [1 .. {length}]")
        return offset

    def _grow(self, capacity: int) -> None:
        """Reallocate to exactly *capacity* cells, keeping existing content."""
        cells = self._live()
        old = len(cells)
        self._config.check_capacity(capacity)
        grown = cells + _allocate(capacity - old)
        self._cells = grown
        logger.debug("Grew buffer from %d to %d cells", old, capacity)

    # -- mutation -----------------------------------------------------------

    def set_str(
        self,
        offset: int,
        text: TextLike,
        attr: int = A_NORMAL,
        rep: int = 1,
    ) -> "AttrBuffer":
        """
        Write *text* at *offset*, repeated *rep* times, with attribute *attr*.

        The buffer grows when the write runs past its size, and its length
        is extended to cover the write. Attributes of every touched cell
        are overwritten.

        Example:
            >>> cs = AttrBuffer.by_size(10)
            >>> cs.set_str(1, "0123456789", A_BOLD)
        """
        cells = self._live()
        offset = self._check_offset(offset)
        attr = check_attr(attr)
        rep = _check_int(rep, "rep")
        if rep < 1:
            raise InvalidArgument(f"rep should > 0, got {rep}")

        pattern = decode_all(text)
        if not pattern:
            raise InvalidArgument("empty string")

        start = offset - 1
        end = start + len(pattern) * rep

        if end > len(cells):
            self._grow(end)
        if end > self._len:
            self._len = end

        stamp(self._live(), start, pattern, rep, attr)
        return self

    def set_ch(
        self,
        offset: int,
        ch: Union[int, TextLike],
        attr: Optional[int] = None,
        rep: int = 1,
    ) -> "AttrBuffer":
        """
        Set the character at *offset*, repeated over *rep* cells.

        *ch* is a codepoint or a one-character string. When *attr* is None
        the existing attributes are kept. Never grows the buffer.

        Example:
            >>> cs = AttrBuffer.by_size(10)
            >>> cs.set_ch(1, 'A', A_BOLD)
            >>> cs.set_ch(2, '风', A_NORMAL, 9)
        """
        self._live()
        offset = self._check_offset(offset)
        codepoint = to_codepoint(ch)
        if attr is not None:
            attr = check_attr(attr)
        rep = _check_int(rep, "rep")
        limit = self._len - offset + 1
        if not 0 < rep <= limit:
            raise IndexOutOfRange(f"bad rep {rep}, range: [1 .. {limit}]")

        stamp(self._live(), offset - 1, (codepoint,), rep, attr)
        return self

    # -- queries ------------------------------------------------------------

    def get(self, offset: int) -> tuple[int, int, int]:
        """
        Return ``(codepoint, attributes, color)`` for the cell at *offset*.

        Example:
            >>> cs = AttrBuffer.by_size(10)
            >>> cs.set_ch(1, 'A', A_BOLD, 10)
            >>> cs.get(9)
            (65, 2097152, 0)
        """
        cells = self._live()
        offset = self._check_offset(offset)
        cell = cells[offset - 1]
        attributes, color = self._config.masks.split(cell.attr)
        return cell.codepoint, attributes, color

    def cell(self, offset: int) -> Cell:
        """Return a copy of the cell at *offset* with its combined attribute."""
        cells = self._live()
        offset = self._check_offset(offset)
        return cells[offset - 1].copy()

    def len(self) -> int:
        """Number of cells in use."""
        self._live()
        return self._len

    def size(self) -> int:
        """Number of allocated cells."""
        return len(self._live())

    @property
    def capacity(self) -> int:
        return self.size()

    @property
    def config(self) -> ChstrConfig:
        return self._config

    @property
    def released(self) -> bool:
        return self._cells is None

    def cells(self) -> Iterator[tuple[int, Cell]]:
        """Iterate over cells in use as (offset, cell) tuples."""
        cells = self._live()
        for i in range(self._len):
            yield i + 1, cells[i].copy()

    def text(self) -> str:
        """The codepoints in use as a string."""
        cells = self._live()
        return "".join(chr(cells[i].codepoint) for i in range(self._len))

    def dup(self) -> "AttrBuffer":
        """Copy the cells in use into a new buffer; unused slack is dropped."""
        cells = self._live()
        try:
            copied = [cells[i].copy() for i in range(self._len)]
        except MemoryError:
            raise AllocationError(f"[chstr:dup] cannot allocate {self._len} cells") from None
        return AttrBuffer._adopt(copied, len(copied), self._config)

    copy = dup

    # -- release ------------------------------------------------------------

    def release(self) -> None:
        """Free the cell storage. Any later use raises BufferReleasedError."""
        self._live()
        self._cells = None
        self._len = 0
        logger.debug("Released buffer")

    def __enter__(self) -> "AttrBuffer":
        self._live()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if not self.released:
            self.release()

    # -- protocol -----------------------------------------------------------

    def __len__(self) -> int:
        return self.len()

    def __iter__(self) -> Iterator[Cell]:
        for _, cell in self.cells():
            yield cell

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AttrBuffer):
            return NotImplemented
        if self.released or other.released:
            return self is other
        a, b = self._live(), other._live()
        if self._len != other._len:
            return False
        return all(a[i] == b[i] for i in range(self._len))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        if self.released:
            return "AttrBuffer(<released>)"
        preview = self.text()
        if len(preview) > 20:
            preview = preview[:20] + "..."
        return f"AttrBuffer(len={self._len}, size={self.size()}, text={preview!r})"
