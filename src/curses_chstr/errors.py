"""Exceptions raised by attributed character buffers."""

from __future__ import annotations


class ChstrError(Exception):
    """Base class for every error raised by curses_chstr."""

    kind = "ChstrError"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"{self.kind}: {self.message}"


class InvalidArgument(ChstrError, ValueError):
    """Bad argument shape or range (size, empty text, repeat count, attr)."""

    kind = "InvalidArgument"


class IndexOutOfRange(ChstrError, IndexError):
    """Offset or repeat count outside the bounds of the buffer."""

    kind = "IndexOutOfRange"


class InvalidEncoding(ChstrError, ValueError):
    """Malformed UTF-8 byte sequence."""

    kind = "InvalidEncoding"

    def __init__(self, message: str, position: int, unit: str = "byte") -> None:
        super().__init__(f"{message} at {unit} {position}")
        self.position = position


class AllocationError(ChstrError, MemoryError):
    """Cell storage could not be obtained or grown."""

    kind = "AllocationError"


class BufferReleasedError(ChstrError, RuntimeError):
    """The buffer was released and can no longer be used."""

    kind = "Released"


__all__ = [
    "ChstrError",
    "InvalidArgument",
    "IndexOutOfRange",
    "InvalidEncoding",
    "AllocationError",
    "BufferReleasedError",
]
