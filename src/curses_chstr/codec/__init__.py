"""UTF-8 decoding collaborator."""

from curses_chstr.codec.utf8 import decode, decode_all, iter_codepoints, to_codepoint

__all__ = ["decode", "decode_all", "iter_codepoints", "to_codepoint"]
