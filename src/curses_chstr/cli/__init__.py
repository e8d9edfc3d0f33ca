"""Command line inspector."""

from curses_chstr.cli.app import create_app

__all__ = ["create_app"]
