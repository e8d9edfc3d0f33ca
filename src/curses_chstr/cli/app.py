"""Typer CLI application for inspecting attributed character buffers."""

from __future__ import annotations

import logging
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from curses_chstr import chstr
from curses_chstr.config import LOG_LEVELS, default_config
from curses_chstr.core.attrs import parse_attr
from curses_chstr.core.chstr import AttrBuffer
from curses_chstr.errors import ChstrError, InvalidArgument

logger = logging.getLogger(__name__)


def configure_logging(level: str, console: Console) -> None:
    """Send library logs through rich at *level*."""
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def parse_op(spec: str) -> tuple[str, int, str, int]:
    """
    Parse an edit operation.

    ``str:OFFSET:TEXT[:REP]`` writes a substring, ``ch:OFFSET:CHAR[:REP]``
    writes a single character. Returns (kind, offset, text, rep).
    """
    kind, _, rest = spec.partition(":")
    kind = kind.strip().lower()
    if kind not in ("str", "ch"):
        raise InvalidArgument(f"operation must start with 'str:' or 'ch:', got {spec!r}")

    offset_text, sep, body = rest.partition(":")
    if not sep:
        raise InvalidArgument(f"operation needs an offset and text: {spec!r}")
    try:
        offset = int(offset_text)
    except ValueError:
        raise InvalidArgument(f"bad offset in {spec!r}") from None

    rep = 1
    head, sep, tail = body.rpartition(":")
    if sep and head and tail.isdigit():
        body, rep = head, int(tail)
    return kind, offset, body, rep


def build_table(buf: AttrBuffer, title: str = "") -> Table:
    """Tabulate the cells in use, one row per offset."""
    table = Table(title=title or None)
    table.add_column("Offset", justify="right")
    table.add_column("Codepoint")
    table.add_column("Char", justify="center")
    table.add_column("Attributes", justify="right")
    table.add_column("Pair", justify="right")
    masks = buf.config.masks
    for offset in range(1, buf.len() + 1):
        codepoint, attributes, color = buf.get(offset)
        table.add_row(
            str(offset),
            f"U+{codepoint:04X}",
            chr(codepoint) if chr(codepoint).isprintable() else "·",
            f"{attributes:#010x}",
            str(masks.pair_number(color)),
        )
    return table


def create_app() -> typer.Typer:
    """Create and configure the CLI application."""
    app = typer.Typer(
        name="curses-chstr",
        help="Build and inspect curses attributed character buffers.",
        no_args_is_help=True,
        rich_markup_mode="rich",
    )
    console = Console()
    err_console = Console(stderr=True)

    @app.callback()
    def main(
        log_level: Annotated[
            Optional[str], typer.Option("--log-level", "-l", help="Logging level")
        ] = None,
    ) -> None:
        """Build and inspect curses attributed character buffers."""
        try:
            level = (log_level or default_config().log_level).upper()
        except ChstrError as exc:
            err_console.print(f"[red]{escape(str(exc))}[/]")
            raise typer.Exit(1)
        if level not in LOG_LEVELS:
            err_console.print(f"[red]Unknown log level: {escape(level)}[/]")
            raise typer.Exit(1)
        configure_logging(level, err_console)

    @app.command()
    def show(
        text: Annotated[str, typer.Argument(help="UTF-8 text to load")] = "",
        attr: Annotated[str, typer.Option("--attr", "-a", help="Attributes, e.g. 'bold|pair:2'")] = "normal",
        size: Annotated[Optional[int], typer.Option("--size", "-n", help="Build a blank buffer of N cells")] = None,
    ) -> None:
        """Show the cells of a new buffer."""
        try:
            if size is not None:
                if text:
                    raise InvalidArgument("give either TEXT or --size, not both")
                buf = chstr(size)
            else:
                buf = chstr(text, parse_attr(attr))
        except ChstrError as exc:
            err_console.print(f"[red]{escape(str(exc))}[/]")
            raise typer.Exit(1)

        console.print(build_table(buf))
        console.print(f"[bold]len:[/] {buf.len()}  [bold]size:[/] {buf.size()}")

    @app.command()
    def edit(
        text: Annotated[str, typer.Argument(help="Initial UTF-8 text")],
        op: Annotated[
            Optional[list[str]],
            typer.Option("--op", "-o", help="str:OFFSET:TEXT[:REP] or ch:OFFSET:CHAR[:REP], applied in order"),
        ] = None,
        attr: Annotated[Optional[str], typer.Option("--attr", "-a", help="Attributes for written cells")] = None,
    ) -> None:
        """Apply set_str/set_ch operations and show the result.

        Single character writes keep existing attributes unless --attr
        is given explicitly.
        """
        try:
            bits = parse_attr(attr or "normal")
            ch_attr = parse_attr(attr) if attr is not None else None
            buf = chstr(text)
            for spec in op or []:
                kind, offset, body, rep = parse_op(spec)
                logger.info("Applying %s at %d (rep=%d)", kind, offset, rep)
                if kind == "str":
                    buf.set_str(offset, body, bits, rep)
                else:
                    buf.set_ch(offset, body, ch_attr, rep)
        except ChstrError as exc:
            err_console.print(f"[red]{escape(str(exc))}[/]")
            raise typer.Exit(1)

        console.print(build_table(buf))
        console.print(f"[bold]len:[/] {buf.len()}  [bold]size:[/] {buf.size()}")

    return app
