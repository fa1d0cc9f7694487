# ~/qrab/src/qrab/cli/main.py
import logging
import sys

import click
from rich.console import Console
from rich.markup import escape

from .. import __version__
from ..config import Settings
from ..errors import QrabError
from ..extract import extract_urls
from ..renderer import QrGrid, render_block, render_qr, terminal_width
from ..select import select_url

console = Console(stderr=True)
logger = logging.getLogger("qrab.cli")

USAGE = """\
Usage: echo 'text with URLs' | qrab [OPTIONS]
       curl -s https://example.com | qrab

qrab extracts URLs from piped text and displays a QR code.

Options:
  -a, --all            Display all URLs (no selection menu)
  -w, --width N        Lay the grid out for N columns
      --light-theme    Use light terminal theme
      --invert         Invert colors (same as --light-theme)
  -v, --verbose        Print debug logging
  -h, --help           Print help
  -V, --version        Print version"""


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(__version__, "-V", "--version", prog_name="qrab")
@click.option("--light-theme", is_flag=True, help="Use light terminal theme (dark QR on light background)")
@click.option("--invert", is_flag=True, help="Invert QR code colors (alias for --light-theme)")
@click.option("-a", "--all", "show_all", is_flag=True, help="Display QR codes for all URLs found (no selection menu)")
@click.option("-w", "--width", type=click.IntRange(min=0), default=None, help="Terminal width for the grid layout")
@click.option("-v", "--verbose", is_flag=True, help="Print debug logging to stderr")
def cli(light_theme, invert, show_all, width, verbose):
    """Extract URLs from piped text and display QR codes in the terminal"""
    if light_theme and invert:
        raise click.UsageError("--light-theme and --invert cannot be used together")

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s %(message)s",
        stream=sys.stderr,
    )

    if _stdin_is_terminal():
        click.echo(USAGE, err=True)
        sys.exit(1)

    try:
        settings = Settings.from_options(
            light_theme=light_theme,
            invert=invert,
            show_all=show_all,
            width=width,
            verbose=verbose,
        )
        run(settings, sys.stdin.read())
    except QrabError as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}", soft_wrap=True)
        sys.exit(1)


def _stdin_is_terminal():
    return sys.stdin.isatty()


def run(settings, text):
    """Extract, select and render according to ``settings``."""
    if not text.strip():
        raise QrabError("No input received on stdin")

    urls = extract_urls(text)
    if not urls:
        raise QrabError("No URLs found in the input text")

    logger.debug("theme=%s all=%s", settings.theme.value, settings.show_all)

    if settings.show_all:
        console.print(f"Found {len(urls)} URL(s):", soft_wrap=True)
        for url in urls:
            console.print(f"  - {escape(url)}", soft_wrap=True)
        console.print()

        blocks = [render_block(url, settings.theme) for url in urls]
        width = settings.width if settings.width is not None else terminal_width()
        grid = QrGrid(blocks, terminal_width=width)
        click.echo(grid.render())
    else:
        chosen = select_url(urls)
        qr_string = render_qr(chosen, settings.theme)

        console.print(f"QR code for: {escape(chosen)}", soft_wrap=True)
        click.echo(qr_string)


if __name__ == "__main__":
    cli()
