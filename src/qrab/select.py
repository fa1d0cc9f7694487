"""Interactive URL selection."""
from __future__ import annotations

import contextlib
import logging
import sys
from typing import Iterator, Optional, Sequence, TextIO, Tuple

from rich.console import Console
from rich.markup import escape
from rich.prompt import IntPrompt

from .errors import QrabError

logger = logging.getLogger("qrab.select")

PROMPT = "Select a URL to generate QR code"
TTY_PATH = "/dev/tty"


class SelectionError(QrabError):
    """Raised when no URL could be chosen."""


def select_url(urls: Sequence[str]) -> str:
    """Pick one of ``urls``; a single URL is returned without prompting."""
    if not urls:
        raise SelectionError("No URLs found in input")
    if len(urls) == 1:
        return urls[0]

    with _terminal() as (console, stream):
        return interactive_select(urls, console, stream)


def interactive_select(urls: Sequence[str], console: Console, stream: Optional[TextIO] = None) -> str:
    """Show a numbered menu on ``console`` and read the choice from ``stream``.

    ``stream`` defaults to standard input.
    """
    for number, url in enumerate(urls, start=1):
        console.print(f"  [bold cyan]{number}[/bold cyan]. {escape(url)}")

    choices = [str(number) for number in range(1, len(urls) + 1)]
    try:
        choice = IntPrompt.ask(
            PROMPT,
            console=console,
            choices=choices,
            show_choices=False,
            default=1,
            stream=stream,
        )
    except (KeyboardInterrupt, EOFError) as exc:
        raise SelectionError("URL selection cancelled") from exc

    logger.debug("selected URL %d of %d", choice, len(urls))
    return urls[choice - 1]


@contextlib.contextmanager
def _terminal() -> Iterator[Tuple[Console, Optional[TextIO]]]:
    """Yield a console and input stream attached to the user's terminal.

    Piped data occupies stdin, so the menu talks to the controlling terminal
    directly unless stdin is itself a terminal.
    """
    if sys.stdin.isatty():
        yield Console(stderr=True), None
        return

    with contextlib.ExitStack() as stack:
        try:
            tty_in = stack.enter_context(open(TTY_PATH, "r", encoding="utf-8"))
            tty_out = stack.enter_context(open(TTY_PATH, "w", encoding="utf-8"))
        except OSError as exc:
            raise SelectionError("Cannot open /dev/tty -- are you in a terminal?") from exc
        yield Console(file=tty_out), tty_in
