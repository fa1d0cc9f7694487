"""Runtime settings for the qrab CLI.

Command line flags win; when a flag is not given the environment is
consulted:

    QRAB_LIGHT_THEME   truthy value (1, true, yes, on) selects the light theme
    QRAB_WIDTH         terminal width to lay the grid out for
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .errors import QrabError
from .renderer.qr import Theme

_TRUTHY = {"1", "true", "yes", "on"}


class ConfigError(QrabError):
    """Raised for unusable configuration values."""


@dataclass(frozen=True)
class Settings:
    theme: Theme = Theme.DARK
    show_all: bool = False
    width: Optional[int] = None
    verbose: bool = False

    @classmethod
    def from_options(
        cls,
        *,
        light_theme: bool = False,
        invert: bool = False,
        show_all: bool = False,
        width: Optional[int] = None,
        verbose: bool = False,
        environ: Optional[Mapping[str, str]] = None,
    ) -> "Settings":
        env = os.environ if environ is None else environ

        light = light_theme or invert
        if not light:
            light = env.get("QRAB_LIGHT_THEME", "").strip().lower() in _TRUTHY

        if width is None:
            width = _parse_width(env.get("QRAB_WIDTH"))

        return cls(
            theme=Theme.LIGHT if light else Theme.DARK,
            show_all=show_all,
            width=width,
            verbose=verbose,
        )


def _parse_width(raw: Optional[str]) -> Optional[int]:
    if raw is None or not raw.strip():
        return None
    try:
        width = int(raw)
    except ValueError:
        raise ConfigError(f"QRAB_WIDTH must be an integer, got {raw!r}") from None
    if width < 0:
        raise ConfigError(f"QRAB_WIDTH must not be negative, got {width}")
    return width
