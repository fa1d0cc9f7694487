"""qrab - turn URLs found in piped text into terminal QR codes."""
from __future__ import annotations

from .errors import QrabError

__version__ = "0.1.0"

__all__ = ["QrabError", "__version__"]
