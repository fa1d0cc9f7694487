"""URL extraction from free-form text."""
from __future__ import annotations

import logging
from typing import List

from linkify_it import LinkifyIt

logger = logging.getLogger("qrab.extract")

# Schemas that are matched but never count as a URL: e-mail addresses and
# protocol-relative links.  Fuzzy (scheme-less) matches carry an empty schema.
_IGNORED_SCHEMAS = {"", "mailto:", "//"}

_linkify = LinkifyIt()


def extract_urls(text: str) -> List[str]:
    """Return every URL in ``text``, deduplicated, in first-occurrence order."""
    matches = _linkify.match(text) or []

    seen = set()
    urls: List[str] = []
    for match in matches:
        if match.schema.lower() in _IGNORED_SCHEMAS:
            continue
        url = match.raw
        if url in seen:
            continue
        seen.add(url)
        urls.append(url)

    logger.debug("found %d URL(s) in %d character(s) of input", len(urls), len(text))
    return urls
