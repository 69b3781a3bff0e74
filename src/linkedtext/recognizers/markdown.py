"""Recognizer for Markdown-style links, e.g. ``[Fred](friend://fred)``."""

from __future__ import annotations

import logging
import re

from linkedtext.errors import MalformedLinkURLError
from linkedtext.models import RawFragment, Span, validate_link_url

logger = logging.getLogger(__name__)

# Group 1 is the label, group 2 the URL; neither may be empty
MARKDOWN_LINK_RE = re.compile(r"\[([^\]]+)\]\(([^\)]+)\)")


def recognize_markdown_links(text: str) -> list[RawFragment]:
    """Find ``[label](url)`` annotations in *text*.

    Matches whose URL does not parse are logged and skipped; the rest of the
    text is still scanned.
    """
    fragments: list[RawFragment] = []
    for match in MARKDOWN_LINK_RE.finditer(text):
        span = Span(start=match.start(), end=match.end())
        label, url = match.group(1), match.group(2)
        try:
            validate_link_url(url)
        except ValueError as exc:
            logger.warning("Skipping link: %s", MalformedLinkURLError(url, span, exc))
            continue
        fragments.append(RawFragment(span=span, replacement=label, url=url))

    return fragments
