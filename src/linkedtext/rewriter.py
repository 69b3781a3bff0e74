"""Replace recognized fragments with their labels without moving any offsets.

Each replacement is right-padded with zero-width spaces up to the length of
the span it replaces. Every substitution therefore leaves the string length
unchanged, and the original offsets of later fragments stay valid in the
partially rewritten string.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Literal

from linkedtext.errors import (
    OverlappingFragmentsError,
    ReplacementTooLongError,
    SpanOutOfBoundsError,
)
from linkedtext.models import FILLER, LinkedFragment, LinkedText, RawFragment

logger = logging.getLogger(__name__)

OverflowPolicy = Literal["error", "truncate"]

_OVERFLOW_POLICIES = ("error", "truncate")


def pad_replacement(replacement: str, length: int, overflow: OverflowPolicy = "error") -> str:
    """Right-pad *replacement* with FILLER to exactly *length* characters.

    A replacement longer than *length* raises ReplacementTooLongError, or is
    cut down to *length* when ``overflow="truncate"``.
    """
    if overflow not in _OVERFLOW_POLICIES:
        raise ValueError(f"Unknown overflow policy: {overflow!r}")

    if len(replacement) > length:
        if overflow == "error":
            raise ReplacementTooLongError(replacement, length)
        logger.warning("Truncating replacement %r to %d characters", replacement, length)
        return replacement[:length]

    return replacement + FILLER * (length - len(replacement))


def validate_fragments(text: str, fragments: Sequence[RawFragment]) -> None:
    """Check spans fit in *text* and are sorted and non-overlapping."""
    previous = None
    for fragment in fragments:
        span = fragment.span
        if span.end > len(text):
            raise SpanOutOfBoundsError(span, len(text))
        if previous is not None and span.start < previous.end:
            raise OverlappingFragmentsError(previous, span)
        previous = span


def rewrite(
    text: str,
    fragments: Sequence[RawFragment],
    overflow: OverflowPolicy = "error",
) -> LinkedText:
    """Substitute each fragment's padded replacement into *text*.

    Fragments must be sorted by span start and must not overlap. The returned
    LinkedText holds one LinkedFragment per input fragment, with the same span
    numbers now addressing the rewritten text.
    """
    validate_fragments(text, fragments)

    rewritten = text
    linked: list[LinkedFragment] = []
    for fragment in fragments:
        span = fragment.span
        padded = pad_replacement(fragment.replacement, span.length, overflow)
        rewritten = rewritten[:span.start] + padded + rewritten[span.end:]
        label_length = min(len(fragment.replacement), span.length)
        linked.append(LinkedFragment(span=span, url=fragment.url, label_length=label_length))

    logger.debug("Rewrote %d fragment(s) in text of length %d", len(linked), len(text))
    return LinkedText(text=rewritten, fragments=tuple(linked))
