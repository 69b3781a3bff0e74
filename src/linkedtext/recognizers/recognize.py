"""Run a list of recognizers over the same text."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from linkedtext.interfaces import Recognizer
from linkedtext.models import RawFragment
from linkedtext.recognizers.loader import RecognizerLoader

logger = logging.getLogger(__name__)


def recognize_all(
    text: str,
    recognizers: Sequence[Recognizer | str] | Recognizer | str,
    loader: RecognizerLoader | None = None,
) -> list[RawFragment]:
    """Concatenate fragments from each recognizer in the order given.

    No sorting or merging happens here. Fragments from different recognizers
    may interleave or overlap; ``rewrite`` rejects overlaps.
    """
    loader = loader or RecognizerLoader()
    fragments: list[RawFragment] = []
    resolved = loader.resolve(recognizers)
    for recognizer in resolved:
        fragments.extend(recognizer(text))

    logger.debug("Recognized %d fragment(s) using %d recognizer(s)", len(fragments), len(resolved))
    return fragments
