"""One-call recognize-then-rewrite helpers."""

from __future__ import annotations

from collections.abc import Sequence

from linkedtext.config.models import LinkedTextConfig
from linkedtext.interfaces import Recognizer
from linkedtext.models import LinkedText
from linkedtext.recognizers.markdown import recognize_markdown_links
from linkedtext.recognizers.recognize import recognize_all
from linkedtext.rewriter import rewrite


def process_text(
    text: str,
    recognizers: Sequence[Recognizer | str] | None = None,
    config: LinkedTextConfig | None = None,
) -> LinkedText:
    """Recognize links in *text* and rewrite it for display.

    *recognizers* overrides the names listed in ``config.recognizers``.
    """
    config = config or LinkedTextConfig()
    chosen = recognizers if recognizers is not None else config.recognizers

    fragments = recognize_all(text, chosen)
    if config.sort_fragments:
        fragments = sorted(fragments, key=lambda f: f.span.start)

    return rewrite(text, fragments, overflow=config.overflow)


def process_markdown(text: str) -> LinkedText:
    """Shortcut for text whose only links are Markdown ``[label](url)`` ones."""
    return rewrite(text, recognize_markdown_links(text))
