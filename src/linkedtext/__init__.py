"""linkedtext - recognize inline link annotations and rewrite text for display."""

from linkedtext.config import LinkedTextConfig, load_config
from linkedtext.errors import (
    LinkedTextError,
    MalformedLinkURLError,
    OverlappingFragmentsError,
    RecognizerNotFoundError,
    ReplacementTooLongError,
    SpanOutOfBoundsError,
)
from linkedtext.interfaces import Recognizer
from linkedtext.log import configure_logging
from linkedtext.models import FILLER, LinkedFragment, LinkedText, RawFragment, Span
from linkedtext.pipeline import process_markdown, process_text
from linkedtext.recognizers import RecognizerLoader, recognize_all, recognize_markdown_links
from linkedtext.rewriter import pad_replacement, rewrite

__version__ = "0.1.0"

__all__ = [
    "FILLER",
    "LinkedFragment",
    "LinkedText",
    "LinkedTextConfig",
    "LinkedTextError",
    "MalformedLinkURLError",
    "OverlappingFragmentsError",
    "RawFragment",
    "Recognizer",
    "RecognizerLoader",
    "RecognizerNotFoundError",
    "ReplacementTooLongError",
    "Span",
    "SpanOutOfBoundsError",
    "configure_logging",
    "load_config",
    "pad_replacement",
    "process_markdown",
    "process_text",
    "recognize_all",
    "recognize_markdown_links",
    "rewrite",
]
