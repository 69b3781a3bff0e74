"""Error types raised while recognizing and rewriting linked text."""

from __future__ import annotations

from linkedtext.models import Span


class LinkedTextError(Exception):
    """Base class for all linkedtext errors."""


class MalformedLinkURLError(LinkedTextError):
    """A link annotation whose URL does not parse.

    Recognizers log this and drop the match instead of raising it.
    """

    def __init__(self, url: str, span: Span, cause: Exception) -> None:
        self.url = url
        self.span = span
        super().__init__(f"Malformed link URL {url!r} at {span.start}:{span.end}: {cause}")
        self.__cause__ = cause


class ReplacementTooLongError(LinkedTextError):
    """Replacement text does not fit in the span it replaces."""

    def __init__(self, replacement: str, length: int) -> None:
        self.replacement = replacement
        self.length = length
        super().__init__(
            f"Replacement {replacement!r} ({len(replacement)} chars) "
            f"exceeds span length {length}"
        )


class OverlappingFragmentsError(LinkedTextError):
    """Fragments passed to the rewriter are out of order or overlap."""

    def __init__(self, previous: Span, current: Span) -> None:
        self.previous = previous
        self.current = current
        super().__init__(
            f"Fragment at {current.start}:{current.end} overlaps or precedes "
            f"fragment at {previous.start}:{previous.end}; fragments must be "
            f"sorted by start and non-overlapping"
        )


class SpanOutOfBoundsError(LinkedTextError):
    """A fragment span reaches past the end of the text."""

    def __init__(self, span: Span, text_length: int) -> None:
        self.span = span
        self.text_length = text_length
        super().__init__(
            f"Span {span.start}:{span.end} is outside text of length {text_length}"
        )


class RecognizerNotFoundError(LinkedTextError):
    """Raised when a recognizer identifier cannot be resolved."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"No recognizer found with name '{name}'")
