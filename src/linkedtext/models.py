"""Pydantic models for recognized fragments and rewritten text."""

from __future__ import annotations

import re
from typing import Any

from pydantic import (
    AnyUrl,
    BaseModel,
    ConfigDict,
    Field,
    TypeAdapter,
    ValidationError,
    field_validator,
    model_validator,
)

FILLER = "\u200b"

_URL_ADAPTER = TypeAdapter(AnyUrl)

# The URL parser silently repairs these (trims, percent-encodes, flips slashes)
_URL_FORBIDDEN_RE = re.compile(r"[\s\x00-\x1f\x7f\\]")


def validate_link_url(value: str) -> str:
    """Check that *value* parses as an absolute URI. Returns it unchanged."""
    bad = _URL_FORBIDDEN_RE.search(value)
    if bad:
        raise ValueError(f"invalid URL {value!r}: forbidden character {bad.group(0)!r}")
    try:
        _URL_ADAPTER.validate_python(value)
    except ValidationError as exc:
        reason = exc.errors()[0]["msg"]
        raise ValueError(f"invalid URL {value!r}: {reason}") from exc
    return value


class Span(BaseModel):
    """Half-open ``[start, end)`` range of codepoint offsets into a string."""

    model_config = ConfigDict(frozen=True)

    start: int = Field(ge=0)
    end: int = Field(ge=0)

    @model_validator(mode="after")
    def validate_order(self) -> Span:
        if self.end < self.start:
            raise ValueError(f"span end {self.end} is before start {self.start}")
        return self

    @property
    def length(self) -> int:
        return self.end - self.start

    def slice(self, text: str) -> str:
        return text[self.start:self.end]

    def overlaps(self, other: Span) -> bool:
        return self.start < other.end and other.start < self.end

    def to_utf16(self, text: str) -> tuple[int, int]:
        """Convert to UTF-16 code-unit offsets within *text*.

        Characters outside the BMP take two code units, so offsets after one
        shift by one per such character.
        """
        start = len(text[:self.start].encode("utf-16-le")) // 2
        length = len(text[self.start:self.end].encode("utf-16-le")) // 2
        return start, start + length


def _coerce_span(value: Any) -> Any:
    if isinstance(value, (tuple, list)) and len(value) == 2:
        return {"start": value[0], "end": value[1]}
    return value


class RawFragment(BaseModel):
    """A recognized link in the original text.

    ``span`` covers the whole annotation (e.g. ``[Fred](friend://fred)``) and
    ``replacement`` is the text shown in its place (``Fred``).
    """

    model_config = ConfigDict(frozen=True)

    span: Span
    replacement: str
    url: str

    @field_validator("span", mode="before")
    @classmethod
    def coerce_span(cls, v: Any) -> Any:
        return _coerce_span(v)

    @field_validator("url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        return validate_link_url(v)


class LinkedFragment(BaseModel):
    """A link in rewritten text, handed to the presentation layer.

    ``label_length`` counts the visible characters at the start of the span;
    the rest is filler. None when unknown.
    """

    model_config = ConfigDict(frozen=True)

    span: Span
    url: str
    label_length: int | None = Field(default=None, ge=0)

    @field_validator("span", mode="before")
    @classmethod
    def coerce_span(cls, v: Any) -> Any:
        return _coerce_span(v)

    @field_validator("url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        return validate_link_url(v)


class LinkedText(BaseModel):
    """Display text with the links that live in it."""

    model_config = ConfigDict(frozen=True)

    text: str
    fragments: tuple[LinkedFragment, ...] = ()

    def label(self, fragment: LinkedFragment) -> str:
        """Visible text of *fragment*, without filler padding.

        Without a ``label_length`` the trailing filler is stripped, which also
        drops any zero-width spaces the label itself ends with.
        """
        visible = fragment.span.slice(self.text)
        if fragment.label_length is not None:
            return visible[:fragment.label_length]
        return visible.rstrip(FILLER)

    def utf16_span(self, fragment: LinkedFragment) -> tuple[int, int]:
        return fragment.span.to_utf16(self.text)
