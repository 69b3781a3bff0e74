"""Recognizer interface."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from linkedtext.models import RawFragment


@runtime_checkable
class Recognizer(Protocol):
    """Scans text for one link syntax.

    Any callable taking the text and returning fragments in left-to-right
    order satisfies this, plain functions included.
    """

    def __call__(self, text: str) -> list[RawFragment]: ...
