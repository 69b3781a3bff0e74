"""Shared test fixtures for linkedtext."""

import logging
import re

import pytest

from linkedtext.config.models import LinkedTextConfig
from linkedtext.models import RawFragment, Span

_MENTION_RE = re.compile(r"@(\w+)")


def recognize_mentions(text: str) -> list[RawFragment]:
    """Toy recognizer: ``@ann`` becomes ``ann`` linking to ``user://ann``."""
    return [
        RawFragment(
            span=Span(start=m.start(), end=m.end()),
            replacement=m.group(1),
            url=f"user://{m.group(1)}",
        )
        for m in _MENTION_RE.finditer(text)
    ]


@pytest.fixture
def mention_recognizer():
    return recognize_mentions


@pytest.fixture
def greeting_text():
    return "Hello [Fred](friend://fred)!"


@pytest.fixture
def crowd_text():
    return "Hello [Fred](friend://fred), [Annie](friend://annie), [Boris](friend://boris), nice to see you all!"


@pytest.fixture
def sample_config():
    return LinkedTextConfig()


@pytest.fixture
def restore_package_logger():
    logger = logging.getLogger("linkedtext")
    level = logger.level
    yield logger
    logger.setLevel(level)
