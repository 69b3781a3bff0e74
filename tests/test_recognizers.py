"""Tests for linkedtext.recognizers — markdown recognizer, composition, loader."""

from __future__ import annotations

import logging
from unittest.mock import MagicMock, patch

import pytest

from linkedtext.errors import RecognizerNotFoundError
from linkedtext.interfaces import Recognizer
from linkedtext.models import Span
from linkedtext.recognizers import RecognizerLoader, recognize_all, recognize_markdown_links


# ── Helpers ───────────────────────────────────────────────────────────


def make_entry_point(name: str, load_return=None):
    """Build a mock entry point with .name and .load()."""
    ep = MagicMock()
    ep.name = name
    ep.load.return_value = load_return or MagicMock()
    return ep


# ── Markdown recognizer ───────────────────────────────────────────────


class TestMarkdownRecognizer:
    def test_single_link(self, greeting_text):
        fragments = recognize_markdown_links(greeting_text)

        assert len(fragments) == 1
        fragment = fragments[0]
        assert fragment.span == Span(start=6, end=27)
        assert fragment.span.slice(greeting_text) == "[Fred](friend://fred)"
        assert fragment.replacement == "Fred"
        assert fragment.url == "friend://fred"

    def test_multiple_links_in_order(self, crowd_text):
        fragments = recognize_markdown_links(crowd_text)

        assert [f.replacement for f in fragments] == ["Fred", "Annie", "Boris"]
        assert [f.url for f in fragments] == ["friend://fred", "friend://annie", "friend://boris"]
        starts = [f.span.start for f in fragments]
        assert starts == sorted(starts)

    def test_no_links(self):
        assert recognize_markdown_links("Nothing to see here.") == []

    def test_empty_label_or_url_not_matched(self):
        assert recognize_markdown_links("[](friend://fred) and [Fred]()") == []

    def test_invalid_url_skipped(self, caplog):
        with caplog.at_level(logging.WARNING, logger="linkedtext"):
            fragments = recognize_markdown_links("[Bad](not a url)")

        assert fragments == []
        assert "not a url" in caplog.text

    def test_invalid_url_does_not_affect_other_links(self, caplog):
        text = "[Bad](not a url) then [Good](https://example.com)"
        with caplog.at_level(logging.WARNING, logger="linkedtext"):
            fragments = recognize_markdown_links(text)

        assert len(fragments) == 1
        assert fragments[0].replacement == "Good"
        assert fragments[0].span.slice(text) == "[Good](https://example.com)"

    @pytest.mark.parametrize(
        "text",
        [
            "[x]( https://example.com)",
            "[x](https://example.com )",
            "[Page](https://example.com/my page)",
            "[x](https:\\\\example.com\\a)",
            "[x](https://example.com/\ta)",
        ],
    )
    def test_urls_the_parser_would_repair_are_skipped(self, text, caplog):
        with caplog.at_level(logging.WARNING, logger="linkedtext"):
            assert recognize_markdown_links(text) == []
        assert "forbidden character" in caplog.text

    def test_offsets_are_codepoints(self):
        text = "\U0001F600 [Hi](https://example.com)"
        fragments = recognize_markdown_links(text)

        assert fragments[0].span == Span(start=2, end=27)

    def test_satisfies_recognizer_protocol(self):
        assert isinstance(recognize_markdown_links, Recognizer)


# ── recognize_all ─────────────────────────────────────────────────────


class TestRecognizeAll:
    def test_no_recognizers(self, greeting_text):
        assert recognize_all(greeting_text, []) == []

    def test_builtin_by_name(self, greeting_text):
        fragments = recognize_all(greeting_text, ["markdown_link"])
        assert fragments == recognize_markdown_links(greeting_text)

    def test_concatenates_in_recognizer_order(self, mention_recognizer):
        text = "@ann meet [Fred](friend://fred)"

        markdown_first = recognize_all(text, ["markdown_link", mention_recognizer])
        mentions_first = recognize_all(text, [mention_recognizer, "markdown_link"])

        assert [f.replacement for f in markdown_first] == ["Fred", "ann"]
        assert [f.replacement for f in mentions_first] == ["ann", "Fred"]

    def test_single_name_not_split_into_letters(self, greeting_text):
        fragments = recognize_all(greeting_text, "markdown_link")
        assert fragments == recognize_markdown_links(greeting_text)

    def test_single_callable(self, mention_recognizer):
        fragments = recognize_all("hi @ann", mention_recognizer)
        assert [f.replacement for f in fragments] == ["ann"]

    def test_unknown_name_raises(self, greeting_text):
        with patch("linkedtext.recognizers.loader.importlib.metadata.entry_points", return_value=[]):
            with pytest.raises(RecognizerNotFoundError, match="wiki_link"):
                recognize_all(greeting_text, ["wiki_link"])


# ── RecognizerLoader ──────────────────────────────────────────────────


class TestRecognizerLoader:
    @patch("linkedtext.recognizers.loader.importlib.metadata.entry_points")
    def test_discover_builtins_only(self, mock_eps):
        mock_eps.return_value = []
        assert RecognizerLoader().discover() == ["markdown_link"]

    @patch("linkedtext.recognizers.loader.importlib.metadata.entry_points")
    def test_discover_includes_entry_points(self, mock_eps):
        mock_eps.return_value = [make_entry_point("mention"), make_entry_point("markdown_link")]
        assert RecognizerLoader().discover() == ["markdown_link", "mention"]
        mock_eps.assert_called_with(group="linkedtext.recognizers")

    @patch("linkedtext.recognizers.loader.importlib.metadata.entry_points")
    def test_builtin_wins_over_entry_point(self, mock_eps):
        mock_eps.return_value = [make_entry_point("markdown_link", lambda text: [])]
        assert RecognizerLoader().load("markdown_link") is recognize_markdown_links

    @patch("linkedtext.recognizers.loader.importlib.metadata.entry_points")
    def test_load_from_entry_point(self, mock_eps, mention_recognizer):
        mock_eps.return_value = [make_entry_point("mention", mention_recognizer)]
        assert RecognizerLoader().load("mention") is mention_recognizer

    @patch("linkedtext.recognizers.loader.importlib.metadata.entry_points")
    def test_missing_name_raises(self, mock_eps):
        mock_eps.return_value = []
        with pytest.raises(RecognizerNotFoundError) as exc_info:
            RecognizerLoader().load("nope")
        assert exc_info.value.name == "nope"

    @patch("linkedtext.recognizers.loader.importlib.metadata.entry_points")
    def test_non_callable_entry_point_rejected(self, mock_eps):
        mock_eps.return_value = [make_entry_point("broken", "not callable")]
        with pytest.raises(TypeError, match="broken"):
            RecognizerLoader().load("broken")

    def test_resolve_keeps_callables_and_order(self, mention_recognizer):
        resolved = RecognizerLoader().resolve([mention_recognizer, "markdown_link"])
        assert resolved == [mention_recognizer, recognize_markdown_links]
