"""Link recognizers and their composition."""

from linkedtext.recognizers.loader import RecognizerLoader
from linkedtext.recognizers.markdown import MARKDOWN_LINK_RE, recognize_markdown_links
from linkedtext.recognizers.recognize import recognize_all

__all__ = [
    "MARKDOWN_LINK_RE",
    "RecognizerLoader",
    "recognize_all",
    "recognize_markdown_links",
]
