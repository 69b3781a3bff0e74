"""Resolve recognizer identifiers to callables via built-ins or entry points."""

from __future__ import annotations

import importlib.metadata
import logging
from collections.abc import Sequence

from linkedtext.errors import RecognizerNotFoundError
from linkedtext.interfaces import Recognizer
from linkedtext.recognizers.markdown import recognize_markdown_links

logger = logging.getLogger(__name__)


class RecognizerLoader:
    """Looks up recognizers by name.

    Resolution order for a name:
      - built-in recognizers shipped with this package
      - entry points registered under ``linkedtext.recognizers``
    """

    GROUP = "linkedtext.recognizers"

    BUILTINS: dict[str, Recognizer] = {
        "markdown_link": recognize_markdown_links,
    }

    def discover(self) -> list[str]:
        """Names of all resolvable recognizers, built-ins first."""
        names = list(self.BUILTINS)
        for ep in importlib.metadata.entry_points(group=self.GROUP):
            if ep.name not in names:
                names.append(ep.name)
        return names

    def _load_from_entry_point(self, name: str) -> object | None:
        eps = importlib.metadata.entry_points(group=self.GROUP)
        for ep in eps:
            if ep.name == name:
                return ep.load()
        return None

    def load(self, name: str) -> Recognizer:
        if name in self.BUILTINS:
            return self.BUILTINS[name]

        loaded = self._load_from_entry_point(name)
        if loaded is None:
            raise RecognizerNotFoundError(name)
        if not callable(loaded):
            raise TypeError(f"Recognizer entry point '{name}' is not callable: {loaded!r}")
        logger.debug("Loaded recognizer %s from entry point", name)
        return loaded

    def resolve(self, recognizers: Sequence[Recognizer | str] | Recognizer | str) -> list[Recognizer]:
        """Turn a mixed list of names and callables into callables, keeping order.

        A single name or callable is treated as a one-item list.
        """
        if isinstance(recognizers, str) or callable(recognizers):
            recognizers = [recognizers]
        return [self.load(r) if isinstance(r, str) else r for r in recognizers]
