"""YAML config loading."""

from pathlib import Path

import yaml
from pydantic import ValidationError

from .models import LinkedTextConfig


def load_config(path: str | None = None) -> LinkedTextConfig:
    """Load config with resolution order: explicit path > project-local > user-global > defaults."""
    config_paths = [
        Path(path) if path else None,
        Path("./linkedtext.yaml"),
        Path.home() / ".linkedtext" / "config.yaml",
    ]

    for candidate in config_paths:
        if candidate and candidate.exists():
            try:
                with open(candidate) as f:
                    raw = yaml.safe_load(f)
                if raw is None:
                    continue
                return LinkedTextConfig(**raw)
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid YAML in {candidate}: {e}") from e
            except (TypeError, ValidationError) as e:
                raise ValueError(f"Invalid config in {candidate}: {e}") from e

    return LinkedTextConfig()


DEFAULT_CONFIG_TEMPLATE = """\
# linkedtext.yaml

# Recognizers to run, in order. Built-in: markdown_link.
# Others are looked up in the "linkedtext.recognizers" entry point group.
recognizers:
  - markdown_link

# What to do when a replacement is longer than the span it replaces
overflow: "error"              # error | truncate

# Order fragments from several recognizers by position before rewriting
sort_fragments: true

# Logging
log_level: "info"              # debug | info | warn | error
"""
