"""Config loader: YAML to dataclasses."""

from dataclasses import dataclass, field
from pathlib import Path

import yaml

DEFAULT_CONFIG = Path("mindgames.yaml")


@dataclass
class TerminalConfig:
    poll_interval_ms: int = 10
    frame_delay_ms: int = 5
    escape_delay_ms: int = 25


@dataclass
class WordsConfig:
    path: str | None = None  # None = bundled list


@dataclass
class RecordConfig:
    directory: str | None = None  # save frames as PNGs when set


@dataclass
class AppConfig:
    terminal: TerminalConfig = field(default_factory=TerminalConfig)
    words: WordsConfig = field(default_factory=WordsConfig)
    record: RecordConfig = field(default_factory=RecordConfig)


def load_config(path: Path) -> AppConfig:
    """Load config from YAML file."""
    with open(path) as f:
        raw = yaml.safe_load(f) or {}

    terminal = TerminalConfig(**(raw.get("terminal") or {}))
    words = WordsConfig(**(raw.get("words") or {}))
    record = RecordConfig(**(raw.get("record") or {}))

    return AppConfig(terminal=terminal, words=words, record=record)
