"""Top-level NoteLens configuration."""

from __future__ import annotations

import json
import os
from dataclasses import asdict, fields, is_dataclass
from pathlib import Path
from typing import Any

from dotenv import find_dotenv, load_dotenv

from notelens.core.utils.logger import log_configuration_change

from .analysis import AnalysisConfig
from .base import ENV_PREFIX
from .system import LoggingConfig


class NoteLensConfig:
    """
    Main configuration class for NoteLens.

    Combines configuration from three sources, lowest priority first:
    - Default values
    - A JSON configuration file
    - Environment variables (``NOTELENS_*``, optionally from a ``.env`` file)

    Sections:
    - analysis: one dataclass per analyzer (summary, sentiment, fillers,
      wordcloud, search, tagging, vocabulary)
    - logging: logger level, file and format
    """

    def __init__(self, config_file: str | None = None):
        """
        Initialize configuration with default values and optional file loading.

        Args:
            config_file: Path to a JSON configuration file. Its values override
                the defaults; environment variables override both.

        Raises:
            ValueError: If the file cannot be read or contains unknown settings
        """
        self.analysis = AnalysisConfig()
        self.logging = LoggingConfig()

        if config_file:
            self._load_from_file(config_file)

        self._load_from_env()

    def _load_from_env(self) -> None:
        """
        Load configuration from environment variables.

        Supported environment variables:
        - NOTELENS_SUMMARY_SENTENCES: Default summary length in sentences
        - NOTELENS_SUMMARY_CENTRALITY: Enable/disable centrality (1/true/yes/on)
        - NOTELENS_MAX_CENTRALITY_SENTENCES: Sentence cap for centrality
        - NOTELENS_WORDCLOUD_MAX_WORDS: Maximum words in word clouds
        - NOTELENS_LANGUAGE: Default analysis language
        - NOTELENS_SEARCH_THRESHOLD: Minimum semantic search score
        - NOTELENS_MAX_TAGS: Maximum generated tags per note
        - NOTELENS_LOG_LEVEL: Logging level
        - NOTELENS_LOG_FILE: Log file path

        Values that cannot be converted are ignored and the current value kept.
        """
        _load_dotenv()

        if os.getenv(f"{ENV_PREFIX}SUMMARY_SENTENCES"):
            try:
                self.analysis.summary.target_sentences = int(
                    os.getenv(f"{ENV_PREFIX}SUMMARY_SENTENCES", "2")
                )
            except ValueError:
                pass  # Keep current value if conversion fails

        centrality = os.getenv(f"{ENV_PREFIX}SUMMARY_CENTRALITY")
        if centrality:
            flag = centrality.strip().lower()
            if flag in ("1", "true", "yes", "on"):
                self.analysis.summary.use_centrality = True
            elif flag in ("0", "false", "no", "off"):
                self.analysis.summary.use_centrality = False

        if os.getenv(f"{ENV_PREFIX}MAX_CENTRALITY_SENTENCES"):
            try:
                self.analysis.summary.max_centrality_sentences = int(
                    os.getenv(f"{ENV_PREFIX}MAX_CENTRALITY_SENTENCES", "300")
                )
            except ValueError:
                pass

        if os.getenv(f"{ENV_PREFIX}WORDCLOUD_MAX_WORDS"):
            try:
                self.analysis.wordcloud.max_words = int(
                    os.getenv(f"{ENV_PREFIX}WORDCLOUD_MAX_WORDS", "30")
                )
            except ValueError:
                pass

        language = os.getenv(f"{ENV_PREFIX}LANGUAGE")
        if language and language.strip():
            self.analysis.wordcloud.default_language = language.strip().lower()

        if os.getenv(f"{ENV_PREFIX}SEARCH_THRESHOLD"):
            try:
                self.analysis.search.threshold = float(
                    os.getenv(f"{ENV_PREFIX}SEARCH_THRESHOLD", "0.3")
                )
            except ValueError:
                pass

        if os.getenv(f"{ENV_PREFIX}MAX_TAGS"):
            try:
                self.analysis.tagging.max_tags = int(
                    os.getenv(f"{ENV_PREFIX}MAX_TAGS", "10")
                )
            except ValueError:
                pass

        log_level = os.getenv(f"{ENV_PREFIX}LOG_LEVEL")
        if log_level:
            self.logging.level = log_level.upper()

        log_file = os.getenv(f"{ENV_PREFIX}LOG_FILE")
        if log_file:
            self.logging.file = log_file

    def _load_from_file(self, config_file: str) -> None:
        """
        Load configuration from a JSON file.

        The file mirrors ``to_dict()``::

            {
                "analysis": {"summary": {"target_sentences": 3}, ...},
                "logging": {"level": "DEBUG"}
            }

        Raises:
            ValueError: If the file is missing, unreadable, not valid JSON or
                names a section or setting that does not exist
        """
        path = Path(config_file)
        if not path.exists():
            raise ValueError(f"Config file not found: {config_file}")
        try:
            with open(path, encoding="utf-8") as f:
                config_data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ValueError(f"Error loading config file {config_file}: {e}") from e

        if not isinstance(config_data, dict):
            raise ValueError(f"Config file {config_file} must contain a JSON object")

        for section, values in config_data.items():
            if section not in ("analysis", "logging"):
                raise ValueError(f"Unknown config section: {section}")
            if not isinstance(values, dict):
                raise ValueError(f"Config section {section!r} must be an object")
            _apply(getattr(self, section), values, section)

        self.validate()

    def validate(self) -> None:
        """Validate every section that defines a ``validate`` method."""
        for value in vars(self.analysis).values():
            if hasattr(value, "validate"):
                value.validate()
        self.logging.validate()

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to a JSON-serializable dictionary."""
        return {
            "analysis": asdict(self.analysis),
            "logging": asdict(self.logging),
        }

    def save_to_file(self, config_file: str) -> None:
        with open(config_file, "w", encoding="utf-8") as f:
            json.dump(self.to_dict(), f, indent=2)


def _apply(target: Any, values: dict[str, Any], path: str) -> None:
    """Recursively copy ``values`` onto a dataclass instance."""
    known = {f.name for f in fields(target)}
    for key, value in values.items():
        if key not in known:
            raise ValueError(f"Unknown config setting: {path}.{key}")
        current = getattr(target, key)
        if is_dataclass(current):
            if not isinstance(value, dict):
                raise ValueError(f"Config section {path}.{key} must be an object")
            _apply(current, value, f"{path}.{key}")
        else:
            if value != current:
                log_configuration_change(f"{path}.{key}", current, value)
            setattr(target, key, value)


_env_loaded = False


def _load_dotenv() -> None:
    global _env_loaded
    if _env_loaded:
        return
    _env_loaded = True
    env_path = find_dotenv(usecwd=True)
    if env_path:
        load_dotenv(dotenv_path=env_path, override=False)
