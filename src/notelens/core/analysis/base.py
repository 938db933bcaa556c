"""
Base classes and interfaces for NoteLens analysis modules.

Every analyzer exposes plain functions (``generate_summary``,
``analyze_sentiment``...) and an ``AnalysisModule`` subclass that wraps them
behind a common interface used by the registry and the CLI.

Key Features:
- Abstract base class for analysis modules
- ``run`` wrapper with start/complete/error logging that never raises
- Per-instance option overrides via the ``config`` dictionary
"""

from __future__ import annotations

import time
from abc import ABC, abstractmethod
from typing import Any

from notelens.core.utils.logger import (
    log_analysis_complete,
    log_analysis_error,
    log_analysis_start,
)


class AnalysisModule(ABC):
    """
    Abstract base class for all NoteLens analysis modules.

    Subclasses implement ``analyze`` (the pure computation) and
    ``empty_result`` (the documented empty shape returned for empty input or
    after an internal failure).
    """

    #: Registry name, e.g. "summary"
    name: str = ""

    def __init__(self, config: dict[str, Any] | None = None):
        """
        Initialize the analysis module.

        Args:
            config: Optional keyword overrides applied to every ``analyze``
                call, e.g. ``{"target_sentences": 3}``
        """
        if config is not None and not isinstance(config, dict):
            raise TypeError(
                f"config must be None or a dict, got {type(config).__name__}"
            )
        self.config = config or {}
        self.module_name = self.name or self.__class__.__name__.lower()

    def options(self, **kwargs: Any) -> dict[str, Any]:
        """Merge call-time keyword arguments over the instance config."""
        merged = dict(self.config)
        merged.update({k: v for k, v in kwargs.items() if v is not None})
        return merged

    @abstractmethod
    def analyze(self, text: str, **kwargs: Any) -> Any:
        """
        Perform the analysis on a transcript.

        Args:
            text: Transcript text (may be empty)
            **kwargs: Module-specific options

        Returns:
            The module's result dataclass
        """

    @abstractmethod
    def empty_result(self) -> Any:
        """Return the result for empty input."""

    def run(self, text: str, **kwargs: Any) -> Any:
        """
        Run ``analyze`` with logging; degrade to ``empty_result`` on error.
        """
        start_time = time.time()
        log_analysis_start(self.module_name, len(text or ""))
        try:
            result = self.analyze(text or "", **kwargs)
        except Exception as e:
            log_analysis_error(self.module_name, e)
            return self.empty_result()
        log_analysis_complete(self.module_name, time.time() - start_time)
        return result

    def get_module_info(self) -> dict[str, Any]:
        """
        Get information about this analysis module.

        Returns:
            Dictionary containing module information
        """
        return {
            "name": self.module_name,
            "description": (self.__doc__ or "No description available").strip(),
            "version": "1.0.0",
            "config": dict(self.config),
        }
