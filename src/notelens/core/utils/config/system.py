"""System-level configuration classes."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class LoggingConfig:
    """Configuration for the notelens logger."""

    level: str = "INFO"
    file: str | None = None
    format: str | None = None

    def validate(self) -> None:
        if self.level.upper() not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"logging.level: unknown level {self.level!r}")
