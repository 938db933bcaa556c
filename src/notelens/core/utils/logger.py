# notelens/core/utils/logger.py

"""
Logging configuration and utilities for NoteLens.

This module provides centralized logging configuration and helper functions
so every analyzer reports progress and degraded sub-steps the same way.

The logging system provides:
- A single ``notelens`` logger configured once per process
- Console output with an optional log file
- Module-tagged messages (``[SENTIMENT] ...``)
- Analysis start/complete/error tracking used by ``AnalysisModule.run``
- Index rebuild and configuration change logging
"""

import logging
import sys
from typing import Any

# Global logger instance for singleton pattern
_logger: logging.Logger | None = None

DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(
    level: str = DEFAULT_LOG_LEVEL,
    log_file: str | None = None,
    format_string: str | None = None,
) -> logging.Logger:
    """
    Set up logging configuration for NoteLens.

    Initializes the ``notelens`` logger with a console handler and, when
    ``log_file`` is given, a file handler. Calling it again replaces the
    handlers, so the CLI can reconfigure after reading ``--log-level``.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Path to log file (optional)
        format_string: Custom log format string (optional)

    Returns:
        Configured logger instance
    """
    global _logger

    logger = logging.getLogger("notelens")
    logger.disabled = False
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    log_level = getattr(logging, level.upper(), logging.INFO)
    logger.setLevel(log_level)
    logger.propagate = False

    formatter = logging.Formatter(format_string or DEFAULT_LOG_FORMAT)

    # stderr keeps --json output on stdout clean
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    _logger = logger
    return logger


def get_logger() -> logging.Logger:
    """
    Get the global logger instance.

    If the logger hasn't been initialized yet, it is set up with the
    default configuration.

    Returns:
        The global logger instance
    """
    if _logger is None:
        return setup_logging()
    return _logger


def _format(module: str, message: str, context: str = "") -> str:
    text = f"[{module.upper()}] {message}"
    if context:
        text += f" | Context: {context}"
    return text


def log_error(
    module: str, error: str, context: str = "", exception: Exception | None = None
) -> None:
    """
    Log a standardized error message.

    Args:
        module: Name of the module where the error occurred
        error: Error message describing what went wrong
        context: Additional context information (optional)
        exception: Exception object to include stack trace (optional)
    """
    logger = get_logger()
    if exception:
        logger.error(_format(module, error, context), exc_info=exception)
    else:
        logger.error(_format(module, error, context))


def log_warning(module: str, warning: str, context: str = "") -> None:
    """Log a standardized warning message."""
    get_logger().warning(_format(module, warning, context))


def log_info(module: str, message: str, context: str = "") -> None:
    """Log a standardized info message."""
    get_logger().info(_format(module, message, context))


def log_debug(module: str, message: str, context: str = "") -> None:
    """Log a standardized debug message."""
    get_logger().debug(_format(module, message, context))


def log_analysis_start(module_name: str, text_length: int) -> None:
    """
    Log the start of an analysis module.

    Args:
        module_name: Name of the analysis module
        text_length: Length of the transcript in characters
    """
    get_logger().debug(f"Starting {module_name} analysis ({text_length} chars)")


def log_analysis_complete(module_name: str, duration: float | None = None) -> None:
    """
    Log the completion of an analysis module.

    Args:
        module_name: Name of the analysis module
        duration: Duration of the analysis in seconds (optional)
    """
    message = f"Completed {module_name} analysis"
    if duration is not None:
        message += f" (took {duration:.3f}s)"
    get_logger().debug(message)


def log_analysis_error(module_name: str, error: Exception) -> None:
    """
    Log an error that occurred during analysis.

    Args:
        module_name: Name of the analysis module
        error: The exception that occurred
    """
    get_logger().error(f"Error in {module_name} analysis: {error}", exc_info=error)


def log_index_rebuild(note_count: int, token_count: int, duration: float) -> None:
    """Log a semantic index rebuild."""
    get_logger().info(
        f"Semantic index rebuilt: {note_count} notes, {token_count} tokens "
        f"(took {duration:.3f}s)"
    )


def log_configuration_change(setting: str, old_value: Any, new_value: Any) -> None:
    """
    Log a configuration change.

    Args:
        setting: Name of the setting that changed
        old_value: Previous value of the setting
        new_value: New value of the setting
    """
    get_logger().info(f"Configuration changed: {setting} = {old_value} -> {new_value}")
