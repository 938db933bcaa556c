"""
Error handling for NoteLens.

Analyzers never raise for malformed or empty input. This module provides the
pieces that make that policy uniform:
- Error categorization and logging
- ``degrade_gracefully`` for optional sub-steps that fall back to a value
- ``graceful_exit`` for the CLI
"""

from __future__ import annotations

import functools
import sys
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from enum import Enum
from typing import Any, TypeVar

import typer

from notelens.core.utils.logger import log_error, log_warning

T = TypeVar("T")


class ErrorSeverity(Enum):
    """Error severity levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class ErrorCategory(Enum):
    """Error categories for better organization."""

    VALIDATION = "VALIDATION"
    PROCESSING = "PROCESSING"
    NUMERICAL = "NUMERICAL"
    RESOURCE = "RESOURCE"
    DEPENDENCY = "DEPENDENCY"
    UNKNOWN = "UNKNOWN"


@dataclass
class ErrorContext:
    """Context information for error handling."""

    module: str
    operation: str
    severity: ErrorSeverity = ErrorSeverity.ERROR
    category: ErrorCategory = ErrorCategory.UNKNOWN
    recoverable: bool = True
    technical_details: str | None = None


def categorize_error(error: Exception) -> ErrorCategory:
    """
    Categorize an exception into an ErrorCategory.

    Args:
        error: The exception to categorize

    Returns:
        The appropriate ErrorCategory for the exception
    """
    if isinstance(error, (ZeroDivisionError, FloatingPointError, OverflowError)):
        return ErrorCategory.NUMERICAL

    if isinstance(error, (ValueError, TypeError, KeyError, AttributeError, IndexError)):
        return ErrorCategory.VALIDATION

    if isinstance(error, (ImportError, ModuleNotFoundError)):
        return ErrorCategory.DEPENDENCY

    if isinstance(error, (MemoryError, OSError)):
        return ErrorCategory.RESOURCE

    if isinstance(error, (RuntimeError, NotImplementedError, AssertionError)):
        return ErrorCategory.PROCESSING

    return ErrorCategory.UNKNOWN


def get_user_friendly_message(error: Exception, category: ErrorCategory) -> str:
    """
    Generate a user-friendly error message.

    Args:
        error: The exception that occurred
        category: The error category

    Returns:
        A user-friendly error message
    """
    category_messages = {
        ErrorCategory.VALIDATION: "Invalid input or configuration",
        ErrorCategory.PROCESSING: "An error occurred while analyzing the text",
        ErrorCategory.NUMERICAL: "A calculation could not be completed",
        ErrorCategory.RESOURCE: "A file or system resource could not be used",
        ErrorCategory.DEPENDENCY: "A required library is missing",
        ErrorCategory.UNKNOWN: "An unexpected error occurred",
    }
    base_message = category_messages.get(category, "An error occurred")
    if str(error):
        return f"{base_message}: {error}"
    return base_message


def handle_error(error: Exception, context: ErrorContext) -> None:
    """Log an error with its category, at the severity named by ``context``."""
    details = context.technical_details or f"{type(error).__name__}: {error}"
    message = f"{context.operation} failed [{context.category.value}]"
    if context.severity in (ErrorSeverity.ERROR, ErrorSeverity.CRITICAL):
        log_error(context.module, message, details, exception=error)
    else:
        log_warning(context.module, message, details)
    if not context.recoverable:
        raise error


def degrade_gracefully(
    fallback: Callable[..., T] | T, module: str = "notelens"
) -> Callable[[Callable[..., T]], Callable[..., T]]:
    """
    Decorator for optional sub-steps that must never propagate errors.

    On any exception the error is categorized, logged as a warning and
    ``fallback`` is returned. A callable fallback is called with the same
    arguments as the wrapped function, so it can size its result to the input.

    Args:
        fallback: Value or callable producing the value to return on failure
        module: Module name used in the log prefix
    """

    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> T:
            try:
                return func(*args, **kwargs)
            except Exception as e:
                handle_error(
                    e,
                    ErrorContext(
                        module=module,
                        operation=func.__name__,
                        severity=ErrorSeverity.WARNING,
                        category=categorize_error(e),
                    ),
                )
                if callable(fallback):
                    return fallback(*args, **kwargs)
                return fallback

        return wrapper

    return decorator


@contextmanager
def graceful_exit() -> Iterator[None]:
    """
    Context manager for graceful exit handling in the CLI.

    Ctrl+C exits with code 130; ``typer.Exit`` (and ``CliExit``) pass through
    untouched; any other exception is logged and re-raised.
    """
    try:
        yield
    except KeyboardInterrupt:
        print("\nOperation interrupted by user.", file=sys.stderr)
        raise typer.Exit(code=130)
    except typer.Exit:
        raise
    except Exception as e:
        category = categorize_error(e)
        log_error("CLI", get_user_friendly_message(e, category), exception=e)
        raise
