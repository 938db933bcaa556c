"""Core analysis, models and utilities for NoteLens."""
