"""Command-line interface for NoteLens."""
