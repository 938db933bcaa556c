"""Analysis modules for NoteLens."""
