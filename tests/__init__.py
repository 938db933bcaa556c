"""
Test suite for NoteLens.

Tests are organized into:

- analysis/: one module per analyzer, plus the registry and base class
- unit/: tokenizer, configuration, logging, error handling and the Note model
- cli/: the Typer command-line interface
"""
