"""Shared utilities: tokenization, configuration, logging and similarity."""
