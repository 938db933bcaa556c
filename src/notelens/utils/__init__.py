"""Cross-cutting helpers for NoteLens."""
