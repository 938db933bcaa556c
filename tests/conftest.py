"""
Shared pytest fixtures and configuration for NoteLens tests.

This module provides common fixtures used across the test suite: sample
transcripts and notes, temporary note files, logging suppression and a
clean configuration for every test.
"""

import json
import os
import sys
from pathlib import Path
from typing import Any, Dict, List
from unittest.mock import MagicMock, patch

import pytest

# Put `src/` first so `import notelens` uses workspace code.
_REPO_ROOT = Path(__file__).resolve().parent.parent
if str(_REPO_ROOT / "src") not in sys.path:
    sys.path.insert(0, str(_REPO_ROOT / "src"))

from notelens.core.models import Note  # noqa: E402
from notelens.core.utils.config import reset_config  # noqa: E402


# ============================================================================
# Transcript Fixtures
# ============================================================================

@pytest.fixture
def sample_transcript() -> str:
    """A short meeting note with clear topics, names and a date."""
    return (
        "The project meeting with Sarah Johnson went really well today. "
        "We reviewed the budget for the marketing campaign and agreed on a deadline. "
        "Sarah thinks the new design is excellent and the team is excited. "
        "The client wants the final report by Friday. "
        "We need to schedule another meeting next week to discuss the launch."
    )


@pytest.fixture
def filler_transcript() -> str:
    """A rambling transcript full of filler words."""
    return (
        "Um, so I was, like, thinking about the project. "
        "You know, it's basically done, uh, I mean mostly done."
    )


# ============================================================================
# Note Fixtures
# ============================================================================

@pytest.fixture
def sample_notes() -> List[Note]:
    """A small note collection covering several tags and topics."""
    return [
        Note(
            id="n1",
            title="Team meeting",
            transcription="We discussed the project deadline and the budget with the team.",
            tags=("work", "meetings"),
            created_at=1_700_000_000_000,
            is_favorite=True,
            duration=120.0,
        ),
        Note(
            id="n2",
            title="Grocery list",
            transcription="Buy apples, bread and milk from the store.",
            tags=("personal", "shopping"),
            created_at=1_700_100_000_000,
            duration=30.0,
        ),
        Note(
            id="n3",
            title="Workout plan",
            transcription="Morning exercise: run five miles, then stretching at the gym.",
            tags=("health",),
            created_at=1_700_200_000_000,
            duration=45.0,
        ),
        Note(
            id="n4",
            title="Client call",
            transcription="The client approved the proposal for the new campaign.",
            tags=("work", "clients"),
            created_at=1_700_300_000_000,
            duration=300.0,
        ),
        Note(
            id="n5",
            title="Random thought",
            transcription="Remember to call mom on Sunday.",
            created_at=1_700_400_000_000,
            duration=10.0,
        ),
    ]


@pytest.fixture
def notes_file(tmp_path: Path, sample_notes: List[Note]) -> Path:
    """The sample notes written as a camelCase JSON list."""
    data: List[Dict[str, Any]] = []
    for note in sample_notes:
        item = note.to_dict()
        item["createdAt"] = item.pop("created_at")
        item["isFavorite"] = item.pop("is_favorite")
        data.append(item)
    path = tmp_path / "notes.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


@pytest.fixture
def transcript_file(tmp_path: Path, sample_transcript: str) -> Path:
    path = tmp_path / "transcript.txt"
    path.write_text(sample_transcript, encoding="utf-8")
    return path


# ============================================================================
# Logging Fixtures
# ============================================================================

@pytest.fixture(autouse=True)
def suppress_logging():
    """Suppress logging output during tests to keep output clean."""
    with patch("notelens.core.utils.logger.get_logger") as mock_logger:
        mock_log = MagicMock()
        mock_logger.return_value = mock_log
        yield mock_log


# ============================================================================
# Environment Fixtures
# ============================================================================

@pytest.fixture(autouse=True)
def clean_environment():
    """Strip NOTELENS_* variables and skip .env discovery for each test."""
    original_env = os.environ.copy()
    for var in [key for key in os.environ if key.startswith("NOTELENS_")]:
        del os.environ[var]

    with patch("notelens.core.utils.config.main._env_loaded", True):
        yield

    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture(autouse=True)
def fresh_config():
    """Every test starts from the default configuration."""
    reset_config()
    yield
    reset_config()
