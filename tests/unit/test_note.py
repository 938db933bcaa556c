"""
Tests for the Note record.
"""

import pytest

from notelens.core.models import Note


class TestNote:
    def test_from_dict_camel_case(self):
        note = Note.from_dict(
            {
                "id": 42,
                "title": "Standup",
                "text": "Short sync",
                "tags": ["work", "daily"],
                "createdAt": 1_700_000_000_000,
                "isFavorite": True,
                "unknown": "ignored",
            }
        )
        assert note.id == "42"
        assert note.transcription == "Short sync"
        assert note.tags == ("work", "daily")
        assert note.created_at == 1_700_000_000_000
        assert note.is_favorite is True

    def test_from_dict_requires_id(self):
        with pytest.raises(ValueError, match="id"):
            Note.from_dict({"title": "No id"})

    def test_tags_stored_as_tuple(self):
        assert Note(id="1", tags=["a", "b"]).tags == ("a", "b")

    def test_frozen(self):
        note = Note(id="1")
        with pytest.raises(AttributeError):
            note.title = "changed"

    def test_to_dict_round_trip(self):
        note = Note(id="1", title="T", transcription="x", tags=("a",), duration=3.0)
        assert Note.from_dict(note.to_dict()) == note
