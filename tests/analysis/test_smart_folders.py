"""
Tests for tag-based smart folders.
"""

import pytest

from notelens.core.analysis.smart_folders import (
    DEFAULT_TAG_COLOR,
    create_smart_folders,
    extract_secondary_key,
    find_folders_for_note,
    get_color_for_tag,
    get_folder_breadcrumb,
    get_folder_diagnostics,
    get_folder_stats,
    get_notes_in_folder,
    search_in_folder,
)
from notelens.core.models import Note


@pytest.fixture
def tagged_notes():
    return [
        Note(id="a", title="Kickoff", tags=("meeting", "Acme"), created_at=300, duration=60),
        Note(id="b", title="Review", tags=("Meeting", "Acme"), created_at=100, duration=30),
        Note(id="c", title="Standup", tags=("meeting", "Globex"), created_at=200, duration=10),
        Note(id="d", title="Receipts", tags=("finance",), created_at=50),
        Note(id="e", title="Diary", tags=("personal",), created_at=60),
        Note(id="f", title="Untagged", created_at=70),
        Note(id="g", title="Forecast", tags=("finance", "Q3"), created_at=400),
    ]


class TestCreateSmartFolders:
    def test_empty(self):
        structure = create_smart_folders([])
        assert structure.folders == []
        assert structure.ungrouped == []

    def test_folders_and_ungrouped(self, tagged_notes):
        structure = create_smart_folders(tagged_notes)
        assert [f.id for f in structure.folders] == ["meeting", "finance"]
        assert structure.ungrouped == ["e", "f"]

    def test_primary_tag_is_case_insensitive(self, tagged_notes):
        meeting = create_smart_folders(tagged_notes).folders[0]
        assert meeting.note_ids == ["a", "b", "c"]
        assert meeting.notes_count == 3
        assert meeting.description == '3 notes tagged "meeting"'
        assert meeting.color == "#3B82F6"

    def test_folder_dates(self, tagged_notes):
        meeting = create_smart_folders(tagged_notes).folders[0]
        assert meeting.created_at == 100
        assert meeting.last_modified == 300

    def test_sub_folders(self, tagged_notes):
        structure = create_smart_folders(tagged_notes)
        meeting, finance = structure.folders
        assert [s.id for s in meeting.sub_folders] == ["meeting_acme"]
        assert meeting.sub_folders[0].note_ids == ["a", "b"]
        assert meeting.sub_folders[0].description == '2 notes with "Acme"'
        # Two notes are not enough to split
        assert finance.sub_folders == []

    def test_folder_map(self, tagged_notes):
        structure = create_smart_folders(tagged_notes)
        assert set(structure.folder_map) == {"meeting", "meeting_acme", "finance"}

    def test_ties_sorted_by_tag_name(self):
        notes = [Note(id="1", tags=("sales",)), Note(id="2", tags=("hr",))]
        assert [f.name for f in create_smart_folders(notes).folders] == ["hr", "sales"]

    def test_single_note_description(self):
        folder = create_smart_folders([Note(id="1", tags=("hr",))]).folders[0]
        assert folder.description == '1 note tagged "hr"'

    def test_to_dict(self, tagged_notes):
        payload = create_smart_folders(tagged_notes).to_dict()
        assert payload["ungrouped"] == ["e", "f"]
        assert payload["folders"][0]["sub_folders"][0]["notes_count"] == 2


class TestSecondaryKey:
    @pytest.mark.parametrize(
        "tags, expected",
        [
            (("meeting", "Acme"), "Acme"),
            (("meeting", "12/05 review"), "12/05 review"),
            (("meeting", "lowercase"), None),
            (("meeting",), None),
            (("meeting", "finance", "Acme"), "Acme"),
        ],
    )
    def test_extract_secondary_key(self, tags, expected):
        assert extract_secondary_key(Note(id="x", tags=tags)) == expected


class TestFolderQueries:
    def test_notes_in_folder(self, tagged_notes):
        meeting = create_smart_folders(tagged_notes).folders[0]
        assert [n.id for n in get_notes_in_folder(tagged_notes, meeting)] == ["a", "b", "c"]

    def test_folder_stats(self, tagged_notes):
        meeting = create_smart_folders(tagged_notes).folders[0]
        stats = get_folder_stats(tagged_notes, meeting)
        assert stats.total_notes == 3
        assert stats.total_duration == 100
        assert stats.date_range == (100, 300)
        assert stats.average_duration == pytest.approx(100 / 3)

    def test_folder_stats_empty(self, tagged_notes):
        meeting = create_smart_folders(tagged_notes).folders[0]
        assert get_folder_stats([], meeting).total_notes == 0

    def test_find_folders_for_note(self, tagged_notes):
        structure = create_smart_folders(tagged_notes)
        assert [f.id for f in find_folders_for_note(structure, "a")] == ["meeting", "meeting_acme"]
        assert find_folders_for_note(structure, "e") == []

    def test_breadcrumb(self, tagged_notes):
        structure = create_smart_folders(tagged_notes)
        primary, secondary = get_folder_breadcrumb(structure, "a")
        assert (primary.id, secondary.id) == ("meeting", "meeting_acme")
        primary, secondary = get_folder_breadcrumb(structure, "c")
        assert (primary.id, secondary) == ("meeting", None)
        assert get_folder_breadcrumb(structure, "e") is None

    def test_search_in_folder(self, tagged_notes):
        meeting = create_smart_folders(tagged_notes).folders[0]
        assert [n.id for n in search_in_folder(tagged_notes, meeting, "ACME")] == ["a", "b"]
        assert [n.id for n in search_in_folder(tagged_notes, meeting, "stand")] == ["c"]

    def test_tag_colors(self):
        assert get_color_for_tag("Finance") == "#10B981"
        assert get_color_for_tag("unknown") == DEFAULT_TAG_COLOR

    def test_diagnostics(self, tagged_notes):
        structure = create_smart_folders(tagged_notes)
        diagnostics = get_folder_diagnostics(tagged_notes, structure)
        assert diagnostics["total_folders"] == 2
        assert diagnostics["total_ungrouped"] == 2
        assert diagnostics["folder_stats"][0]["note_count"] == 3
