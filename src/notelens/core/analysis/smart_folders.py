"""
Smart folders: group notes by their primary (first) tag.

A note's first tag opens a folder when it is a known category. Folders with
three or more notes are split into sub-folders by a secondary tag (a
capitalized name or a numeric date), keeping only sub-folders with at least
two notes.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from notelens.core.models import Note

# Known category tags and their display colors
TAG_COLORS = MappingProxyType(
    {
        "meeting": "#3B82F6",
        "finance": "#10B981",
        "marketing": "#F59E0B",
        "project": "#8B5CF6",
        "client": "#EC4899",
        "research": "#06B6D4",
        "sales": "#EF4444",
        "hr": "#14B8A6",
        "technology": "#6366F1",
        "important": "#DC2626",
    }
)

DEFAULT_TAG_COLOR = "#64748B"

MIN_NOTES_FOR_SUBFOLDERS = 3
MIN_NOTES_PER_SUBFOLDER = 2

_NUMERIC_DATE = re.compile(r"^\d+/\d+")
_WHITESPACE = re.compile(r"\s+")


@dataclass
class SmartFolder:
    id: str
    name: str
    primary_tag: str
    note_ids: list[str]
    color: str
    created_at: float
    last_modified: float
    description: str
    sub_folders: list["SmartFolder"] = field(default_factory=list)

    @property
    def notes_count(self) -> int:
        return len(self.note_ids)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "primary_tag": self.primary_tag,
            "note_ids": list(self.note_ids),
            "notes_count": self.notes_count,
            "color": self.color,
            "created_at": self.created_at,
            "last_modified": self.last_modified,
            "description": self.description,
            "sub_folders": [f.to_dict() for f in self.sub_folders],
        }


@dataclass
class FolderStructure:
    folders: list[SmartFolder] = field(default_factory=list)
    ungrouped: list[str] = field(default_factory=list)
    folder_map: dict[str, SmartFolder] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "folders": [f.to_dict() for f in self.folders],
            "ungrouped": list(self.ungrouped),
        }


@dataclass
class FolderStats:
    total_notes: int = 0
    total_duration: float = 0.0
    date_range: tuple[float, float] | None = None
    average_duration: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        return {
            "total_notes": self.total_notes,
            "total_duration": self.total_duration,
            "date_range": list(self.date_range) if self.date_range else None,
            "average_duration": self.average_duration,
        }


def get_color_for_tag(tag: str) -> str:
    return TAG_COLORS.get(tag.lower(), DEFAULT_TAG_COLOR)


def _slug(value: str) -> str:
    return _WHITESPACE.sub("_", value.lower())


def _plural(count: int) -> str:
    return f"{count} note{'s' if count != 1 else ''}"


def _primary_tag(note: Note) -> str | None:
    if not note.tags:
        return None
    tag = note.tags[0].lower()
    return tag if tag in TAG_COLORS else None


def extract_secondary_key(note: Note) -> str | None:
    """First non-category tag that is capitalized or starts with a numeric date."""
    if len(note.tags) < 2:
        return None
    for tag in note.tags:
        if not tag or tag.lower() in TAG_COLORS:
            continue
        if tag[0].isupper() or _NUMERIC_DATE.match(tag):
            return tag
    return None


def _make_folder(
    folder_id: str, name: str, primary_tag: str, notes: Sequence[Note], description: str
) -> SmartFolder:
    return SmartFolder(
        id=folder_id,
        name=name,
        primary_tag=primary_tag,
        note_ids=[n.id for n in notes],
        color=get_color_for_tag(primary_tag),
        created_at=min(n.created_at for n in notes),
        last_modified=max(n.created_at for n in notes),
        description=description,
    )


def create_smart_folders(notes: Sequence[Note]) -> FolderStructure:
    """
    Build the folder structure for a note collection.

    Returns:
        Folders sorted by note count (descending, then tag name), the ids of
        notes in no folder, and a lookup of every folder and sub-folder by id
    """
    structure = FolderStructure()
    if not notes:
        return structure

    grouped: dict[str, list[Note]] = {}
    for note in notes:
        tag = _primary_tag(note)
        if tag is not None:
            grouped.setdefault(tag, []).append(note)

    for primary_tag in sorted(grouped):
        members = grouped[primary_tag]
        folder_id = _slug(primary_tag)
        folder = _make_folder(
            folder_id,
            primary_tag,
            primary_tag,
            members,
            f'{_plural(len(members))} tagged "{primary_tag}"',
        )

        secondary: dict[str | None, list[Note]] = {}
        for note in members:
            secondary.setdefault(extract_secondary_key(note), []).append(note)

        if len(secondary) > 1 and len(members) >= MIN_NOTES_FOR_SUBFOLDERS:
            for key, sub_notes in secondary.items():
                if key is None or len(sub_notes) < MIN_NOTES_PER_SUBFOLDER:
                    continue
                sub_id = f"{folder_id}_{_slug(key)}"
                sub_folder = _make_folder(
                    sub_id, key, primary_tag, sub_notes, f'{_plural(len(sub_notes))} with "{key}"'
                )
                folder.sub_folders.append(sub_folder)
                structure.folder_map[sub_id] = sub_folder

        structure.folders.append(folder)
        structure.folder_map[folder_id] = folder

    grouped_ids = {n.id for members in grouped.values() for n in members}
    structure.ungrouped = [n.id for n in notes if n.id not in grouped_ids]
    structure.folders.sort(key=lambda f: -f.notes_count)
    return structure


def get_notes_in_folder(notes: Sequence[Note], folder: SmartFolder) -> list[Note]:
    ids = set(folder.note_ids)
    return [n for n in notes if n.id in ids]


def get_folder_stats(notes: Sequence[Note], folder: SmartFolder) -> FolderStats:
    members = get_notes_in_folder(notes, folder)
    if not members:
        return FolderStats()
    total_duration = sum(n.duration or 0.0 for n in members)
    created = [n.created_at for n in members]
    return FolderStats(
        total_notes=len(members),
        total_duration=total_duration,
        date_range=(min(created), max(created)),
        average_duration=total_duration / len(members),
    )


def find_folders_for_note(structure: FolderStructure, note_id: str) -> list[SmartFolder]:
    found = []
    for folder in structure.folders:
        if note_id in folder.note_ids:
            found.append(folder)
        found.extend(sub for sub in folder.sub_folders if note_id in sub.note_ids)
    return found


def get_folder_breadcrumb(
    structure: FolderStructure, note_id: str
) -> tuple[SmartFolder, SmartFolder | None] | None:
    """
    The (primary, secondary) folders holding a note.

    ``secondary`` is the first sub-folder containing the note, or None.
    """
    for folder in structure.folders:
        if note_id in folder.note_ids:
            secondary = next(
                (sub for sub in folder.sub_folders if note_id in sub.note_ids), None
            )
            return folder, secondary
    return None


def search_in_folder(notes: Sequence[Note], folder: SmartFolder, query: str) -> list[Note]:
    """Case-insensitive substring search over title, transcription and tags."""
    needle = query.lower()
    return [
        note
        for note in get_notes_in_folder(notes, folder)
        if needle in note.title.lower()
        or needle in note.transcription.lower()
        or any(needle in tag.lower() for tag in note.tags)
    ]


def get_folder_diagnostics(notes: Sequence[Note], structure: FolderStructure) -> dict[str, Any]:
    return {
        "total_folders": len(structure.folders),
        "total_ungrouped": len(structure.ungrouped),
        "folder_stats": [
            {"name": folder.name, "note_count": folder.notes_count, **get_folder_stats(notes, folder).to_dict()}
            for folder in structure.folders
        ],
    }
