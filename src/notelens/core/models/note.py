"""Note record consumed by the multi-note analyzers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

# camelCase keys produced by the note store
_FIELD_ALIASES = {
    "createdAt": "created_at",
    "isFavorite": "is_favorite",
    "text": "transcription",
}


@dataclass(frozen=True)
class Note:
    """
    A single note: transcript plus the metadata the note store keeps for it.

    ``created_at`` is a Unix timestamp in milliseconds, as stored by the app.
    """

    id: str
    title: str = ""
    transcription: str = ""
    tags: tuple[str, ...] = field(default_factory=tuple)
    created_at: float = 0.0
    is_favorite: bool = False
    duration: float = 0.0
    language: str = "en"

    def __post_init__(self) -> None:
        # Accept any iterable of tags but store an immutable tuple
        if not isinstance(self.tags, tuple):
            object.__setattr__(self, "tags", tuple(self.tags or ()))

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Note":
        """
        Build a Note from a JSON object.

        Both snake_case and camelCase (``createdAt``, ``isFavorite``) keys are
        accepted; unknown keys are ignored.

        Raises:
            ValueError: If ``id`` is missing
        """
        values: dict[str, Any] = {}
        for key, value in data.items():
            name = _FIELD_ALIASES.get(key, key)
            if name in cls.__dataclass_fields__:
                values[name] = value
        if "id" not in values or values["id"] in (None, ""):
            raise ValueError("Note requires an 'id'")
        values["id"] = str(values["id"])
        values["tags"] = tuple(str(t) for t in values.get("tags") or ())
        return cls(**values)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "transcription": self.transcription,
            "tags": list(self.tags),
            "created_at": self.created_at,
            "is_favorite": self.is_favorite,
            "duration": self.duration,
            "language": self.language,
        }
