"""Word cloud data models."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any


@dataclass
class WordCloudItem:
    word: str
    frequency: int
    size: float  # 1-5 scale
    color: str

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass
class WordCloudData:
    words: list[WordCloudItem] = field(default_factory=list)
    total_words: int = 0
    unique_words: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "words": [item.to_dict() for item in self.words],
            "total_words": self.total_words,
            "unique_words": self.unique_words,
        }


@dataclass
class WordStats:
    average_frequency: float = 0.0
    max_frequency: int = 0
    min_frequency: int = 0

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
