"""Resolved extraction depth per chapter."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

DEFAULT_LEVEL = 1


@dataclass(frozen=True)
class DepthTable:
    """Extraction depth for every chapter of a document.

    Level 1 extracts chapters, 2 sections, 3 subsections and so on.
    Chapters are numbered from 1.
    """

    default_level: int = DEFAULT_LEVEL
    overrides: Mapping[int, int] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.default_level < 1:
            raise ValueError(f"default_level must be >= 1, got {self.default_level}")
        for chapter, level in self.overrides.items():
            if chapter < 1 or level < 1:
                raise ValueError(f"Invalid override {chapter}: {level}")
        # Read-only private copy
        object.__setattr__(self, "overrides", MappingProxyType(dict(self.overrides)))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DepthTable):
            return NotImplemented
        return self.default_level == other.default_level and dict(self.overrides) == dict(
            other.overrides
        )

    def __hash__(self) -> int:
        return hash((self.default_level, frozenset(self.overrides.items())))

    def __repr__(self) -> str:
        return f"DepthTable(default_level={self.default_level}, overrides={dict(self.overrides)})"

    def effective_level(self, chapter: int) -> int:
        """Get the extraction level for a 1-based chapter index."""
        if chapter < 1:
            raise ValueError(f"Chapter index must be >= 1, got {chapter}")
        return self.overrides.get(chapter, self.default_level)

    def levels(self, count: int) -> list[int]:
        """Effective levels for chapters 1 through ``count``."""
        return [self.effective_level(chapter) for chapter in range(1, count + 1)]

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-friendly dictionary."""
        return {
            "default": self.default_level,
            "overrides": {str(ch): self.overrides[ch] for ch in sorted(self.overrides)},
        }
