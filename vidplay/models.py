"""Data models for vidplay."""

from dataclasses import dataclass, field
from typing import Any

from vidplay.results import Outcome


@dataclass
class Video:
    """Catalogue entry.

    Only ``flag_reason`` changes after construction; everything else is fixed
    when the catalogue is loaded. Equality covers every field including the
    flag, while ordering is by title alone (used for display sorting).
    """

    id: str
    title: str
    tags: tuple[str, ...] = field(default_factory=tuple)
    flag_reason: str | None = None

    def __post_init__(self) -> None:
        self.tags = tuple(self.tags)

    def __lt__(self, other: "Video") -> bool:
        return self.title < other.title

    def __str__(self) -> str:
        text = f"{self.title} ({self.id}) [{' '.join(self.tags)}]"
        if self.flag_reason is not None:
            text += f" - FLAGGED (reason: {self.flag_reason})"
        return text

    @property
    def is_flagged(self) -> bool:
        """True while the video carries a flag."""
        return self.flag_reason is not None

    def set_flag(self, reason: str) -> Outcome:
        """Flag the video with a human-readable reason."""
        if self.flag_reason is not None:
            return Outcome.ALREADY_FLAGGED
        self.flag_reason = reason
        return Outcome.OK

    def clear_flag(self) -> Outcome:
        """Remove the flag."""
        if self.flag_reason is None:
            return Outcome.NOT_FLAGGED
        self.flag_reason = None
        return Outcome.OK

    def matches_title(self, term: str) -> bool:
        """Case-insensitive substring match on the title."""
        return term.lower() in self.title.lower()

    def has_tag(self, tag: str) -> bool:
        """Case-insensitive exact match against any tag."""
        wanted = tag.lower()
        return any(t.lower() == wanted for t in self.tags)

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON/YAML."""
        d: dict[str, Any] = {"id": self.id, "title": self.title, "tags": list(self.tags)}
        if self.flag_reason is not None:
            d["flag_reason"] = self.flag_reason
        return d

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Video":
        """Deserialize from a YAML catalogue entry."""
        return cls(
            id=data["id"],
            title=data.get("title", ""),
            tags=tuple(data.get("tags") or ()),
        )


class CatalogueError(ValueError):
    """Raised when catalogue input is malformed (duplicate ids, bad lines)."""

    pass
