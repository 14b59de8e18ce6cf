"""Operation outcomes and structured results returned by the library."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from vidplay.models import Video


class Outcome(str, Enum):
    """Named outcome of a library operation."""

    OK = "ok"
    VIDEO_NOT_FOUND = "video_not_found"
    PLAYLIST_NOT_FOUND = "playlist_not_found"
    DUPLICATE_PLAYLIST = "duplicate_playlist"
    VIDEO_FLAGGED = "video_flagged"
    ALREADY_FLAGGED = "already_flagged"
    NOT_FLAGGED = "not_flagged"
    ALREADY_IN_PLAYLIST = "already_in_playlist"
    NOT_IN_PLAYLIST = "not_in_playlist"
    NOTHING_PLAYING = "nothing_playing"
    ALREADY_PAUSED = "already_paused"  # informational, state unchanged
    NOT_PAUSED = "not_paused"
    NO_CANDIDATES = "no_candidates"

    @property
    def is_failure(self) -> bool:
        """True for outcomes that mean the operation was refused."""
        return self not in (Outcome.OK, Outcome.ALREADY_PAUSED)


@dataclass
class Result:
    """Outcome of one user-facing action plus the data needed to display it.

    Attributes:
        action: Name of the operation that produced this result (e.g. "play")
        outcome: Success or the single reason the operation was refused
        video: Video the action concerned, when there is one
        videos: Listing payload (catalogue, playlist contents, search hits)
        playlist: Playlist name exactly as the caller supplied it
        playlists: Playlist names for listings
        term: Search term or tag as supplied
        reason: Flag reason
        paused: Paused indicator for status queries
        count: Size payload (catalogue size)
        stopped: Video whose playback was ended as a side effect
    """

    action: str
    outcome: Outcome = Outcome.OK
    video: Video | None = None
    videos: list[Video] = field(default_factory=list)
    playlist: str | None = None
    playlists: list[str] = field(default_factory=list)
    term: str | None = None
    reason: str | None = None
    paused: bool = False
    count: int | None = None
    stopped: Video | None = None

    @property
    def ok(self) -> bool:
        """True unless the outcome is a failure."""
        return not self.outcome.is_failure

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON output, omitting empty payload fields."""
        d: dict[str, Any] = {"action": self.action, "outcome": self.outcome.value}
        if self.video is not None:
            d["video"] = self.video.to_dict()
        if self.videos:
            d["videos"] = [v.to_dict() for v in self.videos]
        if self.playlist is not None:
            d["playlist"] = self.playlist
        if self.playlists:
            d["playlists"] = list(self.playlists)
        if self.term is not None:
            d["term"] = self.term
        if self.reason is not None:
            d["reason"] = self.reason
        if self.action == "show_playing" and self.video is not None:
            d["paused"] = self.paused
        if self.count is not None:
            d["count"] = self.count
        if self.stopped is not None:
            d["stopped"] = self.stopped.to_dict()
        return d
