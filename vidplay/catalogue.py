"""Fixed catalogue of videos, keyed by id."""

from collections.abc import Iterable, Sequence

from vidplay.logging import logger
from vidplay.models import CatalogueError, Video

VideoRecord = tuple[str, str, Sequence[str]]


class Catalogue:
    """Immutable set of videos supplied at startup.

    Each id maps to exactly one ``Video`` object. Playlists and the playback
    controller hold references into this mapping, so a flag set on a video is
    seen everywhere without copying.
    """

    def __init__(self, videos: Iterable[Video] = ()) -> None:
        self._videos: dict[str, Video] = {}
        for video in videos:
            if video.id in self._videos:
                raise CatalogueError(f"Duplicate video id in catalogue: {video.id}")
            self._videos[video.id] = video
        logger.debug("Catalogue built with {} videos", len(self._videos))

    @classmethod
    def from_records(cls, records: Iterable[VideoRecord]) -> "Catalogue":
        """Build from pre-parsed ``(id, title, tags)`` tuples."""
        return cls(Video(id=vid, title=title, tags=tuple(tags)) for vid, title, tags in records)

    def lookup(self, video_id: str) -> Video | None:
        """Exact id match, None when absent."""
        return self._videos.get(video_id)

    def all_videos(self) -> list[Video]:
        """All videos, in no particular order."""
        return list(self._videos.values())

    def __len__(self) -> int:
        return len(self._videos)

    def __contains__(self, video_id: object) -> bool:
        return video_id in self._videos
