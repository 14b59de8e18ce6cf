"""Named, ordered, duplicate-free playlists."""

from vidplay.catalogue import Catalogue
from vidplay.models import Video


class Playlist:
    """User playlist holding catalogue video ids in insertion order.

    Videos are stored by id and resolved through the catalogue on read, so the
    playlist always reflects the current flag state. No flag checks happen
    here; the library manager rejects flagged videos before calling ``add``.
    """

    def __init__(self, name: str, catalogue: Catalogue) -> None:
        self.name = name
        self._catalogue = catalogue
        self._video_ids: list[str] = []

    @property
    def key(self) -> str:
        """Case-insensitive identity of the playlist."""
        return self.name.lower()

    def matches(self, name: str) -> bool:
        return self.key == name.lower()

    def add(self, video: Video) -> bool:
        """Append a video. Returns False if it is already present."""
        if video.id in self._video_ids:
            return False
        self._video_ids.append(video.id)
        return True

    def remove(self, video: Video) -> bool:
        """Remove a video. Returns False if it is not present."""
        if video.id not in self._video_ids:
            return False
        self._video_ids.remove(video.id)
        return True

    def clear(self) -> None:
        self._video_ids.clear()

    def size(self) -> int:
        return len(self._video_ids)

    def items(self) -> list[Video]:
        """Videos in insertion order."""
        videos = []
        for video_id in self._video_ids:
            video = self._catalogue.lookup(video_id)
            if video is not None:
                videos.append(video)
        return videos

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, video: object) -> bool:
        return isinstance(video, Video) and video.id in self._video_ids

    def __repr__(self) -> str:
        return f"Playlist(name={self.name!r}, videos={self._video_ids!r})"
