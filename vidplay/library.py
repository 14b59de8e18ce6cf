"""Library manager: the single entry point for every user-facing action."""

import random
from collections.abc import Callable

from vidplay.catalogue import Catalogue
from vidplay.logging import logger
from vidplay.models import Video
from vidplay.playback import PlaybackController
from vidplay.playlist import Playlist
from vidplay.results import Outcome, Result

DEFAULT_FLAG_REASON = "Not supplied"


class LibraryManager:
    """Composes the catalogue, the playlists and the playback controller.

    Every operation checks all preconditions before mutating anything and
    returns a ``Result``; nothing here prints. Playlist names are matched
    case-insensitively, and the name echoed back in a result is the one the
    caller supplied.
    """

    def __init__(self, catalogue: Catalogue, rng: random.Random | None = None) -> None:
        self.catalogue = catalogue
        self.player = PlaybackController(rng)
        self._playlists: list[Playlist] = []

    # --- Catalogue ---

    def number_of_videos(self) -> Result:
        return Result("number_of_videos", count=len(self.catalogue))

    def show_all_videos(self) -> Result:
        """All catalogue videos sorted by title, flagged ones included."""
        return Result("show_all_videos", videos=sorted(self.catalogue.all_videos()))

    # --- Playback ---

    def play(self, video_id: str) -> Result:
        video = self.catalogue.lookup(video_id)
        if video is None:
            return Result("play", Outcome.VIDEO_NOT_FOUND)
        outcome = self.player.play(video)
        return Result("play", outcome, video=video, reason=video.flag_reason)

    def stop(self) -> Result:
        current = self.player.current
        return Result("stop", self.player.stop(), video=current)

    def play_random(self) -> Result:
        candidates = [v for v in self.catalogue.all_videos() if not v.is_flagged]
        outcome, video = self.player.play_random(candidates)
        return Result("play_random", outcome, video=video)

    def pause(self) -> Result:
        outcome = self.player.pause()
        return Result("pause", outcome, video=self.player.current)

    def resume(self) -> Result:
        outcome = self.player.resume()
        return Result("resume", outcome, video=self.player.current)

    def show_playing(self) -> Result:
        status = self.player.current_status()
        if status is None:
            return Result("show_playing", Outcome.NOTHING_PLAYING)
        video, paused = status
        return Result("show_playing", video=video, paused=paused)

    # --- Playlists ---

    def find_playlist(self, name: str) -> Playlist | None:
        """Case-insensitive playlist lookup."""
        for playlist in self._playlists:
            if playlist.matches(name):
                return playlist
        return None

    def create_playlist(self, name: str) -> Result:
        if self.find_playlist(name) is not None:
            return Result("create_playlist", Outcome.DUPLICATE_PLAYLIST, playlist=name)
        self._playlists.append(Playlist(name, self.catalogue))
        logger.debug("Created playlist {!r}", name)
        return Result("create_playlist", playlist=name)

    def add_to_playlist(self, name: str, video_id: str) -> Result:
        action = "add_to_playlist"
        playlist = self.find_playlist(name)
        if playlist is None:
            return Result(action, Outcome.PLAYLIST_NOT_FOUND, playlist=name)
        video = self.catalogue.lookup(video_id)
        if video is None:
            return Result(action, Outcome.VIDEO_NOT_FOUND, playlist=name)
        if video.is_flagged:
            return Result(
                action, Outcome.VIDEO_FLAGGED, playlist=name, video=video, reason=video.flag_reason
            )
        if not playlist.add(video):
            return Result(action, Outcome.ALREADY_IN_PLAYLIST, playlist=name, video=video)
        logger.debug("Added {} to {!r} (size {})", video.id, playlist.name, playlist.size())
        return Result(action, playlist=name, video=video)

    def remove_from_playlist(self, name: str, video_id: str) -> Result:
        action = "remove_from_playlist"
        playlist = self.find_playlist(name)
        if playlist is None:
            return Result(action, Outcome.PLAYLIST_NOT_FOUND, playlist=name)
        video = self.catalogue.lookup(video_id)
        if video is None:
            return Result(action, Outcome.VIDEO_NOT_FOUND, playlist=name)
        if not playlist.remove(video):
            return Result(action, Outcome.NOT_IN_PLAYLIST, playlist=name, video=video)
        return Result(action, playlist=name, video=video)

    def clear_playlist(self, name: str) -> Result:
        playlist = self.find_playlist(name)
        if playlist is None:
            return Result("clear_playlist", Outcome.PLAYLIST_NOT_FOUND, playlist=name)
        playlist.clear()
        return Result("clear_playlist", playlist=name)

    def delete_playlist(self, name: str) -> Result:
        playlist = self.find_playlist(name)
        if playlist is None:
            return Result("delete_playlist", Outcome.PLAYLIST_NOT_FOUND, playlist=name)
        self._playlists.remove(playlist)
        logger.debug("Deleted playlist {!r}", playlist.name)
        return Result("delete_playlist", playlist=name)

    def show_playlist(self, name: str) -> Result:
        playlist = self.find_playlist(name)
        if playlist is None:
            return Result("show_playlist", Outcome.PLAYLIST_NOT_FOUND, playlist=name)
        return Result("show_playlist", playlist=name, videos=playlist.items())

    def show_all_playlists(self) -> Result:
        """Playlist names sorted case-insensitively."""
        ordered = sorted(self._playlists, key=lambda p: p.key)
        return Result("show_all_playlists", playlists=[p.name for p in ordered])

    # --- Search ---

    def _search(self, action: str, term: str, predicate: Callable[[Video], bool]) -> Result:
        matches = sorted(
            v for v in self.catalogue.all_videos() if predicate(v) and not v.is_flagged
        )
        logger.debug("Search {!r} matched {} videos", term, len(matches))
        return Result(action, videos=matches, term=term)

    def search_videos(self, term: str) -> Result:
        """Unflagged videos whose title contains ``term`` (case-insensitive)."""
        return self._search("search_videos", term, lambda v: v.matches_title(term))

    def search_videos_with_tag(self, tag: str) -> Result:
        """Unflagged videos carrying ``tag`` (case-insensitive exact match)."""
        return self._search("search_videos_with_tag", tag, lambda v: v.has_tag(tag))

    # --- Flags ---

    def flag_video(self, video_id: str, reason: str = DEFAULT_FLAG_REASON) -> Result:
        """Flag a video and stop it if it is the one playing."""
        video = self.catalogue.lookup(video_id)
        if video is None:
            return Result("flag_video", Outcome.VIDEO_NOT_FOUND)
        outcome = video.set_flag(reason)
        if outcome is not Outcome.OK:
            return Result("flag_video", outcome, video=video)
        stopped = self.player.force_stop_if_current(video)
        logger.debug("Flagged {} (reason: {})", video.id, reason)
        return Result("flag_video", video=video, reason=reason, stopped=stopped)

    def allow_video(self, video_id: str) -> Result:
        """Clear a flag. Playback is not restored."""
        video = self.catalogue.lookup(video_id)
        if video is None:
            return Result("allow_video", Outcome.VIDEO_NOT_FOUND)
        outcome = video.clear_flag()
        return Result("allow_video", outcome, video=video)
