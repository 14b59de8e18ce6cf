"""Single playback slot with pause/resume state."""

import random
from collections.abc import Sequence
from enum import Enum

from vidplay.logging import logger
from vidplay.models import Video
from vidplay.results import Outcome


class PlaybackState(str, Enum):
    """State of the playback slot."""

    IDLE = "idle"
    PLAYING = "playing"
    PAUSED = "paused"


class PlaybackController:
    """Owns the current video and its paused flag.

    ``paused`` is only ever True while ``current`` is set.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()
        self._current: Video | None = None
        self._paused = False

    @property
    def state(self) -> PlaybackState:
        if self._current is None:
            return PlaybackState.IDLE
        return PlaybackState.PAUSED if self._paused else PlaybackState.PLAYING

    @property
    def current(self) -> Video | None:
        return self._current

    def _reset(self) -> None:
        self._current = None
        self._paused = False

    def play(self, video: Video) -> Outcome:
        """Start playing ``video``, silently replacing whatever was playing."""
        if video.is_flagged:
            return Outcome.VIDEO_FLAGGED
        if self._current is not None:
            logger.debug("Implicitly stopping {}", self._current.id)
            self._reset()
        self._current = video
        self._paused = False
        logger.debug("Playing {}", video.id)
        return Outcome.OK

    def stop(self) -> Outcome:
        if self._current is None:
            return Outcome.NOTHING_PLAYING
        logger.debug("Stopping {}", self._current.id)
        self._reset()
        return Outcome.OK

    def pause(self) -> Outcome:
        """Pause playback; pausing twice reports ALREADY_PAUSED and changes nothing."""
        if self._current is None:
            return Outcome.NOTHING_PLAYING
        if self._paused:
            return Outcome.ALREADY_PAUSED
        self._paused = True
        logger.debug("Paused {}", self._current.id)
        return Outcome.OK

    def resume(self) -> Outcome:
        if self._current is None:
            return Outcome.NOTHING_PLAYING
        if not self._paused:
            return Outcome.NOT_PAUSED
        self._paused = False
        logger.debug("Resumed {}", self._current.id)
        return Outcome.OK

    def play_random(self, candidates: Sequence[Video]) -> tuple[Outcome, Video | None]:
        """Play a uniformly chosen candidate.

        Args:
            candidates: Unflagged videos to choose from

        Returns:
            (outcome, chosen video or None)
        """
        if not candidates:
            return Outcome.NO_CANDIDATES, None
        video = self._rng.choice(list(candidates))
        return self.play(video), video

    def current_status(self) -> tuple[Video, bool] | None:
        """Snapshot of (current video, paused), None when idle."""
        if self._current is None:
            return None
        return self._current, self._paused

    def force_stop_if_current(self, video: Video) -> Video | None:
        """Stop playback if ``video`` is the one playing.

        Returns:
            The stopped video, or None if nothing changed.
        """
        if self._current is None or self._current.id != video.id:
            return None
        stopped = self._current
        logger.debug("Force-stopping {}", stopped.id)
        self._reset()
        return stopped
