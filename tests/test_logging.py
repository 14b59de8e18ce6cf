"""Tests for logging configuration."""

import sys
from io import StringIO
from unittest.mock import patch

from vidplay.logging import configure_logging, logger


class TestConfigureLogging:
    """Tests for configure_logging function."""

    def test_verbose_false_filters_debug_and_info(self) -> None:
        """Non-verbose mode only shows warnings and above."""
        stderr = StringIO()
        with patch.object(sys, "stderr", stderr):
            configure_logging(verbose=False)
            logger.debug("debug message")
            logger.info("info message")
            logger.warning("warning message")

        output = stderr.getvalue()
        assert "debug message" not in output
        assert "info message" not in output
        assert "warning message" in output

    def test_verbose_true_shows_debug(self) -> None:
        """Verbose mode shows DEBUG messages with timestamps."""
        stderr = StringIO()
        with patch.object(sys, "stderr", stderr):
            configure_logging(verbose=True)
            logger.debug("debug message")

        output = stderr.getvalue()
        assert "debug message" in output
        assert ":" in output

    def test_state_transitions_logged_in_verbose(self) -> None:
        """Playback transitions emit debug lines."""
        from vidplay.models import Video
        from vidplay.playback import PlaybackController

        stderr = StringIO()
        with patch.object(sys, "stderr", stderr):
            configure_logging(verbose=True)
            PlaybackController().play(Video(id="v1", title="T"))

        assert "Playing v1" in stderr.getvalue()
