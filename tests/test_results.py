"""Tests for vidplay.results."""

from vidplay.models import Video
from vidplay.results import Outcome, Result


class TestOutcome:
    """Tests for Outcome classification."""

    def test_ok_and_already_paused_are_not_failures(self) -> None:
        """Only OK and ALREADY_PAUSED are non-failures."""
        non_failures = {o for o in Outcome if not o.is_failure}
        assert non_failures == {Outcome.OK, Outcome.ALREADY_PAUSED}

    def test_values_are_strings(self) -> None:
        """Outcomes serialize as lowercase strings."""
        assert Outcome.VIDEO_NOT_FOUND.value == "video_not_found"
        assert Outcome("not_paused") is Outcome.NOT_PAUSED


class TestResult:
    """Tests for Result."""

    def test_defaults_to_ok(self) -> None:
        """A bare result is a success."""
        result = Result("stop")
        assert result.outcome is Outcome.OK
        assert result.ok

    def test_to_dict_omits_empty_fields(self) -> None:
        """Only populated payload fields are serialized."""
        result = Result("delete_playlist", Outcome.PLAYLIST_NOT_FOUND, playlist="Faves")
        assert result.to_dict() == {
            "action": "delete_playlist",
            "outcome": "playlist_not_found",
            "playlist": "Faves",
        }

    def test_to_dict_with_videos(self) -> None:
        """Videos are serialized through Video.to_dict."""
        video = Video(id="v1", title="T", tags=("#a",))
        result = Result("search_videos", videos=[video], term="t")
        d = result.to_dict()
        assert d["videos"] == [{"id": "v1", "title": "T", "tags": ["#a"]}]
        assert d["term"] == "t"

    def test_to_dict_show_playing_includes_paused(self) -> None:
        """Status results carry the paused flag."""
        video = Video(id="v1", title="T")
        assert Result("show_playing", video=video, paused=True).to_dict()["paused"] is True
