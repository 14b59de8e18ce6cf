"""Tests for vidplay.models."""

from vidplay.models import Video
from vidplay.results import Outcome


class TestVideo:
    """Tests for Video dataclass."""

    def test_tags_stored_as_tuple(self) -> None:
        """Tags given as a list become an immutable tuple."""
        video = Video(id="v1", title="T", tags=["#a", "#b"])  # type: ignore[arg-type]
        assert video.tags == ("#a", "#b")

    def test_equality_includes_flag_state(self) -> None:
        """Two videos differing only in flag are not equal."""
        a = Video(id="v1", title="T", tags=("#a",))
        b = Video(id="v1", title="T", tags=("#a",))
        assert a == b
        b.set_flag("spam")
        assert a != b

    def test_ordering_by_title(self) -> None:
        """Sorting uses case-sensitive title order only."""
        videos = [
            Video(id="1", title="beta"),
            Video(id="2", title="Alpha"),
            Video(id="3", title="Beta"),
        ]
        assert [v.title for v in sorted(videos)] == ["Alpha", "Beta", "beta"]

    def test_str_unflagged(self) -> None:
        """Display form lists title, id and tags."""
        video = Video(id="amazing_cats", title="Amazing Cats", tags=("#cat", "#animal"))
        assert str(video) == "Amazing Cats (amazing_cats) [#cat #animal]"

    def test_str_no_tags(self) -> None:
        """Videos without tags show empty brackets."""
        assert str(Video(id="n", title="Nothing")) == "Nothing (n) []"

    def test_str_flagged(self) -> None:
        """Flagged videos show the reason."""
        video = Video(id="v", title="V", tags=("#x",))
        video.set_flag("dont_like")
        assert str(video) == "V (v) [#x] - FLAGGED (reason: dont_like)"


class TestFlags:
    """Tests for flag mutators."""

    def test_set_flag(self) -> None:
        """set_flag stores the reason."""
        video = Video(id="v", title="V")
        assert video.set_flag("spam") is Outcome.OK
        assert video.is_flagged
        assert video.flag_reason == "spam"

    def test_set_flag_twice_fails(self) -> None:
        """Second set_flag reports ALREADY_FLAGGED and keeps the first reason."""
        video = Video(id="v", title="V")
        video.set_flag("first")
        assert video.set_flag("second") is Outcome.ALREADY_FLAGGED
        assert video.flag_reason == "first"

    def test_clear_flag(self) -> None:
        """clear_flag removes the reason."""
        video = Video(id="v", title="V")
        video.set_flag("spam")
        assert video.clear_flag() is Outcome.OK
        assert not video.is_flagged

    def test_clear_unflagged_fails(self) -> None:
        """clear_flag on an unflagged video reports NOT_FLAGGED."""
        assert Video(id="v", title="V").clear_flag() is Outcome.NOT_FLAGGED


class TestMatching:
    """Tests for search helpers."""

    def test_matches_title_case_insensitive(self) -> None:
        """Title search is a case-insensitive substring match."""
        video = Video(id="v", title="Amazing Cats")
        assert video.matches_title("cat")
        assert video.matches_title("ZING C")
        assert not video.matches_title("dog")

    def test_has_tag_exact_case_insensitive(self) -> None:
        """Tag search needs a whole tag, ignoring case."""
        video = Video(id="v", title="V", tags=("#Cat", "#animal"))
        assert video.has_tag("#cat")
        assert video.has_tag("#ANIMAL")
        assert not video.has_tag("#ca")
        assert not video.has_tag("cat")


class TestSerialization:
    """Tests for to_dict/from_dict."""

    def test_to_dict_basic(self) -> None:
        """Unflagged video omits flag_reason."""
        video = Video(id="v1", title="T", tags=("#a",))
        assert video.to_dict() == {"id": "v1", "title": "T", "tags": ["#a"]}

    def test_to_dict_flagged(self) -> None:
        """Flagged video includes flag_reason."""
        video = Video(id="v1", title="T")
        video.set_flag("spam")
        assert video.to_dict()["flag_reason"] == "spam"

    def test_from_dict_missing_fields(self) -> None:
        """from_dict tolerates missing title and tags."""
        video = Video.from_dict({"id": "abc"})
        assert video.id == "abc"
        assert video.title == ""
        assert video.tags == ()
        assert not video.is_flagged
