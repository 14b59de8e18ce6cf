"""Tests for vidplay.catalogue."""

import pytest

from vidplay.catalogue import Catalogue
from vidplay.models import CatalogueError, Video


class TestCatalogue:
    """Tests for Catalogue lookup and enumeration."""

    def test_lookup_existing(self, catalogue: Catalogue) -> None:
        """lookup returns the video for a known id."""
        video = catalogue.lookup("A1")
        assert video is not None
        assert video.title == "Amazing Cats"

    def test_lookup_missing_returns_none(self, catalogue: Catalogue) -> None:
        """lookup returns None for unknown ids."""
        assert catalogue.lookup("nope") is None

    def test_lookup_is_exact(self, catalogue: Catalogue) -> None:
        """Ids are matched exactly, not case-insensitively."""
        assert catalogue.lookup("a1") is None

    def test_lookup_returns_same_object(self, catalogue: Catalogue) -> None:
        """Each id maps to a single shared Video instance."""
        assert catalogue.lookup("A2") is catalogue.lookup("A2")

    def test_all_videos(self, catalogue: Catalogue) -> None:
        """all_videos enumerates every entry."""
        assert {v.id for v in catalogue.all_videos()} == {"A1", "A2", "A3", "A4"}

    def test_len_and_contains(self, catalogue: Catalogue) -> None:
        """len counts videos and `in` checks ids."""
        assert len(catalogue) == 4
        assert "A3" in catalogue
        assert "A9" not in catalogue

    def test_duplicate_ids_rejected(self) -> None:
        """Duplicate ids raise CatalogueError."""
        with pytest.raises(CatalogueError, match="Duplicate video id"):
            Catalogue([Video(id="x", title="One"), Video(id="x", title="Two")])

    def test_from_records(self) -> None:
        """from_records builds videos from (id, title, tags) tuples."""
        catalogue = Catalogue.from_records([("v1", "Title", ["#t"])])
        video = catalogue.lookup("v1")
        assert video == Video(id="v1", title="Title", tags=("#t",))

    def test_empty_catalogue(self) -> None:
        """An empty catalogue is allowed."""
        catalogue = Catalogue()
        assert len(catalogue) == 0
        assert catalogue.all_videos() == []
