"""Shared pytest fixtures for vidplay tests."""

import random

import pytest

from vidplay.catalogue import Catalogue
from vidplay.library import LibraryManager

# --- Catalogue Fixtures ---

SAMPLE_RECORDS = [
    ("A1", "Amazing Cats", ["#cat", "#fun"]),
    ("A2", "Funny Dogs", ["#dog", "#fun"]),
    ("A3", "Another Cat Video", ["#cat", "#animal"]),
    ("A4", "Video about nothing", []),
]


@pytest.fixture
def catalogue() -> Catalogue:
    """Catalogue with four videos, two of them sharing the #fun tag."""
    return Catalogue.from_records(SAMPLE_RECORDS)


@pytest.fixture
def two_video_catalogue() -> Catalogue:
    """Minimal catalogue: A1 "Amazing Cats" and A2 "Funny Dogs"."""
    return Catalogue.from_records(SAMPLE_RECORDS[:2])


@pytest.fixture
def manager(catalogue: Catalogue) -> LibraryManager:
    """Library manager over the sample catalogue with a seeded RNG."""
    return LibraryManager(catalogue, random.Random(1234))
