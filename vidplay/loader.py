"""Catalogue loading from pipe-delimited text or YAML files."""

from importlib import resources
from pathlib import Path
from typing import Any

import yaml  # type: ignore[import-untyped]
from pydantic import BaseModel, ValidationError, field_validator

from vidplay.catalogue import Catalogue, VideoRecord
from vidplay.logging import logger
from vidplay.models import CatalogueError, Video

DEFAULT_CATALOGUE = "videos.txt"
YAML_SUFFIXES = {".yaml", ".yml"}


class VideoEntry(BaseModel):  # type: ignore[misc]
    """One item of a YAML ``videos`` list, checked before it becomes a Video."""

    id: str
    title: str = ""
    tags: list[str] = []

    @field_validator("id")  # type: ignore[untyped-decorator]
    @classmethod
    def validate_id(cls, v: str) -> str:
        """Reject blank ids."""
        if not v.strip():
            msg = "Video id must not be empty"
            raise ValueError(msg)
        return v

    @field_validator("tags", mode="before")  # type: ignore[untyped-decorator]
    @classmethod
    def none_means_no_tags(cls, v: Any) -> Any:
        # `tags:` with no value
        return [] if v is None else v

    def to_video(self) -> Video:
        return Video.from_dict(self.model_dump())


def parse_videos_txt(content: str) -> list[VideoRecord]:
    """Parse ``Title | video_id | #tag1, #tag2`` lines into records.

    The tag field may be missing or empty. Blank lines are skipped.

    Raises:
        CatalogueError: If a line has no id or too many fields
    """
    records: list[VideoRecord] = []
    for lineno, line in enumerate(content.splitlines(), start=1):
        if not line.strip():
            continue
        parts = [p.strip() for p in line.split("|")]
        if len(parts) < 2 or len(parts) > 3:
            raise CatalogueError(f"Line {lineno}: expected 'title | id | tags', got: {line!r}")
        title, video_id = parts[0], parts[1]
        if not video_id:
            raise CatalogueError(f"Line {lineno}: missing video id")
        tags: list[str] = []
        if len(parts) == 3 and parts[2]:
            tags = [t.strip() for t in parts[2].split(",") if t.strip()]
        records.append((video_id, title, tags))
    return records


def yaml_to_videos(yaml_content: str) -> list[Video]:
    """Deserialize a YAML catalogue with a top-level ``videos`` list.

    Ids and titles must be strings and tags a list of strings. Numeric ids
    are rejected rather than coerced.

    Raises:
        CatalogueError: If the document or any entry is malformed
    """
    try:
        data: Any = yaml.safe_load(yaml_content)
    except yaml.YAMLError as e:
        raise CatalogueError(f"Invalid YAML: {e}") from e
    if not isinstance(data, dict) or "videos" not in data:
        raise CatalogueError("Invalid YAML: missing 'videos' key")
    entries = data["videos"] or []
    if not isinstance(entries, list):
        raise CatalogueError("Invalid YAML: 'videos' must be a list")
    videos: list[Video] = []
    for index, entry in enumerate(entries, start=1):
        try:
            videos.append(VideoEntry.model_validate(entry).to_video())
        except ValidationError as e:
            raise CatalogueError(f"Invalid YAML video entry {index}: {e}") from e
    return videos


def load_catalogue(path: Path | str | None = None) -> Catalogue:
    """Load a catalogue from ``path``, or the bundled default when None.

    Files ending in .yaml/.yml are read as YAML, anything else as the
    pipe-delimited text format.
    """
    if path is None:
        content = resources.files("vidplay").joinpath(DEFAULT_CATALOGUE).read_text(encoding="utf-8")
        catalogue = Catalogue.from_records(parse_videos_txt(content))
        logger.debug("Loaded {} videos from bundled catalogue", len(catalogue))
        return catalogue

    path = Path(path)
    if not path.exists():
        raise CatalogueError(f"Catalogue file not found: {path}")
    content = path.read_text(encoding="utf-8")
    if path.suffix.lower() in YAML_SUFFIXES:
        catalogue = Catalogue(yaml_to_videos(content))
    else:
        catalogue = Catalogue.from_records(parse_videos_txt(content))
    logger.info("Loaded {} videos from {}", len(catalogue), path)
    return catalogue
