"""Configuration loading for vidplay.

Optional ~/.vidplay/config.toml:
    catalogue = "/path/to/videos.txt"   # or .yaml; default is the bundled list
    seed = 42                           # fixed seed for play_random
    verbose = false
"""

import tomllib
from pathlib import Path

from pydantic import BaseModel, field_validator


class Config(BaseModel):  # type: ignore[misc]
    """vidplay configuration. Every field is optional."""

    catalogue: str | None = None
    seed: int | None = None
    verbose: bool = False

    @field_validator("catalogue")  # type: ignore[untyped-decorator]
    @classmethod
    def validate_catalogue(cls, v: str | None) -> str | None:
        """Reject blank catalogue paths."""
        if v is not None and not v.strip():
            msg = "Catalogue path must not be empty"
            raise ValueError(msg)
        return v


def get_config_dir() -> Path:
    """Get or create config directory."""
    config_dir = Path.home() / ".vidplay"
    config_dir.mkdir(exist_ok=True)
    return config_dir


def get_config_path() -> Path:
    return get_config_dir() / "config.toml"


def load_config() -> Config:
    """Load configuration from ~/.vidplay/config.toml, defaults if absent."""
    config_path = get_config_path()
    if not config_path.exists():
        return Config()
    with open(config_path, "rb") as f:
        data = tomllib.load(f)
    config: Config = Config.model_validate(data)
    return config
