"""vidplay - video library and playback control panel."""

from vidplay.catalogue import Catalogue
from vidplay.library import LibraryManager
from vidplay.models import CatalogueError, Video
from vidplay.results import Outcome, Result

try:
    from vidplay._version import __version__
except ImportError:
    __version__ = "0.0.0.dev0"

__all__ = [
    "Catalogue",
    "CatalogueError",
    "LibraryManager",
    "Outcome",
    "Result",
    "Video",
    "__version__",
]
