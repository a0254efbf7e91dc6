"""
مُفَسِّر (Mufassir) - Per-verse Quran commentary from OCR'd tafsir documents.

Usage:
    from mufassir import CommentaryService
    from mufassir.corpus import FileCorpusSource

    service = CommentaryService(FileCorpusSource("tafsir-fr.txt"))

    # Extract, clean and cache the commentary of one verse
    html = await service.get_commentary("1:2")
    if html is None:
        print("No commentary available for this verse")
"""

from mufassir.models import CommentaryExport, VerseKey
from mufassir.config import MufassirSettings, get_settings, configure
from mufassir.exceptions import (
    MufassirError,
    CorpusLoadError,
    ConfigurationError,
    InvalidVerseKeyError,
)
from mufassir._logging import configure_logging, disable_logging, enable_debug_logging
from mufassir.service import CommentaryService
from mufassir.static import StaticCommentaryStore

__version__ = "1.0.0"
__all__ = [
    # Version
    "__version__",
    # Models
    "VerseKey",
    "CommentaryExport",
    # Config
    "MufassirSettings",
    "get_settings",
    "configure",
    # Exceptions
    "MufassirError",
    "CorpusLoadError",
    "ConfigurationError",
    "InvalidVerseKeyError",
    # Logging
    "configure_logging",
    "disable_logging",
    "enable_debug_logging",
    # Services
    "CommentaryService",
    "StaticCommentaryStore",
]
