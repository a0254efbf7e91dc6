"""
Corpus module for Mufassir library.

Provides the source interface, HTTP and file implementations, and the
memoizing loader.
"""

from mufassir.config import MufassirSettings, get_settings
from mufassir.corpus.base import BaseCorpusSource
from mufassir.corpus.file import FileCorpusSource
from mufassir.corpus.http import HttpCorpusSource
from mufassir.corpus.loader import CorpusLoader
from mufassir.exceptions import ConfigurationError


def create_source(settings: MufassirSettings | None = None) -> BaseCorpusSource:
    """
    Build the corpus source described by the settings.

    A configured corpus_path wins over corpus_url.

    Raises:
        ConfigurationError: If neither is configured
    """
    settings = settings or get_settings()
    if settings.corpus_path:
        return FileCorpusSource(settings=settings)
    if settings.corpus_url:
        return HttpCorpusSource(settings=settings)
    raise ConfigurationError(
        "No corpus source configured. "
        "Set MUFASSIR_CORPUS_PATH or MUFASSIR_CORPUS_URL.",
        setting_name="corpus_path",
    )


__all__ = [
    "BaseCorpusSource",
    "FileCorpusSource",
    "HttpCorpusSource",
    "CorpusLoader",
    "create_source",
]
