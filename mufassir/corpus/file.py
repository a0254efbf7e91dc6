"""
Local file corpus source.
"""

import asyncio
from pathlib import Path

from mufassir.config import MufassirSettings, get_settings
from mufassir.corpus.base import BaseCorpusSource
from mufassir.exceptions import ConfigurationError, CorpusLoadError


class FileCorpusSource(BaseCorpusSource):
    """Read the document from a local text file."""

    def __init__(
        self,
        path: str | Path | None = None,
        encoding: str | None = None,
        settings: MufassirSettings | None = None,
    ):
        settings = settings or get_settings()
        path = path or settings.corpus_path
        if not path:
            raise ConfigurationError(
                "Corpus path is required. "
                "Set via path parameter or MUFASSIR_CORPUS_PATH env var.",
                setting_name="corpus_path",
            )
        self._path = Path(path)
        self._encoding = encoding or settings.corpus_encoding

    @property
    def location(self) -> str:
        return str(self._path)

    def read(self) -> str:
        """Read the file synchronously."""
        if not self._path.exists():
            raise CorpusLoadError("Corpus file not found", location=str(self._path))
        try:
            return self._path.read_text(encoding=self._encoding)
        except (OSError, UnicodeDecodeError) as e:
            raise CorpusLoadError(
                f"Cannot read corpus file: {e}",
                location=str(self._path),
            ) from e

    async def fetch(self) -> str:
        """
        Read the file without blocking the event loop.

        Uses run_in_executor for the blocking read.
        """
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, self.read)
