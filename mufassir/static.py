"""
Static commentary store.

Serves commentary from a pre-extracted JSON export instead of parsing the
raw document on every cache miss. After the first load every lookup is a
dictionary access and can be done synchronously.
"""

from pydantic import ValidationError

from mufassir._logging import get_logger, log_warning
from mufassir.corpus import BaseCorpusSource, CorpusLoader
from mufassir.exceptions import CorpusLoadError, InvalidVerseKeyError
from mufassir.models import DEFAULT_SOURCE_NAME, CommentaryExport, VerseKey, VerseKeyLike

logger = get_logger(__name__)


class StaticCommentaryStore:
    """
    Read-only commentary lookups backed by a CommentaryExport JSON document.

    Example:
        store = StaticCommentaryStore(FileCorpusSource("tafsir-fr.json"))
        if await store.load():
            print(store.get_sync("1:2"))
    """

    def __init__(self, source: BaseCorpusSource):
        self._loader = CorpusLoader(source)
        self._data: CommentaryExport | None = None

    @property
    def is_loaded(self) -> bool:
        return self._data is not None

    @property
    def source_name(self) -> str:
        """Attribution of the loaded commentary."""
        if self._data is None or not self._data.source:
            return DEFAULT_SOURCE_NAME
        return self._data.source

    @property
    def count(self) -> int:
        """Number of verses available."""
        return self._data.verse_count if self._data else 0

    async def load(self) -> bool:
        """
        Load and parse the export (once).

        Returns:
            True if the export is available
        """
        if self._data is not None:
            return True

        try:
            raw = await self._loader.load()
        except CorpusLoadError:
            return False

        if self._data is None:
            try:
                self._data = CommentaryExport.model_validate_json(raw)
            except ValidationError as e:
                log_warning("Invalid commentary export", error=e.error_count())
                # Drop the cached text so the next load fetches again
                self._loader = CorpusLoader(self._loader.source)
                return False
            logger.info(
                f"Loaded {self._data.verse_count} commentaries (v{self._data.version})"
            )

        return True

    def preload(self) -> None:
        """Start fetching the export in the background."""
        self._loader.preload()

    def get_sync(self, key: VerseKeyLike) -> str | None:
        """
        Look up a verse without loading.

        Returns:
            The commentary, or None if not loaded, the key is invalid, or the
            verse is missing from the export
        """
        if self._data is None:
            return None
        try:
            verse_key = VerseKey.parse(key)
        except InvalidVerseKeyError:
            return None
        return self._data.verses.get(str(verse_key)) or None

    async def get(self, key: VerseKeyLike) -> str | None:
        """Look up a verse, loading the export first if needed."""
        await self.load()
        return self.get_sync(key)
