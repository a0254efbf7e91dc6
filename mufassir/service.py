"""
Commentary service.

Ties the corpus loader, the locators, the sanitizer and the verse cache
together behind three operations: get_commentary, preload and is_loaded.
"""

from mufassir._logging import get_logger, log_error, log_verse_not_found
from mufassir.config import MufassirSettings, get_settings
from mufassir.core.cache import VerseCache
from mufassir.core.language import LanguageProfile, get_language
from mufassir.core.patterns import DEFAULT_PATTERN_TABLE, PatternTable
from mufassir.core.sanitizer import Thresholds, sanitize
from mufassir.core.section import locate_chapter
from mufassir.core.verse import find_verse_range
from mufassir.corpus import BaseCorpusSource, CorpusLoader, create_source
from mufassir.data import is_valid_verse
from mufassir.exceptions import CorpusLoadError, InvalidVerseKeyError
from mufassir.models import VerseKey, VerseKeyLike

logger = get_logger(__name__)


class CommentaryService:
    """
    Serve sanitized per-verse commentary from one commentary document.

    Each instance owns its corpus, its in-flight load and its verse cache, so
    several independent services can coexist (one per document, or one per
    test).

    Example:
        service = CommentaryService(FileCorpusSource("tafsir-fr.txt"))
        service.preload()  # optional warm-up, from a running event loop
        html = await service.get_commentary("2:255")
    """

    def __init__(
        self,
        source: BaseCorpusSource | None = None,
        settings: MufassirSettings | None = None,
        pattern_table: PatternTable | None = None,
        language: LanguageProfile | None = None,
    ):
        """
        Initialize the service.

        Args:
            source: Where to fetch the document (default: from settings)
            settings: Settings instance to use
            pattern_table: Chapter heading patterns (default: French table)
            language: Language profile (default: settings.language)

        Raises:
            ConfigurationError: If no source is given and none is configured,
                or the configured language has no profile
        """
        self._settings = settings or get_settings()
        self._loader = CorpusLoader(source or create_source(self._settings))
        self._table = pattern_table or DEFAULT_PATTERN_TABLE
        self._language = language or get_language(self._settings.language)
        self._thresholds = Thresholds(
            max_invalid_ratio=self._settings.max_invalid_ratio,
            min_sentence_length=self._settings.min_sentence_length,
            min_paragraph_length=self._settings.min_paragraph_length,
        )
        self._cache = VerseCache()

    @property
    def loader(self) -> CorpusLoader:
        return self._loader

    @property
    def cache(self) -> VerseCache:
        return self._cache

    def is_loaded(self) -> bool:
        """Whether the corpus is resident."""
        return self._loader.is_loaded

    def preload(self) -> None:
        """Start loading the corpus in the background; failures are ignored."""
        self._loader.preload()

    async def get_commentary(
        self,
        key: VerseKeyLike,
        raise_on_load_error: bool = False,
    ) -> str | None:
        """
        Get the sanitized commentary of a verse.

        Args:
            key: Verse key ("2:255", (2, 255) or a VerseKey)
            raise_on_load_error: Propagate CorpusLoadError instead of
                returning None, so callers can tell "try again" apart from
                "no commentary for this verse"

        Returns:
            HTML paragraphs, or None if the key is invalid, the corpus could
            not be loaded, the verse could not be located, or no text
            survived sanitization

        Raises:
            CorpusLoadError: Only when raise_on_load_error is True
        """
        try:
            verse_key = VerseKey.parse(key)
        except InvalidVerseKeyError as e:
            log_error(str(e))
            return None

        if self._settings.validate_verse_bounds and not is_valid_verse(verse_key):
            logger.debug(f"Verse {verse_key} is out of range")
            return None

        cached = self._cache.get(verse_key)
        if cached is not None:
            return cached or None

        try:
            corpus = await self._loader.load()
        except CorpusLoadError:
            if raise_on_load_error:
                raise
            return None

        text = self.extract(corpus, verse_key)
        if text is None:
            return None

        self._cache.put(verse_key, text)
        return text or None

    def extract(self, corpus: str, key: VerseKeyLike) -> str | None:
        """
        Locate and sanitize one verse's commentary, bypassing the cache.

        Args:
            corpus: Full commentary document
            key: Verse key

        Returns:
            Sanitized text ("" when nothing survived), or None when the
            chapter or verse cannot be located
        """
        verse_key = VerseKey.parse(key)

        location = locate_chapter(
            corpus,
            verse_key.chapter,
            self._table,
            self._settings.chapter_end_min_distance,
        )
        if location is None:
            log_verse_not_found(verse_key.chapter, verse_key.verse, "chapter")
            return None

        chapter_text = location.slice(corpus)
        verse_range = find_verse_range(chapter_text, verse_key.verse, location.body_start)
        if verse_range is None:
            log_verse_not_found(verse_key.chapter, verse_key.verse, "verse")
            return None

        start, end = verse_range
        return sanitize(chapter_text[start:end], self._language, self._thresholds)
