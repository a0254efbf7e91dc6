"""
Core modules for Mufassir library.

This package contains the extraction and cleaning logic:
- Chapter heading pattern table
- Chapter and verse range location
- Sentence-level sanitization of OCR text
- Per-verse result cache
"""

from mufassir.core.language import (
    FRENCH,
    LanguageProfile,
    get_language,
    register_language,
)
from mufassir.core.patterns import (
    DEFAULT_PATTERN_TABLE,
    PatternTable,
    numeric_heading_pattern,
)
from mufassir.core.section import (
    ChapterLocation,
    find_chapter_end,
    find_chapter_heading,
    find_chapter_start,
    locate_chapter,
)
from mufassir.core.verse import find_verse_marker, find_verse_range
from mufassir.core.sanitizer import (
    DEFAULT_THRESHOLDS,
    Thresholds,
    clean_sentence,
    escape_html,
    is_garbage_segment,
    is_valid_word,
    sanitize,
    split_sentences,
    strip_noise,
)
from mufassir.core.cache import VerseCache

__all__ = [
    # Language
    "FRENCH",
    "LanguageProfile",
    "get_language",
    "register_language",
    # Patterns
    "DEFAULT_PATTERN_TABLE",
    "PatternTable",
    "numeric_heading_pattern",
    # Section
    "ChapterLocation",
    "find_chapter_end",
    "find_chapter_heading",
    "find_chapter_start",
    "locate_chapter",
    # Verse
    "find_verse_marker",
    "find_verse_range",
    # Sanitizer
    "DEFAULT_THRESHOLDS",
    "Thresholds",
    "clean_sentence",
    "escape_html",
    "is_garbage_segment",
    "is_valid_word",
    "sanitize",
    "split_sentences",
    "strip_noise",
    # Cache
    "VerseCache",
]
