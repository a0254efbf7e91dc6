"""
Pydantic data models for Mufassir library.

- VerseKey: The (chapter, verse) address of a commentary entry
- CommentaryExport: A pre-extracted set of commentaries stored as JSON
"""

from mufassir.models.verse_key import VerseKey, VerseKeyLike
from mufassir.models.export import CommentaryExport, DEFAULT_SOURCE_NAME

__all__ = [
    "VerseKey",
    "VerseKeyLike",
    "CommentaryExport",
    "DEFAULT_SOURCE_NAME",
]
