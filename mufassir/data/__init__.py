"""
Quran data module for Mufassir library.

Provides access to surah reference data (ayah counts).
"""

from mufassir.data.surahs import (
    SURAH_AYAH_COUNTS,
    TOTAL_SURAHS,
    get_ayah_count,
    get_total_ayahs,
    is_valid_verse,
    iter_surah_keys,
)

__all__ = [
    "SURAH_AYAH_COUNTS",
    "TOTAL_SURAHS",
    "get_ayah_count",
    "get_total_ayahs",
    "is_valid_verse",
    "iter_surah_keys",
]
