"""
Chapter heading pattern table.

Maps each surah number to the ordered list of patterns that recognise its
heading in the commentary document. Headings in the scanned source are
written either as a transliterated name ("Sûratu-l-Baqara") or as an
upper-case French title ("SOURATE DE LA VACHE"); OCR noise makes neither
reliable on its own, so every surah gets several alternatives.
"""

import re
from collections.abc import Iterable, Mapping

PatternLike = str | re.Pattern

DEFAULT_FLAGS = re.IGNORECASE

FRENCH_SURAH_PATTERNS: dict[int, list[str]] = {
    1: [r"Sûratu-l-Fâtih[h]?a", r"FATIHA", r"L'OUVERTURE"],
    2: [r"Sûratu-l-Baqara", r"SOURATE DE LA VACHE", r"BAQARA"],
    3: [r"Sûratu.*'?Imrân", r"FAMILLE D'IMRAN"],
    4: [r"Sûratu.*Nisâ", r"LES FEMMES"],
    5: [r"Sûratu.*Mâ'?ida", r"LA TABLE SERVIE"],
    6: [r"Sûratu.*An'?âm", r"LES BESTIAUX"],
    7: [r"Sûratu.*A'?râf", r"LES MURAILLES"],
    8: [r"Sûratu.*Anfâl", r"LE BUTIN"],
    9: [r"Sûratu.*Tawba", r"LE REPENTIR"],
    10: [r"Sûratu.*Yûnus", r"JONAS"],
}


def numeric_heading_pattern(chapter_id: int) -> re.Pattern:
    """
    Build the fallback heading pattern for a chapter number.

    Matches a line starting with "Sourate 12", or a line starting with a
    heading keyword and carrying the number in parentheses, e.g.
    "SOURATE JOSEPH (12)". A mention inside a sentence ("dans la sourate 12")
    is a cross-reference, not a heading.
    """
    return re.compile(
        rf"^[ \t]*(?:Sourate[ \t]+{chapter_id}\b"
        rf"|(?:Sourate|S[ûu]rat)[^\n]*?\({chapter_id}\))",
        DEFAULT_FLAGS | re.MULTILINE,
    )


def _compile(pattern: PatternLike, flags: int) -> re.Pattern:
    if isinstance(pattern, re.Pattern):
        return pattern
    return re.compile(pattern, flags)


class PatternTable:
    """
    Read-only mapping from chapter number to compiled heading patterns.

    Example:
        table = PatternTable({1: [r"FATIHA"], 2: [r"BAQARA", r"LA VACHE"]})
        table.patterns_for(2)  # [re.compile('BAQARA'), re.compile('LA VACHE')]
    """

    def __init__(
        self,
        patterns: Mapping[int, Iterable[PatternLike]],
        flags: int = DEFAULT_FLAGS,
    ) -> None:
        table: dict[int, tuple[re.Pattern, ...]] = {}
        for chapter_id, alternatives in patterns.items():
            if chapter_id < 1:
                raise ValueError(f"Invalid chapter id: {chapter_id}")
            table[chapter_id] = tuple(_compile(p, flags) for p in alternatives)
        self._table = table
        self._all = tuple(p for chapter_id in sorted(table) for p in table[chapter_id])
        self._fallbacks: dict[int, re.Pattern] = {}

    def patterns_for(self, chapter_id: int) -> tuple[re.Pattern, ...]:
        """Patterns registered for a chapter, in priority order (may be empty)."""
        return self._table.get(chapter_id, ())

    def all_patterns(self) -> tuple[re.Pattern, ...]:
        """Every registered pattern, across all chapters."""
        return self._all

    def fallback(self, chapter_id: int) -> re.Pattern:
        """Numeric fallback pattern for a chapter (compiled once, then reused)."""
        pattern = self._fallbacks.get(chapter_id)
        if pattern is None:
            pattern = numeric_heading_pattern(chapter_id)
            self._fallbacks[chapter_id] = pattern
        return pattern

    def __contains__(self, chapter_id: object) -> bool:
        return chapter_id in self._table

    def __len__(self) -> int:
        return len(self._table)


DEFAULT_PATTERN_TABLE = PatternTable(FRENCH_SURAH_PATTERNS)
