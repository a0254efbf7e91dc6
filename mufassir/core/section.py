"""
Chapter (surah) section locator.

Finds where a chapter's content starts and ends inside the full corpus.
Nothing here raises for a missing chapter: callers get None.
"""

import re
from dataclasses import dataclass

from mufassir.core.patterns import DEFAULT_PATTERN_TABLE, PatternTable

DEFAULT_MIN_DISTANCE = 500


@dataclass(frozen=True)
class ChapterLocation:
    """Offsets of one chapter inside the corpus."""

    start: int  # offset of the heading in the corpus
    end: int  # offset of the next heading, or len(corpus)
    body_start: int  # end of the heading line, relative to start

    def slice(self, corpus: str) -> str:
        return corpus[self.start:self.end]


def find_chapter_heading(
    corpus: str,
    chapter_id: int,
    table: PatternTable = DEFAULT_PATTERN_TABLE,
) -> re.Match | None:
    """
    Find the heading of a chapter.

    Registered patterns are tried in order and the first one that matches
    anywhere wins; if none does, the numeric fallback is tried.

    Args:
        corpus: Full commentary text
        chapter_id: Chapter number
        table: Heading pattern table

    Returns:
        The heading match, or None if the chapter cannot be found
    """
    for pattern in table.patterns_for(chapter_id):
        match = pattern.search(corpus)
        if match:
            return match

    return table.fallback(chapter_id).search(corpus)


def find_chapter_start(
    corpus: str,
    chapter_id: int,
    table: PatternTable = DEFAULT_PATTERN_TABLE,
) -> int | None:
    """Offset of a chapter's heading, or None if not found."""
    match = find_chapter_heading(corpus, chapter_id, table)
    return match.start() if match else None


def find_chapter_end(
    corpus: str,
    start: int,
    table: PatternTable = DEFAULT_PATTERN_TABLE,
    min_distance: int = DEFAULT_MIN_DISTANCE,
    next_chapter: int | None = None,
) -> int:
    """
    Find where the chapter starting at ``start`` ends.

    Every pattern of the table (not only the current chapter's) is searched
    from ``start + min_distance`` on, so the chapter's own heading is never
    taken as its end. The earliest candidate wins.

    Args:
        corpus: Full commentary text
        start: Offset of the chapter heading
        table: Heading pattern table
        min_distance: Minimum distance past ``start`` for a candidate
        next_chapter: Also try this chapter's numeric fallback heading

    Returns:
        Offset of the next chapter heading, or len(corpus)
    """
    search_from = start + min_distance
    end = len(corpus)
    if search_from >= end:
        return end

    candidates = list(table.all_patterns())
    if next_chapter is not None:
        candidates.append(table.fallback(next_chapter))

    for pattern in candidates:
        match = pattern.search(corpus, search_from)
        if match and match.start() < end:
            end = match.start()

    return end


def locate_chapter(
    corpus: str,
    chapter_id: int,
    table: PatternTable = DEFAULT_PATTERN_TABLE,
    min_distance: int = DEFAULT_MIN_DISTANCE,
) -> ChapterLocation | None:
    """
    Locate a chapter's heading and extent.

    ``body_start`` marks the end of the heading line so that a number printed
    in the heading, e.g. "SOURATE JOSEPH (12)", is not taken for a verse
    marker.

    Returns:
        ChapterLocation, or None if the chapter heading cannot be found
    """
    heading = find_chapter_heading(corpus, chapter_id, table)
    if heading is None:
        return None

    start = heading.start()
    end = find_chapter_end(corpus, start, table, min_distance, next_chapter=chapter_id + 1)

    line_end = corpus.find("\n", heading.end(), end)
    body_end = line_end if line_end != -1 else heading.end()

    return ChapterLocation(start=start, end=end, body_start=body_end - start)
