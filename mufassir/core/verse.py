"""
Verse (ayah) range locator.

Verse numbers are typeset inline in parentheses at the end of the
transliteration and translation lines, e.g.:

    Alhamdu li-L-Lâhi Rabbi-l-'âlamîn (2)
    Louange à Dieu, le Seigneur des mondes (2).

    ...commentary for verse 2...

The commentary for verse N runs from the first marker of N to the paragraph
break preceding the first marker of N + 1.
"""

import re

_BLANK_LINE = re.compile(r"\n[ \t]*\n")

_primary_cache: dict[int, re.Pattern] = {}
_fallback_cache: dict[int, re.Pattern] = {}


def primary_marker(verse_number: int) -> re.Pattern:
    """
    ``(N)`` not preceded by a parenthesis, followed by punctuation and whitespace.

    Spaces before the marker are part of the match; the character before it
    is not, so a marker right after the previous one's whitespace is found.
    """
    pattern = _primary_cache.get(verse_number)
    if pattern is None:
        pattern = re.compile(rf"[ \t]*(?<!\()\({verse_number}\)[.,;:!?]*(?:\s|$)")
        _primary_cache[verse_number] = pattern
    return pattern


def fallback_marker(verse_number: int) -> re.Pattern:
    """The verse number (parentheses optional) followed by punctuation and a line break."""
    pattern = _fallback_cache.get(verse_number)
    if pattern is None:
        pattern = re.compile(rf"(?<!\d)\(?{verse_number}\)?[.,;:!?]+[ \t]*\r?\n")
        _fallback_cache[verse_number] = pattern
    return pattern


def _first_acceptable(
    pattern: re.Pattern, text: str, pos: int, body_start: int
) -> re.Match | None:
    for match in pattern.finditer(text, pos):
        # A marker at position 0 has no content before it; one inside the
        # heading is the chapter number.
        if match.start() == 0 or match.start() < body_start:
            continue
        return match
    return None


def find_verse_marker(
    text: str,
    verse_number: int,
    pos: int = 0,
    body_start: int = 0,
) -> re.Match | None:
    """
    Find the first usable marker for a verse at or after ``pos``.

    Args:
        text: Chapter text
        verse_number: Verse number to look for
        pos: Offset to start scanning from
        body_start: Markers starting before this offset are ignored

    Returns:
        The marker match, or None
    """
    match = _first_acceptable(primary_marker(verse_number), text, pos, body_start)
    if match is None:
        match = _first_acceptable(fallback_marker(verse_number), text, pos, body_start)
    return match


def _paragraph_cut(text: str, start: int, marker_start: int) -> int:
    """
    Walk back from the next verse's marker to the nearest paragraph break.

    Falls back to the start of the marker's line, then to the marker itself,
    when no break leaves any content before it.
    """
    boundary = None
    for blank in _BLANK_LINE.finditer(text, start, marker_start):
        boundary = blank.start()

    if boundary is not None and text[start:boundary].strip():
        return boundary

    line_start = text.rfind("\n", start, marker_start)
    if line_start != -1 and text[start:line_start].strip():
        return line_start

    return marker_start


def find_verse_range(
    chapter_text: str,
    verse_number: int,
    body_start: int = 0,
) -> tuple[int, int] | None:
    """
    Find the commentary range of a verse inside a chapter's text.

    Args:
        chapter_text: Text of one chapter (heading included)
        verse_number: Verse number (1-based)
        body_start: End of the chapter heading; markers before it are ignored

    Returns:
        (start, end) offsets into ``chapter_text``, or None if the verse
        marker cannot be found

    Examples:
        >>> text = "SOURATE TEST (3)\\nText here (1) more text (2) end"
        >>> start, end = find_verse_range(text, 1, body_start=16)
        >>> text[start:end]
        'more text'
    """
    marker = find_verse_marker(chapter_text, verse_number, body_start=body_start)
    if marker is None:
        return None

    start = marker.end()

    next_marker = find_verse_marker(
        chapter_text, verse_number + 1, pos=start, body_start=body_start
    )
    if next_marker is None:
        return start, len(chapter_text)

    return start, _paragraph_cut(chapter_text, start, next_marker.start())
