"""
Commentary sanitizer.

Cleans a raw slice of the OCR'd commentary into HTML paragraphs:

1. strip the embedded original-script text and scanned page numbers
2. split into sentences
3. remove known OCR artifact shapes from each sentence
4. drop sentences whose tokens are mostly noise
5. reassemble paragraphs and drop the ones that are too short or noisy
6. escape and wrap each paragraph in <p>

Every function here is pure and deterministic.
"""

import html
import re
from dataclasses import dataclass

from mufassir.core.language import FRENCH, LanguageProfile


@dataclass(frozen=True)
class Thresholds:
    """Tunable limits of the validity scoring."""

    max_invalid_ratio: float = 0.3
    min_sentence_length: int = 20
    min_paragraph_length: int = 50


DEFAULT_THRESHOLDS = Thresholds()

PARAGRAPH_BREAK = "\n\n"

_PAGE_NUMBER_LINE = re.compile(r"^[ \t]*\d+[ \t]*(?:\n|$)", re.MULTILINE)
_EXCESS_BLANK_LINES = re.compile(r"\n{3,}")
_SENTENCE_SPLIT = re.compile(r"(?<=[.!?])\s+")
_BLANK_LINE = re.compile(r"\n[ \t]*\n")
_HORIZONTAL_SPACE = re.compile(r"[^\S\n]+")
_BLANK_LINE_RUN = re.compile(r"\s*\n\s*\n\s*")
_SINGLE_NEWLINE = re.compile(r"[ \t]*\n[ \t]*")
_MULTI_SPACE = re.compile(r"[ \t]{2,}")

_DIACRITIC = "îïûùâäëê"

# Ordered (pattern, replacement) rules. Order matters: bracket and
# parenthesis clusters go first so the token rules see what is left.
SENTENCE_RULES: tuple[tuple[re.Pattern, str], ...] = (
    # Square-bracket OCR junk, keeping references like "[Coran XI, 123]"
    (re.compile(r"\[(?!\s*Coran\b)[^\]]*\]", re.IGNORECASE), ""),
    # Parentheses containing accented capitals/vowels
    (re.compile(rf"\([^)]*[ÂÎÛ{_DIACRITIC}][^)]*\)"), ""),
    # Parentheses containing mixed-case hyphenated fragments like "(A-B)"
    (re.compile(r"\([^)]*[A-Z][a-z]?-[A-Z][^)]*\)"), ""),
    # Parenthesized transliteration junk like "(r-J')"
    (re.compile(r"\([^)]*\b[A-Za-z]{1,2}-[A-Za-z]{1,2}['’]?\b[^)]*\)"), ""),
    # "jhh :Jlî £)t"
    (re.compile(rf"\b\w{{1,3}}\s*[:;]\s*\w{{1,4}}[{_DIACRITIC}]\w*\s*[£$€)(\[\]]+\w*"), ""),
    # Symbol clusters like "A*tShk*"
    (re.compile(r"\b\w{1,8}[*^_|]+\w{0,8}\b"), ""),
    # Box-drawing and square characters
    (re.compile(r"[■□▪▫─━│┃┌┐└┘├┤┬┴┼]+"), ""),
    # Short capitalised tokens with an accented vowel, e.g. "Tîj"
    (re.compile(rf"\b[A-Z][a-z]?[{_DIACRITIC}][A-Za-z]{{0,3}}\b"), ""),
    # "-...Tj OU H"
    (re.compile(r"-\.{2,}[A-Za-z]{1,3}\s+[A-Z]{1,3}\s+[A-Z]\b"), ""),
    # "oljj)"
    (re.compile(r"\b[a-z]{2,4}[jJ]{2,}[)\]]*\)?"), ""),
    # "ùUa-iit —J À Ojl"
    (re.compile(r"\b[ùûîï][A-Za-z]{1,4}[-—][a-z]{2,4}\s+[—-]?[A-Z]\s+[ÀÂ]\s+[A-Z][a-z]{1,3}\b"), ""),
    # Inverted punctuation never occurs in French text
    (re.compile(r"\([^)]*[¿¡][^)]*\)"), ""),
    (re.compile(r"[¿¡][^.!?]*[.!?]?"), ""),
    # "Ab-Cd'"
    (re.compile(r"\b[A-Z][a-z]?-[A-Z][a-z]?['’]?\)?"), ""),
    # "c-âÂ-19 tt UJI jjj"
    (
        re.compile(
            r"[a-z]-[âäàáéèêëîïôöùûüÿ][ÂÄÀÁÉÈÊËÎÏÔÖÙÛÜŸ]-\d+\s+[a-z]{2}\s+[A-Z]{2,4}\s+[a-z]{2,4}",
            re.IGNORECASE,
        ),
        "",
    ),
    # "tojai IfjJaî"
    (re.compile(rf"\b[a-z]{{2,6}}[jJ][aeiouâäàáéèêëîïôöùûüÿ][{_DIACRITIC}]\b", re.IGNORECASE), ""),
)

# Leftover 1-2 letter fragments at paragraph edges
_EDGE_TOKEN = re.compile(r"^[A-Za-z]{1,2}$")


def strip_noise(text: str, language: LanguageProfile = FRENCH) -> str:
    """
    Remove the original-script text and page numbers, normalise line breaks.

    Args:
        text: Raw extracted slice
        language: Profile whose foreign script is stripped

    Returns:
        Text with at most one blank line between paragraphs
    """
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    text = language.foreign_script.sub("", text)
    text = _PAGE_NUMBER_LINE.sub("", text)
    return _EXCESS_BLANK_LINES.sub(PARAGRAPH_BREAK, text)


def split_sentences(text: str) -> list[tuple[str, bool]]:
    """
    Split text on sentence-final punctuation followed by whitespace.

    Returns:
        List of (sentence, ends_paragraph) pairs; ``ends_paragraph`` is True
        when the whitespace after the sentence contained a blank line
    """
    sentences: list[tuple[str, bool]] = []
    pos = 0
    for gap in _SENTENCE_SPLIT.finditer(text):
        sentence = text[pos:gap.start()]
        if sentence.strip():
            sentences.append((sentence, _BLANK_LINE.search(gap.group()) is not None))
        pos = gap.end()

    tail = text[pos:]
    if tail.strip():
        sentences.append((tail, True))

    return sentences


def clean_sentence(sentence: str) -> str:
    """
    Remove OCR artifact shapes from one sentence.

    Whitespace is collapsed afterwards; blank lines inside the sentence are
    kept as paragraph breaks, single line breaks become spaces.
    """
    for pattern, replacement in SENTENCE_RULES:
        sentence = pattern.sub(replacement, sentence)

    sentence = _BLANK_LINE_RUN.sub(PARAGRAPH_BREAK, sentence)
    sentence = _SINGLE_NEWLINE.sub(" ", sentence)
    sentence = _HORIZONTAL_SPACE.sub(" ", sentence)
    return sentence.strip()


def is_valid_word(word: str, language: LanguageProfile = FRENCH) -> bool:
    """
    Check whether a token looks like a real word of the document's language.

    Args:
        word: Raw token (punctuation is ignored)
        language: Language profile

    Returns:
        True for known words, short alphabetic tokens, and letter-only words
        without the consonant-accent-consonant garbage signature

    Examples:
        >>> is_valid_word("miséricorde")
        True
        >>> is_valid_word("bîtj")
        False
    """
    cleaned = language.normalize_token(word)
    if not cleaned:
        return True
    if language.is_known(cleaned):
        return True
    if len(cleaned) <= 2:
        return language.is_short_word(cleaned)

    return language.has_word_shape(cleaned) and not language.has_garbage_adjacency(cleaned)


def invalid_ratio(segment: str, language: LanguageProfile = FRENCH) -> float:
    """Share of whitespace-separated tokens that are not valid words."""
    words = segment.split()
    if not words:
        return 1.0
    invalid = sum(1 for word in words if not is_valid_word(word, language))
    return invalid / len(words)


def is_garbage_segment(
    segment: str,
    language: LanguageProfile = FRENCH,
    max_invalid_ratio: float = DEFAULT_THRESHOLDS.max_invalid_ratio,
) -> bool:
    """Whether more than ``max_invalid_ratio`` of the tokens are invalid."""
    return invalid_ratio(segment, language) > max_invalid_ratio


def _trim_edges(paragraph: str, language: LanguageProfile) -> str:
    words = paragraph.split()

    def is_fragment(token: str) -> bool:
        return bool(_EDGE_TOKEN.match(token)) and not language.is_known(token.lower())

    # Two leading or trailing fragments in a row
    if len(words) >= 2 and is_fragment(words[0]) and is_fragment(words[1]):
        words = words[2:]
    if len(words) >= 2 and is_fragment(words[-1]) and is_fragment(words[-2]):
        words = words[:-2]

    return " ".join(words)


def escape_html(text: str) -> str:
    """Escape &, <, >, " and ' for inclusion in HTML."""
    return html.escape(text, quote=True)


def sanitize(
    raw: str,
    language: LanguageProfile = FRENCH,
    thresholds: Thresholds = DEFAULT_THRESHOLDS,
) -> str:
    """
    Turn a raw extracted slice into clean HTML paragraphs.

    Args:
        raw: Raw text slice from the corpus
        language: Language profile of the document
        thresholds: Validity scoring limits

    Returns:
        Paragraphs wrapped in <p>...</p>, joined by newlines, or "" when no
        usable text survives
    """
    text = strip_noise(raw, language)

    kept: list[tuple[str, bool]] = []
    for sentence, ends_paragraph in split_sentences(text):
        cleaned = clean_sentence(sentence)
        if len(cleaned) < thresholds.min_sentence_length:
            continue
        if is_garbage_segment(cleaned, language, thresholds.max_invalid_ratio):
            continue
        kept.append((cleaned, ends_paragraph))

    parts: list[str] = []
    for i, (sentence, ends_paragraph) in enumerate(kept):
        parts.append(sentence)
        if i < len(kept) - 1:
            parts.append(PARAGRAPH_BREAK if ends_paragraph else " ")
    joined = "".join(parts)

    paragraphs: list[str] = []
    for paragraph in _BLANK_LINE_RUN.split(joined):
        paragraph = _MULTI_SPACE.sub(" ", _trim_edges(paragraph, language)).strip()
        if len(paragraph) < thresholds.min_paragraph_length:
            continue
        if is_garbage_segment(paragraph, language, thresholds.max_invalid_ratio):
            continue
        paragraphs.append(paragraph)

    return "\n".join(f"<p>{escape_html(p)}</p>" for p in paragraphs)
