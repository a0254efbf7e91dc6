"""
Language profiles for the sanitizer heuristics.

A profile bundles everything the validity scoring needs to know about the
document's language: its alphabet, the accented vowels that show up in OCR
noise, a small set of known words, and the foreign script embedded in the
source that must be stripped.
"""

import re
from dataclasses import dataclass, field

from mufassir.exceptions import ConfigurationError


@dataclass(frozen=True)
class LanguageProfile:
    """Character classes and vocabulary for one document language."""

    code: str
    letters: str  # lower-case letters, including accented ones
    diacritic_vowels: str  # accented vowels that appear in recognizer noise
    consonants: str
    known_words: frozenset[str]
    foreign_script: re.Pattern  # runs of the original-script text
    strip_chars: str = ".,;:!?'\"()[]«»’‘“”…"

    _word_pattern: re.Pattern = field(init=False, repr=False, compare=False)
    _short_pattern: re.Pattern = field(init=False, repr=False, compare=False)
    _garbage_pattern: re.Pattern = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        letters = re.escape(self.letters)
        consonants = re.escape(self.consonants)
        vowels = re.escape(self.diacritic_vowels)
        object.__setattr__(
            self, "_word_pattern", re.compile(rf"^[{letters}'-]+$", re.IGNORECASE)
        )
        object.__setattr__(self, "_short_pattern", re.compile(rf"^[{letters}]+$"))
        object.__setattr__(
            self,
            "_garbage_pattern",
            re.compile(rf"[{consonants}][{vowels}][{consonants}]", re.IGNORECASE),
        )

    def normalize_token(self, token: str) -> str:
        """Lower-case a token and drop surrounding/embedded punctuation."""
        return token.lower().translate(_deletion_table(self.strip_chars))

    def is_known(self, word: str) -> bool:
        return word in self.known_words

    def has_word_shape(self, word: str) -> bool:
        """Letters, apostrophes and hyphens only."""
        return self._word_pattern.match(word) is not None

    def is_short_word(self, word: str) -> bool:
        return self._short_pattern.match(word) is not None

    def has_garbage_adjacency(self, word: str) -> bool:
        """Consonant, accented vowel, consonant: a recognizer artifact signature."""
        return self._garbage_pattern.search(word) is not None


_DELETION_TABLES: dict[str, dict[int, None]] = {}


def _deletion_table(chars: str) -> dict[int, None]:
    table = _DELETION_TABLES.get(chars)
    if table is None:
        table = {ord(c): None for c in chars}
        _DELETION_TABLES[chars] = table
    return table


ARABIC_SCRIPT = re.compile(r"[\u0600-\u06FF\u0750-\u077F\uFB50-\uFDFF\uFE70-\uFEFF]+")

FRENCH_KNOWN_WORDS = frozenset({
    # Articles
    "le", "la", "les", "un", "une", "des", "du", "de", "au", "aux",
    # Pronouns
    "il", "elle", "ils", "elles", "je", "tu", "nous", "vous", "on", "ce", "qui", "que", "quoi",
    "ne", "se", "me", "te", "y", "lui", "leur", "leurs",
    # Possessives
    "sa", "ma", "ta", "son", "mon", "ton", "ses", "mes", "tes", "nos", "vos",
    # Prepositions
    "à", "dans", "par", "pour", "en", "vers", "avec", "sans", "sous", "sur", "entre", "chez",
    # Conjunctions
    "et", "ou", "mais", "donc", "car", "ni", "si", "comme", "quand", "lorsque",
    # Common verbs
    "est", "sont", "a", "ont", "dit", "fait", "être", "avoir", "faire", "dire", "fut", "était",
    # Common words
    "dieu", "allah", "coran", "prophète", "miséricordieux", "seigneur", "croyants", "homme", "hommes",
    # Real words with a consonant-accent-consonant shape
    "même", "mêmes", "côté", "tête", "fête", "grâce", "apôtre", "apôtres", "hôte", "tôt",
    "bientôt", "plutôt", "aussitôt", "sûr", "sûre", "sûrement", "goût", "coûte", "forêt",
    "intérêt", "arrêt", "prêt", "prête", "prêts", "fenêtre", "chaîne", "maître", "maîtres",
    "connaît", "paraît", "plaît", "naît", "reconnaît", "brûlé", "brûlant",
    "châtiment", "châtiments", "gîte",
})

FRENCH = LanguageProfile(
    code="fr",
    letters="abcdefghijklmnopqrstuvwxyzàâäéèêëïîôùûüÿçœæ",
    diacritic_vowels="îïûùôâäëê",
    consonants="bcdfghjklmnpqrstvwxz",
    known_words=FRENCH_KNOWN_WORDS,
    foreign_script=ARABIC_SCRIPT,
)

_PROFILES: dict[str, LanguageProfile] = {FRENCH.code: FRENCH}


def get_language(code: str) -> LanguageProfile:
    """
    Look up a registered language profile.

    Raises:
        ConfigurationError: If no profile is registered for the code
    """
    profile = _PROFILES.get(code.strip().lower())
    if profile is None:
        raise ConfigurationError(
            f"No language profile registered for {code!r}",
            setting_name="language",
        )
    return profile


def register_language(profile: LanguageProfile) -> None:
    """Register (or replace) a language profile."""
    _PROFILES[profile.code] = profile
