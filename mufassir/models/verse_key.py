"""
Verse key data model.
"""

import re
from typing import Union

from pydantic import BaseModel, Field, ValidationError

from mufassir.exceptions import InvalidVerseKeyError

_KEY_PATTERN = re.compile(r"^\s*(\d+)\s*:\s*(\d+)\s*$")


class VerseKey(BaseModel):
    """
    Address of a single verse: (chapter, verse).

    Serialized as ``"chapter:verse"`` for cache addressing. Keys are immutable
    and hashable; two keys are equal iff both components are equal.

    Attributes:
        chapter: Chapter (surah) number, starting at 1
        verse: Verse (ayah) number within the chapter, starting at 1
    """

    model_config = {"frozen": True}

    chapter: int = Field(
        ...,
        description="Chapter (surah) number",
        ge=1,
    )
    verse: int = Field(
        ...,
        description="Verse (ayah) number within the chapter",
        ge=1,
    )

    @classmethod
    def parse(cls, value: "VerseKeyLike") -> "VerseKey":
        """
        Build a key from a ``"c:v"`` string, a ``(c, v)`` pair or a key.

        Raises:
            InvalidVerseKeyError: If the value is not a valid key
        """
        if isinstance(value, VerseKey):
            return value

        if isinstance(value, str):
            match = _KEY_PATTERN.match(value)
            if not match:
                raise InvalidVerseKeyError(value, "expected 'chapter:verse'")
            chapter, verse = int(match.group(1)), int(match.group(2))
        elif isinstance(value, tuple) and len(value) == 2:
            chapter, verse = value
            if isinstance(chapter, bool) or isinstance(verse, bool):
                raise InvalidVerseKeyError(value, "expected integers")
            if not isinstance(chapter, int) or not isinstance(verse, int):
                raise InvalidVerseKeyError(value, "expected integers")
        else:
            raise InvalidVerseKeyError(value)

        try:
            return cls(chapter=chapter, verse=verse)
        except ValidationError as e:
            raise InvalidVerseKeyError(value, "numbers must be positive") from e

    def __str__(self) -> str:
        return f"{self.chapter}:{self.verse}"


VerseKeyLike = Union[VerseKey, str, tuple[int, int]]
