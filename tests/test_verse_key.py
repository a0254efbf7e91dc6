"""
Tests for verse keys and surah reference data.
"""
import pytest
from pydantic import ValidationError

from mufassir.data import get_ayah_count, get_total_ayahs, is_valid_verse, iter_surah_keys
from mufassir.exceptions import InvalidVerseKeyError
from mufassir.models import VerseKey


class TestVerseKey:
    """Tests for VerseKey parsing and identity."""

    def test_parse_string(self):
        key = VerseKey.parse("2:255")
        assert key.chapter == 2
        assert key.verse == 255

    def test_parse_tolerates_whitespace(self):
        assert VerseKey.parse(" 2 : 255 ") == VerseKey(chapter=2, verse=255)

    def test_parse_tuple(self):
        assert VerseKey.parse((1, 7)) == VerseKey(chapter=1, verse=7)

    def test_parse_key_returns_same_key(self):
        key = VerseKey(chapter=3, verse=1)
        assert VerseKey.parse(key) is key

    def test_str(self):
        assert str(VerseKey(chapter=2, verse=255)) == "2:255"

    def test_equality_and_hash(self):
        a = VerseKey(chapter=1, verse=2)
        b = VerseKey.parse("1:2")
        assert a == b
        assert hash(a) == hash(b)
        assert a != VerseKey(chapter=2, verse=1)
        assert len({a, b}) == 1

    def test_is_immutable(self):
        key = VerseKey(chapter=1, verse=2)
        with pytest.raises(ValidationError):
            key.verse = 3

    @pytest.mark.parametrize("raw", ["", "2", "2:", ":5", "a:b", "2:255:1", "2-255"])
    def test_invalid_strings(self, raw):
        with pytest.raises(InvalidVerseKeyError):
            VerseKey.parse(raw)

    @pytest.mark.parametrize("raw", ["0:1", "1:0", (0, 1), (1, -2)])
    def test_non_positive_numbers(self, raw):
        with pytest.raises(InvalidVerseKeyError):
            VerseKey.parse(raw)

    @pytest.mark.parametrize("raw", [(1,), (1, 2, 3), (True, 1), ("1", "2"), 12, None])
    def test_invalid_values(self, raw):
        with pytest.raises(InvalidVerseKeyError):
            VerseKey.parse(raw)

    def test_invalid_key_error_is_value_error(self):
        with pytest.raises(ValueError):
            VerseKey.parse("nope")


class TestSurahData:
    """Tests for the ayah-count table."""

    def test_known_counts(self):
        assert get_ayah_count(1) == 7
        assert get_ayah_count(2) == 286
        assert get_ayah_count(114) == 6

    def test_total(self):
        assert get_total_ayahs() == 6236

    @pytest.mark.parametrize("surah_id", [0, 115])
    def test_out_of_range_surah(self, surah_id):
        with pytest.raises(ValueError):
            get_ayah_count(surah_id)

    def test_is_valid_verse(self):
        assert is_valid_verse(VerseKey(chapter=1, verse=7))
        assert not is_valid_verse(VerseKey(chapter=1, verse=8))
        assert not is_valid_verse(VerseKey(chapter=115, verse=1))

    def test_iter_surah_keys(self):
        keys = iter_surah_keys(1)
        assert [str(k) for k in keys] == ["1:1", "1:2", "1:3", "1:4", "1:5", "1:6", "1:7"]
