"""
Tests for settings, language profiles and exceptions.
"""
import pytest

from mufassir.config import MufassirSettings, configure, get_settings, reset_settings
from mufassir.core.language import FRENCH, get_language
from mufassir.corpus import FileCorpusSource, HttpCorpusSource, create_source
from mufassir.exceptions import ConfigurationError, CorpusLoadError, MufassirError


class TestSettings:
    """Tests for MufassirSettings."""

    def test_defaults(self):
        settings = MufassirSettings()
        assert settings.corpus_url is None
        assert settings.corpus_path is None
        assert settings.language == "fr"
        assert settings.max_invalid_ratio == 0.3
        assert settings.min_sentence_length == 20
        assert settings.min_paragraph_length == 50
        assert settings.chapter_end_min_distance == 500
        assert settings.validate_verse_bounds is True

    def test_environment_variables(self, monkeypatch):
        monkeypatch.setenv("MUFASSIR_CORPUS_URL", "https://example.org/tafsir.txt")
        monkeypatch.setenv("MUFASSIR_MAX_INVALID_RATIO", "0.25")
        monkeypatch.setenv("MUFASSIR_LANGUAGE", " FR ")

        settings = get_settings()

        assert settings.corpus_url == "https://example.org/tafsir.txt"
        assert settings.max_invalid_ratio == 0.25
        assert settings.language == "fr"

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()

    def test_reset_settings_rereads_environment(self, monkeypatch):
        first = get_settings()
        monkeypatch.setenv("MUFASSIR_MIN_SENTENCE_LENGTH", "10")
        reset_settings()
        second = get_settings()
        assert second is not first
        assert second.min_sentence_length == 10

    def test_configure_replaces_settings(self):
        settings = configure(min_paragraph_length=80)
        assert settings.min_paragraph_length == 80
        assert get_settings() is settings

    def test_configure_rejects_invalid_values(self):
        with pytest.raises(ConfigurationError) as exc_info:
            configure(max_invalid_ratio=1.5)
        assert exc_info.value.setting_name == "max_invalid_ratio"


class TestCreateSource:
    """Tests for building the corpus source from settings."""

    def test_path_wins_over_url(self, tmp_path):
        settings = MufassirSettings(
            corpus_path=tmp_path / "tafsir.txt",
            corpus_url="https://example.org/tafsir.txt",
        )
        assert isinstance(create_source(settings), FileCorpusSource)

    def test_url(self):
        settings = MufassirSettings(corpus_url="https://example.org/tafsir.txt")
        source = create_source(settings)
        assert isinstance(source, HttpCorpusSource)
        assert source.location == "https://example.org/tafsir.txt"

    def test_nothing_configured(self):
        with pytest.raises(ConfigurationError):
            create_source(MufassirSettings())


class TestLanguage:
    """Tests for the language profile registry."""

    def test_get_french(self):
        assert get_language("fr") is FRENCH
        assert get_language(" FR ") is FRENCH

    def test_unknown_language(self):
        with pytest.raises(ConfigurationError) as exc_info:
            get_language("xx")
        assert exc_info.value.setting_name == "language"


class TestExceptions:
    """Tests for the exception hierarchy."""

    def test_context_in_message(self):
        error = CorpusLoadError("Failed", location="https://example.org", status_code=404)
        assert isinstance(error, MufassirError)
        assert error.status_code == 404
        assert str(error) == "Failed (location=https://example.org, status_code=404)"

    def test_plain_message(self):
        assert str(MufassirError("Boom")) == "Boom"
