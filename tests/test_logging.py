"""
Tests for the logging helpers.
"""
import io
import logging

import pytest

from mufassir._logging import configure_logging, disable_logging, log_error, log_warning
from mufassir.corpus import CorpusLoader
from mufassir.exceptions import CorpusLoadError
from tests.doubles import FlakySource, StaticSource


@pytest.fixture
def log_stream():
    stream = io.StringIO()
    configure_logging(level=logging.DEBUG, format_string="%(levelname)s %(message)s", stream=stream)
    yield stream
    disable_logging()


class TestConfigureLogging:
    """Tests for configure_logging and disable_logging."""

    def test_reconfigure_replaces_handler(self):
        first = configure_logging(stream=io.StringIO())
        second = configure_logging(stream=io.StringIO())
        try:
            assert first is second
            assert len(second.handlers) == 1
        finally:
            disable_logging()

    def test_disable_logging(self):
        stream = io.StringIO()
        configure_logging(stream=stream)
        disable_logging()

        log_warning("Muted")

        assert stream.getvalue() == ""


class TestLogHelpers:
    """Tests for the event helpers."""

    def test_warning_with_context(self, log_stream):
        log_warning("Invalid commentary export", error=3, source="memory")
        assert log_stream.getvalue() == "WARNING Invalid commentary export (error=3, source=memory)\n"

    def test_error_without_context(self, log_stream):
        log_error("Export failed")
        assert log_stream.getvalue() == "ERROR Export failed\n"

    @pytest.mark.asyncio
    async def test_corpus_load_is_logged(self, log_stream):
        await CorpusLoader(StaticSource("corpus")).load()
        assert "INFO Loaded 6 characters from memory" in log_stream.getvalue()

    @pytest.mark.asyncio
    async def test_corpus_load_failure_is_logged(self, log_stream):
        loader = CorpusLoader(FlakySource("corpus", failures=1))

        with pytest.raises(CorpusLoadError):
            await loader.load()

        assert "ERROR Failed to load corpus: simulated outage" in log_stream.getvalue()
