"""
Tests for the export model and StaticCommentaryStore.
"""
import json

import pytest

from mufassir.models import DEFAULT_SOURCE_NAME, CommentaryExport
from mufassir.static import StaticCommentaryStore
from tests.doubles import FlakySource, StaticSource

EXPORT_JSON = json.dumps({
    "version": 1,
    "generatedAt": "2024-05-01T12:00:00Z",
    "source": "Ibn Kathir",
    "lastSurahCompleted": 1,
    "verses": {
        "1:1": "<p>Au nom de Dieu.</p>",
        "1:2": "<p>La louange appartient à Dieu.</p>",
    },
})


class TestCommentaryExport:
    """Tests for the CommentaryExport model."""

    def test_defaults(self):
        data = CommentaryExport()
        assert data.version == 1
        assert data.source == DEFAULT_SOURCE_NAME
        assert data.last_surah_completed == 0
        assert data.verse_count == 0

    def test_parse_camel_case(self):
        data = CommentaryExport.model_validate_json(EXPORT_JSON)
        assert data.last_surah_completed == 1
        assert data.generated_at.year == 2024
        assert data.verse_count == 2

    def test_to_json_uses_camel_case(self):
        payload = json.loads(CommentaryExport(last_surah_completed=3).to_json())
        assert payload["lastSurahCompleted"] == 3
        assert "generatedAt" in payload
        assert "last_surah_completed" not in payload


class TestStaticCommentaryStore:
    """Tests for StaticCommentaryStore."""

    @pytest.mark.asyncio
    async def test_load_and_get(self):
        store = StaticCommentaryStore(StaticSource(EXPORT_JSON))

        assert store.get_sync("1:1") is None
        assert await store.load() is True
        assert store.is_loaded is True
        assert store.count == 2
        assert store.source_name == "Ibn Kathir"
        assert store.get_sync("1:2") == "<p>La louange appartient à Dieu.</p>"
        assert store.get_sync((1, 1)) == "<p>Au nom de Dieu.</p>"

    @pytest.mark.asyncio
    async def test_get_loads_once(self):
        source = StaticSource(EXPORT_JSON)
        store = StaticCommentaryStore(source)

        assert await store.get("1:1") == "<p>Au nom de Dieu.</p>"
        assert await store.get("1:3") is None
        assert source.calls == 1

    @pytest.mark.asyncio
    async def test_invalid_key(self):
        store = StaticCommentaryStore(StaticSource(EXPORT_JSON))
        assert await store.get("not-a-key") is None

    @pytest.mark.asyncio
    async def test_load_failure(self):
        store = StaticCommentaryStore(FlakySource(EXPORT_JSON, failures=1))

        assert await store.load() is False
        assert store.count == 0
        assert store.source_name == DEFAULT_SOURCE_NAME

        assert await store.load() is True

    @pytest.mark.asyncio
    async def test_invalid_document(self):
        store = StaticCommentaryStore(StaticSource("not json"))

        assert await store.load() is False
        assert store.is_loaded is False
        assert store.get_sync("1:1") is None

    @pytest.mark.asyncio
    async def test_invalid_document_is_fetched_again(self):
        source = StaticSource("not json")
        store = StaticCommentaryStore(source)

        assert await store.load() is False

        source.text = EXPORT_JSON
        assert await store.load() is True
        assert store.count == 2
        assert source.calls == 2

    @pytest.mark.asyncio
    async def test_preload(self):
        source = StaticSource(EXPORT_JSON)
        store = StaticCommentaryStore(source)

        store.preload()
        assert await store.get("1:2") is not None
        assert source.calls == 1
