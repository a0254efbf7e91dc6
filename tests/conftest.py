"""
Mufassir - Test Configuration

Pytest fixtures shared by all tests.
"""
import os

import pytest

from mufassir.config import MufassirSettings, reset_settings
from tests.doubles import SAMPLE_CORPUS, StaticSource


@pytest.fixture(autouse=True)
def _clean_settings(monkeypatch):
    """Keep MUFASSIR_* variables from the environment out of the tests."""
    for name in list(os.environ):
        if name.startswith("MUFASSIR_"):
            monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def settings() -> MufassirSettings:
    """Settings with a chapter guard suited to the short sample corpus."""
    return MufassirSettings(chapter_end_min_distance=50)


@pytest.fixture
def sample_corpus() -> str:
    return SAMPLE_CORPUS


@pytest.fixture
def static_source() -> StaticSource:
    return StaticSource(SAMPLE_CORPUS)
