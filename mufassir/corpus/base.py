"""
Abstract base class for corpus sources.

This module defines the interface that every way of fetching the commentary
document must follow.
"""

from abc import ABC, abstractmethod


class BaseCorpusSource(ABC):
    """
    Abstract interface for fetching the commentary document.

    A source performs exactly one fetch per call and keeps no state about
    previous calls; memoization and request coalescing belong to
    CorpusLoader.

    Example:
        class InlineSource(BaseCorpusSource):
            async def fetch(self) -> str:
                return "SOURATE TEST (3) ..."
    """

    @abstractmethod
    async def fetch(self) -> str:
        """
        Fetch the full document text.

        Returns:
            The document as a string

        Raises:
            CorpusLoadError: If the document cannot be fetched
        """
        pass

    @property
    def location(self) -> str | None:
        """Human-readable origin of the document, used in log messages."""
        return None
