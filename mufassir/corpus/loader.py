"""
Memoizing corpus loader.

The commentary document is several megabytes; it is fetched once and kept
for the lifetime of the loader. Concurrent callers that arrive while a fetch
is in flight share that fetch instead of starting their own.
"""

import asyncio

from mufassir._logging import log_corpus_load_failed, log_corpus_loaded, log_warning
from mufassir.corpus.base import BaseCorpusSource
from mufassir.exceptions import CorpusLoadError


class CorpusLoader:
    """
    Load a corpus from a source at most once, coalescing concurrent requests.

    State:
        - corpus: None until a fetch succeeds, then the document text forever
        - pending: the in-flight fetch task, or None when no fetch is running

    A failed fetch leaves the corpus absent; the next load() call starts a
    fresh fetch.

    Example:
        loader = CorpusLoader(FileCorpusSource("tafsir-fr.txt"))
        text = await loader.load()
    """

    def __init__(self, source: BaseCorpusSource):
        self._source = source
        self._corpus: str | None = None
        self._pending: asyncio.Task | None = None

    @property
    def source(self) -> BaseCorpusSource:
        return self._source

    @property
    def is_loaded(self) -> bool:
        """Whether the corpus is resident."""
        return self._corpus is not None

    @property
    def corpus(self) -> str | None:
        """The loaded corpus, or None."""
        return self._corpus

    async def load(self) -> str:
        """
        Return the corpus, fetching it if needed.

        Returns:
            The full document text

        Raises:
            CorpusLoadError: If the fetch this call waited on failed
        """
        if self._corpus is not None:
            return self._corpus

        if self._pending is None:
            self._pending = self._start_fetch(asyncio.get_running_loop())

        # A cancelled waiter must not cancel the fetch the others share
        return await asyncio.shield(self._pending)

    def preload(self) -> None:
        """
        Start loading in the background and return immediately.

        Must be called from a running event loop. Failures are logged by the
        fetch and otherwise ignored; the next load() retries.
        """
        if self._corpus is not None or self._pending is not None:
            return

        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            log_warning("Corpus preload skipped: no running event loop")
            return

        self._pending = self._start_fetch(loop)

    def _start_fetch(self, loop: asyncio.AbstractEventLoop) -> asyncio.Task:
        task = loop.create_task(self._fetch())
        task.add_done_callback(_consume_failure)
        return task

    async def _fetch(self) -> str:
        try:
            text = await self._source.fetch()
        except CorpusLoadError as e:
            log_corpus_load_failed(e)
            raise
        except Exception as e:
            error = CorpusLoadError(
                f"Failed to load corpus: {e}",
                location=self._source.location,
            )
            log_corpus_load_failed(error)
            raise error from e
        finally:
            self._pending = None

        self._corpus = text
        log_corpus_loaded(len(text), self._source.location)
        return text


def _consume_failure(task: asyncio.Task) -> None:
    # Already logged in _fetch. Nobody awaits a preload, and shield() drops
    # its own callback once the last waiter is cancelled.
    if not task.cancelled():
        task.exception()
