"""
HTTP corpus source.

Downloads the commentary document with httpx, e.g. from the static assets of
the host application:

    source = HttpCorpusSource("https://example.org/data/tafsir-fr.txt")
    text = await source.fetch()
"""

import httpx

from mufassir.config import MufassirSettings, get_settings
from mufassir.corpus.base import BaseCorpusSource
from mufassir.exceptions import ConfigurationError, CorpusLoadError


class HttpCorpusSource(BaseCorpusSource):
    """
    Fetch the document over HTTP(S).

    Failures are not retried here; the loader starts a fresh attempt on the
    next request.
    """

    def __init__(
        self,
        url: str | None = None,
        settings: MufassirSettings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Initialize the HTTP source.

        Args:
            url: Document URL (overrides settings)
            settings: Settings instance to use
            transport: Custom httpx transport (mainly for tests)
        """
        self._settings = settings or get_settings()
        self._url = url or self._settings.corpus_url

        if not self._url:
            raise ConfigurationError(
                "Corpus URL is required. "
                "Set via url parameter or MUFASSIR_CORPUS_URL env var.",
                setting_name="corpus_url",
            )

        self._timeout = httpx.Timeout(
            self._settings.request_timeout,
            connect=self._settings.connect_timeout,
        )
        self._transport = transport

    @property
    def location(self) -> str:
        return self._url

    async def fetch(self) -> str:
        try:
            async with httpx.AsyncClient(
                timeout=self._timeout,
                transport=self._transport,
                follow_redirects=True,
            ) as client:
                response = await client.get(self._url)
        except httpx.HTTPError as e:
            raise CorpusLoadError(
                f"Failed to fetch corpus: {e}",
                location=self._url,
            ) from e

        if not response.is_success:
            raise CorpusLoadError(
                "Failed to fetch corpus",
                location=self._url,
                status_code=response.status_code,
            )

        return response.text
