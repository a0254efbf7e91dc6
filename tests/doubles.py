"""
Sample corpora and corpus source doubles used across the tests.
"""
import asyncio

from mufassir.corpus import BaseCorpusSource
from mufassir.exceptions import CorpusLoadError


FATIHA_SECTION = """Sûratu-l-Fâtiha
L'OUVERTURE

بِسْمِ اللَّهِ الرَّحْمَٰنِ الرَّحِيمِ
Bismi-L-Lâhi-r-Rahmâni-r-Rahîm (1)
Au nom de Dieu, le Tout Miséricordieux, le Très Miséricordieux (1).

La formule du nom de Dieu ouvre chaque chapitre du Livre. Les savants disent que cette formule apporte la bénédiction sur toute action entreprise par le croyant.

12

Le croyant la prononce avant de manger, avant de boire et avant de dormir, comme le rapportent les compagnons.

الْحَمْدُ لِلَّهِ رَبِّ الْعَالَمِينَ
Alhamdu li-L-Lâhi Rabbi-l-'âlamîn (2)
Louange à Dieu, le Seigneur des mondes (2).

La louange appartient à Dieu seul, car Il est le créateur de toute chose dans les cieux et sur la terre.

الرَّحْمَٰنِ الرَّحِيمِ
ar-Rahmâni-r-Rahîm (3)
Le Tout Miséricordieux, le Très Miséricordieux (3).

Ces deux noms indiquent que la miséricorde de Dieu embrasse toute chose et toutes les créatures.

"""

BAQARA_SECTION = """SOURATE DE LA VACHE

Alif-Lâm-Mîm (1)
Alif, Lam, Mim (1).

Ces lettres isolées ouvrent plusieurs chapitres du Livre et leur sens exact est connu de Dieu seul.

Dhâlika-l-Kitâbu lâ rayba fîh (2)
C'est le Livre au sujet duquel il n'y a aucun doute, un guide pour les pieux (2).

Le Livre est une direction pour ceux qui craignent Dieu et qui croient au monde invisible.
"""

SAMPLE_CORPUS = FATIHA_SECTION + BAQARA_SECTION

INLINE_CORPUS = "SOURATE TEST (3)\nText here (1) more text (2) end"


class StaticSource(BaseCorpusSource):
    """Source double that returns a fixed text and counts fetches."""

    def __init__(self, text: str, delay: float = 0.0):
        self.text = text
        self.delay = delay
        self.calls = 0

    async def fetch(self) -> str:
        self.calls += 1
        # Yield so concurrent callers can pile up on the pending load
        await asyncio.sleep(self.delay)
        return self.text

    @property
    def location(self) -> str:
        return "memory"


class FlakySource(BaseCorpusSource):
    """Source double that fails a given number of times, then succeeds."""

    def __init__(self, text: str, failures: int = 1, error: Exception | None = None):
        self.text = text
        self.failures = failures
        self.error = error
        self.calls = 0

    async def fetch(self) -> str:
        self.calls += 1
        await asyncio.sleep(0)
        if self.calls <= self.failures:
            raise self.error or CorpusLoadError("simulated outage", location="memory")
        return self.text
