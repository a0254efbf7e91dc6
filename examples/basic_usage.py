"""
Basic usage example for Mufassir library.

This example demonstrates the core workflow:
1. Point a service at the commentary document
2. Warm it up in the background
3. Fetch the commentary of a few verses
"""

import asyncio
import sys

from mufassir import CommentaryService, CorpusLoadError, configure_logging
from mufassir.corpus import FileCorpusSource


async def show_commentary(corpus_path: str, verse_keys: list[str]) -> None:
    """
    Print the commentary of each verse.

    Args:
        corpus_path: Path to the commentary text document
        verse_keys: Verse keys like "1:2"
    """
    service = CommentaryService(FileCorpusSource(corpus_path))
    service.preload()

    for key in verse_keys:
        try:
            html = await service.get_commentary(key, raise_on_load_error=True)
        except CorpusLoadError as e:
            print(f"❌ Could not load the commentary document: {e}")
            return

        print(f"\n📖 {key}")
        print("=" * 50)
        print(html if html else "(no commentary available)")


if __name__ == "__main__":
    if len(sys.argv) < 2:
        print("Usage: python basic_usage.py <tafsir.txt> [verse_key ...]")
        sys.exit(1)

    configure_logging()
    asyncio.run(show_commentary(sys.argv[1], sys.argv[2:] or ["1:1", "1:2", "1:7"]))
