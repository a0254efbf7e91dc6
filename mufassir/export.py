"""
Bulk export of extracted commentary to a static JSON document.

The export is saved after every surah and records the last completed surah,
so an interrupted run resumes where it stopped.
"""

from collections.abc import Callable, Iterable
from datetime import datetime, timezone
from pathlib import Path

from pydantic import ValidationError

from mufassir._logging import log_warning
from mufassir.data import iter_surah_keys
from mufassir.models import CommentaryExport
from mufassir.service import CommentaryService


def load_existing(path: Path) -> CommentaryExport:
    """
    Load a previous export to resume from.

    Returns:
        The existing export, or an empty one if the file is missing or invalid
    """
    if path.exists():
        try:
            return CommentaryExport.model_validate_json(path.read_text(encoding="utf-8"))
        except ValidationError:
            log_warning("Existing export is invalid, starting fresh", path=path)
    return CommentaryExport()


def save_export(data: CommentaryExport, path: Path) -> Path:
    """Write the export as pretty-printed JSON."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(data.to_json(), encoding="utf-8")
    return path


def export_surah(service: CommentaryService, corpus: str, surah_id: int) -> dict[str, str]:
    """
    Extract every verse of a surah.

    Verses that cannot be located or have no usable text are left out.

    Returns:
        Mapping from "chapter:verse" to sanitized commentary
    """
    verses: dict[str, str] = {}
    for key in iter_surah_keys(surah_id):
        text = service.extract(corpus, key)
        if text:
            verses[str(key)] = text
    return verses


def export_surahs(
    service: CommentaryService,
    corpus: str,
    surah_ids: Iterable[int],
    output_path: Path,
    data: CommentaryExport | None = None,
    on_surah_done: Callable[[int, int], None] | None = None,
) -> CommentaryExport:
    """
    Export several surahs, saving after each one.

    Surahs up to ``data.last_surah_completed`` are skipped.

    Args:
        service: Service whose extraction settings are used
        corpus: Full commentary document
        surah_ids: Surahs to export
        output_path: JSON file to write
        data: Export to extend (default: a new one)
        on_surah_done: Called with (surah_id, verses_found) after each surah

    Returns:
        The updated export
    """
    data = data or CommentaryExport()

    for surah_id in sorted(set(surah_ids)):
        if surah_id <= data.last_surah_completed:
            continue

        verses = export_surah(service, corpus, surah_id)
        data.verses.update(verses)
        data.last_surah_completed = surah_id
        data.generated_at = datetime.now(timezone.utc)
        save_export(data, output_path)

        if on_surah_done:
            on_surah_done(surah_id, len(verses))

    return data
