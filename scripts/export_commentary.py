#!/usr/bin/env python3
"""CLI commentary exporter for Mufassir.

Extracts the commentary of every verse of the selected surahs from a local
commentary document and writes a static JSON export.
Emits JSONL progress events to stdout.
"""

import argparse
import asyncio
import json
import sys
from pathlib import Path

# Allow running without installing the package
sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from mufassir import CommentaryService, CorpusLoadError, configure_logging
from mufassir.corpus import FileCorpusSource
from mufassir.data import TOTAL_SURAHS, get_total_ayahs
from mufassir.export import export_surahs, load_existing
from mufassir.models import CommentaryExport


def emit(event: dict) -> None:
    print(json.dumps(event, ensure_ascii=False))
    sys.stdout.flush()


def parse_surah_ids(raw: str | None) -> list[int]:
    if not raw:
        return list(range(1, TOTAL_SURAHS + 1))
    ids: list[int] = []
    for part in raw.split(","):
        part = part.strip()
        if not part:
            continue
        try:
            surah_id = int(part)
        except ValueError:
            continue
        if 1 <= surah_id <= TOTAL_SURAHS:
            ids.append(surah_id)
    return ids


def main() -> int:
    parser = argparse.ArgumentParser(description="Export per-verse commentary to JSON")
    parser.add_argument("--corpus", required=True, help="Commentary text document")
    parser.add_argument("--output", required=True, help="Output JSON file")
    parser.add_argument("--surah-ids", default=None, help="Comma-separated list of surah IDs")
    parser.add_argument("--source-name", default=None, help="Attribution stored in the export")
    parser.add_argument("--overwrite", action="store_true", help="Ignore an existing export")

    args = parser.parse_args()

    configure_logging()

    output_path = Path(args.output)
    surah_ids = parse_surah_ids(args.surah_ids)

    data = CommentaryExport() if args.overwrite else load_existing(output_path)
    if args.source_name:
        data.source = args.source_name

    service = CommentaryService(FileCorpusSource(args.corpus))
    try:
        corpus = asyncio.run(service.loader.load())
    except CorpusLoadError as e:
        emit({"type": "job_error", "error": str(e)})
        return 1

    emit({
        "type": "job_start",
        "total": len(surah_ids),
        "resume_from": data.last_surah_completed + 1,
        "existing_verses": data.verse_count,
    })

    total_verses = get_total_ayahs()

    def on_surah_done(surah_id: int, found: int) -> None:
        emit({
            "type": "surah_done",
            "surah_id": surah_id,
            "verses": found,
            "progress": round(len(data.verses) / total_verses, 4),
        })

    data = export_surahs(
        service,
        corpus,
        surah_ids,
        output_path,
        data=data,
        on_surah_done=on_surah_done,
    )

    emit({"type": "job_done", "verses": data.verse_count, "output": str(output_path)})
    return 0


if __name__ == "__main__":
    sys.exit(main())
