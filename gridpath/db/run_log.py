"""Search run logging helpers (JSONL)."""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from gridpath.core.contracts import SearchReport, VisitRecord

SCHEMA_VERSION = 1
RUN_LOG_NAME = "run.jsonl"


def create_run_folder(
    base_dir: Path, *, timestamp: str | None = None
) -> tuple[Path, Path]:
    run_id = timestamp or _format_timestamp(datetime.now(timezone.utc))
    base_dir.mkdir(parents=True, exist_ok=True)
    run_dir = base_dir / run_id
    suffix = 1
    # Searches started within the same second each get their own folder.
    while True:
        try:
            run_dir.mkdir()
        except FileExistsError:
            run_dir = base_dir / f"{run_id}-{suffix}"
            suffix += 1
            continue
        return run_dir, run_dir / RUN_LOG_NAME


def write_header(path: Path, metadata: dict[str, Any]) -> None:
    record: dict[str, Any] = {
        "type": "header",
        "schema_version": SCHEMA_VERSION,
        "metadata": metadata,
    }
    _append_record(path, record)


def append_visit(path: Path, visit: VisitRecord) -> None:
    record: dict[str, Any] = {
        "type": "visit",
        "schema_version": SCHEMA_VERSION,
        "visit": visit.model_dump(),
    }
    _append_record(path, record)


def append_report(path: Path, report: SearchReport) -> None:
    record: dict[str, Any] = {
        "type": "path",
        "schema_version": SCHEMA_VERSION,
        "report": report.model_dump(),
    }
    _append_record(path, record)


def write_search_log(path: Path, report: SearchReport, *, run_id: str) -> None:
    layout = report.layout
    write_header(
        path,
        metadata={
            "run_id": run_id,
            "rows": layout.rows,
            "cols": layout.cols,
            "start": list(layout.start.as_tuple()),
            "finish": list(layout.finish.as_tuple()),
        },
    )
    for visit in report.trace:
        append_visit(path, visit)
    append_report(path, report)


def _append_record(path: Path, record: dict[str, Any]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("a", encoding="utf-8") as handle:
        handle.write(json.dumps(record))
        handle.write("\n")


def _format_timestamp(value: datetime) -> str:
    return value.strftime("%Y-%m-%dT%H-%M-%SZ")
