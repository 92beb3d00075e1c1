"""Read search run logs back into reports."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Iterator

from pydantic import ValidationError

from gridpath.core.contracts import SearchReport, VisitRecord


def read_visits(path: Path) -> Iterator[VisitRecord]:
    for record in _iter_records(path, "visit"):
        visit = record.get("visit")
        if visit is None:
            continue
        try:
            yield VisitRecord.model_validate(visit)
        except ValidationError:
            continue


def read_report(path: Path) -> SearchReport | None:
    """Return the last valid report in the log, if any."""
    report: SearchReport | None = None
    for record in _iter_records(path, "path"):
        payload = record.get("report")
        if payload is None:
            continue
        try:
            report = SearchReport.model_validate(payload)
        except ValidationError:
            continue
    return report


def read_header(path: Path) -> dict | None:
    for record in _iter_records(path, "header"):
        metadata = record.get("metadata")
        return metadata if isinstance(metadata, dict) else {}
    return None


def _iter_records(path: Path, record_type: str) -> Iterator[dict]:
    with path.open("r", encoding="utf-8") as handle:
        for line in handle:
            record = _parse_record(line)
            if record is None or record.get("type") != record_type:
                continue
            yield record


def _parse_record(line: str) -> dict | None:
    try:
        record = json.loads(line)
    except json.JSONDecodeError:
        return None
    # Lines such as `[1, 2]` or `42` decode fine but carry no record.
    if not isinstance(record, dict):
        return None
    return record
