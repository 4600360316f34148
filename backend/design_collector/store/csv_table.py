"""Flat CSV table holding one row per collected design."""

from __future__ import annotations

import csv
import threading
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Sequence

from design_collector.core.logging import get_logger
from design_collector.models.entities import ID_COLUMN, SOURCE_COLUMN, TABLE_HEADER, AnalysisFields, DesignRecord
from design_collector.utils.time import today_iso

logger = get_logger(__name__)


class StoreError(RuntimeError):
    """Base error for table storage failures."""


class TableMissingError(StoreError):
    """The table file does not exist."""

    def __init__(self, path: Path) -> None:
        super().__init__("No data file")
        self.path = path


@dataclass(slots=True)
class CreateResult:
    saved_to: list[str] = field(default_factory=list)
    record_id: str | None = None

    @property
    def duplicate(self) -> bool:
        return not self.saved_to


def parse_csv_line(line: str) -> list[str]:
    """Split one CSV line; quoted separators and doubled quotes are honored.

    An unbalanced quote swallows the rest of this line only.
    """
    return next(csv.reader([line.replace("\0", "")]), [])


def _is_blank(row: Sequence[str]) -> bool:
    return not any(value.strip() for value in row)


def _single_line(value: str) -> str:
    return " ".join(value.splitlines())


def read_rows(path: Path) -> list[list[str]]:
    """All non-blank rows of ``path`` including the header.

    Each physical line is one row. Undecodable bytes become U+FFFD.
    """
    text = path.read_text(encoding="utf-8", errors="replace")
    rows = (parse_csv_line(line) for line in text.splitlines() if line.strip())
    return [row for row in rows if not _is_blank(row)]


def _writer(fh):
    return csv.writer(fh, quoting=csv.QUOTE_ALL, lineterminator="\n")


def _cell(row: Sequence[str], index: int) -> str:
    return row[index] if index < len(row) else ""


class DesignTable:
    """Append/list/delete access to one CSV file.

    Rows are written fully quoted. Writers are serialized per instance, so one
    table object should be shared by everything in the process that writes.
    """

    def __init__(self, path: Path, header: Sequence[str] = TABLE_HEADER) -> None:
        self.path = path.expanduser()
        self.header = tuple(header)
        self._lock = threading.Lock()

    @property
    def name(self) -> str:
        return self.path.name

    def ensure_header(self) -> None:
        if self.path.exists() and self.path.stat().st_size > 0:
            return
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with self.path.open("w", encoding="utf-8", newline="") as fh:
            _writer(fh).writerow(self.header)

    def create(self, source: str, analysis: AnalysisFields, date: str | None = None) -> CreateResult:
        """Append a record for ``source`` unless one already exists."""
        with self._lock:
            self.ensure_header()
            data_rows = read_rows(self.path)[1:]
            if any(_cell(row, SOURCE_COLUMN) == source for row in data_rows):
                logger.info("Skipped duplicate source %s", source, extra={"ctx_source": source})
                return CreateResult()

            record = DesignRecord(
                id=str(_next_id(data_rows)),
                date=date or today_iso(),
                source=source,
                analysis=analysis,
            )
            self._append(record.to_row())
        logger.info(
            "Saved %s from %s as record %s",
            analysis.style_category,
            source,
            record.id,
            extra={"ctx_source": source, "ctx_record_id": record.id},
        )
        return CreateResult(saved_to=[self.name], record_id=record.id)

    def list_records(self) -> list[dict[str, str]]:
        """Rows as column mappings, most recently appended first."""
        if not self.path.exists():
            return []
        rows = read_rows(self.path)
        if len(rows) <= 1:
            return []
        columns = rows[0]
        records = [{name: _cell(row, idx) for idx, name in enumerate(columns)} for row in rows[1:]]
        records.reverse()
        return records

    def delete(self, record_id: str | int) -> int:
        """Remove every row whose ID equals ``record_id``; returns rows removed."""
        target = str(record_id)
        with self._lock:
            if not self.path.exists():
                raise TableMissingError(self.path)
            rows = read_rows(self.path)
            if not rows:
                return 0
            header, data_rows = rows[0], rows[1:]
            kept = [row for row in data_rows if _cell(row, ID_COLUMN) != target]
            removed = len(data_rows) - len(kept)
            if removed:
                self._rewrite([header, *kept])
        if removed:
            logger.info("Removed design ID %s", target, extra={"ctx_record_id": target})
        return removed

    def count(self) -> int:
        if not self.path.exists():
            return 0
        return max(len(read_rows(self.path)) - 1, 0)

    def _append(self, row: Sequence[str]) -> None:
        with self.path.open("a+", encoding="utf-8", errors="replace", newline="") as fh:
            fh.seek(0)
            content = fh.read()
            if content and not content.endswith("\n"):
                fh.write("\n")
            _writer(fh).writerow([_single_line(value) for value in row])

    def _rewrite(self, rows: Iterable[Sequence[str]]) -> None:
        with self.path.open("w", encoding="utf-8", newline="") as fh:
            _writer(fh).writerows(rows)


def _next_id(data_rows: Sequence[Sequence[str]]) -> int:
    # The header occupies line 0, so an untouched table numbers rows by line.
    numeric = [int(value) for value in (_cell(row, ID_COLUMN) for row in data_rows) if value.isdigit()]
    return max([len(data_rows), *numeric]) + 1


def table_stats(data_dir: Path, files: Iterable[str]) -> dict[str, int]:
    """Data-row counts for each known CSV in ``data_dir``; missing files count 0."""
    stats: dict[str, int] = {}
    for name in files:
        path = data_dir / name
        stats[Path(name).stem] = max(len(read_rows(path)) - 1, 0) if path.exists() else 0
    return stats


__all__ = [
    "StoreError",
    "TableMissingError",
    "CreateResult",
    "DesignTable",
    "parse_csv_line",
    "read_rows",
    "table_stats",
]
