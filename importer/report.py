"""Console output of an import run."""

import sys
from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, TextIO


class Outcome(str, Enum):
    ALIAS_SKIPPED = "alias_skipped"
    UPLOADED = "uploaded"
    DUPLICATE_SKIPPED = "duplicate_skipped"
    FETCH_FAILED = "fetch_failed"
    UPLOAD_FAILED = "upload_failed"


@dataclass(frozen=True)
class OutcomeRecord:
    """Result of one manifest entry."""

    original_name: str
    sanitized_name: str
    outcome: Outcome
    status_code: Optional[int] = None
    detail: Optional[str] = None


@dataclass
class ImportReport:
    """All outcomes of a run, in processing order."""

    records: List[OutcomeRecord] = field(default_factory=list)

    def add(self, record: OutcomeRecord) -> None:
        self.records.append(record)

    @property
    def counts(self) -> Counter:
        return Counter(record.outcome for record in self.records)

    @property
    def failed(self) -> int:
        counts = self.counts
        return counts[Outcome.FETCH_FAILED] + counts[Outcome.UPLOAD_FAILED]


def describe(record: OutcomeRecord) -> str:
    """Human readable outcome shown at the end of a 'Processing' line."""
    if record.outcome is Outcome.ALIAS_SKIPPED:
        return "⏭️  Skipped (alias - references existing emoji)"
    if record.outcome is Outcome.UPLOADED:
        return "✅ Success!"
    if record.outcome is Outcome.DUPLICATE_SKIPPED:
        return "⚠️  Skipped (already exists or invalid name)"
    if record.outcome is Outcome.FETCH_FAILED:
        return f"❌ Download error: {record.detail}"
    return f"❌ Upload error: {record.detail}"


class ConsoleReporter:
    """Prints progress in the same shape the import has always used."""

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream or sys.stdout

    def _write(self, text: str) -> None:
        print(text, file=self.stream, flush=True)

    def start(self, total: int) -> None:
        self._write(f"🚀 Starting import of {total} emojis...\n")

    def entry(self, record: OutcomeRecord) -> None:
        self._write(
            f"Processing: [:{record.original_name}:] -> [:{record.sanitized_name}:]... "
            f"{describe(record)}"
        )

    def finish(self, report: ImportReport) -> None:
        counts = report.counts
        self._write(
            f"\nDone: {counts[Outcome.UPLOADED]} uploaded, "
            f"{counts[Outcome.DUPLICATE_SKIPPED]} already existed, "
            f"{counts[Outcome.ALIAS_SKIPPED]} aliases skipped, "
            f"{report.failed} failed."
        )
