"""Batch import of candidate submissions."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Literal

import pendulum
import structlog

from . import __version__
from .core import CandidateService
from .errors import CandidateError

ImportStatus = Literal["created", "rejected"]


@dataclass(slots=True)
class SubmissionRecord:
    """Raw submission read from a JSONL line."""

    line: int
    payload: dict[str, Any]


@dataclass(slots=True)
class ImportResult:
    """Outcome of adding a single submission."""

    line: int
    status: ImportStatus
    candidate: dict[str, Any] | None = None
    error: str | None = None


class SubmissionLoadError(ValueError):
    """Raised when submission loading encounters invalid lines."""

    def __init__(self, errors: list[str], partial: list[SubmissionRecord]):
        super().__init__("Submission loading failed")
        self.errors = errors
        self.partial = partial

    def __str__(self) -> str:
        return f"Submission loading failed: {self.errors}"


class SubmissionLoader:
    """Load candidate submissions from a JSON Lines file."""

    def load(self, path: Path) -> list[SubmissionRecord]:
        records: list[SubmissionRecord] = []
        errors: list[str] = []
        with path.open("r", encoding="utf-8") as handle:
            for idx, line in enumerate(handle, start=1):
                raw = line.strip()
                if not raw:
                    continue
                try:
                    payload = json.loads(raw)
                except json.JSONDecodeError as exc:
                    errors.append(f"line {idx}: invalid JSON ({exc})")
                    continue
                if not isinstance(payload, dict):
                    errors.append(f"line {idx}: expected a JSON object")
                    continue
                records.append(SubmissionRecord(line=idx, payload=payload))
        if errors:
            raise SubmissionLoadError(errors, records)
        return records


class OutputWriter:
    """Persist import outcomes."""

    def write(self, path: Path, payload: dict | list[dict]) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(
            json.dumps(payload, ensure_ascii=False, indent=2),
            encoding="utf-8",
        )


class ImportPipeline:
    """Feed a submissions file through the candidate service."""

    def __init__(
        self,
        *,
        service: CandidateService,
        loader: SubmissionLoader | None = None,
        writer: OutputWriter | None = None,
    ) -> None:
        self._service = service
        self._loader = loader or SubmissionLoader()
        self._writer = writer or OutputWriter()
        self._logger = structlog.get_logger(__name__)

    def run(self, *, submissions_path: Path, output_path: Path) -> list[ImportResult]:
        load_errors: list[str] = []
        try:
            records = self._loader.load(submissions_path)
        except SubmissionLoadError as exc:
            records = exc.partial
            load_errors.extend(exc.errors)
            self._logger.warning("submissions.partial_load", errors=exc.errors)

        results = [self._add(record) for record in records]
        created = sum(1 for result in results if result.status == "created")

        metadata = {
            "submission_count": len(records),
            "created_count": created,
            "errors": load_errors,
            "timestamp": pendulum.now().to_iso8601_string(),
            "app_version": __version__,
        }
        self._writer.write(
            output_path,
            {"metadata": metadata, "results": [asdict(result) for result in results]},
        )
        self._logger.info(
            "import.completed",
            submission_count=len(records),
            created_count=created,
        )
        return results

    def _add(self, record: SubmissionRecord) -> ImportResult:
        with structlog.contextvars.bound_contextvars(line=record.line):
            try:
                stored = self._service.add_candidate(record.payload)
            except CandidateError as exc:
                return ImportResult(line=record.line, status="rejected", error=str(exc))
        return ImportResult(
            line=record.line,
            status="created",
            candidate=stored.model_dump(mode="json", by_alias=True),
        )
