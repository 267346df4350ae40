from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from candidatestore.cli import app


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


def write_jsonl(path: Path, items: list[dict]) -> None:
    path.write_text(
        "\n".join(json.dumps(item, ensure_ascii=False) for item in items),
        encoding="utf-8",
    )


def test_cli_imports_submissions(tmp_path: Path, runner: CliRunner) -> None:
    submissions_path = tmp_path / "submissions.jsonl"
    output_path = tmp_path / "results.json"
    config_path = tmp_path / "config.yaml"
    config_path.write_text("repository:\n  start_id: 100\nlogging:\n  level: WARNING\n", encoding="utf-8")
    write_jsonl(
        submissions_path,
        [
            {
                "firstName": "José",
                "lastName": "González",
                "email": "jose.gonzalez@example.com",
                "phone": "612345678",
                "cv": {"filePath": "uploads/jose.pdf", "fileType": "application/pdf"},
            },
            {"firstName": "A", "lastName": "Pérez", "email": "test@example.com"},
        ],
    )

    result = runner.invoke(
        app,
        [
            "import",
            "--submissions",
            str(submissions_path),
            "--output",
            str(output_path),
            "--config",
            str(config_path),
        ],
    )

    assert result.exit_code == 0, result.stdout
    assert "Processed 2 submissions, 1 created." in result.stdout

    rendered = json.loads(output_path.read_text(encoding="utf-8"))
    created, rejected = rendered["results"]
    assert created["status"] == "created"
    assert created["candidate"]["id"] == 100
    assert created["candidate"]["firstName"] == "José"
    assert created["candidate"]["resumes"] == [{"filePath": "uploads/jose.pdf", "fileType": "application/pdf"}]
    assert rejected == {"line": 2, "status": "rejected", "candidate": None, "error": "Invalid name"}


def test_cli_rejects_non_mapping_config(tmp_path: Path, runner: CliRunner) -> None:
    submissions_path = tmp_path / "submissions.jsonl"
    config_path = tmp_path / "config.yaml"
    write_jsonl(submissions_path, [])
    config_path.write_text("- just\n- a list\n", encoding="utf-8")

    result = runner.invoke(
        app,
        [
            "import",
            "--submissions",
            str(submissions_path),
            "--output",
            str(tmp_path / "results.json"),
            "--config",
            str(config_path),
        ],
    )

    assert result.exit_code != 0
    assert not (tmp_path / "results.json").exists()
