from __future__ import annotations

import json
from pathlib import Path

from candidatestore.container import create_container


def test_pipeline_reports_created_and_rejected(tmp_path: Path):
    submissions_path = tmp_path / "submissions.jsonl"
    output_path = tmp_path / "out" / "results.json"
    submissions = [
        {"firstName": "Juan", "lastName": "Pérez", "email": "juan.perez@example.com"},
        {"firstName": "Juan", "lastName": "Pérez", "email": "emailinvalido.com"},
        {"firstName": "Pedro", "lastName": "López", "email": "juan.perez@example.com"},
        {"firstName": "María", "lastName": "García", "email": "maria@example.com", "phone": "912345678"},
    ]
    submissions_path.write_text(
        "\n".join(json.dumps(item, ensure_ascii=False) for item in submissions) + "\n{broken",
        encoding="utf-8",
    )

    container = create_container()
    pipeline = container.import_pipeline()

    results = pipeline.run(submissions_path=submissions_path, output_path=output_path)

    assert [result.status for result in results] == ["created", "rejected", "rejected", "created"]
    assert results[1].error == "Invalid email"
    assert results[2].error == "The email already exists in the database"
    assert results[3].candidate is not None
    assert results[3].candidate["id"] == 2

    rendered = json.loads(output_path.read_text(encoding="utf-8"))
    metadata = rendered["metadata"]
    assert metadata["submission_count"] == 4
    assert metadata["created_count"] == 2
    assert len(metadata["errors"]) == 1
    assert metadata["errors"][0].startswith("line 5")
    assert metadata["app_version"]
    assert metadata["timestamp"]
    assert rendered["results"][0]["candidate"]["firstName"] == "Juan"

    stored = container.repository().find_by_email("maria@example.com")
    assert stored is not None
    assert stored.phone == "912345678"
