from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from candidatestore.config import ConfigManager
from candidatestore.container import create_container
from candidatestore.core import CandidateService
from candidatestore.pipeline import ImportPipeline
from candidatestore.repository import InMemoryCandidateRepository
from candidatestore.schemas.config import AppConfig, load_config


def test_default_container_wiring():
    container = create_container()

    repository = container.repository()
    service = container.candidate_service()

    assert isinstance(repository, InMemoryCandidateRepository)
    assert isinstance(service, CandidateService)
    assert service.repository is repository
    assert isinstance(container.import_pipeline(), ImportPipeline)


def test_create_container_with_start_id_override():
    container = create_container(settings={"repository": {"start_id": 5}})
    service = container.candidate_service()

    stored = service.add_candidate({"firstName": "Juan", "lastName": "Pérez", "email": "juan@example.com"})

    assert stored.id == 5


def test_load_config_validation():
    app_config = load_config({"repository": {"start_id": 3}, "logging": {"level": "DEBUG"}})

    assert isinstance(app_config, AppConfig)
    assert app_config.logging.level == "DEBUG"
    assert app_config.to_settings() == {"repository": {"start_id": 3}}


def test_load_config_defaults():
    app_config = load_config(None)

    assert app_config.repository.start_id == 1
    assert app_config.to_settings() == {}


@pytest.mark.parametrize("raw", [["not", "a", "mapping"], {"repository": {"start_id": 0}}])
def test_load_config_rejects_invalid(raw: object):
    with pytest.raises(ValidationError):
        load_config(raw)


def test_config_manager_loads_yaml(tmp_path: Path):
    (tmp_path / "intake.yaml").write_text("repository:\n  start_id: 7\n", encoding="utf-8")

    manager = ConfigManager(tmp_path)

    assert manager.load("intake") == {"repository": {"start_id": 7}}
    assert manager.load_app_config("intake").repository.start_id == 7


def test_config_manager_for_file_and_missing(tmp_path: Path):
    path = tmp_path / "settings.yml"
    path.write_text("logging:\n  level: DEBUG\n  format: console\n", encoding="utf-8")

    manager, name = ConfigManager.for_file(path)

    assert name == "settings"
    assert manager.load_app_config(name).logging.format == "console"
    with pytest.raises(FileNotFoundError):
        manager.load("absent")
