"""Dependency injection container for candidate intake."""

from __future__ import annotations

from dependency_injector import containers, providers

from .core import CandidateService
from .pipeline import ImportPipeline
from .repository import InMemoryCandidateRepository

DEFAULT_SETTINGS: dict = {"repository": {"start_id": 1}}


class CandidateContainer(containers.DeclarativeContainer):
    """Dependency-injector container definition."""

    config = providers.Configuration(default=DEFAULT_SETTINGS)

    repository = providers.Singleton(
        InMemoryCandidateRepository,
        start_id=config.repository.start_id.as_int(),
    )

    candidate_service = providers.Factory(
        CandidateService,
        repository=repository,
    )

    import_pipeline = providers.Factory(
        ImportPipeline,
        service=candidate_service,
    )


def create_container(*, settings: dict | None = None) -> CandidateContainer:
    """Instantiate container with optional overrides."""

    container = CandidateContainer()

    if settings and isinstance(settings, dict):
        container.config.from_dict(settings)

    return container
