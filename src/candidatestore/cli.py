"""Typer CLI entrypoint for candidate imports."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError

from .config import ConfigManager
from .container import create_container
from .logging import configure_logging
from .schemas.config import AppConfig

app = typer.Typer(help="Candidate intake CLI.")


@app.callback()
def main_callback() -> None:
    """Validate and store candidate submissions."""


@app.command("import")
def import_candidates(
    submissions: Path = typer.Option(..., exists=True, readable=True, dir_okay=False, help="Submissions JSONL path."),
    output: Path = typer.Option(
        ...,
        exists=False,
        file_okay=True,
        dir_okay=False,
        resolve_path=True,
        help="Output JSON path.",
    ),
    config: Optional[Path] = typer.Option(None, exists=True, readable=True, dir_okay=False, help="YAML config path."),
    log_level: Optional[str] = typer.Option(None, help="Log level for structured logging."),
) -> None:
    """Add every submission in a JSONL file and report the outcomes."""
    app_config = AppConfig()
    if config:
        if config.suffix not in (".yaml", ".yml"):
            raise typer.BadParameter("Config file must have a .yaml or .yml extension", param_name="config")
        manager, name = ConfigManager.for_file(config)
        try:
            app_config = manager.load_app_config(name)
        except ValidationError as exc:
            raise typer.BadParameter(f"Invalid config file: {exc}", param_name="config") from exc

    configure_logging(log_level or app_config.logging.level, log_format=app_config.logging.format)

    container = create_container(settings=app_config.to_settings())
    pipeline = container.import_pipeline()

    results = pipeline.run(submissions_path=submissions, output_path=output)
    created = sum(1 for result in results if result.status == "created")
    typer.echo(
        f"Processed {len(results)} submissions, {created} created. Results saved to {output}."
    )


def main() -> None:
    app()


if __name__ == "__main__":
    main()
