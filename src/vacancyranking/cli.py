"""Typer CLI entrypoint for vacancy ranking."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

import typer
from pydantic import ValidationError

from .config import ConfigManager
from .container import create_container
from .errors import CriterionValidationError, UnsupportedCriterionTypeError, VacancyNotFoundError
from .logging import configure_logging
from .schemas.config import load_config

app = typer.Typer(help="Rank candidates against vacancy criteria.")


@app.command()
def rank(
    candidates: Path = typer.Option(..., exists=True, readable=True, dir_okay=False, help="Candidates JSONL path."),
    vacancies: Path = typer.Option(..., exists=True, readable=True, dir_okay=False, help="Vacancies JSON path."),
    vacancy_id: str = typer.Option(..., help="Identifier of the vacancy to rank against."),
    output: Path = typer.Option(
        ...,
        exists=False,
        file_okay=True,
        dir_okay=False,
        resolve_path=True,
        help="Output JSON path.",
    ),
    as_of: Optional[str] = typer.Option(None, help="Evaluation date (YYYY-MM-DD or ISO) for derived fields such as age."),
    config: Optional[Path] = typer.Option(None, exists=True, readable=True, dir_okay=False, help="YAML config path."),
    log_level: Optional[str] = typer.Option(None, help="Log level for structured logging."),
) -> None:
    """Rank every candidate against one vacancy."""
    raw: Any = {}
    if config:
        raw = ConfigManager.load_file(config)
        if not isinstance(raw, dict):
            raise typer.BadParameter("Config file must be a YAML object", param_name="config")
    try:
        app_config = load_config(raw)
    except ValidationError as exc:
        raise typer.BadParameter(str(exc), param_name="config") from exc

    configure_logging(log_level or app_config.logging.level)

    settings = app_config.to_settings()
    if as_of:
        settings.setdefault("ranking", {})["as_of"] = as_of

    try:
        container = create_container(settings=settings)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_name="as_of") from exc
    pipeline = container.pipeline()

    try:
        results = pipeline.run(
            candidates_path=candidates,
            vacancies_path=vacancies,
            vacancy_id=vacancy_id,
            output_path=output,
        )
    except VacancyNotFoundError as exc:
        typer.echo(f"{exc.title}: {exc}", err=True)
        raise typer.Exit(code=2) from exc
    except UnsupportedCriterionTypeError as exc:
        typer.echo(f"{exc.title}: {exc}", err=True)
        raise typer.Exit(code=3) from exc
    except CriterionValidationError as exc:
        for error in exc.errors:
            typer.echo(f"Validation Error: {error}", err=True)
        raise typer.Exit(code=1) from exc
    except ValidationError as exc:
        for error in exc.errors():
            location = ".".join(str(part) for part in error["loc"])
            typer.echo(f"Validation Error: {location}: {error['msg']}", err=True)
        raise typer.Exit(code=1) from exc
    except ValueError as exc:
        typer.echo(f"Invalid Input: {exc}", err=True)
        raise typer.Exit(code=1) from exc

    typer.echo(f"Ranked {len(results)} candidates. Results saved to {output}.")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
