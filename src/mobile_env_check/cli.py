from __future__ import annotations
from pathlib import Path
import logging

import typer
from rich.console import Console

from .config import PlatformConfig, Settings
from .errors import CatalogConstructionError, ConfigError, MessageCatalogError
from .profiles.android import AndroidEnvironmentSetup
from .reporter import Reporter

app = typer.Typer(add_completion=False, no_args_is_help=True)
setup_app = typer.Typer(add_completion=False, no_args_is_help=True)

EXIT_CONFIG_ERROR = 2


def _log_level(verbose: bool) -> int:
    # Results are rendered by the reporter; stderr carries errors only.
    return logging.DEBUG if verbose else logging.ERROR


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=_log_level(verbose),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )


def _settings(config: Path | None) -> Settings:
    return Settings(platform=PlatformConfig.load(config))


@app.callback()
def main() -> None:
    pass


@setup_app.command("android")
def setup_android(
    api_level: str | None = typer.Option(None, "--api-level", help="Android API level to require (default: any supported)"),
    config: Path | None = typer.Option(None, "--config", help="JSON file overriding the Android support policy"),
    as_json: bool = typer.Option(False, "--json", help="Print the report as JSON."),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
):
    """Verify the Android development environment."""
    _configure_logging(verbose)
    console = Console()
    reporter = Reporter(console)
    try:
        profile = AndroidEnvironmentSetup(
            logger=logging.getLogger("mobile_env.setup.android"),
            api_level=api_level,
            settings=_settings(config),
        )
    except (ConfigError, CatalogConstructionError, MessageCatalogError) as e:
        typer.secho(str(e), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=EXIT_CONFIG_ERROR)

    try:
        report = profile.run_sync(on_result=None if as_json else reporter.progress)
    except CatalogConstructionError as e:
        typer.secho(str(e), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=EXIT_CONFIG_ERROR)

    if as_json:
        console.print_json(data=report.to_dict())
    else:
        reporter.report(report)
        reporter.summary(report)
    raise typer.Exit(code=reporter.exit_code(report))


app.add_typer(setup_app, name="setup")

if __name__ == "__main__":
    app()
