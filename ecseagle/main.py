"""Command line entry point: ``ecseagle [--profile P] [--region R] ...``."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from ecseagle.app import EcsEagleApp
from ecseagle.controllers.ecs import EcsController
from ecseagle.errors import EcsEagleError
from ecseagle.logger_setup import configure_logging
from ecseagle.models.state.app_settings import ConfigLoadError
from ecseagle.models.state.config_manager import ConfigManager

logger = logging.getLogger(__name__)
console = Console(stderr=True)

app = typer.Typer(add_completion=False, help="Terminal dashboard for Amazon ECS services.")


@app.command()
def run(
    profile: Optional[str] = typer.Option(None, "--profile", "-p", help="AWS profile name"),
    region: Optional[str] = typer.Option(None, "--region", "-r", help="AWS region"),
    auto_refresh: Optional[bool] = typer.Option(
        None, "--auto-refresh/--no-auto-refresh", help="Start service views with auto refresh on"
    ),
    refresh_interval: Optional[float] = typer.Option(
        None, "--refresh-interval", help="Seconds between refresh timer ticks"
    ),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="Path to settings YAML"),
    log_file: Optional[Path] = typer.Option(None, "--log-file", help="Path to log file"),
    no_log: bool = typer.Option(False, "--no-log", help="Disable file logging"),
) -> None:
    """Browse ECS services, their task sets and load balancer routing."""
    overrides = {
        "profile": profile,
        "region": region,
        "auto_refresh": auto_refresh,
        "refresh_interval": refresh_interval,
        "log_file": str(log_file) if log_file is not None else None,
    }
    try:
        settings = ConfigManager.load(config, overrides=overrides)
    except ConfigLoadError as exc:
        console.print(f"[red]✗[/red] {exc}")
        raise typer.Exit(1) from exc

    configure_logging(None if no_log else settings.log_file, settings.log_level)
    logger.info("Starting with profile=%s region=%s", settings.profile, settings.region)

    try:
        controller = EcsController.from_profile(
            settings.profile, settings.region, listener_port=settings.listener_port
        )
    except EcsEagleError as exc:
        console.print(f"[red]✗[/red] {exc}")
        raise typer.Exit(1) from exc

    EcsEagleApp(controller, settings).run()


if __name__ == "__main__":
    app()
