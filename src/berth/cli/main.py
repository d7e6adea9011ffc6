"""Main CLI implementation using Typer."""

import logging
from pathlib import Path
from typing import Any, Callable, Optional

import typer
from rich.console import Console

from berth.cli.commands import end_container, run_container, show_status
from berth.config import load_config
from berth.errors import BerthError
from berth.runtime.docker import DockerRuntimeClient
from berth.utils.logging import setup_logging


# Create Typer app
app = typer.Typer(
    name="berth",
    help="Berth - run one versioned service container and keep it current",
    add_completion=False,
)

# Console for rich output
console = Console()


def _run_cli_command(
    handler: Callable[..., Any],
    config_path: Optional[Path],
    quiet: bool = False,
    **overrides: Any,
):
    """Helper to run a CLI command against the Docker runtime with error handling."""
    try:
        config = load_config(config_path, **overrides)
        log_level = config.log_level
        if quiet and logging.getLevelName(log_level) < logging.WARNING:
            log_level = "WARNING"
        setup_logging(log_level)
        runtime = DockerRuntimeClient(docker_host=config.runtime.docker_host)
        handler(runtime, config, quiet=quiet)
    except BerthError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1) from e


@app.command("run")
def run_command(
    config: Optional[Path] = typer.Option(
        None, "--config", "-c", help="Path to config file (default: ./berth.yaml)"
    ),
    name: Optional[str] = typer.Option(None, "--name", "-n", help="Container and image name"),
    tag: Optional[str] = typer.Option(None, "--tag", "-t", help="Image version to run"),
    port: Optional[int] = typer.Option(None, "--port", "-p", help="Port to publish"),
    docker_host: Optional[str] = typer.Option(
        None, "--docker-host", help="Docker daemon URL"
    ),
    removal_timeout: Optional[float] = typer.Option(
        None, "--removal-timeout", help="Seconds to wait for a container that is being removed"
    ),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Log level"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Only print errors"),
):
    """Replace the application container with one running the configured version."""
    _run_cli_command(
        run_container,
        config,
        quiet=quiet,
        name=name,
        version=tag,
        port=port,
        docker_host=docker_host,
        removal_timeout=removal_timeout,
        log_level=log_level,
    )


@app.command("end")
def end_command(
    config: Optional[Path] = typer.Option(
        None, "--config", "-c", help="Path to config file (default: ./berth.yaml)"
    ),
    name: Optional[str] = typer.Option(None, "--name", "-n", help="Container and image name"),
    docker_host: Optional[str] = typer.Option(
        None, "--docker-host", help="Docker daemon URL"
    ),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Log level"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Only print errors"),
):
    """Stop and remove the application container."""
    _run_cli_command(
        end_container,
        config,
        quiet=quiet,
        name=name,
        docker_host=docker_host,
        log_level=log_level,
    )


@app.command("status")
def status_command(
    config: Optional[Path] = typer.Option(
        None, "--config", "-c", help="Path to config file (default: ./berth.yaml)"
    ),
    name: Optional[str] = typer.Option(None, "--name", "-n", help="Container and image name"),
    docker_host: Optional[str] = typer.Option(
        None, "--docker-host", help="Docker daemon URL"
    ),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Log level"),
):
    """Show the state of the application container."""
    _run_cli_command(
        show_status,
        config,
        name=name,
        docker_host=docker_host,
        log_level=log_level,
    )


def main():
    """Main entry point for CLI."""
    app()
