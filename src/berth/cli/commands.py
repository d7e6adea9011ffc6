"""Command implementations for CLI."""

import asyncio
from typing import Any, Awaitable

from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from berth.errors import ConfigError
from berth.lifecycle import LifecycleReconciler, StateInspector, TeardownOperation, TeardownOutcome
from berth.models.config import BerthConfig
from berth.models.container import DesiredSpec, image_name_with_version
from berth.runtime.base import RuntimeClient


console = Console()


def _run_action(description: str, action: Awaitable[Any], quiet: bool = False) -> Any:
    """Helper to drive a lifecycle coroutine behind a progress spinner."""
    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
        disable=quiet,
        transient=True,
    ) as progress:
        progress.add_task(description, total=None)
        return asyncio.run(action)


def build_desired_spec(config: BerthConfig) -> DesiredSpec:
    """Desired spec for the configured container, or a ConfigError."""
    try:
        return DesiredSpec.build(config.name, config)
    except ValueError as e:
        raise ConfigError(f"{config.name}: version and port must be configured") from e


def run_container(runtime: RuntimeClient, config: BerthConfig, quiet: bool = False) -> str:
    """Replace the configured container with one running the configured version."""
    spec = build_desired_spec(config)
    reconciler = LifecycleReconciler(
        runtime,
        removal_timeout=config.runtime.removal_timeout,
        poll_interval=config.runtime.poll_interval,
    )

    container_id = _run_action(
        f"Running {spec.image_reference}...",
        reconciler.run(config.name, spec),
        quiet=quiet,
    )

    if not quiet:
        console.print(
            f"[green]✓[/green] {config.name} is running {spec.image_reference} "
            f"on port {spec.host_bind_port} ({container_id[:12]})"
        )
    return container_id


def end_container(runtime: RuntimeClient, config: BerthConfig, quiet: bool = False) -> TeardownOutcome:
    """Stop and remove the configured container."""
    teardown = TeardownOperation(runtime)
    outcome = _run_action(f"Stopping {config.name}...", teardown.end(config.name), quiet=quiet)

    if not quiet:
        if outcome is TeardownOutcome.NOTHING_RUNNING:
            console.print("[yellow]No application is running[/yellow]")
        else:
            console.print(f"[green]✓[/green] {config.name} stopped and removed")
    return outcome


def show_status(runtime: RuntimeClient, config: BerthConfig, quiet: bool = False):
    """Show the observed state of the configured container."""
    observed = asyncio.run(StateInspector(runtime).inspect(config.name))

    if quiet:
        return observed

    table = Table(title="Application")
    table.add_column("Name", style="cyan")
    table.add_column("Id", style="dim")
    table.add_column("Status")
    table.add_column("Desired Image", style="magenta")

    status = observed.status.name.lower()
    status_color = "green" if status == "running" else "yellow"
    desired_image = "-"
    if config.version:
        desired_image = image_name_with_version(config.name, config.version)

    table.add_row(
        config.name,
        observed.id[:12] if observed.id else "-",
        f"[{status_color}]{status}[/{status_color}]",
        desired_image,
    )
    console.print(table)
    return observed
