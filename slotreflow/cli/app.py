"""
Main CLI application using Typer.
"""

import asyncio
import logging
from pathlib import Path
from typing import Annotated, List, Optional

import pendulum
import typer
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from ..adapters.json_schedule_source import JsonScheduleSource
from ..config import AppConfig, get_default_config_path
from ..domain.durations import end_time as compute_end_time
from ..domain.durations import min_service_duration, total_duration
from ..domain.exceptions import ConfigurationError
from ..domain.models import Service
from ..domain.time_validation import is_slot_in_past
from ..services.availability import AvailabilityService

app = typer.Typer(
    name="slotreflow",
    help="Show which slots of a day are still bookable after existing bookings",
    add_completion=False
)

console = Console()


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _load_config(config_file: Optional[Path]) -> AppConfig:
    """Load the config, falling back to defaults when no file exists."""
    config_path = config_file or get_default_config_path()
    if config_file is None and not config_path.exists():
        return AppConfig()
    return AppConfig.load_from_yaml(config_path)


def _resolve_services(config: AppConfig, names: Optional[List[str]]) -> List[Service]:
    try:
        return config.resolve_services(names or [])
    except ValueError as e:
        console.print(f"[bold red]Fehler:[/bold red] {e}")
        raise typer.Exit(1)


@app.command()
def show(
    day: Annotated[str, typer.Argument(help="Tag (YYYY-MM-DD)")],
    service: Annotated[Optional[List[str]], typer.Option("--service", "-s", help="Gewählte Leistung(en), mehrfach angebbar")] = None,
    min_duration: Annotated[Optional[int], typer.Option("--min-duration", "-d", help="Mindestdauer in Minuten (überschreibt Leistungen)")] = None,
    schedule: Annotated[Optional[Path], typer.Option("--schedule", help="JSON-Datei mit Slots und Buchungen")] = None,
    config_file: Annotated[Optional[Path], typer.Option("--config", "-c", help="Path to config file. Defaults to ./config.yaml")] = None,
    hide_past: Annotated[bool, typer.Option("--hide-past", help="Bereits vergangene Slots ausblenden")] = False,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Debug-Ausgaben aktivieren")] = False,
):
    """
    Show the reflowed slots of a day.

    Examples:

        slotreflow show 2024-11-25 --schedule schedule.json

        slotreflow show 2024-11-25 -s Haarschnitt -s Bart

        slotreflow show 2024-11-25 --min-duration 45 --hide-past
    """
    _configure_logging(verbose)

    try:
        config = _load_config(config_file)

        try:
            pendulum.from_format(day, "YYYY-MM-DD", tz=config.timezone)
        except ValueError as e:
            console.print(f"[red]Fehler beim Parsen des Datums: {e}[/red]")
            raise typer.Exit(1)

        schedule_path = schedule or config.schedule_file
        if schedule_path is None:
            console.print("[bold red]Fehler:[/bold red] Keine Schedule-Datei angegeben (--schedule oder schedule_file).")
            raise typer.Exit(1)

        services = _resolve_services(config, service)
        if min_duration is not None:
            threshold = min_duration
        elif services:
            threshold = min_service_duration(services)
        else:
            threshold = config.defaults.min_service_duration

        availability = AvailabilityService(schedule_source=JsonScheduleSource(schedule_path))
        reflowed = asyncio.run(availability.day_availability(day, min_duration=threshold))

        hidden_past = 0
        if hide_past:
            total = len(reflowed)
            reflowed = [
                slot for slot in reflowed
                if not is_slot_in_past(
                    day,
                    slot.display_time,
                    buffer_minutes=config.defaults.past_buffer_minutes,
                    tz=config.timezone,
                )
            ]
            hidden_past = total - len(reflowed)

        console.print()
        console.print(f"[bold cyan]Slots am {day}[/bold cyan] (Mindestdauer: {threshold} Minuten)")
        if services:
            console.print(f"   Leistungen: {', '.join(s.name for s in services)} ({total_duration(services)} Min.)")
        console.print()

        if not reflowed:
            if hidden_past:
                console.print(f"[yellow]⚠ Alle {hidden_past} Slot(s) liegen bereits in der Vergangenheit.[/yellow]\n")
            else:
                console.print("[yellow]⚠ Keine Slots mit ausreichend Zeit gefunden.[/yellow]\n")
            return

        table = Table(show_header=True, header_style="bold cyan")
        table.add_column("Beginn", style="bold yellow")
        table.add_column("Slot", style="dim")
        table.add_column("Status")

        for slot in reflowed:
            status = "[green]Frei[/green]" if slot.available else "[red]Belegt[/red]"
            table.add_row(slot.display_time, str(slot.original_slot), status)

        console.print(table)
        free = sum(1 for slot in reflowed if slot.available)
        console.print(f"\n[bold green]✓ {free} von {len(reflowed)} Slot(s) frei[/bold green]\n")

    except (FileNotFoundError, ConfigurationError, ValidationError) as e:
        console.print(f"[bold red]Fehler:[/bold red] {e}")
        raise typer.Exit(1)


@app.command()
def end_time(
    start: Annotated[str, typer.Argument(help="Beginn (HH:MM)")],
    service: Annotated[Optional[List[str]], typer.Option("--service", "-s", help="Gewählte Leistung(en)")] = None,
    duration: Annotated[Optional[int], typer.Option("--duration", "-d", help="Dauer in Minuten (statt Leistungen)")] = None,
    config_file: Annotated[Optional[Path], typer.Option("--config", "-c", help="Path to config file")] = None,
):
    """
    Calculate when a booking starting at START ends.
    """
    try:
        config = _load_config(config_file)
    except (FileNotFoundError, ConfigurationError, ValidationError) as e:
        console.print(f"[bold red]Fehler:[/bold red] {e}")
        raise typer.Exit(1)

    if duration is None:
        services = _resolve_services(config, service)
        if not services:
            console.print("[bold red]Fehler:[/bold red] --duration oder --service angeben.")
            raise typer.Exit(1)
        duration = total_duration(services)

    console.print(f"{start} + {duration} Min. → [bold]{compute_end_time(start, duration)}[/bold]")


@app.command()
def list_services(
    config_file: Optional[Path] = typer.Option(
        None,
        "--config", "-c",
        help="Path to config file"
    )
):
    """
    List all configured services.
    """
    try:
        config = _load_config(config_file)

        if not config.services:
            console.print("[yellow]Keine Leistungen in der Config-Datei definiert.[/yellow]")
            return

        table = Table(
            title="Konfigurierte Leistungen",
            show_header=True,
            header_style="bold cyan"
        )
        table.add_column("Name", style="bold yellow")
        table.add_column("Dauer (Min.)", justify="right")

        for service in config.services:
            table.add_row(service.name, str(service.duration))

        console.print()
        console.print(table)
        console.print()

    except (FileNotFoundError, ConfigurationError, ValidationError) as e:
        console.print(f"[bold red]Fehler:[/bold red] {e}")
        raise typer.Exit(1)


@app.command()
def version():
    """
    Show version information.
    """
    from .. import __version__
    console.print(f"\n[bold cyan]slotreflow[/bold cyan] version [bold]{__version__}[/bold]\n")


if __name__ == "__main__":
    app()
