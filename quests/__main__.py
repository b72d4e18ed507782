"""CLI for the quests adventures.

Usage:
    python -m quests list                          # Show adventures
    python -m quests systems                       # Show built-in star systems
    python -m quests lumoria                       # Classify the default system
    python -m quests lumoria --system andromeda --report --svg
    python -m quests lumoria --input my-system.json --scientific
    python -m quests lumoria --interactive         # Enter bodies by hand
    python -m quests tempora 14:45 15:05 --reference 15:00
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from quests.adventures import list_adventures
from quests.adventures.lumoria.systems import SYSTEMS, get_system
from quests.adventures.tempora.clocks import REFERENCE_TIME, VILLAGE_CLOCKS
from quests.config import load_settings
from quests.errors import ClockFormatError, ValidationError
from quests.models import StarSystem
from quests.prompts import prompt_bodies
from quests.render import render_adventures, render_systems
from quests.runner import run_lumoria, run_tempora
from quests.validation import validate_bodies

app = typer.Typer(
    name="quests",
    help="Coding adventures: Lumoria light intensity and Tempora clock drift",
    no_args_is_help=True,
)
console = Console(stderr=True)


def _report_invalid(err: ValidationError) -> None:
    console.print("[red]Error:[/red] invalid input")
    for v in err.violations:
        console.print(f"  [red]-[/red] {escape(str(v))}")


@app.command("list")
def cmd_list() -> None:
    """Show available adventures."""
    adventures = list_adventures()
    if not adventures:
        console.print("[yellow]No adventures found.[/yellow]")
        raise typer.Exit(1)
    render_adventures(adventures, console)


@app.command("systems")
def cmd_systems() -> None:
    """Show the built-in star systems."""
    render_systems(list(SYSTEMS.values()), console)


@app.command("lumoria")
def cmd_lumoria(
    system_name: Optional[str] = typer.Option(None, "--system", "-s", help="Built-in system: lumoria, andromeda"),
    input_file: Optional[Path] = typer.Option(None, "--input", "-i", help="JSON file describing a star system"),
    interactive: bool = typer.Option(False, "--interactive", help="Enter bodies at the prompt"),
    scientific: bool = typer.Option(False, "--scientific", help="Add light fractions and angular sizes"),
    report: bool = typer.Option(False, "--report", "-r", help="Write the text report(s)"),
    svg: bool = typer.Option(False, "--svg", help="Write the static alignment SVG"),
    animated: bool = typer.Option(False, "--animated", help="Write the animated SVG"),
    frames: int = typer.Option(0, "--frames", min=0, help="Write N flip-book SVG frames"),
    output_dir: Optional[Path] = typer.Option(None, "--output-dir", "-o", help="Where to write files (env: QUESTS_OUTPUT_DIR)"),
) -> None:
    """Classify the light each body of a star system receives."""
    settings = load_settings()

    if input_file and system_name:
        console.print("[red]Error:[/red] use either --system or --input, not both")
        raise typer.Exit(1)

    try:
        if input_file:
            system = StarSystem.load(input_file)
        else:
            name = system_name or settings.default_system
            system = get_system(name)
            if not system:
                console.print(f"[red]Error:[/red] Unknown system: {escape(name)}. Choose: {', '.join(SYSTEMS)}")
                raise typer.Exit(1)

        if interactive:
            bodies = prompt_bodies(console, system.bodies)
            system = StarSystem(name=system.name, bodies=tuple(validate_bodies(bodies)))
    except ValidationError as e:
        _report_invalid(e)
        raise typer.Exit(1)

    run_lumoria(
        system,
        console,
        output_dir=output_dir or settings.output_dir,
        scientific=scientific,
        report=report,
        svg=svg,
        animated=animated,
        frames=frames,
    )


@app.command("tempora")
def cmd_tempora(
    clocks: Optional[list[str]] = typer.Argument(None, help="Village clock readings (HH:MM)"),
    reference: str = typer.Option(REFERENCE_TIME, "--reference", "-t", help="Grand Clock Tower time (HH:MM)"),
) -> None:
    """Report how far each village clock drifts from the Grand Clock Tower."""
    try:
        run_tempora(clocks or list(VILLAGE_CLOCKS), reference, console)
    except ClockFormatError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
