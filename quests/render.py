"""Console rendering — Rich tables for classification results, clocks and adventures."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from quests.adventures import AdventureInfo
from quests.adventures.lumoria.report import format_number
from quests.adventures.tempora.clocks import ClockReading
from quests.models import ClassificationResult, LightIntensity, StarSystem

_LIGHT_STYLES = {
    LightIntensity.FULL: "bold yellow",
    LightIntensity.PARTIAL: "cyan",
    LightIntensity.NONE: "red",
    LightIntensity.MULTIPLE_SHADOWS: "magenta",
}

_STATUS_STYLES = {
    "ahead": "yellow",
    "behind": "cyan",
    "synchronized": "green",
    "invalid": "red",
}


def render_results(
    results: list[ClassificationResult],
    console: Console,
    system_name: str = "Lumoria",
    scientific: bool = False,
) -> None:
    """Render a Rich table of light classifications.

    Columns: name, distance, size, light, explanation. Scientific mode adds
    the light fraction and angular size.
    """
    if not results:
        console.print(f"[yellow]No bodies to classify in {system_name}.[/yellow]")
        return

    table = Table(
        title=f"The Celestial Light Intensity of {system_name}",
        show_header=True,
        header_style="bold",
    )
    table.add_column("Planet", style="green", min_width=10)
    table.add_column("Distance (AU)", justify="right")
    table.add_column("Diameter (km)", justify="right")
    table.add_column("Light", min_width=12)
    if scientific:
        table.add_column("Light %", justify="right")
        table.add_column("Angular (\")", justify="right")
    table.add_column("Explanation", style="dim")

    for r in results:
        style = _LIGHT_STYLES.get(r.light, "white")
        row = [
            escape(r.name),
            format_number(r.distance),
            format_number(r.size),
            f"[{style}]{r.light.value}[/{style}]",
        ]
        if scientific:
            row.append(f"{r.light_fraction * 100:.0f}%" if r.light_fraction is not None else "--")
            row.append(f"{r.angular_size:.2f}" if r.angular_size is not None else "--")
        explanation = r.explanation
        if r.shadow_casters:
            explanation += f" ({', '.join(r.shadow_casters)})"
        row.append(escape(explanation))
        table.add_row(*row)

    console.print()
    console.print(table)
    console.print()


def render_clocks(readings: list[ClockReading], reference: str, console: Console) -> None:
    """Render a Rich table of clock drift against the reference."""
    table = Table(
        title=f"The Clockwork Town of Tempora (Grand Clock Tower {reference})",
        show_header=True,
        header_style="bold",
    )
    table.add_column("Clock", style="dim")
    table.add_column("Reading", justify="right")
    table.add_column("Drift (min)", justify="right")
    table.add_column("Status")

    for r in readings:
        style = _STATUS_STYLES[r.status]
        if r.difference is None:
            drift = "--"
        else:
            drift = f"{'+' if r.difference > 0 else ''}{r.difference}"
        table.add_row(r.label, escape(r.reading), drift, f"[{style}]{r.status}[/{style}]")

    console.print()
    console.print(table)
    console.print()


def render_adventures(adventures: list[AdventureInfo], console: Console) -> None:
    """Render the table of available adventures."""
    table = Table(title="Available Adventures", show_header=True, header_style="bold")
    table.add_column("Name", style="green", min_width=10)
    table.add_column("Description", min_width=30)
    table.add_column("Command", style="cyan")
    for a in adventures:
        table.add_row(a.name, a.description, a.command)

    console.print()
    console.print(table)
    console.print()


def render_systems(systems: list[StarSystem], console: Console) -> None:
    """Render the built-in star systems and their bodies."""
    table = Table(title="Built-in Star Systems", show_header=True, header_style="bold")
    table.add_column("System", style="green")
    table.add_column("Bodies")
    for s in systems:
        bodies = ", ".join(f"{escape(b.name)} ({format_number(b.distance)} AU)" for b in s.bodies)
        table.add_row(escape(s.name), bodies)

    console.print()
    console.print(table)
    console.print()
