"""Quests runner — orchestrates classify → render → write outputs.

Data flow for a Lumoria run:
1. Classify the bodies (basic or scientific)
2. Render the console table
3. Write the requested report / SVG files into the output directory
4. Collect written paths and write failures into a LumoriaRun

A failed file write is reported and recorded; it never discards the
classification already computed.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from rich.console import Console

from quests.adventures.lumoria.report import generate_report, generate_scientific_report
from quests.adventures.lumoria.shadows import classify, classify_scientific
from quests.adventures.lumoria.svg import generate_animated_svg, generate_frames, generate_static_svg
from quests.adventures.tempora.clocks import ClockReading, synchronize
from quests.models import ClassificationResult, StarSystem
from quests.render import render_clocks, render_results


@dataclass
class LumoriaRun:
    """Everything a single Lumoria run produced."""

    system: str
    results: list[ClassificationResult] = field(default_factory=list)
    written: list[Path] = field(default_factory=list)
    failed: dict[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.failed

    def to_dict(self) -> dict:
        return {
            "system": self.system,
            "results": [r.to_dict() for r in self.results],
            "written": [str(p) for p in self.written],
            "failed": dict(self.failed),
        }


def _system_slug(name: str) -> str:
    """Normalize a system name for use in filenames.

    'Lumoria' → 'lumoria', 'Alpha Centauri' → 'alpha-centauri'
    """
    slug = re.sub(r"[^a-z0-9]+", "-", name.lower()).strip("-")
    return slug or "system"


def _write_output(path: Path, text: str, run: LumoriaRun, console: Console) -> Optional[Path]:
    """Write one output file, recording success or failure on the run."""
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
    except OSError as e:
        run.failed[path.name] = str(e)
        console.print(f"  [red]Error:[/red] could not write {path}: {e}")
        return None
    run.written.append(path)
    console.print(f"  [green]Saved[/green] {path}")
    return path


def run_lumoria(
    system: StarSystem,
    console: Console,
    output_dir: Path,
    scientific: bool = False,
    report: bool = False,
    svg: bool = False,
    animated: bool = False,
    frames: int = 0,
    date: Optional[str] = None,
) -> LumoriaRun:
    """Classify a system, show the table, and write the requested files.

    Args:
        system: Bodies to classify (already validated).
        console: Rich Console for status output.
        output_dir: Directory for report and SVG files.
        scientific: Use the scientific classifier and also write the
            scientific report when `report` is set.
        report: Write the plain-text report(s).
        svg: Write the static alignment SVG.
        animated: Write the animated SVG.
        frames: Number of flip-book frames to write (0 for none).
        date: YYYY-MM-DD stamp for SVG filenames; defaults to today (UTC).

    Returns:
        LumoriaRun with results, written paths and any write failures.
    """
    classifier = classify_scientific if scientific else classify
    results = classifier(list(system.bodies))
    run = LumoriaRun(system=system.name, results=results)

    render_results(results, console, system_name=system.name, scientific=scientific)

    slug = _system_slug(system.name)
    date = date or datetime.now(timezone.utc).strftime("%Y-%m-%d")

    if report:
        _write_output(output_dir / f"{slug}-alignment-report.txt",
                      generate_report(results, system.name), run, console)
        if scientific:
            _write_output(output_dir / f"{slug}-scientific-report.txt",
                          generate_scientific_report(results, system.name), run, console)
    if svg:
        _write_output(output_dir / f"{slug}-alignment-{date}.svg",
                      generate_static_svg(results, system.name), run, console)
    if animated:
        _write_output(output_dir / f"{slug}-animated-{date}.svg",
                      generate_animated_svg(results, system.name), run, console)
    if frames > 0:
        frame_dir = output_dir / "frames"
        for i, frame in enumerate(generate_frames(results, frames, system.name)):
            _write_output(frame_dir / f"{slug}-frame{i:02d}.svg", frame, run, console)

    if run.failed:
        console.print(f"  [yellow]{len(run.failed)} file(s) could not be written.[/yellow]")
    return run


def run_tempora(clocks, reference: str, console: Console) -> list[ClockReading]:
    """Compare clocks with the reference and show the drift table."""
    readings = synchronize(clocks, reference)
    render_clocks(readings, reference, console)
    return readings
