"""Tests for the runner: classification, rendering and file outputs."""

import io

import pytest
from rich.console import Console

from quests.adventures.lumoria.systems import LUMORIA
from quests.models import Body, LightIntensity, StarSystem
from quests.runner import _system_slug, run_lumoria, run_tempora


@pytest.fixture
def console():
    return Console(file=io.StringIO(), width=120)


def _output(console: Console) -> str:
    return console.file.getvalue()


def test_run_without_files(console, tmp_path):
    run = run_lumoria(LUMORIA, console, output_dir=tmp_path)
    assert [r.light for r in run.results][-1] == LightIntensity.MULTIPLE_SHADOWS
    assert run.written == []
    assert run.ok
    assert "Mercuria" in _output(console)
    assert list(tmp_path.iterdir()) == []


def test_run_writes_everything(console, tmp_path):
    run = run_lumoria(
        LUMORIA, console, output_dir=tmp_path,
        scientific=True, report=True, svg=True, animated=True, frames=2,
        date="2025-09-26",
    )
    names = sorted(p.name for p in run.written)
    assert names == [
        "lumoria-alignment-2025-09-26.svg",
        "lumoria-alignment-report.txt",
        "lumoria-animated-2025-09-26.svg",
        "lumoria-frame00.svg",
        "lumoria-frame01.svg",
        "lumoria-scientific-report.txt",
    ]
    assert all(p.exists() for p in run.written)
    report = (tmp_path / "lumoria-alignment-report.txt").read_text(encoding="utf-8")
    assert "Shadow Type: Partial" in report
    assert run.results[0].light_fraction == pytest.approx(1.0)


def test_scientific_report_only_in_scientific_mode(console, tmp_path):
    run = run_lumoria(LUMORIA, console, output_dir=tmp_path, report=True)
    assert [p.name for p in run.written] == ["lumoria-alignment-report.txt"]
    assert run.results[0].light_fraction is None


def test_write_failure_keeps_results(console, tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory", encoding="utf-8")
    run = run_lumoria(LUMORIA, console, output_dir=blocker, report=True, svg=True, date="2025-01-01")
    assert len(run.results) == 4
    assert not run.ok
    assert set(run.failed) == {"lumoria-alignment-report.txt", "lumoria-alignment-2025-01-01.svg"}
    assert "could not write" in _output(console)


def test_run_to_dict(console, tmp_path):
    run = run_lumoria(StarSystem("Solo", (Body("Only", 1.0, 10.0),)), console, output_dir=tmp_path)
    d = run.to_dict()
    assert d["system"] == "Solo"
    assert d["results"][0]["light"] == "Full"
    assert d["failed"] == {}


def test_empty_system(console, tmp_path):
    run = run_lumoria(StarSystem("Void"), console, output_dir=tmp_path)
    assert run.results == []
    assert "No bodies" in _output(console)


@pytest.mark.parametrize("name,slug", [
    ("Lumoria", "lumoria"),
    ("Alpha Centauri", "alpha-centauri"),
    ("../etc", "etc"),
    ("***", "system"),
])
def test_system_slug(name, slug):
    assert _system_slug(name) == slug


def test_run_tempora(console):
    readings = run_tempora(["14:45", "oops"], "15:00", console)
    assert [r.status for r in readings] == ["behind", "invalid"]
    out = _output(console)
    assert "behind" in out and "invalid" in out
