"""Tests for interactive body entry."""

import io

from rich.console import Console

from quests.adventures.lumoria.systems import LUMORIA
from quests.models import Body
from quests.prompts import prompt_bodies


def _console() -> Console:
    return Console(file=io.StringIO(), width=100)


def test_declining_uses_defaults():
    bodies = prompt_bodies(_console(), LUMORIA.bodies, stream=io.StringIO("n\n"))
    assert bodies == list(LUMORIA.bodies)


def test_end_of_input_uses_defaults():
    bodies = prompt_bodies(_console(), LUMORIA.bodies, stream=io.StringIO(""))
    assert bodies == list(LUMORIA.bodies)


def test_entering_bodies():
    stream = io.StringIO("y\nAlpha\n0.5\n6000\nBeta\n1\n9000\n\n")
    bodies = prompt_bodies(_console(), LUMORIA.bodies, stream=stream)
    assert bodies == [Body("Alpha", 0.5, 6000.0), Body("Beta", 1.0, 9000.0)]


def test_invalid_number_reprompts_same_body():
    console = _console()
    stream = io.StringIO("y\nBeta\nabc\nBeta\n1.0\n-5\nBeta\n1.0\n9000\n\n")
    bodies = prompt_bodies(console, LUMORIA.bodies, stream=stream)
    assert bodies == [Body("Beta", 1.0, 9000.0)]
    out = console.file.getvalue()
    assert "Invalid distance" in out
    assert "Invalid diameter" in out


def test_no_bodies_entered_uses_defaults():
    console = _console()
    bodies = prompt_bodies(console, LUMORIA.bodies, stream=io.StringIO("y\n\n"))
    assert bodies == list(LUMORIA.bodies)
    assert "Using default data" in console.file.getvalue()


class _ClosedStdin(io.StringIO):
    """Stream whose reads behave like input() at end of file."""

    def readline(self, *args):
        raise EOFError


def test_end_of_input_at_confirm_declines():
    bodies = prompt_bodies(_console(), LUMORIA.bodies, stream=_ClosedStdin())
    assert bodies == list(LUMORIA.bodies)


def test_end_of_input_keeps_completed_bodies(monkeypatch):
    answers = iter(["y", "Alpha", "0.5", "6000", "Beta"])

    def fake_input(*args, **kwargs):
        try:
            return next(answers)
        except StopIteration:
            raise EOFError from None

    console = _console()
    monkeypatch.setattr(console, "input", fake_input)
    bodies = prompt_bodies(console, LUMORIA.bodies)
    assert bodies == [Body("Alpha", 0.5, 6000.0)]
