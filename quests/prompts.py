"""Interactive entry of bodies.

Asks whether to enter custom data, then reads name → distance → diameter
for one body at a time until an empty name is given. A bad number re-asks
the same body from its name. End of input stops entry and keeps the bodies
completed so far.
"""

from __future__ import annotations

import math
from typing import Optional, TextIO

from rich.console import Console
from rich.prompt import Confirm, Prompt

from quests.models import Body


def _ask(label: str, console: Console, stream: Optional[TextIO]) -> Optional[str]:
    """Prompt for one answer; None at end of input."""
    try:
        return Prompt.ask(label, console=console, stream=stream).strip()
    except EOFError:
        console.print()
        return None


def _to_positive(raw: str) -> Optional[float]:
    try:
        value = float(raw)
    except ValueError:
        return None
    if not value > 0 or math.isinf(value):
        return None
    return value


def prompt_bodies(
    console: Console,
    defaults: tuple[Body, ...],
    stream: Optional[TextIO] = None,
) -> list[Body]:
    """Read bodies from the user, falling back to `defaults`.

    Args:
        console: Console used for prompts and messages.
        defaults: Bodies returned when the user declines or enters none.
        stream: Optional input stream (stdin when None).

    Returns:
        The entered bodies in entry order, or `defaults`.
    """
    try:
        custom = Confirm.ask(
            "Would you like to enter custom planet data?",
            console=console, default=False, stream=stream,
        )
    except EOFError:
        custom = False
    if not custom:
        return list(defaults)

    bodies: list[Body] = []
    while True:
        n = len(bodies) + 1
        name = _ask(f"\nName for planet #{n} [dim](blank to finish)[/dim]", console, stream)
        if not name:
            break

        raw = _ask("  Distance from star (AU)", console, stream)
        if raw is None:
            break
        distance = _to_positive(raw)
        if distance is None:
            console.print("  [yellow]Invalid distance. Try again.[/yellow]")
            continue

        raw = _ask("  Diameter (km)", console, stream)
        if raw is None:
            break
        size = _to_positive(raw)
        if size is None:
            console.print("  [yellow]Invalid diameter. Try again.[/yellow]")
            continue

        bodies.append(Body(name=name, distance=distance, size=size))

    if not bodies:
        console.print("No planets entered. Using default data.")
        return list(defaults)
    return bodies
