"""Built-in star systems.

Distances in AU, diameters in km. The systems are immutable: tuples of
frozen Bodies behind a read-only mapping.
"""

from __future__ import annotations

from types import MappingProxyType

from quests.models import Body, StarSystem

LUMORIA = StarSystem(
    name="Lumoria",
    bodies=(
        Body("Mercuria", 0.4, 4879),
        Body("Venusia", 0.7, 12104),
        Body("Earthia", 1.0, 12742),
        Body("Marsia", 1.5, 6779),
    ),
)

ANDROMEDA = StarSystem(
    name="Andromeda",
    bodies=(
        Body("Zyra", 0.3, 6000),
        Body("Tirion", 0.8, 9000),
        Body("Vex", 1.2, 15000),
        Body("Orion", 2.0, 11000),
    ),
)

SYSTEMS = MappingProxyType({
    s.name.lower(): s for s in (LUMORIA, ANDROMEDA)
})


def get_system(name: str) -> StarSystem | None:
    """Look up a built-in system by case-insensitive name."""
    return SYSTEMS.get(name.strip().lower())
