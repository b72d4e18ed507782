"""Adventure discovery and loading for quests.

Each adventure is a subdirectory of quests/adventures/ containing:
    __init__.py  — NAME, DESCRIPTION, COMMAND constants
    *.py         — the adventure's code
    tests/       — pytest suite for that adventure
"""

from __future__ import annotations

import importlib
from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass
class AdventureInfo:
    """Metadata about a discovered adventure."""

    name: str
    description: str
    command: str
    path: Path
    tests_dir: Optional[Path]


def _adventures_root() -> Path:
    """Absolute path to the adventures/ directory."""
    return Path(__file__).parent


def list_adventures() -> list[AdventureInfo]:
    """Discover all available adventures.

    Scans subdirectories of quests/adventures/ for packages whose
    __init__.py defines NAME.
    """
    adventures = []
    for child in sorted(_adventures_root().iterdir()):
        if not child.is_dir() or not (child / "__init__.py").exists():
            continue
        info = load_adventure(child.name)
        if info:
            adventures.append(info)
    return adventures


def load_adventure(name: str) -> Optional[AdventureInfo]:
    """Load a single adventure by name.

    Args:
        name: Directory name under quests/adventures/ (e.g., 'lumoria').

    Returns:
        AdventureInfo if the adventure exists and declares NAME, None otherwise.
    """
    adventure_dir = _adventures_root() / name
    if not (adventure_dir / "__init__.py").exists():
        return None

    try:
        mod = importlib.import_module(f"quests.adventures.{name}")
    except ImportError:
        return None
    if not hasattr(mod, "NAME"):
        return None

    tests_dir = adventure_dir / "tests"
    return AdventureInfo(
        name=mod.NAME,
        description=getattr(mod, "DESCRIPTION", ""),
        command=getattr(mod, "COMMAND", ""),
        path=adventure_dir,
        tests_dir=tests_dir if tests_dir.is_dir() else None,
    )
