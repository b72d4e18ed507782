"""Runtime settings for quests, read from the environment.

QUESTS_OUTPUT_DIR      — where reports and SVGs go (default ./output)
QUESTS_DEFAULT_SYSTEM  — built-in system used when none is given (default lumoria)

CLI options override both.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

DEFAULT_OUTPUT_DIR = "output"
DEFAULT_SYSTEM = "lumoria"


@dataclass(frozen=True)
class Settings:
    """Resolved settings for one CLI invocation."""

    output_dir: Path
    default_system: str


def load_settings(env: Optional[Mapping[str, str]] = None) -> Settings:
    """Build Settings from environment variables.

    Args:
        env: Mapping to read from. Defaults to os.environ.
    """
    env = os.environ if env is None else env
    output_dir = env.get("QUESTS_OUTPUT_DIR") or DEFAULT_OUTPUT_DIR
    system = env.get("QUESTS_DEFAULT_SYSTEM") or DEFAULT_SYSTEM
    return Settings(output_dir=Path(output_dir).expanduser(), default_system=system.strip().lower())
