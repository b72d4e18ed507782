"""Data models for the quests adventures.

Body, StarSystem, LightIntensity, ShadowInteraction, ClassificationResult —
the typed structures that flow through validation → shadows → render → runner.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional


class LightIntensity(str, Enum):
    """Light intensity categories a body can receive."""

    FULL = "Full"
    PARTIAL = "Partial"
    NONE = "None"
    MULTIPLE_SHADOWS = "None (Multiple Shadows)"

    @property
    def explanation(self) -> str:
        return _EXPLANATIONS[self]


_EXPLANATIONS = {
    LightIntensity.FULL: "Nothing lies between it and the star",
    LightIntensity.PARTIAL: "Closer bodies exist, but none is larger",
    LightIntensity.NONE: "A single larger body blocks the light",
    LightIntensity.MULTIPLE_SHADOWS: "Several larger bodies block the light",
}


@dataclass(frozen=True)
class Body:
    """A body orbiting the star: distance in AU, diameter in km."""

    name: str
    distance: float
    size: float

    def to_dict(self) -> dict:
        return {"name": self.name, "distance": self.distance, "size": self.size}


@dataclass(frozen=True)
class StarSystem:
    """A named set of bodies, loadable from a JSON file."""

    name: str
    bodies: tuple[Body, ...] = ()

    def to_dict(self) -> dict:
        return {"name": self.name, "bodies": [b.to_dict() for b in self.bodies]}

    @classmethod
    def from_dict(cls, d: dict) -> StarSystem:
        """Build a system from a JSON dict, validating every body.

        Raises ValidationError listing every bad record.
        """
        from quests.validation import validate_bodies

        bodies = validate_bodies(d.get("bodies", []))
        return cls(name=str(d.get("name", "Unnamed")), bodies=tuple(bodies))

    def save(self, path: Path) -> None:
        """Write the system as JSON."""
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(self.to_dict(), indent=2), encoding="utf-8")

    @classmethod
    def load(cls, path: Path) -> StarSystem:
        """Load a system from a JSON file.

        Unreadable or malformed files surface as a ValidationError so the CLI
        reports them like any other bad input.
        """
        from quests.errors import ValidationError, Violation

        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, OSError) as e:
            raise ValidationError([Violation(None, "file", f"{path}: {e}")]) from e
        if not isinstance(data, dict):
            raise ValidationError([Violation(None, "file", f"{path}: expected a JSON object")])
        return cls.from_dict(data)


@dataclass(frozen=True)
class ShadowInteraction:
    """How one closer body shades a farther one."""

    caster: str
    has_shadow: bool
    kind: str = "none"  # "complete", "partial", "penumbral" or "none"
    intensity: float = 0.0
    angular_diameter: float = 0.0  # radians, as seen from the receiver

    def to_dict(self) -> dict:
        return {
            "caster": self.caster,
            "has_shadow": self.has_shadow,
            "kind": self.kind,
            "intensity": self.intensity,
            "angular_diameter": self.angular_diameter,
        }


@dataclass
class ClassificationResult:
    """Light classification for a single body."""

    body: Body
    light: LightIntensity
    shadow_count: int = 0
    closer_count: int = 0
    shadow_casters: list[str] = field(default_factory=list)
    # Positions of those casters in the distance-sorted result list
    shadow_caster_indices: list[int] = field(default_factory=list)

    # Scientific refinement (only filled by classify_scientific)
    light_fraction: Optional[float] = None
    angular_size: Optional[float] = None
    interactions: list[ShadowInteraction] = field(default_factory=list)

    @property
    def name(self) -> str:
        return self.body.name

    @property
    def distance(self) -> float:
        return self.body.distance

    @property
    def size(self) -> float:
        return self.body.size

    @property
    def explanation(self) -> str:
        return self.light.explanation

    def to_dict(self) -> dict:
        """Serialize to a JSON-compatible dict."""
        d = {
            **self.body.to_dict(),
            "light": self.light.value,
            "shadow_count": self.shadow_count,
            "closer_count": self.closer_count,
            "shadow_casters": list(self.shadow_casters),
        }
        if self.light_fraction is not None:
            d["light_fraction"] = self.light_fraction
            d["angular_size"] = self.angular_size
            d["interactions"] = [i.to_dict() for i in self.interactions]
        return d
