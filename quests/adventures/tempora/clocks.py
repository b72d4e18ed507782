"""Clock drift against the Grand Clock Tower.

Readings are 24-hour `H:MM` or `HH:MM` strings. Drift is the reading minus
the reference, in minutes: positive means the clock runs ahead.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

from quests.errors import ClockFormatError

REFERENCE_TIME = "15:00"
VILLAGE_CLOCKS = ("14:45", "15:05", "15:00", "14:40")

_TIME_RE = re.compile(r"^([01]?\d|2[0-3]):([0-5]\d)$")


def parse_time(text: str) -> int:
    """Parse an HH:MM reading into minutes since midnight.

    Raises:
        ClockFormatError: if the text is not a valid 24-hour time.
    """
    m = _TIME_RE.match(text.strip()) if isinstance(text, str) else None
    if not m:
        raise ClockFormatError(f"Invalid time format: {text!r}")
    return int(m.group(1)) * 60 + int(m.group(2))


def minute_difference(clock: str, reference: str) -> int:
    """Minutes `clock` is ahead of (positive) or behind (negative) `reference`."""
    return parse_time(clock) - parse_time(reference)


@dataclass
class ClockReading:
    """One village clock compared against the reference."""

    label: str
    reading: str
    difference: Optional[int] = None
    error: str = ""

    @property
    def status(self) -> str:
        if self.difference is None:
            return "invalid"
        if self.difference > 0:
            return "ahead"
        if self.difference < 0:
            return "behind"
        return "synchronized"

    def describe(self) -> str:
        if self.difference is None:
            return f"Invalid time format ({self.reading})"
        sign = "+" if self.difference > 0 else ""
        return f"{self.reading} ({sign}{self.difference} min {self.status})"


def synchronize(clocks, reference: str = REFERENCE_TIME) -> list[ClockReading]:
    """Compare each clock with the reference.

    Unparsable clock readings come back with status "invalid" rather than
    aborting the whole comparison.

    Raises:
        ClockFormatError: if the reference itself is invalid.
    """
    ref_minutes = parse_time(reference)
    readings = []
    for i, clock in enumerate(clocks, 1):
        label = f"Clock {i}"
        try:
            readings.append(ClockReading(label, clock, parse_time(clock) - ref_minutes))
        except ClockFormatError as e:
            readings.append(ClockReading(label, str(clock), error=str(e)))
    return readings
