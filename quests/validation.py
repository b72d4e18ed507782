"""Validation of raw body records before classification.

Records may be Body instances or mappings with name/distance/size keys
(JSON files, interactive entry). Every record is checked and all problems
are reported together in one ValidationError.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from numbers import Real

from quests.errors import ValidationError, Violation
from quests.models import Body

_FIELDS = ("name", "distance", "size")


def _is_number(value) -> bool:
    # bool is an int subclass but never a meaningful distance or size
    return isinstance(value, Real) and not isinstance(value, bool)


def check_record(index: int, record) -> list[Violation]:
    """Return every violation found in a single record."""
    if isinstance(record, Body):
        values = record.to_dict()
    elif isinstance(record, Mapping):
        values = dict(record)
    else:
        return [Violation(index, "record", f"expected a body or mapping, got {type(record).__name__}")]

    violations: list[Violation] = []
    for key in _FIELDS:
        if key not in values or values[key] is None:
            violations.append(Violation(index, key, "missing"))

    name = values.get("name")
    if name is not None:
        if not isinstance(name, str):
            violations.append(Violation(index, "name", "must be a string"))
        elif not name.strip():
            violations.append(Violation(index, "name", "must not be empty"))

    for key in ("distance", "size"):
        value = values.get(key)
        if value is None:
            continue
        if not _is_number(value):
            violations.append(Violation(index, key, f"must be a number, got {value!r}"))
        elif math.isnan(value) or math.isinf(value):
            violations.append(Violation(index, key, "must be finite"))
        elif value <= 0:
            violations.append(Violation(index, key, f"must be positive, got {value}"))

    return violations


def validate_bodies(records) -> list[Body]:
    """Validate raw records and return them as Bodies.

    Args:
        records: List or tuple of Body instances or name/distance/size
            mappings. Anything else (None, a string, a mapping, a number, a
            generator) is reported as a single "bodies" violation.

    Returns:
        Bodies in input order.

    Raises:
        ValidationError: listing every violation across every record.
    """
    if not isinstance(records, (list, tuple)):
        raise ValidationError([Violation(None, "bodies", "expected a list of bodies")])

    violations: list[Violation] = []
    bodies: list[Body] = []
    for i, record in enumerate(records):
        found = check_record(i, record)
        if found:
            violations.extend(found)
            continue
        if isinstance(record, Body):
            bodies.append(record)
        else:
            bodies.append(Body(
                name=record["name"].strip(),
                distance=float(record["distance"]),
                size=float(record["size"]),
            ))

    if violations:
        raise ValidationError(violations)
    return bodies
