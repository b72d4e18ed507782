"""Shadow and light-intensity classification for a star system.

Bodies are sorted by distance from the star. A body is shaded by the
bodies before it in that order, but only a strictly larger one blocks its
light:

    first body                      → Full
    exactly one larger closer body  → None
    more than one                   → None (Multiple Shadows)
    closer bodies, none larger      → Partial

The scientific variant adds a continuous light fraction and angular sizes
without changing the category.
"""

from __future__ import annotations

import math
from numbers import Real

from quests.errors import InvalidInputError
from quests.models import Body, ClassificationResult, LightIntensity, ShadowInteraction

AU_KM = 149_597_870.7
ARCSEC_PER_RAD = 180 / math.pi * 3600

# (minimum caster/receiver size ratio, kind, shadow intensity), largest first
_SHADOW_TIERS = (
    (1.1, "complete", 1.0),
    (0.9, "partial", 0.6),
    (0.0, "penumbral", 0.3),
)


def _check_input(bodies) -> list[Body]:
    if bodies is None or not isinstance(bodies, (list, tuple)):
        raise InvalidInputError(
            f"expected a list of bodies, got {type(bodies).__name__}"
        )
    for i, b in enumerate(bodies):
        if not isinstance(b, Body):
            raise InvalidInputError(f"item {i} is not a Body: {b!r}")
        for attr in ("distance", "size"):
            value = getattr(b, attr)
            if not isinstance(value, Real) or isinstance(value, bool):
                raise InvalidInputError(f"{b.name}: {attr} is not a number: {value!r}")
    return list(bodies)


def sort_by_distance(bodies) -> list[Body]:
    """Stable ascending sort by distance; ties keep input order."""
    return sorted(_check_input(bodies), key=lambda b: b.distance)


def light_category(position: int, shadow_count: int) -> LightIntensity:
    """The categorical rule shared by every classifier variant.

    Args:
        position: Index of the body in distance order.
        shadow_count: Number of strictly larger bodies closer to the star.
    """
    if position == 0:
        return LightIntensity.FULL
    if shadow_count == 1:
        return LightIntensity.NONE
    if shadow_count > 1:
        return LightIntensity.MULTIPLE_SHADOWS
    return LightIntensity.PARTIAL


def classify(bodies) -> list[ClassificationResult]:
    """Classify the light every body receives.

    Args:
        bodies: List or tuple of Bodies in any order.

    Returns:
        One ClassificationResult per body, sorted ascending by distance.

    Raises:
        InvalidInputError: if bodies is not a list/tuple of Bodies with
            numeric distance and size.
    """
    ordered = sort_by_distance(bodies)
    results = []
    for i, body in enumerate(ordered):
        closer = ordered[:i]
        larger = [j for j, c in enumerate(closer) if c.size > body.size]
        results.append(ClassificationResult(
            body=body,
            light=light_category(i, len(larger)),
            shadow_count=len(larger),
            closer_count=len(closer),
            shadow_casters=[closer[j].name for j in larger],
            shadow_caster_indices=larger,
        ))
    return results


def angular_size(diameter_km: float, distance_au: float) -> float:
    """Apparent diameter in arcseconds of a body seen from the star."""
    return 2 * math.atan((diameter_km / 2) / (distance_au * AU_KM)) * ARCSEC_PER_RAD


def shadow_interaction(caster: Body, receiver: Body) -> ShadowInteraction:
    """Describe the shadow `caster` throws on `receiver`.

    Only a caster strictly closer to the star shades the receiver. The tier
    depends on the caster's size relative to the receiver's.
    """
    if caster.distance >= receiver.distance:
        return ShadowInteraction(caster=caster.name, has_shadow=False)

    gap_km = (receiver.distance - caster.distance) * AU_KM
    angular = 2 * math.atan((caster.size / 2) / gap_km)
    ratio = caster.size / receiver.size
    for threshold, kind, intensity in _SHADOW_TIERS:
        if ratio >= threshold:
            break
    return ShadowInteraction(
        caster=caster.name,
        has_shadow=True,
        kind=kind,
        intensity=intensity,
        angular_diameter=angular,
    )


def light_fraction(interactions: list[ShadowInteraction]) -> float:
    """Fraction of light left after summing shadow intensities (clamped)."""
    shade = min(1.0, sum(i.intensity for i in interactions if i.has_shadow))
    return 1.0 - shade


def classify_scientific(bodies) -> list[ClassificationResult]:
    """classify(), plus light fraction, angular size and shadow details.

    The category is the same one classify() assigns; the extra fields are
    informational.
    """
    results = classify(bodies)
    ordered = [r.body for r in results]
    for i, result in enumerate(results):
        interactions = [shadow_interaction(c, result.body) for c in ordered[:i]]
        result.interactions = interactions
        result.light_fraction = light_fraction(interactions)
        result.angular_size = angular_size(result.size, result.distance)
    return results
