"""Plain-text alignment reports.

Two flavours: the short per-body report, and the scientific report with a
data summary, shadow analysis and light fractions.
"""

from __future__ import annotations

from datetime import datetime, timezone

from quests.models import ClassificationResult, LightIntensity

_RULE = "=" * 42


def format_number(x: float) -> str:
    """Drop a trailing .0 so 1.0 AU prints as 1."""
    if float(x).is_integer():
        return str(int(x))
    return f"{x:g}"


def generate_report(results: list[ClassificationResult], system_name: str = "Lumoria") -> str:
    """Build the per-body alignment report."""
    lines: list[str] = []
    lines.append(f"Celestial Alignment Report for {system_name}")
    lines.append(_RULE)
    for r in results:
        lines.append(f"Planet: {r.name}")
        lines.append(f"  Distance from star: {format_number(r.distance)} AU")
        lines.append(f"  Diameter: {format_number(r.size)} km")
        lines.append(f"  Shadow Type: {r.light.value}")
        if r.shadow_casters:
            lines.append(f"  Shadowed by: {', '.join(r.shadow_casters)}")
        lines.append("")
    return "\n".join(lines) + "\n"


def generate_scientific_report(
    results: list[ClassificationResult],
    system_name: str = "Lumoria",
    generated: datetime | None = None,
) -> str:
    """Build the scientific report.

    Expects results from classify_scientific(); light fraction and angular
    size print as "--" when missing.
    """
    generated = generated or datetime.now(timezone.utc)
    lines: list[str] = []
    lines.append("SCIENTIFIC CELESTIAL ALIGNMENT REPORT")
    lines.append(f"System: {system_name}")
    lines.append(f"Generated: {generated.strftime('%Y-%m-%d %H:%M UTC')}")
    lines.append(_RULE)
    lines.append("")

    lines.append("PLANETARY DATA SUMMARY")
    lines.append("-" * 22)
    lines.append(f"{'Planet':<16} {'Distance (AU)':>13} {'Diameter (km)':>13} {'Angular (arcsec)':>16}")
    for r in results:
        ang = f"{r.angular_size:.2f}" if r.angular_size is not None else "--"
        lines.append(f"{r.name:<16} {format_number(r.distance):>13} {format_number(r.size):>13} {ang:>16}")
    lines.append("")

    lines.append("SHADOW ANALYSIS")
    lines.append("-" * 15)
    for r in results:
        lines.append(f"{r.name}: {r.light.value}")
        if r.light_fraction is not None:
            lines.append(f"  Light received: {r.light_fraction * 100:.0f}%")
        shading = [i for i in r.interactions if i.has_shadow]
        if shading:
            for i in shading:
                lines.append(
                    f"  - {i.caster}: {i.kind} shadow "
                    f"(intensity {i.intensity:.1f}, {i.angular_diameter:.2e} rad)"
                )
        elif r.light == LightIntensity.FULL:
            lines.append("  - No closer bodies")
        lines.append("")

    counts = {level: 0 for level in LightIntensity}
    for r in results:
        counts[r.light] += 1
    lines.append("SUMMARY")
    lines.append("-" * 7)
    for level, n in counts.items():
        lines.append(f"  {level.value}: {n}")

    return "\n".join(lines) + "\n"
