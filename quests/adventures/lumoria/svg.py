"""SVG renderings of a classified star system.

- static alignment: star on the left, bodies on a line at x proportional to
  distance, light shown as glow / opacity, dashed red shadow lines
- animated alignment: bodies orbiting the star (SMIL)
- frame sequence: one small SVG per frame for flip-book animation

Background stars come from a seeded RNG so the same input renders the same
markup.
"""

from __future__ import annotations

import math
import random
from xml.sax.saxutils import escape

from quests.models import ClassificationResult, LightIntensity

WIDTH = 1200
HEIGHT = 400
STAR_X = 100
STAR_RADIUS = 40
TRACK_LENGTH = 800
FONT = 'font-family="Arial, sans-serif"'

# (highlight, shadow) colours cycled across bodies
_PALETTE = [
    ("#8C7853", "#5A5A5A"),
    ("#FFC649", "#FF8C42"),
    ("#6B93D6", "#2E4057"),
    ("#CD5C5C", "#8B0000"),
    ("#9FE2BF", "#2E8B57"),
    ("#C3B1E1", "#5D3FD3"),
]

_DEFS_FILTERS = [
    '    <filter id="glow">',
    '      <feGaussianBlur stdDeviation="4" result="coloredBlur"/>',
    "      <feMerge>",
    '        <feMergeNode in="coloredBlur"/>',
    '        <feMergeNode in="SourceGraphic"/>',
    "      </feMerge>",
    "    </filter>",
    '    <filter id="shadow">',
    '      <feGaussianBlur stdDeviation="2" result="coloredBlur"/>',
    '      <feOffset dx="2" dy="2" result="offsetblur"/>',
    "      <feMerge>",
    '        <feMergeNode in="offsetblur"/>',
    '        <feMergeNode in="SourceGraphic"/>',
    "      </feMerge>",
    "    </filter>",
]

_SUN_GRADIENT = [
    '    <radialGradient id="sunGradient" cx="0.5" cy="0.5" r="0.5">',
    '      <stop offset="0%" style="stop-color:#FFD700;stop-opacity:1" />',
    '      <stop offset="70%" style="stop-color:#FFA500;stop-opacity:1" />',
    '      <stop offset="100%" style="stop-color:#FF4500;stop-opacity:0.8" />',
    "    </radialGradient>",
]


def _fmt(x: float) -> str:
    return f"{x:.2f}".rstrip("0").rstrip(".")


def _header(width: int, height: int) -> list[str]:
    return [
        '<?xml version="1.0" encoding="UTF-8"?>',
        f'<svg width="{width}" height="{height}" viewBox="0 0 {width} {height}" '
        f'xmlns="http://www.w3.org/2000/svg">',
    ]


def _background_stars(rng: random.Random, count: int, width: int, height: int, twinkle: bool = False) -> list[str]:
    lines = []
    for _ in range(count):
        x = rng.random() * width
        y = rng.random() * height
        r = rng.random() * 2 + 0.5
        if twinkle:
            dur = 2 + rng.random() * 3
            lines.append(f'  <circle cx="{_fmt(x)}" cy="{_fmt(y)}" r="{_fmt(r)}" fill="#FFFFFF">')
            lines.append(f'    <animate attributeName="opacity" values="0.2;1;0.2" dur="{_fmt(dur)}s" repeatCount="indefinite"/>')
            lines.append("  </circle>")
        else:
            opacity = rng.random() * 0.8 + 0.2
            lines.append(
                f'  <circle cx="{_fmt(x)}" cy="{_fmt(y)}" r="{_fmt(r)}" fill="#FFFFFF" opacity="{_fmt(opacity)}"/>'
            )
    return lines


def _x_position(distance: float, max_distance: float) -> float:
    return STAR_X + (distance / max_distance) * TRACK_LENGTH


def _light_effect(light: LightIntensity) -> str:
    """SVG attributes for how brightly a body is lit."""
    if light == LightIntensity.FULL:
        return 'filter="url(#glow)"'
    if light == LightIntensity.PARTIAL:
        return 'opacity="0.7"'
    return 'opacity="0.3" filter="url(#shadow)"'


def generate_static_svg(
    results: list[ClassificationResult],
    system_name: str = "Lumoria",
    seed: int = 0,
) -> str:
    """Render the alignment as a static SVG document.

    Args:
        results: Classification results in distance order.
        system_name: Shown in the title and under the star.
        seed: Seed for the background star field.
    """
    rng = random.Random(seed)
    cy = HEIGHT / 2
    name = escape(system_name)
    max_distance = max((r.distance for r in results), default=1.0)

    lines = _header(WIDTH, HEIGHT)
    lines.append("  <defs>")
    lines.extend(_SUN_GRADIENT)
    for i, _ in enumerate(results):
        light, dark = _PALETTE[i % len(_PALETTE)]
        lines.append(f'    <radialGradient id="body{i}Gradient" cx="0.3" cy="0.3" r="0.7">')
        lines.append(f'      <stop offset="0%" style="stop-color:{light};stop-opacity:1" />')
        lines.append(f'      <stop offset="100%" style="stop-color:{dark};stop-opacity:1" />')
        lines.append("    </radialGradient>")
    lines.extend(_DEFS_FILTERS)
    lines.append("  </defs>")

    lines.append('  <rect width="100%" height="100%" fill="#0B1426" />')
    lines.extend(_background_stars(rng, 50, WIDTH, HEIGHT))

    lines.append(f'  <circle cx="{STAR_X}" cy="{_fmt(cy)}" r="{STAR_RADIUS}" fill="url(#sunGradient)" filter="url(#glow)"/>')
    lines.append(
        f'  <text x="{STAR_X}" y="{_fmt(cy + 60)}" text-anchor="middle" fill="#FFD700" {FONT} '
        f'font-size="14" font-weight="bold">{name} Sun</text>'
    )

    for r in results:
        x = _x_position(r.distance, max_distance)
        lines.append(
            f'  <line x1="{STAR_X}" y1="{_fmt(cy)}" x2="{_fmt(x)}" y2="{_fmt(cy)}" stroke="#333333" '
            f'stroke-width="1" stroke-dasharray="5,5" opacity="0.3"/>'
        )

    for i, r in enumerate(results):
        x = _x_position(r.distance, max_distance)
        radius = max(8.0, min(25.0, r.size / 500))
        lines.append(
            f'  <circle cx="{_fmt(x)}" cy="{_fmt(cy)}" r="{_fmt(radius)}" '
            f'fill="url(#body{i}Gradient)" {_light_effect(r.light)}/>'
        )
        lines.append(
            f'  <text x="{_fmt(x)}" y="{_fmt(cy + radius + 15)}" text-anchor="middle" fill="#CCCCCC" '
            f'{FONT} font-size="12">{escape(r.name)}</text>'
        )
        lines.append(
            f'  <text x="{_fmt(x)}" y="{_fmt(cy + radius + 30)}" text-anchor="middle" fill="#888888" '
            f'{FONT} font-size="10">{escape(r.light.value)}</text>'
        )

    # Shadow lines from each larger caster to the body it shades
    xs = [_x_position(r.distance, max_distance) for r in results]
    for i, r in enumerate(results):
        for j in r.shadow_caster_indices:
            lines.append(
                f'  <line x1="{_fmt(xs[j])}" y1="{_fmt(cy)}" '
                f'x2="{_fmt(xs[i])}" y2="{_fmt(cy)}" stroke="#FF0000" stroke-width="2" '
                f'opacity="0.4" stroke-dasharray="3,3" class="shadow-line"/>'
            )

    lines.append(
        f'  <text x="{WIDTH // 2}" y="30" text-anchor="middle" fill="#FFFFFF" {FONT} '
        f'font-size="24" font-weight="bold">{name} Celestial Alignment</text>'
    )
    lines.append(
        f'  <text x="{WIDTH // 2}" y="50" text-anchor="middle" fill="#CCCCCC" {FONT} '
        f'font-size="14">Light Intensity Analysis</text>'
    )

    lines.append('  <g transform="translate(20, 320)">')
    lines.append(f'    <text x="0" y="0" fill="#CCCCCC" {FONT} font-size="14" font-weight="bold">Legend:</text>')
    lines.append('    <circle cx="10" cy="20" r="6" fill="#FFD700" filter="url(#glow)"/>')
    lines.append(f'    <text x="25" y="25" fill="#CCCCCC" {FONT} font-size="12">Full Light</text>')
    lines.append('    <circle cx="10" cy="40" r="6" fill="#4F7942" opacity="0.7"/>')
    lines.append(f'    <text x="25" y="45" fill="#CCCCCC" {FONT} font-size="12">Partial Light</text>')
    lines.append('    <circle cx="10" cy="60" r="6" fill="#8B0000" opacity="0.3"/>')
    lines.append(f'    <text x="25" y="65" fill="#CCCCCC" {FONT} font-size="12">No Light (Shadowed)</text>')
    lines.append('    <line x1="120" y1="40" x2="140" y2="40" stroke="#FF0000" stroke-width="2" opacity="0.4" stroke-dasharray="3,3"/>')
    lines.append(f'    <text x="150" y="45" fill="#CCCCCC" {FONT} font-size="12">Shadow Line</text>')
    lines.append("  </g>")
    lines.append("</svg>")
    return "\n".join(lines) + "\n"


def generate_animated_svg(
    results: list[ClassificationResult],
    system_name: str = "Lumoria",
    cycle_s: float = 20.0,
    seed: int = 0,
) -> str:
    """Render bodies orbiting the star, with twinkling background stars."""
    rng = random.Random(seed)
    cy = HEIGHT / 2
    name = escape(system_name)
    max_distance = max((r.distance for r in results), default=1.0)

    lines = _header(WIDTH, HEIGHT)
    lines.append("  <defs>")
    lines.extend(_SUN_GRADIENT)
    lines.append('    <radialGradient id="planetGradient" cx="0.3" cy="0.3" r="0.7">')
    lines.append('      <stop offset="0%" style="stop-color:#6B93D6;stop-opacity:1" />')
    lines.append('      <stop offset="100%" style="stop-color:#2E4057;stop-opacity:1" />')
    lines.append("    </radialGradient>")
    lines.extend(_DEFS_FILTERS[:7])
    lines.append("  </defs>")
    lines.append('  <rect width="100%" height="100%" fill="#0B1426" />')
    lines.extend(_background_stars(rng, 30, WIDTH, HEIGHT, twinkle=True))

    lines.append(f'  <circle cx="{STAR_X}" cy="{_fmt(cy)}" r="{STAR_RADIUS}" fill="url(#sunGradient)" filter="url(#glow)"/>')
    lines.append(
        f'  <text x="{STAR_X}" y="{_fmt(cy + 60)}" text-anchor="middle" fill="#FFD700" {FONT} '
        f'font-size="14" font-weight="bold">{name} Sun</text>'
    )

    for i, r in enumerate(results):
        orbit = 50 + (r.distance / max_distance) * 400
        radius = max(6.0, min(20.0, r.size / 600))
        period = cycle_s * (1 + i * 0.3)
        start = i * 60
        lines.append("  <g>")
        lines.append(
            f'    <circle cx="{STAR_X}" cy="{_fmt(cy)}" r="{_fmt(orbit)}" fill="none" stroke="#333333" '
            f'stroke-width="1" stroke-dasharray="3,3" opacity="0.3"/>'
        )
        lines.append("    <g>")
        lines.append(
            f'      <animateTransform attributeName="transform" type="rotate" '
            f'values="{start} {STAR_X} {_fmt(cy)};{start + 360} {STAR_X} {_fmt(cy)}" '
            f'dur="{_fmt(period)}s" repeatCount="indefinite"/>'
        )
        lines.append(
            f'      <circle cx="{_fmt(STAR_X + orbit)}" cy="{_fmt(cy)}" r="{_fmt(radius)}" '
            f'fill="url(#planetGradient)" {_light_effect(r.light)}/>'
        )
        lines.append(
            f'      <text x="{_fmt(STAR_X + orbit)}" y="{_fmt(cy + 25)}" text-anchor="middle" fill="#CCCCCC" '
            f'{FONT} font-size="10">{escape(r.name)}</text>'
        )
        lines.append("    </g>")
        lines.append("  </g>")

    lines.append(
        f'  <text x="{WIDTH // 2}" y="30" text-anchor="middle" fill="#FFFFFF" {FONT} '
        f'font-size="24" font-weight="bold">{name} Animated Alignment</text>'
    )
    lines.append(
        f'  <text x="{WIDTH - 20}" y="{HEIGHT - 20}" text-anchor="end" fill="#666666" {FONT} '
        f'font-size="12">Animation: {_fmt(cycle_s)}s cycle</text>'
    )
    lines.append("</svg>")
    return "\n".join(lines) + "\n"


def generate_frame(results: list[ClassificationResult], frame: int, total_frames: int, system_name: str = "Lumoria") -> str:
    """Render one frame of a flip-book animation.

    Bodies bob above and below the star line; every body after the first
    trails a dark shadow ellipse.
    """
    width, height = 900, 220
    cy = height / 2
    lines = _header(width, height)
    lines.append('  <rect width="100%" height="100%" fill="#0a1020"/>')
    lines.append(f'  <circle cx="80" cy="{_fmt(cy)}" r="36" fill="gold" stroke="#fff59d" stroke-width="3"/>')
    lines.append(
        f'  <text x="80" y="{_fmt(cy - 46)}" fill="white" font-size="18" '
        f'text-anchor="middle">{escape(system_name)} Sun</text>'
    )
    for i, r in enumerate(results):
        angle = (frame / total_frames) * math.pi * 2 + i * 0.2
        x = 80 + r.distance * 220
        y = cy + math.sin(angle) * 30
        radius = max(r.size * 0.012, 8.0)
        lines.append(
            f'  <circle cx="{_fmt(x)}" cy="{_fmt(y)}" r="{_fmt(radius)}" fill="#{0x8888FF + i * 0x2222:06x}" '
            f'stroke="#fff" stroke-width="2" {_light_effect(r.light)}/>'
        )
        lines.append(
            f'  <text x="{_fmt(x)}" y="{_fmt(y + radius + 18)}" fill="white" font-size="15" '
            f'text-anchor="middle">{escape(r.name)}</text>'
        )
        if i > 0:
            lines.append(
                f'  <ellipse cx="{_fmt(x - radius - 18)}" cy="{_fmt(y)}" rx="12" ry="{_fmt(radius)}" '
                f'fill="#222" opacity="0.5"/>'
            )
    lines.append("</svg>")
    return "\n".join(lines) + "\n"


def generate_frames(results: list[ClassificationResult], total_frames: int = 12, system_name: str = "Lumoria") -> list[str]:
    """Render every frame of the flip-book animation."""
    if total_frames < 1:
        raise ValueError("total_frames must be at least 1")
    return [generate_frame(results, f, total_frames, system_name) for f in range(total_frames)]
