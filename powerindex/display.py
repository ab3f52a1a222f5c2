"""Presentation helpers: model string, coalition bar layout and text reports."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

from powerindex.analysis import BanzhafResult, Coalition

RGB = tuple[float, float, float]

COLORS: tuple[RGB, ...] = (
    (0.16, 0.49, 0.82),  # vivid blue
    (0.89, 0.29, 0.30),  # intense red
    (0.30, 0.69, 0.31),  # emerald green
    (0.49, 0.35, 0.09),  # dark copper
    (0.61, 0.31, 0.71),  # royal purple
    (0.09, 0.75, 0.81),  # bright turquoise
    (0.95, 0.52, 0.13),  # fire orange
    (0.46, 0.33, 0.64),  # deep indigo
    (0.80, 0.18, 0.40),  # fuchsia
    (0.00, 0.62, 0.45),  # ocean green
    (0.93, 0.46, 0.65),  # light pink
    (0.70, 0.47, 0.20),  # golden brown
)

CRITICAL_COLOR: RGB = (1.0, 0.84, 0.0)
BAR_PALETTE_SIZE = 6
LABEL_MIN_WIDTH = 50
STAR_SCALE = 0.15
STAR_INNER_RATIO = 0.4


def color_for(index: int) -> RGB:
    """Colour of a voter's segment in a coalition bar (palette cycles every 6)."""
    return COLORS[index % BAR_PALETTE_SIZE]


def format_model(quota: int, weights: Sequence[int]) -> str:
    """Describe the game as ``Modelo: (quota; w1, w2, ..., wn)``."""
    last = len(weights) - 1
    parts = "".join(
        f" {w}{')' if i == last else ','}" for i, w in enumerate(weights)
    )
    return f"Modelo: ({quota};{parts}"


@dataclass(frozen=True)
class Segment:
    """One voter's slice of a coalition bar."""

    voter: int
    x: float
    width: float
    votes: int
    critical: bool
    color: RGB

    @property
    def pixel_width(self) -> int:
        """Whole-pixel width of the slice, never below one pixel."""
        return max(int(self.width), 1)

    def star(self, height: float) -> list[tuple[float, float]]:
        """Outline of the marker drawn on a critical voter's slice."""
        size = min(self.width, height) * STAR_SCALE
        return star_points(self.x + self.width / 2, height / 2, size)


def coalition_segments(
    coalition: Coalition, total_votes: int, width: float
) -> list[Segment]:
    """Lay out the members of a coalition as proportional slices of a bar."""
    if total_votes <= 0:
        raise ValueError(f"total votes must be positive, got {total_votes}")
    segments = []
    x = 0.0
    for voter, (votes, critical) in enumerate(zip(coalition.votes, coalition.critical)):
        if votes <= 0:
            continue
        seg_width = width * votes / total_votes
        segments.append(
            Segment(voter, x, seg_width, votes, critical, color_for(voter))
        )
        x += seg_width
    return segments


def star_points(
    center_x: float, center_y: float, size: float
) -> list[tuple[float, float]]:
    """Vertices of a five-pointed star, alternating outer and inner points."""
    points = []
    for j in range(5):
        angle = 2.0 * math.pi * j / 5.0 - math.pi / 2.0
        points.append(
            (center_x + math.cos(angle) * size, center_y + math.sin(angle) * size)
        )
        angle += 2.0 * math.pi / 10.0
        inner = size * STAR_INNER_RATIO
        points.append(
            (center_x + math.cos(angle) * inner, center_y + math.sin(angle) * inner)
        )
    return points


def ipb_label(
    power: float, critical: int, total_critical: int, pixel_width: int
) -> str:
    """Label shown under a slice; empty when the slice is too narrow."""
    if pixel_width > LABEL_MIN_WIDTH:
        return f"{power:.4f}\n({critical}/{total_critical})"
    return ""


def summary(result: BanzhafResult) -> str:
    """One-line summary of coalitions found and critical votes."""
    return (
        f"Coaliciones encontradas: {result.solution_count()} | "
        f"Total votos críticos: {result.total_critical()}"
    )


def _coalition_line(number: int, coalition: Coalition) -> str:
    parts = []
    for votes, included, critical in zip(
        coalition.votes, coalition.included, coalition.critical
    ):
        if not included:
            parts.append("-")
        elif critical:
            parts.append(f"{votes}*")
        else:
            parts.append(str(votes))
    return f"{number:>4}: {' '.join(parts)}  = {coalition.total()}"


def render_text(result: BanzhafResult) -> str:
    """Full plain-text report of a Banzhaf analysis."""
    lines = [format_model(result.quota, result.weights)]
    lines.extend(
        _coalition_line(number, coalition)
        for number, coalition in enumerate(result.coalitions, start=1)
    )
    total_critical = result.total_critical()
    for voter, (weight, critical, power) in enumerate(
        zip(result.weights, result.critical_votes, result.power_index()), start=1
    ):
        lines.append(
            f"Votante {voter}: peso {weight}, críticos {critical}/{total_critical}, "
            f"IPB {power:.4f}"
        )
    lines.append(summary(result))
    return "\n".join(lines)