"""
Chart layout service - geometry for the category pie and the monthly bars.

Turns aggregated series into plain shape descriptors (angles, points,
rectangles, labels). Drawing, colors beyond the palette lookup, and any
reveal animation belong to the renderer; only final positions are computed
here.

NO IMPORTS FROM:
- rich
- typer
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass, field

from tally.config import (
    BAR_CHART_HEIGHT,
    BAR_CHART_PADDING,
    BAR_CHART_WIDTH,
    BAR_LABEL_OFFSET,
    BAR_SCALE_FLOOR,
    BAR_WIDTH_RATIO,
    PIE_CENTER,
    PIE_LABEL_MARGIN,
    PIE_RADIUS,
)
from tally.model.category import CategoryPalette
from tally.services.aggregation_service import CategorySlice, TimeBucket

Point = tuple[float, float]

PIE_START_ANGLE = -math.pi / 2  # 12 o'clock
FULL_TURN = 2 * math.pi
BAR_COLOR = "#60a5fa"
BAR_CORNER_RADIUS = 6.0
PLACEHOLDER_FILL = "rgba(255,255,255,0.03)"
NO_DATA_LABEL = "No data"


@dataclass(frozen=True)
class PieWedge:
    category: str
    amount: float
    start_angle: float
    end_angle: float
    start_point: Point
    end_point: Point
    large_arc: bool
    color: str
    label: str
    label_pos: Point

    @property
    def sweep(self) -> float:
        return self.end_angle - self.start_angle


@dataclass(frozen=True)
class NoDataPlaceholder:
    """Drawn instead of wedges when there is nothing to show."""

    center: Point
    radius: float
    fill: str = PLACEHOLDER_FILL
    label: str = NO_DATA_LABEL


@dataclass(frozen=True)
class PieLayout:
    center: Point
    radius: float
    wedges: list[PieWedge] = field(default_factory=list)
    placeholder: NoDataPlaceholder | None = None

    @property
    def is_empty(self) -> bool:
        return self.placeholder is not None


@dataclass(frozen=True)
class BarShape:
    key: str
    amount: float
    x: float
    y: float
    width: float
    height: float
    label: str
    label_x: float
    label_y: float
    color: str = BAR_COLOR
    corner_radius: float = BAR_CORNER_RADIUS


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def _polar(center: Point, radius: float, angle: float) -> Point:
    cx, cy = center
    return (cx + radius * math.cos(angle), cy + radius * math.sin(angle))


def pie_layout(
    slices: Sequence[CategorySlice],
    center: Point = PIE_CENTER,
    radius: float = PIE_RADIUS,
    label_margin: float = PIE_LABEL_MARGIN,
    palette: CategoryPalette | None = None,
) -> PieLayout:
    """Allocate a full turn to the slices in proportion to their amounts.

    Wedges start at 12 o'clock and follow slice order clockwise (screen
    coordinates, y down). A zero total yields zero-width wedges rather than a
    division error; no slices at all yields the no-data placeholder.
    """
    if not slices:
        return PieLayout(
            center=center,
            radius=radius,
            wedges=[],
            placeholder=NoDataPlaceholder(center=center, radius=radius),
        )

    palette = palette or CategoryPalette.default()
    grand_total = sum(s.amount for s in slices) or 1.0

    wedges: list[PieWedge] = []
    start = PIE_START_ANGLE
    for s in slices:
        sweep = s.amount / grand_total * FULL_TURN
        end = start + sweep
        mid = start + sweep / 2
        wedges.append(
            PieWedge(
                category=s.category,
                amount=s.amount,
                start_angle=start,
                end_angle=end,
                start_point=_polar(center, radius, start),
                end_point=_polar(center, radius, end),
                large_arc=sweep > math.pi,
                color=palette.color_for(s.category),
                label=f"{s.category} ({round_half_up(s.amount)})",
                label_pos=_polar(center, radius + label_margin, mid),
            )
        )
        start = end

    return PieLayout(center=center, radius=radius, wedges=wedges, placeholder=None)


def bar_layout(
    buckets: Sequence[TimeBucket],
    width: float = BAR_CHART_WIDTH,
    height: float = BAR_CHART_HEIGHT,
    padding: float = BAR_CHART_PADDING,
) -> list[BarShape]:
    """Lay out one bar per bucket, growing upward from a shared baseline.

    Each bucket owns an equal band of the plot width; its bar fills 60% of the
    band and is centered in it. Heights scale against the largest bucket, but
    never against less than BAR_SCALE_FLOOR, and are clamped to the plot area.
    """
    if not buckets:
        return []

    plot_width = width - 2 * padding
    plot_height = max(0.0, height - 2 * padding)
    band = plot_width / len(buckets)
    bar_width = band * BAR_WIDTH_RATIO
    gap = band - bar_width
    scale_max = max(max(b.amount for b in buckets), BAR_SCALE_FLOOR)
    baseline = height - padding

    bars: list[BarShape] = []
    for i, b in enumerate(buckets):
        x = padding + i * band + gap / 2
        bar_height = min(max(b.amount / scale_max * plot_height, 0.0), plot_height)
        bars.append(
            BarShape(
                key=b.key,
                amount=b.amount,
                x=x,
                y=baseline - bar_height,
                width=bar_width,
                height=bar_height,
                label=b.label,
                label_x=x + bar_width / 2,
                label_y=height - BAR_LABEL_OFFSET,
            )
        )
    return bars


__all__ = [
    "BarShape",
    "NoDataPlaceholder",
    "PieLayout",
    "PieWedge",
    "bar_layout",
    "pie_layout",
    "round_half_up",
]
