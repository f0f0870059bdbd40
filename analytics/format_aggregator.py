"""Per-format averages and retention trends within the analysis window."""

from __future__ import annotations

from typing import Dict, List, Sequence

from analytics.metrics import mean_or_zero, round1, round_half_up, safe_ratio
from analytics.models import AnalysisWindow, FormatAggregate, FormatTrends

GROWTH_THRESHOLD = 5
DECLINE_THRESHOLD = -5


def _group_by_format(window: AnalysisWindow) -> Dict[str, Dict]:
    groups: Dict[str, Dict] = {}
    for position, video in enumerate(window.videos):
        group = groups.get(video.format)
        if group is None:
            group = {
                "first_seen": len(groups),
                "views": [],
                "retention": [],
                "first_half_retention": [],
                "second_half_retention": [],
            }
            groups[video.format] = group

        retention = video.retention or 0
        group["views"].append(video.views or 0)
        group["retention"].append(retention)
        # Half membership comes from the position in the whole window.
        if position < window.half:
            group["first_half_retention"].append(retention)
        else:
            group["second_half_retention"].append(retention)
    return groups


def _format_trend(group: Dict, avg_retention: float) -> int:
    first = group["first_half_retention"]
    second = group["second_half_retention"]
    first_mean = mean_or_zero(first) if first else avg_retention
    second_mean = mean_or_zero(second) if second else avg_retention
    return round_half_up(safe_ratio(second_mean, first_mean))


def aggregate_formats(window: AnalysisWindow) -> List[FormatAggregate]:
    """Aggregate every format in the window, best retention first."""
    groups = _group_by_format(window)

    ranked = []
    for name, group in groups.items():
        avg_retention = round1(mean_or_zero(group["retention"]))
        aggregate = FormatAggregate(
            name=name,
            count=len(group["views"]),
            avg_views=round_half_up(mean_or_zero(group["views"])),
            avg_retention=avg_retention,
            trend=_format_trend(group, avg_retention),
        )
        ranked.append((group["first_seen"], aggregate))

    ranked.sort(key=lambda item: (-item[1].avg_retention, item[0]))
    return [aggregate for _, aggregate in ranked]


def classify_trends(formats: Sequence[FormatAggregate]) -> FormatTrends:
    if not formats:
        raise ValueError("At least one format aggregate is required")
    return FormatTrends(
        growing=tuple(item for item in formats if item.trend > GROWTH_THRESHOLD),
        declining=tuple(item for item in formats if item.trend < DECLINE_THRESHOLD),
        best=formats[0],
        worst=formats[-1],
    )
