"""Bucket the analysis window into at most 12 chart points."""

from __future__ import annotations

from typing import List

from analytics.metrics import metric_mean, round1, round_half_up
from analytics.models import AnalysisWindow, WeeklyPoint

MAX_WEEKS = 12


def aggregate_weeks(window: AnalysisWindow) -> List[WeeklyPoint]:
    videos = window.videos
    weeks_count = min(MAX_WEEKS, len(videos))
    per_week = max(1, len(videos) // weeks_count) if weeks_count else 1

    points = []
    for week in range(weeks_count):
        chunk = videos[week * per_week : (week + 1) * per_week]
        if not chunk:
            break
        points.append(
            WeeklyPoint(
                label=f"W{week + 1}",
                views=round_half_up(metric_mean(chunk, "views")),
                retention=round1(metric_mean(chunk, "retention")),
            )
        )
    return points
