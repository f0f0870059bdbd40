"""Rule-based strategy recommendations built from the format and health signals.

Every field is a template filled from the aggregates, so the same analysis
always produces the same plan.
"""

from __future__ import annotations

from typing import Dict, List, Sequence

from analytics.metrics import format_number, metric_mean, round_half_up
from analytics.models import AnalysisWindow, CalendarEntry, FormatAggregate, FormatTrends, HealthMetrics, StrategyPlan

LOW_HEALTH_THRESHOLD = 5
DEFAULT_PIVOT_BASELINE = 40
DEFAULT_RETENTION_TARGET = 50
MONTHS_IN_WINDOW = 12


def _names(formats: Sequence[FormatAggregate]) -> str:
    return " and ".join(item.name for item in formats)


def format_guidance(trends: FormatTrends) -> Dict[str, str]:
    growing, declining = trends.growing, trends.declining

    if growing:
        do = f"{_names(growing)} content (avg {format_number(growing[0].avg_retention)}% retention)"
        top_share = min(70, 40 + len(growing) * 15)
        experimental_share = max(10, 30 - len(growing) * 10)
        other_share = max(10, 30 - len(declining) * 10)
        ratio = (
            f"{top_share}% {growing[0].name} · {experimental_share}% experimental · {other_share}% other"
        )
    else:
        do = "Experiment with new formats — no clear winner yet"
        ratio = "Split evenly across formats until clear signals emerge"

    if declining:
        stop = (
            f"{_names(declining)} content "
            f"(avg {format_number(declining[0].avg_retention)}% retention, declining)"
        )
    else:
        stop = "No formats critically declining — maintain current mix"

    return {"do": do, "stop": stop, "ratio": ratio}


def pivot_lift(trends: FormatTrends) -> int:
    """Relative retention lift of the top growing format over the top declining one."""
    baseline = DEFAULT_PIVOT_BASELINE
    if trends.declining and trends.declining[0].avg_retention:
        baseline = trends.declining[0].avg_retention
    return round_half_up(trends.growing[0].avg_retention / baseline * 100 - 100)


def positioning(trends: FormatTrends) -> Dict[str, str]:
    if trends.declining:
        current = f"Heavy {trends.declining[0].name} focus"
    else:
        current = "Mixed content approach"

    if trends.growing:
        pivot = (
            f"Lean into {trends.growing[0].name} — your audience responds "
            f"{pivot_lift(trends)}% better to this format"
        )
    else:
        pivot = "Test 3 different formats over next month to find signal"

    return {
        "current": current,
        "pivot": pivot,
        "hook": "Lead with your highest-retention format and topic combination",
    }


def posting_frequency(window: AnalysisWindow, metrics: HealthMetrics) -> Dict[str, str]:
    if metrics.health_score < LOW_HEALTH_THRESHOLD:
        recommended = "Reduce to 1/week — invest more time per video in your winning format"
    else:
        recommended = "Maintain current pace — focus on format mix rather than volume"
    return {
        "current": f"{round_half_up(window.count / MONTHS_IN_WINDOW)} videos/month average",
        "recommended": recommended,
        "reason": "Higher production quality in winning formats beats volume in declining ones",
    }


def content_calendar(trends: FormatTrends) -> List[CalendarEntry]:
    best = trends.best
    second_growing = trends.growing[1].name if len(trends.growing) > 1 else "Challenge / Story"
    return [
        CalendarEntry(
            week="Week 1",
            format=best.name,
            title=f"Create a {best.name} video on your most-requested topic",
            why=f"{best.name} has your highest retention at {format_number(best.avg_retention)}%",
        ),
        CalendarEntry(
            week="Week 2",
            format=second_growing,
            title="Personal story or challenge — share a real experience with your audience",
            why="Story-driven content typically drives 1.5–2x retention over instructional",
        ),
        CalendarEntry(
            week="Week 3",
            format=best.name,
            title=f"Another {best.name} video — build momentum in your winning format",
            why="Consistency in a growing format signals the algorithm to push more",
        ),
        CalendarEntry(
            week="Week 4",
            format="Review / Opinion",
            title="Roundup or honest review relevant to your niche",
            why="Opinion content builds authority and drives comments",
        ),
    ]


def projected_impact(window: AnalysisWindow, metrics: HealthMetrics, trends: FormatTrends) -> Dict[str, str]:
    low_health = metrics.health_score < LOW_HEALTH_THRESHOLD
    best_retention = trends.best.avg_retention or DEFAULT_RETENTION_TARGET
    target = round_half_up(max(best_retention, metric_mean(window.videos, "retention") + 10))
    return {
        "viewLift": "20–40%" if low_health else "10–20%",
        "retTarget": f"{target}%+ average",
        "subGrowth": "Reverse decline in 3–4 weeks" if low_health else "Steady growth, +10–15%",
    }


def missed_opportunities(trends: FormatTrends) -> List[str]:
    if trends.growing:
        return [
            f"More {item.name} content ({format_number(item.avg_retention)}% retention, trending +{item.trend}%)"
            for item in trends.growing[:4]
        ]
    return [
        "Experiment with project-based content",
        "Try story/challenge format",
        "Test review/opinion videos",
    ]


def synthesize_strategy(window: AnalysisWindow, metrics: HealthMetrics, trends: FormatTrends) -> StrategyPlan:
    return StrategyPlan(
        format_guidance=format_guidance(trends),
        positioning=positioning(trends),
        frequency=posting_frequency(window, metrics),
        calendar=tuple(content_calendar(trends)),
        impact=projected_impact(window, metrics, trends),
        opportunities=tuple(missed_opportunities(trends)),
    )
