"""Trend and channel health scoring.

Trends compare the second half of the analysis window against the first.
Only declining trends are penalized: a growing channel scores a neutral 10,
never more.
"""

from __future__ import annotations

from analytics.metrics import metric_mean, round1, round_half_up, safe_ratio
from analytics.models import AnalysisWindow, HealthMetrics

TREND_WEIGHTS = {"views": 0.4, "retention": 0.4, "ctr": 0.2}
RISK_SCALE = 2.2
CHURN_FLOOR = 5
CHURN_CEILING = 95


def metric_trend(window: AnalysisWindow, key: str) -> float:
    return safe_ratio(metric_mean(window.second_half, key), metric_mean(window.first_half, key))


def stagnation_risk(views_trend: float, retention_trend: float, ctr_trend: float) -> float:
    """Risk on a 0-100 scale from the negative parts of the three trends."""
    raw = (
        min(0.0, views_trend) * TREND_WEIGHTS["views"]
        + min(0.0, retention_trend) * TREND_WEIGHTS["retention"]
        + min(0.0, ctr_trend) * TREND_WEIGHTS["ctr"]
    )
    return min(100.0, max(0.0, abs(raw) * RISK_SCALE))


def health_score_from_risk(risk100: float) -> float:
    return round1(10 - risk100 / 10)


def churn_from_risk(risk100: float) -> int:
    return min(CHURN_CEILING, max(0, round_half_up(risk100 * 0.7 + CHURN_FLOOR)))


def score_health(window: AnalysisWindow) -> HealthMetrics:
    views_trend = metric_trend(window, "views")
    retention_trend = metric_trend(window, "retention")
    ctr_trend = metric_trend(window, "ctr")

    risk100 = stagnation_risk(views_trend, retention_trend, ctr_trend)

    return HealthMetrics(
        health_score=health_score_from_risk(risk100),
        churn_risk=churn_from_risk(risk100),
        views_trend=round1(views_trend),
        retention_trend=round1(retention_trend),
        ctr_trend=round1(ctr_trend),
        avg_views=round_half_up(metric_mean(window.second_half, "views")),
        avg_retention=round1(metric_mean(window.second_half, "retention")),
        avg_ctr=round1(metric_mean(window.second_half, "ctr")),
    )
