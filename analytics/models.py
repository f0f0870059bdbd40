"""Immutable records produced and consumed by the analytics engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple


@dataclass(frozen=True)
class ParsedVideo:
    title: str
    views: int
    retention: float
    ctr: Optional[float] = 0.0
    published: str = ""


@dataclass(frozen=True)
class VideoRecord:
    title: str
    views: int
    retention: float
    ctr: Optional[float] = 0.0
    format: str = "Other"
    published: str = ""

    @classmethod
    def from_parsed(cls, video: ParsedVideo, format_name: str) -> "VideoRecord":
        return cls(
            title=video.title,
            views=video.views,
            retention=video.retention,
            ctr=video.ctr,
            format=format_name,
            published=video.published,
        )

    @classmethod
    def from_dict(cls, data: Dict) -> "VideoRecord":
        return cls(
            title=data.get("title") or "Untitled",
            views=int(data.get("views") or 0),
            retention=float(data.get("retention") or 0),
            ctr=None if data.get("ctr") is None else float(data["ctr"]),
            format=data.get("format") or "Other",
            published=data.get("published", ""),
        )

    def to_dict(self) -> Dict:
        payload = {
            "title": self.title,
            "views": self.views,
            "retention": self.retention,
            "ctr": self.ctr,
            "format": self.format,
        }
        if self.published:
            payload["published"] = self.published
        return payload


@dataclass(frozen=True)
class SchemaMapping:
    videos: Tuple[ParsedVideo, ...]
    suggested_formats: Tuple[str, ...]
    columns: Dict[str, Optional[str]]
    detected_columns: Tuple[str, ...]


@dataclass(frozen=True)
class AnalysisWindow:
    videos: Tuple[VideoRecord, ...]
    half: int

    @property
    def count(self) -> int:
        return len(self.videos)

    @property
    def first_half(self) -> Tuple[VideoRecord, ...]:
        return self.videos[: self.half]

    @property
    def second_half(self) -> Tuple[VideoRecord, ...]:
        return self.videos[self.half :]


@dataclass(frozen=True)
class HealthMetrics:
    health_score: float
    churn_risk: int
    views_trend: float
    retention_trend: float
    ctr_trend: float
    avg_views: int
    avg_retention: float
    avg_ctr: float

    @property
    def health_label(self) -> str:
        if self.health_score >= 8:
            return "Healthy"
        if self.health_score >= 5:
            return "Early Warning"
        if self.health_score >= 3:
            return "Stagnating"
        return "Critical"

    def to_dict(self) -> Dict:
        return {
            "healthScore": self.health_score,
            "healthLabel": self.health_label,
            "churn": self.churn_risk,
            "vt": self.views_trend,
            "rt": self.retention_trend,
            "ct": self.ctr_trend,
            "avgViews": self.avg_views,
            "avgRet": self.avg_retention,
            "avgCtr": self.avg_ctr,
        }


@dataclass(frozen=True)
class FormatAggregate:
    name: str
    count: int
    avg_views: int
    avg_retention: float
    trend: int

    def to_dict(self) -> Dict:
        return {
            "name": self.name,
            "views": self.avg_views,
            "retention": self.avg_retention,
            "count": self.count,
            "trend": self.trend,
        }


@dataclass(frozen=True)
class FormatTrends:
    growing: Tuple[FormatAggregate, ...]
    declining: Tuple[FormatAggregate, ...]
    best: FormatAggregate
    worst: FormatAggregate


@dataclass(frozen=True)
class WeeklyPoint:
    label: str
    views: int
    retention: float

    def to_dict(self) -> Dict:
        return {"week": self.label, "views": self.views, "retention": self.retention}


@dataclass(frozen=True)
class CalendarEntry:
    week: str
    format: str
    title: str
    why: str

    def to_dict(self) -> Dict:
        return {"wk": self.week, "format": self.format, "title": self.title, "why": self.why}


@dataclass(frozen=True)
class StrategyPlan:
    format_guidance: Dict[str, str]
    positioning: Dict[str, str]
    frequency: Dict[str, str]
    calendar: Tuple[CalendarEntry, ...]
    impact: Dict[str, str]
    opportunities: Tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> Dict:
        return {
            "format": dict(self.format_guidance),
            "positioning": dict(self.positioning),
            "frequency": dict(self.frequency),
            "calendar": [entry.to_dict() for entry in self.calendar],
            "impact": dict(self.impact),
            "opportunities": list(self.opportunities),
        }


@dataclass(frozen=True)
class AnalysisResult:
    videos: Tuple[VideoRecord, ...]
    metrics: HealthMetrics
    formats: Tuple[FormatAggregate, ...]
    weekly: Tuple[WeeklyPoint, ...]
    strategy: StrategyPlan
    trends: FormatTrends
    detected_columns: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def best_format(self) -> FormatAggregate:
        return self.trends.best

    @property
    def worst_format(self) -> FormatAggregate:
        return self.trends.worst

    @property
    def growing_formats(self) -> Tuple[FormatAggregate, ...]:
        return self.trends.growing

    @property
    def declining_formats(self) -> Tuple[FormatAggregate, ...]:
        return self.trends.declining

    def to_dict(self) -> Dict:
        return {
            "videos": [video.to_dict() for video in self.videos],
            "metrics": self.metrics.to_dict(),
            "formats": [item.to_dict() for item in self.formats],
            "weeklyData": [point.to_dict() for point in self.weekly],
            "strategy": self.strategy.to_dict(),
            "bestFormat": self.best_format.to_dict(),
            "worstFormat": self.worst_format.to_dict(),
            "growingFormats": [item.to_dict() for item in self.growing_formats],
            "decliningFormats": [item.to_dict() for item in self.declining_formats],
            "detectedColumns": list(self.detected_columns),
        }
