"""End-to-end analysis: rows in, read-only result document out."""

from __future__ import annotations

from typing import Iterable, Mapping, Optional, Sequence, Union

from analytics.demo_data import demo_videos
from analytics.format_aggregator import aggregate_formats, classify_trends
from analytics.format_classifier import apply_format_overrides, batch_assign, validate_format
from analytics.health import score_health
from analytics.models import AnalysisResult, VideoRecord
from analytics.schema_mapper import map_rows
from analytics.strategy import synthesize_strategy
from analytics.weekly import aggregate_weeks
from analytics.window import build_window


def _as_record(video: Union[VideoRecord, Mapping]) -> VideoRecord:
    record = video if isinstance(video, VideoRecord) else VideoRecord.from_dict(dict(video))
    validate_format(record.format)
    return record


def analyze_videos(
    videos: Iterable[Union[VideoRecord, Mapping]],
    detected_columns: Sequence[str] = (),
) -> AnalysisResult:
    """Analyze already-tagged videos, oldest first."""
    window = build_window([_as_record(video) for video in videos])

    metrics = score_health(window)
    formats = aggregate_formats(window)
    trends = classify_trends(formats)
    weekly = aggregate_weeks(window)
    strategy = synthesize_strategy(window, metrics, trends)

    return AnalysisResult(
        videos=window.videos,
        metrics=metrics,
        formats=tuple(formats),
        weekly=tuple(weekly),
        strategy=strategy,
        trends=trends,
        detected_columns=tuple(detected_columns),
    )


def analyze_rows(
    rows: Sequence[Mapping[str, str]],
    overrides: Optional[Mapping[int, str]] = None,
    batch_format: Optional[str] = None,
    sort_by_publish_date: bool = False,
) -> AnalysisResult:
    """Map raw export rows, tag their formats and analyze them.

    ``batch_format`` tags every video with one format; ``overrides`` (index to
    format) are applied on top of it, or on top of the keyword suggestions.
    """
    mapping = map_rows(rows, sort_by_publish_date=sort_by_publish_date)

    chosen = {}
    if batch_format:
        chosen.update(batch_assign(mapping.videos, batch_format))
    chosen.update(overrides or {})

    tagged = apply_format_overrides(mapping.videos, mapping.suggested_formats, chosen)
    return analyze_videos(tagged, detected_columns=mapping.detected_columns)


def analyze_demo() -> AnalysisResult:
    return analyze_videos(demo_videos())
