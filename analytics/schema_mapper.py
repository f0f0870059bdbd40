"""Map loosely named analytics export columns onto title/views/retention/ctr."""

from __future__ import annotations

import re
from datetime import datetime
from typing import Dict, List, Mapping, Optional, Sequence

from dateutil import parser as dateparser

from analytics.errors import InsufficientDataError, SchemaError
from analytics.format_classifier import suggest_formats
from analytics.models import ParsedVideo, SchemaMapping

MIN_VIDEOS = 4

# Each list is scanned in order; the first keyword contained in a normalized
# header picks that header.
COLUMN_KEYWORDS = {
    "title": ["title", "video title", "video name", "content", "name"],
    "views": ["views", "view count", "watch time"],
    "retention": [
        "average percentage viewed",
        "avg percentage viewed",
        "average percent viewed",
        "avg percent",
        "avg view percentage",
        "average view percentage",
        "avg percentage",
        "avg viewed",
        "retention",
        "avg %",
        "percent viewed",
        "percentage viewed",
        "avg duration",
    ],
    "ctr": [
        "impressions click through rate",
        "click through rate",
        "impressions ctr",
        "ctr",
        "click rate",
    ],
    "published": ["video publish time", "publish time", "published", "publish date", "upload date"],
}

COLUMN_LABELS = {
    "title": "Title",
    "views": "Views",
    "retention": "Retention",
    "ctr": "CTR",
    "published": "Published",
}

INT_PATTERN = re.compile(r"^\s*[+-]?\d+")
FLOAT_PATTERN = re.compile(r"^\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def normalize_header(header: str) -> str:
    lowered = re.sub(r"[^a-z0-9]", " ", str(header).lower())
    return re.sub(r"\s+", " ", lowered).strip()


def find_column(headers: Sequence[str], keywords: Sequence[str]) -> Optional[str]:
    normalized = [(header, normalize_header(header)) for header in headers]
    for keyword in keywords:
        for header, norm in normalized:
            if keyword in norm:
                return header
    return None


def detect_columns(headers: Sequence[str]) -> Dict[str, Optional[str]]:
    return {field: find_column(headers, keywords) for field, keywords in COLUMN_KEYWORDS.items()}


def describe_columns(columns: Mapping[str, Optional[str]]) -> List[str]:
    return [
        f'{COLUMN_LABELS[field]}: "{source}"'
        for field, source in columns.items()
        if source
    ]


def _clean_cell(row: Mapping[str, str], column: Optional[str]) -> str:
    if not column:
        return "0"
    raw = row.get(column)
    return re.sub(r"[%,]", "", str(raw or "0")).strip()


def parse_int(text: str) -> int:
    match = INT_PATTERN.match(text)
    return int(match.group(0)) if match else 0


def parse_float(text: str) -> float:
    match = FLOAT_PATTERN.match(text)
    return float(match.group(0)) if match else 0.0


def parse_published(raw_value: str) -> Optional[datetime]:
    if not raw_value:
        return None
    try:
        parsed = dateparser.parse(raw_value)
    except (ValueError, OverflowError):
        return None
    if parsed is None:
        return None
    return parsed.replace(tzinfo=None) if parsed.tzinfo else parsed


def order_by_publish_date(videos: Sequence[ParsedVideo]) -> List[ParsedVideo]:
    """Oldest first when every video has a parseable publish time, else unchanged."""
    stamped = [(parse_published(video.published), video) for video in videos]
    if not stamped or any(stamp is None for stamp, _ in stamped):
        return list(videos)
    return [video for _, video in sorted(stamped, key=lambda item: item[0])]


def parse_row(row: Mapping[str, str], columns: Mapping[str, Optional[str]]) -> ParsedVideo:
    title_col = columns.get("title")
    published_col = columns.get("published")
    return ParsedVideo(
        title=(row.get(title_col) or "Untitled") if title_col else "Untitled",
        views=parse_int(_clean_cell(row, columns.get("views"))),
        retention=parse_float(_clean_cell(row, columns.get("retention"))),
        ctr=parse_float(_clean_cell(row, columns.get("ctr"))),
        published=str(row.get(published_col) or "").strip() if published_col else "",
    )


def map_rows(rows: Sequence[Mapping[str, str]], sort_by_publish_date: bool = False) -> SchemaMapping:
    """Turn raw string rows into parsed videos plus a format suggestion for each."""
    if len(rows) < MIN_VIDEOS:
        raise InsufficientDataError(len(rows), MIN_VIDEOS)

    headers = list(rows[0].keys())
    columns = detect_columns(headers)
    detected = describe_columns(columns)

    # A title column alone is not enough: without views every row is dropped below.
    if not columns["views"]:
        raise SchemaError(headers)

    videos = [parse_row(row, columns) for row in rows]
    videos = [video for video in videos if video.views > 0]

    if len(videos) < MIN_VIDEOS:
        sample = [video.retention for video in videos[:3]]
        raise InsufficientDataError(len(videos), MIN_VIDEOS, detected, sample)

    if sort_by_publish_date and columns["published"]:
        videos = order_by_publish_date(videos)

    return SchemaMapping(
        videos=tuple(videos),
        suggested_formats=tuple(suggest_formats(videos)),
        columns=columns,
        detected_columns=tuple(detected),
    )
