"""Keyword-driven content format suggestions and creator overrides.

The keyword table is ordered: the first keyword (in table order) found in the
lower-cased title decides the suggestion, regardless of where it sits in the
title. The creator's own choice always wins over the suggestion.
"""

from __future__ import annotations

from typing import Dict, List, Mapping, Optional, Sequence

from analytics.models import ParsedVideo, VideoRecord

OTHER_FORMAT = "Other"

FORMAT_TAXONOMY = (
    "Tutorial / How-to",
    "Screen Recording Walkthrough",
    "Beginner's Guide / Starter Pack",
    "Project Build",
    "Talking Head Commentary",
    "Podcast-style Conversation",
    "Vlog (Video Blog)",
    "Storytime / Personal Experience",
    "Listicle (Top List)",
    "Before vs After Transformation",
    "Review / Unboxing",
    "Product Review (Short Format)",
    "Commentary on Trends / News",
    "Interview / Q&A",
    "Voiceover with B-roll",
    "Reaction",
    "Things I Wish I Knew",
    "Challenge",
    "Music / Performance",
    "Myth vs Fact / Debunking",
    "Comedy / Sketch",
    "Behind-the-Scenes Process",
    "Live Stream",
    "Documentary Style",
    "Comparison Video (A vs B)",
    OTHER_FORMAT,
)

KEYWORD_PRIORITY = (
    ("tutorial", "Tutorial / How-to"),
    ("how to", "Tutorial / How-to"),
    ("guide", "Tutorial / How-to"),
    ("explained", "Tutorial / How-to"),
    ("step by step", "Tutorial / How-to"),
    ("beginner", "Beginner's Guide / Starter Pack"),
    ("starter", "Beginner's Guide / Starter Pack"),
    ("basics", "Beginner's Guide / Starter Pack"),
    ("getting started", "Beginner's Guide / Starter Pack"),
    ("project", "Project Build"),
    ("build", "Project Build"),
    ("create", "Project Build"),
    ("automate", "Project Build"),
    ("made a", "Project Build"),
    ("built a", "Project Build"),
    ("talking head", "Talking Head Commentary"),
    ("podcast", "Podcast-style Conversation"),
    ("conversation with", "Podcast-style Conversation"),
    ("vlog", "Vlog (Video Blog)"),
    ("day in", "Vlog (Video Blog)"),
    ("a day", "Vlog (Video Blog)"),
    ("my morning", "Vlog (Video Blog)"),
    ("come with me", "Vlog (Video Blog)"),
    ("storytime", "Storytime / Personal Experience"),
    ("story time", "Storytime / Personal Experience"),
    ("my experience", "Storytime / Personal Experience"),
    ("what happened", "Storytime / Personal Experience"),
    ("i tried", "Challenge"),
    ("challenge", "Challenge"),
    ("i did", "Challenge"),
    ("top", "Listicle (Top List)"),
    ("best", "Listicle (Top List)"),
    ("worst", "Listicle (Top List)"),
    ("tips", "Listicle (Top List)"),
    ("things you", "Listicle (Top List)"),
    ("before and after", "Before vs After Transformation"),
    ("transformation", "Before vs After Transformation"),
    ("glow up", "Before vs After Transformation"),
    ("review", "Review / Unboxing"),
    ("unboxing", "Review / Unboxing"),
    ("honest", "Review / Unboxing"),
    ("worth it", "Review / Unboxing"),
    ("product review", "Product Review (Short Format)"),
    ("news", "Commentary on Trends / News"),
    ("drama", "Commentary on Trends / News"),
    ("update", "Commentary on Trends / News"),
    ("opinion", "Commentary on Trends / News"),
    ("interview", "Interview / Q&A"),
    ("q&a", "Interview / Q&A"),
    ("qa", "Interview / Q&A"),
    ("ask me", "Interview / Q&A"),
    ("react", "Reaction"),
    ("reacting", "Reaction"),
    ("reaction", "Reaction"),
    ("wish i knew", "Things I Wish I Knew"),
    ("things i", "Things I Wish I Knew"),
    ("mistakes", "Things I Wish I Knew"),
    ("music", "Music / Performance"),
    ("cover", "Music / Performance"),
    ("performance", "Music / Performance"),
    ("myth", "Myth vs Fact / Debunking"),
    ("debunk", "Myth vs Fact / Debunking"),
    ("fact or", "Myth vs Fact / Debunking"),
    ("actually", "Myth vs Fact / Debunking"),
    ("comedy", "Comedy / Sketch"),
    ("sketch", "Comedy / Sketch"),
    ("funny", "Comedy / Sketch"),
    ("skit", "Comedy / Sketch"),
    ("behind the scenes", "Behind-the-Scenes Process"),
    ("bts", "Behind-the-Scenes Process"),
    ("process", "Behind-the-Scenes Process"),
    ("how i make", "Behind-the-Scenes Process"),
    ("live", "Live Stream"),
    ("livestream", "Live Stream"),
    ("stream", "Live Stream"),
    ("documentary", "Documentary Style"),
    ("deep dive", "Documentary Style"),
    ("the story of", "Documentary Style"),
    ("vs", "Comparison Video (A vs B)"),
    ("compared", "Comparison Video (A vs B)"),
    ("which is better", "Comparison Video (A vs B)"),
    ("screen recording", "Screen Recording Walkthrough"),
    ("walkthrough", "Screen Recording Walkthrough"),
)


def suggest_format(title: str) -> str:
    lower = (title or "").lower()
    for keyword, format_name in KEYWORD_PRIORITY:
        if keyword in lower:
            return format_name
    return OTHER_FORMAT


def suggest_formats(videos: Sequence[ParsedVideo]) -> List[str]:
    return [suggest_format(video.title) for video in videos]


def validate_format(format_name: str) -> str:
    if format_name not in FORMAT_TAXONOMY:
        raise ValueError(f"Unknown format: {format_name!r}. Choose one of: {', '.join(FORMAT_TAXONOMY)}")
    return format_name


def batch_assign(videos: Sequence[ParsedVideo], format_name: str) -> Dict[int, str]:
    """Override every suggestion with one format."""
    validate_format(format_name)
    return {index: format_name for index in range(len(videos))}


def apply_format_overrides(
    videos: Sequence[ParsedVideo],
    suggestions: Sequence[str],
    overrides: Optional[Mapping[int, str]] = None,
) -> List[VideoRecord]:
    """Tag each parsed video with its final format.

    ``overrides`` maps a video index to the creator's chosen format and wins
    over the suggestion for that index. Indexes outside ``videos`` are ignored.
    """
    chosen = {index: validate_format(name) for index, name in (overrides or {}).items()}

    tagged = []
    for index, video in enumerate(videos):
        if index in chosen:
            format_name = chosen[index]
        elif index < len(suggestions) and suggestions[index]:
            format_name = suggestions[index]
        else:
            format_name = OTHER_FORMAT
        tagged.append(VideoRecord.from_parsed(video, format_name))
    return tagged
