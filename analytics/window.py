"""Select the most recent videos and split them into comparison halves."""

from __future__ import annotations

from typing import Sequence

from analytics.errors import EmptyWindowError
from analytics.models import AnalysisWindow, VideoRecord

MAX_VIDEOS = 50
MIN_VIDEOS = 4


def build_window(videos: Sequence[VideoRecord], max_videos: int = MAX_VIDEOS) -> AnalysisWindow:
    recent = tuple(videos[-max_videos:]) if max_videos > 0 else tuple(videos)
    if len(recent) < MIN_VIDEOS:
        raise EmptyWindowError(len(recent), MIN_VIDEOS)
    return AnalysisWindow(videos=recent, half=len(recent) // 2)
