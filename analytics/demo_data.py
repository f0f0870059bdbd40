"""Pre-tagged demonstration channel, used when no export is supplied."""

from __future__ import annotations

from typing import List

from analytics.models import VideoRecord

DEMO_CHANNEL_NAME = "CodeWithNadia (Demo)"

DEMO_VIDEOS = (
    {"title": "Python Basics: Variables Explained", "views": 24100, "retention": 48, "ctr": 5.8, "format": "Tutorial / How-to"},
    {"title": "How to Install Python in 2025", "views": 31200, "retention": 42, "ctr": 5.5, "format": "Screen Recording Walkthrough"},
    {"title": "5 Beginner Python Mistakes", "views": 19800, "retention": 55, "ctr": 6.1, "format": "Listicle (Top List)"},
    {"title": "Python For Loops Tutorial", "views": 15600, "retention": 38, "ctr": 5.2, "format": "Tutorial / How-to"},
    {"title": "I Built an App in 24 Hours", "views": 41200, "retention": 64, "ctr": 7.2, "format": "Challenge"},
    {"title": "Python Lists & Dictionaries", "views": 12400, "retention": 35, "ctr": 4.8, "format": "Tutorial / How-to"},
    {"title": "Build a Budget Tracker in Python", "views": 38500, "retention": 61, "ctr": 6.8, "format": "Project Build"},
    {"title": "Python String Methods Guide", "views": 9800, "retention": 32, "ctr": 4.5, "format": "Screen Recording Walkthrough"},
    {"title": "Automate Your Desktop with Python", "views": 44600, "retention": 67, "ctr": 7.5, "format": "Project Build"},
    {"title": "Python Functions for Beginners", "views": 8200, "retention": 30, "ctr": 4.2, "format": "Beginner's Guide / Starter Pack"},
    {"title": "I Automated My Job with Python", "views": 52100, "retention": 71, "ctr": 8.1, "format": "Storytime / Personal Experience"},
    {"title": "Build a Web Scraper Project", "views": 47300, "retention": 69, "ctr": 7.8, "format": "Project Build"},
)


def demo_videos() -> List[VideoRecord]:
    return [VideoRecord.from_dict(video) for video in DEMO_VIDEOS]
