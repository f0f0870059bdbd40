import unittest

from analytics.format_classifier import (
    FORMAT_TAXONOMY,
    KEYWORD_PRIORITY,
    apply_format_overrides,
    batch_assign,
    suggest_format,
)
from analytics.models import ParsedVideo


def _parsed(titles):
    return [ParsedVideo(title=title, views=100, retention=40.0) for title in titles]


class SuggestFormatTests(unittest.TestCase):
    def test_table_order_breaks_ties(self):
        # "how to" is declared before "build".
        self.assertEqual(suggest_format("How to Build a Budget Tracker in Python"), "Tutorial / How-to")
        self.assertEqual(suggest_format("Build a Budget Tracker in Python"), "Project Build")

    def test_title_position_does_not_matter(self):
        # "review" appears first in the title but "tutorial" comes first in the table.
        self.assertEqual(suggest_format("Honest review of my tutorial setup"), "Tutorial / How-to")

    def test_matching_is_case_insensitive_substring(self):
        self.assertEqual(suggest_format("MY MORNING ROUTINE"), "Vlog (Video Blog)")
        self.assertEqual(suggest_format("Reacting to old videos"), "Reaction")

    def test_no_keyword_is_other(self):
        self.assertEqual(suggest_format("Zzz"), "Other")
        self.assertEqual(suggest_format(""), "Other")

    def test_keyword_table_only_uses_taxonomy_labels(self):
        for keyword, format_name in KEYWORD_PRIORITY:
            self.assertEqual(keyword, keyword.lower())
            self.assertIn(format_name, FORMAT_TAXONOMY)
        self.assertEqual(FORMAT_TAXONOMY[-1], "Other")


class OverrideTests(unittest.TestCase):
    def test_override_always_wins(self):
        videos = _parsed(["How to cook rice", "Build a shed", "Zzz"])
        suggestions = [suggest_format(video.title) for video in videos]

        tagged = apply_format_overrides(videos, suggestions, {0: "Vlog (Video Blog)"})

        self.assertEqual(
            [video.format for video in tagged],
            ["Vlog (Video Blog)", "Project Build", "Other"],
        )
        self.assertEqual(tagged[0].title, "How to cook rice")

    def test_missing_suggestion_falls_back_to_other(self):
        tagged = apply_format_overrides(_parsed(["a", "b"]), ["Challenge"])
        self.assertEqual([video.format for video in tagged], ["Challenge", "Other"])

    def test_batch_assign_covers_every_index(self):
        videos = _parsed(["How to", "Vlog", "Top 10"])
        overrides = batch_assign(videos, "Live Stream")
        self.assertEqual(overrides, {0: "Live Stream", 1: "Live Stream", 2: "Live Stream"})

        tagged = apply_format_overrides(videos, ["Tutorial / How-to"] * 3, overrides)
        self.assertTrue(all(video.format == "Live Stream" for video in tagged))

    def test_unknown_format_is_rejected(self):
        videos = _parsed(["a"])
        with self.assertRaises(ValueError):
            apply_format_overrides(videos, ["Other"], {0: "Cat Videos"})
        with self.assertRaises(ValueError):
            batch_assign(videos, "Cat Videos")


if __name__ == "__main__":
    unittest.main()
