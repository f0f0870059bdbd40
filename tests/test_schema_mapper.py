import unittest

from analytics.errors import InsufficientDataError, SchemaError
from analytics.schema_mapper import (
    detect_columns,
    map_rows,
    normalize_header,
    parse_float,
    parse_int,
)

STUDIO_HEADERS = [
    "Content",
    "Video title",
    "Video publish time",
    "Views",
    "Watch time (hours)",
    "Average percentage viewed (%)",
    "Impressions click-through rate (%)",
]


def _studio_row(title, views, retention, ctr, published="Jan 1, 2025"):
    return {
        "Content": "abc123",
        "Video title": title,
        "Video publish time": published,
        "Views": views,
        "Watch time (hours)": "10.5",
        "Average percentage viewed (%)": retention,
        "Impressions click-through rate (%)": ctr,
    }


def _simple_rows(count, views="100"):
    return [
        {"title": f"Video {idx}", "views": views, "retention": "40"}
        for idx in range(count)
    ]


class NormalizeHeaderTests(unittest.TestCase):
    def test_normalize_header_strips_symbols_and_case(self):
        self.assertEqual(normalize_header("Average percentage viewed (%)"), "average percentage viewed")
        self.assertEqual(normalize_header("  Impressions click-through   rate "), "impressions click through rate")

    def test_detect_youtube_studio_columns(self):
        columns = detect_columns(STUDIO_HEADERS)
        self.assertEqual(columns["title"], "Video title")
        self.assertEqual(columns["views"], "Views")
        self.assertEqual(columns["retention"], "Average percentage viewed (%)")
        self.assertEqual(columns["ctr"], "Impressions click-through rate (%)")
        self.assertEqual(columns["published"], "Video publish time")

    def test_keyword_priority_beats_header_order(self):
        # "views" is scanned before "watch time", so the later header wins.
        columns = detect_columns(["Watch time", "Total views"])
        self.assertEqual(columns["views"], "Total views")

    def test_numeric_prefix_parsing(self):
        self.assertEqual(parse_int("12.7"), 12)
        self.assertEqual(parse_int("abc"), 0)
        self.assertEqual(parse_int(""), 0)
        self.assertEqual(parse_float("3.5abc"), 3.5)
        self.assertEqual(parse_float(".5"), 0.5)
        self.assertEqual(parse_float("n/a"), 0.0)


class MapRowsTests(unittest.TestCase):
    def test_cells_are_cleaned_before_parsing(self):
        rows = [
            _studio_row("How to start", "1,234", "45.5%", "5.1"),
            _studio_row("", "2,000", "50", "n/a"),
            _studio_row("Vlog day", "900", "", ""),
            _studio_row("Review", "1200", "33.3", "4"),
        ]
        mapping = map_rows(rows)

        self.assertEqual(len(mapping.videos), 4)
        first = mapping.videos[0]
        self.assertEqual(first.views, 1234)
        self.assertEqual(first.retention, 45.5)
        self.assertEqual(first.ctr, 5.1)
        self.assertEqual(mapping.videos[1].title, "Untitled")
        self.assertEqual(mapping.videos[1].ctr, 0.0)
        self.assertEqual(mapping.videos[2].retention, 0.0)
        self.assertIn('Title: "Video title"', mapping.detected_columns)
        self.assertIn('Retention: "Average percentage viewed (%)"', mapping.detected_columns)

    def test_suggestions_follow_titles(self):
        rows = [
            _studio_row("How to start", "100", "40", "5"),
            _studio_row("My morning vlog", "100", "40", "5"),
            _studio_row("Random thoughts", "100", "40", "5"),
            _studio_row("Unboxing the new phone", "100", "40", "5"),
        ]
        mapping = map_rows(rows)
        self.assertEqual(
            list(mapping.suggested_formats),
            ["Tutorial / How-to", "Vlog (Video Blog)", "Other", "Review / Unboxing"],
        )

    def test_rows_without_views_are_dropped(self):
        rows = _simple_rows(6)
        rows[2]["views"] = "0"
        rows[4]["views"] = ""
        mapping = map_rows(rows)
        self.assertEqual([video.title for video in mapping.videos], ["Video 0", "Video 1", "Video 3", "Video 5"])

    def test_mapper_does_not_cap_rows(self):
        mapping = map_rows(_simple_rows(60))
        self.assertEqual(len(mapping.videos), 60)

    def test_missing_title_column_defaults_to_untitled(self):
        rows = [{"Views": "100", "Retention": "40"} for _ in range(4)]
        mapping = map_rows(rows)
        self.assertTrue(all(video.title == "Untitled" for video in mapping.videos))
        self.assertIsNone(mapping.columns["title"])


class MapRowsErrorTests(unittest.TestCase):
    def test_three_rows_are_rejected(self):
        with self.assertRaises(InsufficientDataError) as ctx:
            map_rows(_simple_rows(3))
        self.assertEqual(ctx.exception.found, 3)

    def test_four_rows_are_accepted(self):
        self.assertEqual(len(map_rows(_simple_rows(4)).videos), 4)

    def test_schema_error_lists_headers(self):
        rows = [{"Name": "Widget", "Qty": "3"} for _ in range(4)]
        with self.assertRaises(SchemaError) as ctx:
            map_rows(rows)
        self.assertEqual(ctx.exception.headers, ["Name", "Qty"])
        self.assertIn("Name, Qty", str(ctx.exception))

    def test_schema_error_when_nothing_matches(self):
        rows = [{"Foo": "1", "Bar": "2"} for _ in range(4)]
        with self.assertRaises(SchemaError):
            map_rows(rows)

    def test_too_few_survivors_carry_diagnostics(self):
        rows = _simple_rows(5, views="0")
        rows[0]["views"] = "10"
        rows[0]["retention"] = "42.5"
        with self.assertRaises(InsufficientDataError) as ctx:
            map_rows(rows)

        error = ctx.exception
        self.assertEqual(error.found, 1)
        self.assertEqual(error.retention_sample, [42.5])
        self.assertIn('Views: "views"', error.detected_columns)
        self.assertIn("Sample retention values: [42.5]", str(error))


class PublishOrderTests(unittest.TestCase):
    def _rows(self):
        return [
            _studio_row("Newest tutorial", "100", "40", "5", "Mar 3, 2025"),
            _studio_row("Middle vlog", "100", "40", "5", "Feb 2, 2025"),
            _studio_row("Oldest review", "100", "40", "5", "Jan 1, 2025"),
            _studio_row("Second reaction", "100", "40", "5", "Jan 15, 2025"),
        ]

    def test_sorted_oldest_first_when_requested(self):
        mapping = map_rows(self._rows(), sort_by_publish_date=True)
        self.assertEqual(
            [video.title for video in mapping.videos],
            ["Oldest review", "Second reaction", "Middle vlog", "Newest tutorial"],
        )
        self.assertEqual(mapping.suggested_formats[0], "Review / Unboxing")

    def test_input_order_kept_by_default(self):
        mapping = map_rows(self._rows())
        self.assertEqual(mapping.videos[0].title, "Newest tutorial")

    def test_unparseable_dates_keep_input_order(self):
        rows = self._rows()
        rows[1]["Video publish time"] = "not a date"
        mapping = map_rows(rows, sort_by_publish_date=True)
        self.assertEqual(mapping.videos[0].title, "Newest tutorial")


if __name__ == "__main__":
    unittest.main()
