import tempfile
import unittest
from pathlib import Path

from openpyxl import load_workbook

from analytics.pipeline import analyze_demo, analyze_videos
from tools.export_to_excel import ExcelExporter
from tools.generate_markdown_report import MarkdownReportGenerator, signed


class ReportOutputTests(unittest.TestCase):
    def setUp(self):
        self.analysis = analyze_demo().to_dict()

    def test_excel_workbook_tabs(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            output_path = Path(tmpdir) / "audit.xlsx"
            ExcelExporter(self.analysis, "Demo Channel").export(output_path)
            workbook = load_workbook(output_path)

            self.assertEqual(
                workbook.sheetnames,
                ["Summary", "Format Breakdown", "Weekly Trend", "Strategy", "Content Calendar", "Videos"],
            )
            breakdown = workbook["Format Breakdown"]
            values = [str(cell) for row in breakdown.iter_rows(values_only=True) for cell in row if cell is not None]
            self.assertIn("Storytime / Personal Experience", values)
            self.assertEqual(workbook["Videos"].max_row, 13)
            self.assertEqual(workbook["Videos"].max_column, 6)

    def test_excel_signals_come_from_the_document(self):
        growing = {item["name"] for item in self.analysis["growingFormats"]}
        declining = {item["name"] for item in self.analysis["decliningFormats"]}
        relabelled = dict(self.analysis, growingFormats=[], decliningFormats=[])

        with tempfile.TemporaryDirectory() as tmpdir:
            output_path = Path(tmpdir) / "audit.xlsx"
            ExcelExporter(self.analysis).export(output_path)
            rows = list(load_workbook(output_path)["Format Breakdown"].iter_rows(min_row=2, values_only=True))
            signals = {row[0]: row[5] for row in rows}

            relabelled_path = Path(tmpdir) / "relabelled.xlsx"
            ExcelExporter(relabelled).export(relabelled_path)
            relabelled_rows = load_workbook(relabelled_path)["Format Breakdown"].iter_rows(min_row=2, values_only=True)
            relabelled_signals = {row[5] for row in relabelled_rows}

        for name, signal in signals.items():
            if name in growing:
                self.assertEqual(signal, "Growing")
            elif name in declining:
                self.assertEqual(signal, "Declining")
            else:
                self.assertEqual(signal, "Stable")
        self.assertEqual(relabelled_signals, {"Stable"})

    def test_signed_trend_text(self):
        self.assertEqual(signed(12.0), "+12")
        self.assertEqual(signed(-3.5), "-3.5")
        self.assertEqual(signed(0), "0")

    def test_markdown_sections(self):
        markdown = MarkdownReportGenerator(self.analysis, "Demo Channel").generate()

        for heading in (
            "# Content Strategy Audit",
            "## Channel Pulse Check",
            "## What's Working vs What's Declining",
            "## Performance by Content Type",
            "## Positioning & Frequency",
            "## Where To Focus Next",
            "## Your Content Calendar",
            "## What To Expect",
            "## Weekly Trend",
            "## Methodology",
        ):
            self.assertIn(heading, markdown)
        self.assertIn("Demo Channel", markdown)
        self.assertIn("Storytime / Personal Experience", markdown)

    def test_flat_channel_reports_are_safe(self):
        videos = [{"title": f"v{idx}", "views": 100, "retention": 40, "format": "Other"} for idx in range(4)]
        analysis = analyze_videos(videos).to_dict()
        self.assertEqual(analysis["growingFormats"], [])

        markdown = MarkdownReportGenerator(analysis).generate()
        self.assertIn("Experiment with new formats", markdown)

        with tempfile.TemporaryDirectory() as tmpdir:
            output_path = Path(tmpdir) / "flat.xlsx"
            ExcelExporter(analysis).export(str(output_path))
            self.assertTrue(output_path.exists())


if __name__ == "__main__":
    unittest.main()
