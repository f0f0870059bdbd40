#!/usr/bin/env python3
"""
Excel Exporter
Creates a multi-tab Excel workbook from the stagnation audit.

Usage:
    python3 export_to_excel.py path/to/analysis.json [output.xlsx] [channel name]
"""

import json
import sys
from datetime import datetime
from pathlib import Path

from openpyxl import Workbook
from openpyxl.styles import Alignment, Font, PatternFill
from openpyxl.utils import get_column_letter


TITLE_FILL = PatternFill(start_color="1F4E78", end_color="1F4E78", fill_type="solid")
HEADER_FILL = PatternFill(start_color="D9D9D9", end_color="D9D9D9", fill_type="solid")
SECTION_FILL = PatternFill(start_color="EEF3F8", end_color="EEF3F8", fill_type="solid")
GROWING_FONT = Font(bold=True, color="1A4A30")
DECLINING_FONT = Font(bold=True, color="6A2A2A")


def autosize_columns(worksheet, max_width=80):
    """Auto-size columns to content width with a reasonable cap."""
    widths = {}
    for row in worksheet.iter_rows():
        for cell in row:
            value = cell.value
            if value is None:
                continue
            length = len(str(value))
            widths[cell.column] = max(widths.get(cell.column, 0), length)

    for col_idx, width in widths.items():
        worksheet.column_dimensions[get_column_letter(col_idx)].width = min(max(width + 2, 10), max_width)


def style_title_row(worksheet, end_column):
    """Style and merge row 1 as title."""
    worksheet.merge_cells(start_row=1, start_column=1, end_row=1, end_column=end_column)
    cell = worksheet.cell(row=1, column=1)
    cell.fill = TITLE_FILL
    cell.font = Font(bold=True, color="FFFFFF", size=13)
    cell.alignment = Alignment(horizontal="center", vertical="center")


def style_header_row(worksheet, row_idx, end_column):
    """Style a header row."""
    for col in range(1, end_column + 1):
        cell = worksheet.cell(row=row_idx, column=col)
        cell.fill = HEADER_FILL
        cell.font = Font(bold=True)
        cell.alignment = Alignment(horizontal="center", vertical="center", wrap_text=True)


def style_section_row(worksheet, row_idx, end_column):
    """Style section rows for readability."""
    for col in range(1, end_column + 1):
        cell = worksheet.cell(row=row_idx, column=col)
        cell.fill = SECTION_FILL
        cell.font = Font(bold=True)


def signed_percent(value):
    return f"+{value}%" if value > 0 else f"{value}%"


class ExcelExporter:
    def __init__(self, analysis, channel_name="My Channel"):
        self.analysis = analysis
        self.channel_name = channel_name
        self.metrics = analysis.get("metrics", {})
        self.strategy = analysis.get("strategy", {})
        self.videos = analysis.get("videos", [])

    def create_summary_tab(self, workbook):
        ws = workbook.create_sheet("Summary")
        best = self.analysis.get("bestFormat", {})
        worst = self.analysis.get("worstFormat", {})

        rows = [
            ["CONTENT STRATEGY AUDIT - CHANNEL PULSE CHECK"],
            [""],
            ["Channel Information", ""],
            ["Channel Name", self.channel_name],
            ["Videos Analyzed", len(self.videos)],
            ["Generated", datetime.now().strftime("%Y-%m-%d %H:%M")],
            [""],
            ["Channel Health", ""],
            ["Health Score", f"{self.metrics.get('healthScore', 0)}/10"],
            ["Status", self.metrics.get("healthLabel", "")],
            ["Churn Risk (60-day)", f"{self.metrics.get('churn', 0)}%"],
            ["Views Trend", signed_percent(self.metrics.get("vt", 0))],
            ["Retention Trend", signed_percent(self.metrics.get("rt", 0))],
            ["CTR Trend", signed_percent(self.metrics.get("ct", 0))],
            ["Recent Avg Views", self.metrics.get("avgViews", 0)],
            ["Recent Avg Retention", f"{self.metrics.get('avgRet', 0)}%"],
            ["Recent Avg CTR", f"{self.metrics.get('avgCtr', 0)}%"],
            [""],
            ["Formats", ""],
            ["Best Format", f"{best.get('name', 'N/A')} ({best.get('retention', 0)}% retention)"],
            ["Worst Format", f"{worst.get('name', 'N/A')} ({worst.get('retention', 0)}% retention)"],
            ["Growing Formats", ", ".join(item["name"] for item in self.analysis.get("growingFormats", [])) or "None"],
            ["Declining Formats", ", ".join(item["name"] for item in self.analysis.get("decliningFormats", [])) or "None"],
        ]

        for row in rows:
            ws.append(row)

        style_title_row(ws, 2)
        style_section_row(ws, 3, 2)
        style_section_row(ws, 8, 2)
        style_section_row(ws, 19, 2)
        ws.freeze_panes = "A4"
        autosize_columns(ws)

    def create_format_breakdown_tab(self, workbook):
        ws = workbook.create_sheet("Format Breakdown")
        headers = ["Format", "Videos", "Avg Retention %", "Avg Views", "Trend %", "Signal"]
        ws.append(headers)

        growing = {item["name"] for item in self.analysis.get("growingFormats", [])}
        declining = {item["name"] for item in self.analysis.get("decliningFormats", [])}

        for item in self.analysis.get("formats", []):
            name = item.get("name", "")
            if name in growing:
                signal = "Growing"
            elif name in declining:
                signal = "Declining"
            else:
                signal = "Stable"
            ws.append([
                name,
                item.get("count", 0),
                item.get("retention", 0),
                item.get("views", 0),
                item.get("trend", 0),
                signal,
            ])
            if signal == "Growing":
                ws.cell(row=ws.max_row, column=6).font = GROWING_FONT
            elif signal == "Declining":
                ws.cell(row=ws.max_row, column=6).font = DECLINING_FONT

        style_header_row(ws, 1, len(headers))
        ws.freeze_panes = "A2"
        autosize_columns(ws)

    def create_weekly_trend_tab(self, workbook):
        ws = workbook.create_sheet("Weekly Trend")
        headers = ["Week", "Avg Views", "Avg Retention %"]
        ws.append(headers)

        for point in self.analysis.get("weeklyData", []):
            ws.append([point.get("week", ""), point.get("views", 0), point.get("retention", 0)])

        style_header_row(ws, 1, len(headers))
        ws.freeze_panes = "A2"
        autosize_columns(ws)

    def create_strategy_tab(self, workbook):
        ws = workbook.create_sheet("Strategy")
        guidance = self.strategy.get("format", {})
        positioning = self.strategy.get("positioning", {})
        frequency = self.strategy.get("frequency", {})
        impact = self.strategy.get("impact", {})

        rows = [
            ["CONTENT STRATEGY"],
            [""],
            ["Format Mix", ""],
            ["Start", guidance.get("do", "")],
            ["Stop", guidance.get("stop", "")],
            ["Target Ratio", guidance.get("ratio", "")],
            [""],
            ["Positioning", ""],
            ["Current", positioning.get("current", "")],
            ["Pivot", positioning.get("pivot", "")],
            ["Hook", positioning.get("hook", "")],
            [""],
            ["Posting Frequency", ""],
            ["Current", frequency.get("current", "")],
            ["Recommended", frequency.get("recommended", "")],
            ["Why", frequency.get("reason", "")],
            [""],
            ["Projected Impact", ""],
            ["Expected View Lift", impact.get("viewLift", "")],
            ["Retention Target", impact.get("retTarget", "")],
            ["Subscriber Growth", impact.get("subGrowth", "")],
            [""],
            ["Missed Opportunities", ""],
        ]
        for line in self.strategy.get("opportunities", []):
            rows.append(["", line])

        for row in rows:
            ws.append(row)

        style_title_row(ws, 2)
        for row_idx in (3, 8, 13, 18, 23):
            style_section_row(ws, row_idx, 2)
        autosize_columns(ws, max_width=90)

    def create_calendar_tab(self, workbook):
        ws = workbook.create_sheet("Content Calendar")
        headers = ["Week", "Format", "Video Idea", "Why"]
        ws.append(headers)

        for entry in self.strategy.get("calendar", []):
            ws.append([entry.get("wk", ""), entry.get("format", ""), entry.get("title", ""), entry.get("why", "")])

        style_header_row(ws, 1, len(headers))
        ws.freeze_panes = "A2"
        autosize_columns(ws, max_width=70)

    def create_videos_tab(self, workbook):
        ws = workbook.create_sheet("Videos")
        headers = ["#", "Title", "Format", "Views", "Retention %", "CTR %"]
        ws.append(headers)

        for idx, video in enumerate(self.videos):
            ws.append([
                idx + 1,
                video.get("title", ""),
                video.get("format", ""),
                video.get("views", 0),
                video.get("retention", 0),
                video.get("ctr"),
            ])

        style_header_row(ws, 1, len(headers))
        ws.freeze_panes = "A2"
        autosize_columns(ws, max_width=70)

    def export(self, output_path):
        output_path = Path(output_path)
        workbook = Workbook()
        default_sheet = workbook.active
        workbook.remove(default_sheet)

        self.create_summary_tab(workbook)
        self.create_format_breakdown_tab(workbook)
        self.create_weekly_trend_tab(workbook)
        self.create_strategy_tab(workbook)
        self.create_calendar_tab(workbook)
        self.create_videos_tab(workbook)

        output_path.parent.mkdir(parents=True, exist_ok=True)
        workbook.save(output_path)
        return output_path


def main():
    if len(sys.argv) < 2 or len(sys.argv) > 4:
        print("Error: Missing analysis file")
        print("\nUsage:")
        print("  python3 export_to_excel.py path/to/analysis.json [output.xlsx] [channel name]")
        sys.exit(1)

    analysis_file = Path(sys.argv[1])
    output_file = Path(sys.argv[2]) if len(sys.argv) >= 3 else analysis_file.parent / "audit_report.xlsx"
    channel_name = sys.argv[3] if len(sys.argv) == 4 else "My Channel"

    try:
        print("Loading analysis file...")
        with analysis_file.open("r", encoding="utf-8") as f:
            analysis = json.load(f)

        print("Exporting to Excel workbook...")
        print("=" * 50)

        exporter = ExcelExporter(analysis, channel_name)
        saved_path = exporter.export(output_file)

        print("\n" + "=" * 50)
        print("SUCCESS")
        print(f"\nExcel file saved at:\n{saved_path}")
        print(f"\nGenerated at: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")

    except FileNotFoundError as exc:
        print(f"Error: File not found: {exc}")
        sys.exit(1)
    except json.JSONDecodeError as exc:
        print(f"Error: Invalid JSON file: {exc}")
        sys.exit(1)
    except Exception as exc:
        print(f"Error: {exc}")
        import traceback
        traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
