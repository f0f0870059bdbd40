"""Audit runner wrapper around the analysis and report tool modules."""

from __future__ import annotations

import io
import json
import re
from contextlib import redirect_stdout
from pathlib import Path
from typing import Callable, Dict, Mapping, Optional

from analytics.pipeline import analyze_demo, analyze_rows
from tools.analyze_creator_csv import load_rows
from tools.export_to_excel import ExcelExporter
from tools.generate_markdown_report import MarkdownReportGenerator



def channel_slug(channel_name: str) -> str:
    slug = re.sub(r"[^A-Za-z0-9]+", "_", channel_name.strip()).strip("_")
    return slug or "channel"



def _emit(logger: Optional[Callable[[str], None]], message: str) -> None:
    if logger:
        logger(message)



def _capture_step(logger: Optional[Callable[[str], None]], step_name: str, fn) -> None:
    _emit(logger, f"\n[{step_name}] starting...")
    buffer = io.StringIO()
    with redirect_stdout(buffer):
        fn()
    output = buffer.getvalue().strip()
    if output:
        _emit(logger, output)
    _emit(logger, f"[{step_name}] complete")



def extract_summary_metrics(analysis: Dict) -> Dict:
    metrics = analysis.get("metrics", {})
    best = analysis.get("bestFormat") or {}
    return {
        "health_score": float(metrics.get("healthScore", 0)),
        "health_label": metrics.get("healthLabel", ""),
        "churn_risk": int(metrics.get("churn", 0)),
        "videos_analyzed": len(analysis.get("videos", [])),
        "formats_analyzed": len(analysis.get("formats", [])),
        "growing_formats": len(analysis.get("growingFormats", [])),
        "declining_formats": len(analysis.get("decliningFormats", [])),
        "best_format": best.get("name", ""),
    }



def run_audit_pipeline(
    csv_path: Optional[str],
    output_folder: str,
    channel_name: str = "My Channel",
    overrides: Optional[Mapping[int, str]] = None,
    batch_format: Optional[str] = None,
    sort_by_publish_date: bool = False,
    export_excel: bool = True,
    csv_encoding: str = "utf-8-sig",
    logger: Optional[Callable[[str], None]] = None,
) -> Dict:
    """Run the full audit and return paths/summary metadata.

    ``csv_path=None`` analyzes the demonstration channel.
    """
    output_root = Path(output_folder) / channel_slug(channel_name)
    output_root.mkdir(parents=True, exist_ok=True)

    _emit(logger, f"Running audit for: {channel_name}")

    analysis_holder: Dict = {}

    if csv_path is None:
        _emit(logger, "Using demonstration channel data")

        def do_analysis():
            analysis_holder["data"] = analyze_demo().to_dict()
    else:
        rows = load_rows(csv_path, encoding=csv_encoding)
        _emit(logger, f"Loaded {len(rows)} rows from: {csv_path}")

        def do_analysis():
            result = analyze_rows(
                rows,
                overrides=overrides,
                batch_format=batch_format,
                sort_by_publish_date=sort_by_publish_date,
            )
            for column in result.detected_columns:
                print(f"Detected {column}")
            analysis_holder["data"] = result.to_dict()

    _capture_step(logger, "Analyze Videos", do_analysis)
    analysis_data = analysis_holder["data"]

    analysis_path = output_root / "analysis.json"
    with analysis_path.open("w", encoding="utf-8") as analysis_file:
        json.dump(analysis_data, analysis_file, indent=2, ensure_ascii=False)

    _emit(logger, f"Analysis saved: {analysis_path}")

    excel_path = None
    if export_excel:
        excel_path = output_root / "audit_report.xlsx"

        def do_excel_export():
            ExcelExporter(analysis_data, channel_name).export(excel_path)

        _capture_step(logger, "Export Excel", do_excel_export)

    markdown_path = output_root / "report.md"

    def do_markdown():
        generator = MarkdownReportGenerator(analysis_data, channel_name)
        markdown_path.write_text(generator.generate(), encoding="utf-8")

    _capture_step(logger, "Generate Markdown", do_markdown)

    return {
        "channel_name": channel_name,
        "analysis_path": str(analysis_path),
        "excel_path": str(excel_path) if excel_path else "",
        "markdown_path": str(markdown_path),
        "summary": extract_summary_metrics(analysis_data),
    }
