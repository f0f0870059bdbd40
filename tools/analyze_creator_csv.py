#!/usr/bin/env python3
"""
Creator CSV Analyzer
Analyzes a per-video analytics export and generates a stagnation audit

Performs 4 analysis modules:
1. Channel Health (views / retention / CTR trends, churn risk)
2. Format Breakdown (per-format retention and trend)
3. Weekly Trend (up to 12 chart points)
4. Strategy (format mix, positioning, frequency, 4-week calendar, impact)

Usage:
    python3 analyze_creator_csv.py path/to/export.csv [path/to/formats.json]
    python3 analyze_creator_csv.py --demo

formats.json maps a row index (0-based, after empty-view rows are dropped)
to a format label. The key "*" tags every video with one format first.
"""

import csv
import json
import sys
from pathlib import Path

from analytics.config import AppConfig
from analytics.errors import CreatorAnalyticsError
from analytics.pipeline import analyze_demo, analyze_rows


def load_rows(csv_path, encoding="utf-8-sig"):
    """Read a CSV export into a list of header -> cell dictionaries."""
    with open(csv_path, "r", encoding=encoding, newline="") as f:
        reader = csv.DictReader(f)
        # Cells beyond the header row land under a None key; drop them.
        return [{key: value for key, value in row.items() if key is not None} for row in reader]


def load_format_choices(formats_path):
    """Split a formats.json file into (batch_format, overrides)."""
    with open(formats_path, "r", encoding="utf-8") as f:
        raw = json.load(f)

    batch_format = raw.pop("*", None)
    overrides = {int(index): format_name for index, format_name in raw.items()}
    return batch_format, overrides


def print_summary(analysis):
    metrics = analysis["metrics"]
    print("\n✅ Analysis complete!")
    print(f"📊 Channel Health Score: {metrics['healthScore']}/10 ({metrics['healthLabel']})")
    print(f"📉 Churn Risk (60-day): {metrics['churn']}%")
    print(f"👀 Views Trend: {metrics['vt']}%")
    print(f"⏱️ Retention Trend: {metrics['rt']}%")
    print(f"🖱️ CTR Trend: {metrics['ct']}%")
    print(f"🎬 Formats Analyzed: {len(analysis['formats'])}")
    print(f"   - Growing: {len(analysis['growingFormats'])}")
    print(f"   - Declining: {len(analysis['decliningFormats'])}")
    print(f"🏆 Best Format: {analysis['bestFormat']['name']} ({analysis['bestFormat']['retention']}% retention)")


def run_analysis(csv_path, formats_path=None, config=None):
    """Analyze one export and return the result document as a dict."""
    config = config or AppConfig.from_env()

    print(f"📂 Loading data from: {csv_path}")
    rows = load_rows(csv_path, encoding=config.csv_encoding)

    batch_format, overrides = (None, {})
    if formats_path:
        print(f"🏷️  Loading format choices from: {formats_path}")
        batch_format, overrides = load_format_choices(formats_path)

    print("\n🔬 Creator Stagnation Analysis")
    print("=" * 50)
    result = analyze_rows(
        rows,
        overrides=overrides,
        batch_format=batch_format,
        sort_by_publish_date=config.sort_by_publish_date,
    )
    for column in result.detected_columns:
        print(f"   Detected {column}")

    analysis = result.to_dict()
    print_summary(analysis)
    return analysis


def main():
    """Main execution function"""
    if len(sys.argv) not in (2, 3):
        print("❌ Error: Missing data file path")
        print("\nUsage:")
        print("  python3 analyze_creator_csv.py path/to/export.csv [path/to/formats.json]")
        print("  python3 analyze_creator_csv.py --demo")
        sys.exit(1)

    config = AppConfig.from_env()

    try:
        if sys.argv[1] == "--demo":
            print("🧪 Using demonstration channel data")
            analysis = analyze_demo().to_dict()
            print_summary(analysis)
            output_dir = Path(config.output_folder) / "demo"
        else:
            data_path = Path(sys.argv[1])
            if not data_path.exists():
                print(f"❌ Error: File not found: {data_path}")
                sys.exit(1)
            formats_path = sys.argv[2] if len(sys.argv) == 3 else None
            analysis = run_analysis(data_path, formats_path, config)
            output_dir = data_path.parent

        output_dir.mkdir(parents=True, exist_ok=True)
        output_file = output_dir / "analysis.json"
        with open(output_file, "w", encoding="utf-8") as f:
            json.dump(analysis, f, indent=2, ensure_ascii=False)

        print(f"\n📁 Analysis saved to: {output_file}")
        print("\nNext step:")
        print(f"  python3 tools/generate_markdown_report.py {output_file}")

    except CreatorAnalyticsError as e:
        print(f"❌ Error: {e}")
        sys.exit(1)
    except json.JSONDecodeError as e:
        print(f"❌ Error: Invalid JSON file: {e}")
        sys.exit(1)
    except Exception as e:
        print(f"❌ Error: {e}")
        import traceback
        traceback.print_exc()
        sys.exit(1)


if __name__ == '__main__':
    main()
