#!/usr/bin/env python3
"""
Markdown Report Generator
Generates the content strategy audit in markdown format

Usage:
    python3 generate_markdown_report.py path/to/analysis.json [channel name]
"""

import sys
import json
from pathlib import Path
from datetime import datetime

from analytics.metrics import format_number as plain


def signed(value):
    """Trend values as shown in the report: +12.5 / -3 / 0."""
    return f"+{plain(value)}" if value > 0 else plain(value)


class MarkdownReportGenerator:
    def __init__(self, analysis, channel_name="My Channel"):
        """Initialize generator with the analysis document"""
        self.analysis = analysis
        self.channel_name = channel_name
        self.metrics = analysis.get("metrics", {})
        self.strategy = analysis.get("strategy", {})

    def generate_header(self):
        """Generate report header"""
        date_str = datetime.now().strftime('%B %d, %Y')

        return f"""# Content Strategy Audit
**Channel:** {self.channel_name}
**Date:** {date_str}
**Videos Analyzed:** {len(self.analysis.get('videos', []))}

---

"""

    def generate_executive_summary(self):
        """Generate channel pulse check section"""
        health_score = self.metrics.get("healthScore", 0)
        label = self.metrics.get("healthLabel", "")

        if health_score >= 8:
            icon = "🟢"
        elif health_score >= 5:
            icon = "🟡"
        elif health_score >= 3:
            icon = "🟠"
        else:
            icon = "🔴"

        return f"""## Channel Pulse Check

### Channel Health Score: {plain(health_score)}/10 ({label} {icon})

**Key Signals:**
- Churn Risk (60-day): {self.metrics.get('churn', 0)}%
- Views Trend: {signed(self.metrics.get('vt', 0))}%
- Retention Trend: {signed(self.metrics.get('rt', 0))}%
- CTR Trend: {signed(self.metrics.get('ct', 0))}%

**Recent Averages (second half of the window):**
- Avg views: {int(self.metrics.get('avgViews', 0)):,}
- Avg retention: {plain(self.metrics.get('avgRet', 0))}%
- Avg CTR: {plain(self.metrics.get('avgCtr', 0))}%

*This analysis is data-driven, not professional consulting advice. Actual results will vary.*

---

"""

    def generate_content_gap(self):
        """Generate growing vs declining formats"""
        text = "## What's Working vs What's Declining\n\n"

        text += "### 📈 Growing Formats\n\n"
        growing = self.analysis.get("growingFormats", [])
        if not growing:
            text += "- No clear growth signal\n"
        for item in growing[:4]:
            text += f"- **{item['name']}** · Retention: {plain(item['retention'])}% · Trend: +{item['trend']}%\n"

        text += "\n### 📉 Declining Formats\n\n"
        declining = self.analysis.get("decliningFormats", [])
        if not declining:
            text += "- No formats critically declining\n"
        for item in declining[:4]:
            text += f"- **{item['name']}** · Retention: {plain(item['retention'])}% · Trend: {item['trend']}%\n"

        text += "\n---\n\n"
        return text

    def generate_format_breakdown(self):
        """Generate per-format performance table and recommendation"""
        text = "## Performance by Content Type\n\n"
        text += "| Format | Videos | Avg Retention | Avg Views | Trend |\n"
        text += "|--------|--------|---------------|-----------|-------|\n"

        for item in self.analysis.get("formats", []):
            name = item.get("name", "").replace("|", "/")
            text += (
                f"| {name} | {item.get('count', 0)} | {plain(item.get('retention', 0))}% | "
                f"{item.get('views', 0) / 1000:.1f}K | {signed(item.get('trend', 0))}% |\n"
            )

        guidance = self.strategy.get("format", {})
        text += f"""
**Recommendation:**
- **START:** {guidance.get('do', 'N/A')}
- **STOP:** {guidance.get('stop', 'N/A')}
- **TARGET RATIO:** {guidance.get('ratio', 'N/A')}

---

"""
        return text

    def generate_positioning(self):
        """Generate positioning and posting frequency"""
        positioning = self.strategy.get("positioning", {})
        frequency = self.strategy.get("frequency", {})

        return f"""## Positioning & Frequency

### 🎯 Positioning
- **Current:** {positioning.get('current', 'N/A')}
- **Pivot:** {positioning.get('pivot', 'N/A')}
- **Hook:** {positioning.get('hook', 'N/A')}

### 📅 Posting Frequency
- **Current:** {frequency.get('current', 'N/A')}
- **Recommended:** {frequency.get('recommended', 'N/A')}
- **Why:** {frequency.get('reason', 'N/A')}

---

"""

    def generate_opportunities(self):
        """Generate missed opportunities list"""
        text = "## Where To Focus Next\n\n"
        text += "Based on format and retention trends. Validate with free tools before committing.\n\n"

        for i, line in enumerate(self.strategy.get("opportunities", [])[:4], 1):
            text += f"{i:02d}. {line}\n"

        text += "\n**Free validation tools:** Google Trends · YouTube Search Suggest · vidIQ (free) · TubeBuddy (free)\n"
        text += "\n---\n\n"
        return text

    def generate_calendar(self):
        """Generate the 4-week content calendar"""
        text = "## Your Content Calendar\n\n"
        text += "*Suggested starting points, not guarantees. Adapt based on your expertise.*\n\n"

        for entry in self.strategy.get("calendar", []):
            text += f"""### {entry.get('wk', '')}: {entry.get('format', '')}
**{entry.get('title', '')}**

{entry.get('why', '')}

"""
        text += "---\n\n"
        return text

    def generate_impact(self):
        """Generate projected impact section"""
        impact = self.strategy.get("impact", {})

        return f"""## What To Expect

*Directional estimates, not predictions. Based on your historical format performance.*

| Expected View Lift | Retention Target | Subscriber Growth |
|--------------------|------------------|-------------------|
| {impact.get('viewLift', 'N/A')} | {impact.get('retTarget', 'N/A')} | {impact.get('subGrowth', 'N/A')} |

---

"""

    def generate_weekly_trend(self):
        """Generate weekly trend table"""
        text = "## Weekly Trend\n\n"
        text += "| Week | Avg Views | Avg Retention |\n"
        text += "|------|-----------|---------------|\n"

        for point in self.analysis.get("weeklyData", []):
            text += f"| {point.get('week', '')} | {int(point.get('views', 0)):,} | {plain(point.get('retention', 0))}% |\n"

        text += "\n---\n\n"
        return text

    def generate_methodology(self):
        """Generate methodology appendix"""
        detected = self.analysis.get("detectedColumns", [])
        columns = ", ".join(detected) if detected else "Pre-tagged dataset"

        text = """## Methodology

1. **Analysis Window**
   - The 50 most recent videos are analyzed and split into an older and a newer half

2. **Channel Health**
   - Views, retention and CTR trends compare the newer half against the older half
   - Only declining trends reduce the score (weights: views 40%, retention 40%, CTR 20%)
   - Health score runs from 10 (healthy) to 0 (critical stagnation); churn risk is capped at 95%

3. **Format Breakdown**
   - Formats come from title keywords, overridden by the creator's own tagging
   - A format is growing above +5% retention trend and declining below -5%

**Detected Columns:** """ + columns + """
**Analysis Date:** """ + datetime.now().strftime('%B %d, %Y') + """

---

"""
        return text

    def generate_footer(self):
        """Generate report footer"""
        return f"""## Next Steps

1. **Start with Week 1** and validate the topic with YouTube Search Suggest
2. **Track retention and views** weekly in YouTube Studio
3. **Re-run this audit in 4 weeks** to measure improvement

---

**Report Generated:** {datetime.now().strftime('%B %d, %Y at %I:%M %p')}
"""

    def generate(self):
        """Generate complete markdown report"""
        print("📝 Generating markdown report...")

        report = ""
        report += self.generate_header()
        report += self.generate_executive_summary()
        report += self.generate_content_gap()
        report += self.generate_format_breakdown()
        report += self.generate_positioning()
        report += self.generate_opportunities()
        report += self.generate_calendar()
        report += self.generate_impact()
        report += self.generate_weekly_trend()
        report += self.generate_methodology()
        report += self.generate_footer()

        print("✅ Report generated successfully!")

        return report


def main():
    """Main execution function"""
    if len(sys.argv) not in (2, 3):
        print("❌ Error: Missing analysis file")
        print("\nUsage:")
        print("  python3 generate_markdown_report.py path/to/analysis.json [channel name]")
        sys.exit(1)

    analysis_file = sys.argv[1]
    channel_name = sys.argv[2] if len(sys.argv) == 3 else "My Channel"

    try:
        print("📂 Loading analysis file...")
        with open(analysis_file, 'r', encoding='utf-8') as f:
            analysis = json.load(f)

        print("\n🚀 Generating Markdown Report")
        print("=" * 50)

        generator = MarkdownReportGenerator(analysis, channel_name)
        report = generator.generate()

        output_path = Path(analysis_file).parent / 'report.md'
        with open(output_path, 'w', encoding='utf-8') as f:
            f.write(report)

        print("\n" + "=" * 50)
        print("✅ SUCCESS!")
        print(f"📁 Report saved to: {output_path}")
        print("\n📄 Report Preview:")
        print("=" * 50)
        print(report[:1000] + "\n\n... (truncated for display)\n")

    except FileNotFoundError as e:
        print(f"❌ Error: File not found: {e}")
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
