import os
import shutil
import sys

from analytics.config import AppConfig
from analytics.demo_data import DEMO_CHANNEL_NAME
from analytics.errors import CreatorAnalyticsError
from analytics.runner import channel_slug, run_audit_pipeline


def copy_to_reports(source, target, label):
    if source and os.path.exists(source):
        try:
            shutil.copy(source, target)
            print(f"✨ Final {label} copied to: {target}")
        except OSError as e:
            print(f"⚠️ Could not copy {label} to reports/ archive: {e}")


def main():
    if len(sys.argv) < 2:
        print("Usage: python3 main.py \"path/to/export.csv\" [\"Channel Name\"]")
        print("       python3 main.py --demo")
        sys.exit(1)

    config = AppConfig.from_env()

    if sys.argv[1] == "--demo":
        csv_path = None
        channel_name = DEMO_CHANNEL_NAME
    else:
        csv_path = sys.argv[1]
        if not os.path.exists(csv_path):
            print(f"❌ File not found: {csv_path}")
            sys.exit(1)
        channel_name = sys.argv[2] if len(sys.argv) > 2 else config.channel_name

    # Ensure reports directory exists
    os.makedirs("reports", exist_ok=True)

    try:
        result = run_audit_pipeline(
            csv_path,
            config.output_folder,
            channel_name=channel_name,
            sort_by_publish_date=config.sort_by_publish_date,
            export_excel=config.export_excel,
            csv_encoding=config.csv_encoding,
            logger=print,
        )
    except CreatorAnalyticsError as e:
        print(f"❌ {e}")
        sys.exit(1)

    summary = result["summary"]
    print(f"\n📊 Health Score: {summary['health_score']}/10 ({summary['health_label']})")
    print(f"📉 Churn Risk: {summary['churn_risk']}%")

    slug = channel_slug(channel_name)
    print()
    copy_to_reports(result["markdown_path"], f"reports/{slug}_report.md", "report")
    copy_to_reports(result["excel_path"], f"reports/{slug}_audit.xlsx", "Excel audit")

    print("\n✅ Audit Pipeline Complete!")

if __name__ == "__main__":
    main()
