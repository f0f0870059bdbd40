"""Configuration for the creator stagnation audit."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()



def _env_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class AppConfig:
    output_folder: str
    channel_name: str
    sort_by_publish_date: bool
    export_excel: bool
    csv_encoding: str

    @staticmethod
    def from_env() -> "AppConfig":
        output_folder = Path(os.getenv("OUTPUT_FOLDER", ".tmp/creator_audits"))
        if not output_folder.is_absolute():
            output_folder = Path.cwd() / output_folder

        return AppConfig(
            output_folder=str(output_folder),
            channel_name=os.getenv("CHANNEL_NAME", "My Channel"),
            sort_by_publish_date=_env_bool("SORT_BY_PUBLISH_DATE", False),
            export_excel=_env_bool("EXPORT_EXCEL", True),
            csv_encoding=os.getenv("CSV_ENCODING", "utf-8-sig"),
        )
