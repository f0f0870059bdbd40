import os
import unittest
from pathlib import Path
from unittest import mock

from analytics.config import AppConfig, _env_bool


class ConfigTests(unittest.TestCase):
    def test_defaults(self):
        names = ("OUTPUT_FOLDER", "CHANNEL_NAME", "SORT_BY_PUBLISH_DATE", "EXPORT_EXCEL", "CSV_ENCODING")
        env = {key: value for key, value in os.environ.items() if key not in names}
        with mock.patch.dict(os.environ, env, clear=True):
            config = AppConfig.from_env()

        self.assertEqual(config.output_folder, str(Path.cwd() / ".tmp" / "creator_audits"))
        self.assertEqual(config.channel_name, "My Channel")
        self.assertFalse(config.sort_by_publish_date)
        self.assertTrue(config.export_excel)
        self.assertEqual(config.csv_encoding, "utf-8-sig")

    def test_overrides_from_environment(self):
        with mock.patch.dict(
            os.environ,
            {"OUTPUT_FOLDER": "/srv/audits", "SORT_BY_PUBLISH_DATE": "yes", "EXPORT_EXCEL": "0"},
        ):
            config = AppConfig.from_env()

        self.assertEqual(config.output_folder, "/srv/audits")
        self.assertTrue(config.sort_by_publish_date)
        self.assertFalse(config.export_excel)

    def test_env_bool(self):
        with mock.patch.dict(os.environ, {"FLAG_ON": " True ", "FLAG_OFF": "nope"}):
            self.assertTrue(_env_bool("FLAG_ON"))
            self.assertFalse(_env_bool("FLAG_OFF", True))
        self.assertTrue(_env_bool("SURELY_UNSET_FLAG_NAME", True))


if __name__ == "__main__":
    unittest.main()
