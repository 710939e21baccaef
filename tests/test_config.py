from __future__ import annotations

import json
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from navi import config


class ConfigBehaviorTests(unittest.TestCase):
    def load(self, payload: str | None, environ: dict[str, str] | None = None) -> config.Settings:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            if payload is not None:
                config_path.write_text(payload, encoding="utf-8")
            with mock.patch("navi.config.CONFIG_PATH", config_path):
                return config.load_settings(environ or {})

    def test_missing_file_gives_defaults(self) -> None:
        self.assertEqual(self.load(None), config.Settings())

    def test_malformed_or_non_object_json_gives_defaults(self) -> None:
        self.assertEqual(self.load("{not json"), config.Settings())
        self.assertEqual(self.load("[1, 2]"), config.Settings())

    def test_values_are_read(self) -> None:
        settings = self.load(
            json.dumps(
                {
                    "preview_supported": False,
                    "preview_enabled": True,
                    "status_seconds": 5,
                    "delete_confirm_seconds": 1.5,
                    "show_splash": False,
                    "style": "native",
                    "log_file": "~/navi.log",
                }
            )
        )

        self.assertFalse(settings.preview_supported)
        self.assertTrue(settings.preview_enabled)
        self.assertEqual(settings.status_seconds, 5.0)
        self.assertEqual(settings.delete_confirm_seconds, 1.5)
        self.assertFalse(settings.show_splash)
        self.assertEqual(settings.style, "native")
        self.assertEqual(settings.log_file, Path("~/navi.log").expanduser())

    def test_mistyped_values_fall_back(self) -> None:
        settings = self.load(
            json.dumps(
                {
                    "preview_enabled": "yes",
                    "status_seconds": -1,
                    "delete_confirm_seconds": True,
                    "style": 3,
                    "log_file": "",
                }
            )
        )

        self.assertEqual(settings, config.Settings())

    def test_no_color_environment_variable(self) -> None:
        self.assertTrue(self.load(None, {"NO_COLOR": ""}).no_color)
        self.assertTrue(self.load('{"no_color": true}').no_color)

    def test_config_file_is_never_written(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "nested" / "config.json"
            with mock.patch("navi.config.CONFIG_PATH", config_path):
                config.load_settings({})

            self.assertFalse(config_path.parent.exists())


if __name__ == "__main__":
    unittest.main()
