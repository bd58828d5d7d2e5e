import tempfile
import unittest
from pathlib import Path

from pocketkit import config
from pocketkit.settings_schema import ConsoleSettings, load_settings, save_settings


class ConsoleSettingsTests(unittest.TestCase):
    def test_round_trip(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "settings.json"
            settings = ConsoleSettings(use_color=False, fallback_columns=132, fallback_lines=50)
            self.assertEqual(save_settings(settings, path), path)
            self.assertEqual(load_settings(path), settings)

    def test_missing_file_uses_defaults(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            settings = load_settings(Path(tmp) / "absent.json")
        self.assertEqual(settings, ConsoleSettings())
        self.assertEqual(settings.fallback_columns, config.DEFAULT_FALLBACK_COLUMNS)

    def test_invalid_json_uses_defaults(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "broken.json"
            path.write_text("{not json")
            self.assertEqual(load_settings(path), ConsoleSettings())

    def test_partial_payload(self) -> None:
        settings = ConsoleSettings.from_json({"fallback_lines": "60"})
        self.assertEqual(settings.fallback_lines, 60)
        self.assertEqual(settings.use_color, config.DEFAULT_USE_COLOR)

    def test_bad_value(self) -> None:
        with self.assertRaises(ValueError):
            ConsoleSettings.from_json({"fallback_columns": "wide"})

    def test_use_color_requires_json_boolean(self) -> None:
        self.assertFalse(ConsoleSettings.from_json({"use_color": False}).use_color)
        for value in ("false", "0", 0, 1, None):
            with self.subTest(value=value):
                with self.assertRaises(ValueError):
                    ConsoleSettings.from_json({"use_color": value})

    def test_boolean_is_not_an_integer(self) -> None:
        with self.assertRaises(ValueError):
            ConsoleSettings.from_json({"fallback_lines": True})

    def test_hand_edited_file_with_string_flag(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "settings.json"
            path.write_text('{"use_color": "false"}')
            with self.assertRaises(ValueError):
                load_settings(path)


if __name__ == "__main__":
    unittest.main()
