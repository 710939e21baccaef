from __future__ import annotations

import unittest
from pathlib import Path

from navi.ansi import strip_ansi
from navi.highlight import colorize_preview


class HighlightTests(unittest.TestCase):
    def test_python_source_is_colored_without_changing_text(self) -> None:
        source = "def f():\n    return 1"

        rendered = colorize_preview(source, Path("mod.py"))

        self.assertIn("\x1b[", rendered)
        self.assertEqual(strip_ansi(rendered), source)

    def test_unknown_extension_is_left_plain(self) -> None:
        self.assertEqual(colorize_preview("just words", Path("notes.unknownext")), "just words")

    def test_invalid_style_falls_back(self) -> None:
        rendered = colorize_preview("x = 1\n", Path("a.py"), style="no-such-style")

        self.assertEqual(strip_ansi(rendered), "x = 1\n")


if __name__ == "__main__":
    unittest.main()
