from __future__ import annotations

import time
import unittest

from navi.formatting import format_date, format_size


class FormattingTests(unittest.TestCase):
    def test_format_size(self) -> None:
        self.assertEqual(format_size(0), "0 B")
        self.assertEqual(format_size(1023), "1023 B")
        self.assertEqual(format_size(1024), "1.0 KB")
        self.assertEqual(format_size(1536), "1.5 KB")
        self.assertEqual(format_size(1024 * 1024), "1.0 MB")
        self.assertEqual(format_size(5 * 1024**3), "5.0 GB")

    def test_format_date_uses_month_day_year_time(self) -> None:
        stamp = time.mktime((2006, 1, 2, 15, 4, 0, 0, 0, -1))

        self.assertEqual(format_date(stamp), "Jan 02 2006 15:04")


if __name__ == "__main__":
    unittest.main()
