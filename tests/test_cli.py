from __future__ import annotations

import io
import unittest
from contextlib import redirect_stdout
from unittest import mock

from navi import __version__, cli
from navi.config import Settings


class CliTests(unittest.TestCase):
    def test_version_flag(self) -> None:
        out = io.StringIO()
        with redirect_stdout(out), self.assertRaises(SystemExit) as ctx:
            cli.main(["--version"])

        self.assertEqual(ctx.exception.code, 0)
        self.assertIn(__version__, out.getvalue())

    def test_unknown_flag_is_rejected(self) -> None:
        with mock.patch("sys.stderr", new_callable=io.StringIO), self.assertRaises(SystemExit) as ctx:
            cli.main(["--bogus"])

        self.assertEqual(ctx.exception.code, 2)

    def test_requires_interactive_stdin(self) -> None:
        with mock.patch("navi.cli.sys.stdin") as stdin_mock, mock.patch("navi.cli.run_browser") as run_mock:
            stdin_mock.isatty.return_value = False
            with self.assertRaises(SystemExit):
                cli.main([])

        run_mock.assert_not_called()

    def test_runs_browser_with_loaded_settings(self) -> None:
        settings = Settings(show_splash=False)
        with mock.patch("navi.cli.sys.stdin") as stdin_mock, mock.patch(
            "navi.cli.load_settings", return_value=settings
        ), mock.patch("navi.cli.configure_logging") as logging_mock, mock.patch(
            "navi.cli.run_browser"
        ) as run_mock:
            stdin_mock.isatty.return_value = True
            cli.main([])

        logging_mock.assert_called_once_with(None)
        run_mock.assert_called_once_with(settings)


if __name__ == "__main__":
    unittest.main()
