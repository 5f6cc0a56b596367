"""CLI argument, output, and failure-exit tests.

Verifies how ``sizetree.cli.main`` prints a built tree and reports
filesystem errors without printing a partial tree.
"""

from __future__ import annotations

import io
import sys
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from sizetree import cli


class CliTests(unittest.TestCase):
    def test_main_prints_rendered_tree_for_directory_argument(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp) / "project"
            root.mkdir()
            (root / "only.txt").write_text("hi\n", encoding="utf-8")

            stdout = io.StringIO()
            with mock.patch.object(sys, "argv", ["sizetree", str(root)]), mock.patch("sys.stdout", stdout):
                cli.main()

            self.assertEqual(stdout.getvalue(), "project\n │ └only.txt\n")

    def test_main_exits_with_message_and_no_output_for_missing_path(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            missing = Path(tmp) / "missing"

            stdout = io.StringIO()
            with (
                mock.patch.object(sys, "argv", ["sizetree", str(missing)]),
                mock.patch("sys.stdout", stdout),
            ):
                with self.assertRaises(SystemExit) as exc_info:
                    cli.main()

            message = str(exc_info.exception)
            self.assertTrue(message.startswith("sizetree: "))
            self.assertIn(str(missing), message)
            self.assertIsInstance(exc_info.exception.__cause__, FileNotFoundError)
            self.assertEqual(stdout.getvalue(), "")

    def test_main_reports_builder_error_without_partial_output(self) -> None:
        stdout = io.StringIO()
        failure = PermissionError(13, "Permission denied", b"/data/locked")
        with (
            mock.patch.object(sys, "argv", ["sizetree", "/data"]),
            mock.patch("sizetree.cli.build_file_tree", side_effect=failure),
            mock.patch("sys.stdout", stdout),
        ):
            with self.assertRaises(SystemExit) as exc_info:
                cli.main()

        self.assertEqual(str(exc_info.exception), "sizetree: /data/locked: Permission denied")
        self.assertEqual(stdout.getvalue(), "")

    def test_main_requires_exactly_one_positional_argument(self) -> None:
        with mock.patch.object(sys, "argv", ["sizetree"]), mock.patch("sys.stderr", io.StringIO()):
            with self.assertRaises(SystemExit) as exc_info:
                cli.main()

        self.assertEqual(exc_info.exception.code, 2)


if __name__ == "__main__":
    unittest.main()
