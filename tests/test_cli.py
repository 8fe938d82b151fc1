"""End-to-end tests for the Typer CLI with git calls stubbed out."""

from __future__ import annotations

import json
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from typer.testing import CliRunner

from git_radar import __version__
from git_radar.cli import app
from git_radar.exceptions import BulkCommandError, StatusQueryError
from git_radar.models import BulkOperation

STATUS_OUTPUTS = {
    "api": "## main...origin/main [ahead 2, behind 1]\n M file.txt\n",
    "docs": "## main...origin/main\n",
    "web": "## dev\n?? new.txt\n",
}


def _fake_status(path: Path, git: str = "git") -> str:
    if path.name == "broken":
        raise StatusQueryError([git, "status"], 128)
    return STATUS_OUTPUTS[path.name]


class CliTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name)
        for name in (*STATUS_OUTPUTS, "broken"):
            (self.root / name / ".git").mkdir(parents=True)
        (self.root / "not-a-repo").mkdir()
        self.runner = CliRunner()
        patcher = mock.patch("git_radar.cli.status_porcelain", side_effect=_fake_status)
        patcher.start()
        self.addCleanup(patcher.stop)

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def test_lists_all_repositories(self) -> None:
        result = self.runner.invoke(app, [str(self.root)])

        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("Radar", result.output)
        self.assertIn("api", result.output)
        self.assertIn("(main) ~1 ↑2 ↓1", result.output)
        self.assertIn("(dev) +1", result.output)
        self.assertIn("docs", result.output)
        self.assertNotIn("broken", result.output)
        self.assertNotIn("not-a-repo", result.output)

    def test_show_clean(self) -> None:
        result = self.runner.invoke(app, [str(self.root), "--show", "clean", "--json"])

        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual([item["name"] for item in json.loads(result.output)], ["docs"])

    def test_show_unclean(self) -> None:
        result = self.runner.invoke(app, [str(self.root), "--show", "unclean", "--json"])

        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(sorted(item["name"] for item in json.loads(result.output)), ["api", "web"])

    def test_filter_line_in_header(self) -> None:
        result = self.runner.invoke(app, [str(self.root), "--show", "unclean"])

        self.assertIn("Filtering: unclean", result.output)

    def test_table_output(self) -> None:
        result = self.runner.invoke(app, [str(self.root), "--table"])

        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("REPOSITORY", result.output)
        self.assertIn("REMOTE", result.output)

    def test_invalid_show_value(self) -> None:
        result = self.runner.invoke(app, [str(self.root), "--show", "dirty"])

        self.assertNotEqual(result.exit_code, 0)

    def test_missing_directory_is_fatal(self) -> None:
        result = self.runner.invoke(app, [str(self.root / "nope")])

        self.assertEqual(result.exit_code, 1)
        self.assertIn("Error:", result.output)

    def test_non_positive_interval_is_rejected(self) -> None:
        result = self.runner.invoke(app, [str(self.root), "--watch", "--interval", "0"])

        self.assertEqual(result.exit_code, 2)

    def test_version(self) -> None:
        result = self.runner.invoke(app, ["--version"])

        self.assertEqual(result.exit_code, 0)
        self.assertIn(f"git-radar {__version__}", result.output)


class BulkCliTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name)
        for name in ("one", "two", "three"):
            (self.root / name / ".git").mkdir(parents=True)
        self.runner = CliRunner()
        self.calls: list[tuple[str, BulkOperation]] = []

        def fake_run(path: Path, operation: BulkOperation, git: str = "git") -> None:
            self.calls.append((path.name, operation))
            if path.name == "two":
                raise BulkCommandError([git, operation.value], 1, stderr="rejected")

        patcher = mock.patch("git_radar.cli.run_operation", side_effect=fake_run)
        patcher.start()
        self.addCleanup(patcher.stop)

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def test_pull_reports_each_repository_and_total(self) -> None:
        result = self.runner.invoke(app, [str(self.root), "--pull"])

        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(sorted(name for name, _ in self.calls), ["one", "three", "two"])
        self.assertIn("OK [pull]:", result.output)
        self.assertIn("FAIL [pull]:", result.output)
        self.assertIn("Total: 2 successful, 1 failed", result.output)

    def test_only_the_highest_priority_operation_runs(self) -> None:
        result = self.runner.invoke(app, [str(self.root), "--push", "--pull", "--fetch", "--json"])

        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual({operation for _, operation in self.calls}, {BulkOperation.FETCH})
        payload = json.loads(result.output)
        self.assertEqual(payload["operation"], "fetch")
        self.assertEqual((payload["successful"], payload["failed"]), (2, 1))


if __name__ == "__main__":
    unittest.main()
