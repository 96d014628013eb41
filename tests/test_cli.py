import io
import json
import logging
import unittest
from contextlib import redirect_stderr, redirect_stdout

from gridmaze import cli


class CliTests(unittest.TestCase):
    def setUp(self) -> None:
        root = logging.getLogger()
        self._handlers = root.handlers[:]
        self._level = root.level

    def tearDown(self) -> None:
        root = logging.getLogger()
        for handler in root.handlers:
            if handler not in self._handlers:
                handler.close()
        root.handlers = self._handlers
        root.setLevel(self._level)

    def run_cli(self, *argv: str) -> dict:
        stdout = io.StringIO()
        with redirect_stdout(stdout), redirect_stderr(io.StringIO()):
            cli.main(["--log-level", "ERROR", *argv])
        return json.loads(stdout.getvalue())

    def assertExits(self, *argv: str) -> str:
        stderr = io.StringIO()
        with redirect_stderr(stderr), redirect_stdout(io.StringIO()):
            with self.assertRaises(SystemExit) as caught:
                cli.main(["--log-level", "ERROR", *argv])
        self.assertEqual(caught.exception.code, 2)
        return stderr.getvalue()

    def test_report_for_fixed_endpoints(self) -> None:
        report = self.run_cli(
            "--generator", "kruskal",
            "--search", "astar",
            "--width", "11",
            "--height", "11",
            "--start", "1", "1",
            "--target", "9", "9",
            "--seed", "4",
            "--show",
        )
        self.assertEqual(report["grid"]["width"], 11)
        self.assertEqual(report["generation"]["algorithm"], "Kruskal")
        self.assertTrue(report["generation"]["completed"])
        search = report["search"]
        self.assertTrue(search["reached"])
        self.assertEqual(search["path"][0], [9, 9])
        self.assertEqual(search["distance"], len(search["path"]))
        rows = report["rows"]
        self.assertEqual(rows[1][1], "S")
        self.assertEqual(rows[9][9], "T")
        self.assertEqual(sum(row.count("*") for row in rows), search["distance"] - 1)

    def test_random_endpoints_in_a_perfect_maze_are_connected(self) -> None:
        report = self.run_cli("--seed", "11")
        self.assertEqual(report["grid"]["width"], 15)
        self.assertEqual(report["generation"]["algorithm"], "Recursive Backtracking")
        self.assertTrue(report["search"]["reached"])
        self.assertNotEqual(report["search"]["start"], report["search"]["target"])
        self.assertNotIn("rows", report)

    def test_preset_sets_the_grid_size(self) -> None:
        report = self.run_cli("--preset", "medium", "--generator", "prim", "--search", "dfs", "--seed", "2")
        self.assertEqual((report["grid"]["width"], report["grid"]["height"]), (31, 31))
        self.assertTrue(report["search"]["reached"])

    def test_invalid_arguments_exit_with_usage_errors(self) -> None:
        message = self.assertExits("--generator", "kruskal", "--start", "0", "0", "--seed", "1")
        self.assertIn("is a wall", message)
        self.assertIn("positive integer", self.assertExits("--width", "0"))
        self.assertIn("outside", self.assertExits("--width", "5", "--height", "5", "--target", "7", "1"))
        self.assertExits("--delay", "-1")
        self.assertExits("--generator", "labyrinth")

    def test_unknown_log_level_is_rejected(self) -> None:
        stderr = io.StringIO()
        with redirect_stderr(stderr), redirect_stdout(io.StringIO()):
            with self.assertRaises(SystemExit):
                cli.main(["--log-level", "CHATTY"])
        self.assertIn("Unknown log level", stderr.getvalue())


if __name__ == "__main__":
    unittest.main()
