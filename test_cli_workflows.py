from __future__ import annotations

import io
import json
import os
import subprocess
import sys
import unittest
from contextlib import redirect_stdout
from pathlib import Path

from uniqseq.cli import cmd_prime, cmd_sample


class CLIIntegrationTests(unittest.TestCase):
    def run_cli(self, args, *, expect: int | None = 0):
        cmd = [sys.executable, "-m", "uniqseq.cli"] + list(args)
        env = os.environ.copy()
        repo_root = Path(__file__).resolve().parent
        existing = env.get("PYTHONPATH", "")
        env["PYTHONPATH"] = str(repo_root) if not existing else f"{repo_root}{os.pathsep}{existing}"
        proc = subprocess.run(
            cmd,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            text=True,
            env=env,
        )
        if expect is not None and proc.returncode != expect:
            raise AssertionError(
                f"CLI exited {proc.returncode}, expected {expect}\nCommand: {' '.join(cmd)}\nSTDOUT:\n{proc.stdout}\nSTDERR:\n{proc.stderr}"
            )
        return proc

    def test_sample_json(self):
        proc = self.run_cli(["sample", "10", "--count", "11", "--json"])
        payload = json.loads(proc.stdout)
        self.assertEqual(payload["prime"], 11)
        self.assertEqual(payload["seed"], 1)
        self.assertEqual(payload["values"], [7, 3, 9, 2, 8, 4, 6, 10, 0, 1, 5])

    def test_sample_lines_with_seed(self):
        proc = self.run_cli(["sample", "1000", "-n", "25", "--seed", "77"])
        values = [int(line) for line in proc.stdout.split()]
        self.assertEqual(len(values), 25)
        self.assertEqual(len(set(values)), 25)

    def test_prime(self):
        proc = self.run_cli(["prime", "1000"])
        self.assertEqual(proc.stdout.strip(), "1019")
        proc = self.run_cli(["prime", "5000000000"])
        self.assertEqual(proc.stdout.strip(), "4294967291")

    def test_invalid_arguments(self):
        proc = self.run_cli(["sample", "0"], expect=2)
        self.assertIn("Error:", proc.stderr)
        proc = self.run_cli(["sample", "10", "--seed", "-1"], expect=2)
        self.assertIn("Seed", proc.stderr)
        proc = self.run_cli(["sample", "10", "--count", "-3"], expect=2)
        self.assertIn("--count", proc.stderr)
        self.run_cli(["prime", "0"], expect=2)


class CLIFunctionTests(unittest.TestCase):
    def test_cmd_sample_returns_values(self):
        buf = io.StringIO()
        with redirect_stdout(buf):
            values = cmd_sample(100, count=5, seed=3)
        self.assertEqual([int(x) for x in buf.getvalue().split()], values)

    def test_cmd_prime(self):
        buf = io.StringIO()
        with redirect_stdout(buf):
            self.assertEqual(cmd_prime(100), 103)
        self.assertEqual(buf.getvalue().strip(), "103")


if __name__ == "__main__":
    unittest.main()
