"""
Tests for the command line interface
"""

import io
import os
import sys
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout

import pandas as pd

sys.path.append(os.path.join(os.path.dirname(__file__), '..'))

from config.config import EVALUATOR_CONFIG, validate_config
from main import main


def run_cli(argv):
    stdout, stderr = io.StringIO(), io.StringIO()
    with redirect_stdout(stdout), redirect_stderr(stderr):
        code = main(argv)
    return code, stdout.getvalue(), stderr.getvalue()


class TestCLI(unittest.TestCase):
    """Test main() end to end"""

    def test_single_expression(self):
        code, out, err = run_cli(["2+3*4"])
        self.assertEqual(code, 0)
        self.assertEqual(out.strip(), "14")
        self.assertEqual(err, "")

    def test_negative_expression_after_separator(self):
        code, out, _ = run_cli(["--", "-3+5"])
        self.assertEqual(code, 0)
        self.assertEqual(out.strip(), "2")

    def test_multiple_expressions_with_postfix(self):
        code, out, _ = run_cli(["--show_postfix", "2^3^2", "8/4/2"])
        self.assertEqual(code, 0)
        self.assertEqual(out.splitlines(), [
            "2^3^2 = 512    [2 3 2 ^ ^]",
            "8/4/2 = 1    [8 4 / 2 /]",
        ])

    def test_error_exit_code(self):
        code, out, err = run_cli(["1/0"])
        self.assertEqual(code, 1)
        self.assertEqual(out, "")
        self.assertIn("DivisionByZero", err)

    def test_precision(self):
        _, out, _ = run_cli(["--precision", "3", "1/3"])
        self.assertEqual(out.strip(), "0.333")

    def test_decimal_separator(self):
        _, out, _ = run_cli(["--decimal_separator", ";", "1;5*2"])
        self.assertEqual(out.strip(), "3")

    def test_invalid_decimal_separator(self):
        with redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit):
                main(["--decimal_separator", "+", "1+1"])

    def test_no_expressions(self):
        with redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit):
                main([])

    def test_file_and_save_results(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            input_path = os.path.join(tmpdir, "exprs.txt")
            output_path = os.path.join(tmpdir, "results.csv")
            with open(input_path, "w", encoding="utf-8") as f:
                f.write("1,5+2,5\n(2+3)*4\n(1+2\n")

            code, out, err = run_cli([
                "--file", input_path, "--save_results", "--output_path", output_path
            ])
            self.assertEqual(code, 1)
            self.assertEqual(out.splitlines(), ["1,5+2,5 = 4", "(2+3)*4 = 20"])
            self.assertIn("MismatchedParentheses", err)

            saved = pd.read_csv(output_path)
            self.assertEqual(list(saved.columns), ['expression', 'postfix', 'result', 'error'])
            self.assertEqual(saved['result'].iloc[1], 20.0)
            self.assertTrue(pd.isna(saved['result'].iloc[2]))


class TestConfig(unittest.TestCase):
    """Test configuration validation"""

    def test_default_config_is_valid(self):
        validate_config()

    def test_invalid_separator_rejected(self):
        original = EVALUATOR_CONFIG["alternate_decimal_separator"]
        EVALUATOR_CONFIG["alternate_decimal_separator"] = "."
        try:
            with self.assertRaises(AssertionError):
                validate_config()
        finally:
            EVALUATOR_CONFIG["alternate_decimal_separator"] = original


if __name__ == "__main__":
    unittest.main()
