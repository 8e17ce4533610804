"""Tests for the command-line entry point."""
import io
import os
import unittest
import tempfile
import shutil
from contextlib import redirect_stdout
from pathlib import Path
from unittest import mock

from docscan import main as main_mod
from docscan.config.settings import AppSettings
from docscan.utils.exceptions import ScanError


class TestMain(unittest.TestCase):
    """Test the CLI end to end."""

    def setUp(self):
        """Set up test fixtures."""
        self.test_dir = Path(tempfile.mkdtemp())
        (self.test_dir / "rechnung-G1-ShopA-Food-10.00-2024-01-02.pdf").write_text("")
        (self.test_dir / "invoice-G1-ShopB-Travel-20.00-2024-02-03.pdf").write_text("")
        (self.test_dir / "notes.txt").write_text("")

    def tearDown(self):
        """Clean up test fixtures."""
        shutil.rmtree(self.test_dir, ignore_errors=True)

    def _run_main(self, argv):
        out = io.StringIO()
        with redirect_stdout(out), mock.patch.object(main_mod, "configure_logging"):
            main_mod.main(argv)
        return out.getvalue()

    def test_report_for_directory_argument(self):
        output = self._run_main([str(self.test_dir)])

        self.assertTrue(output.startswith("Scanning complete. Preparing report...\n"))
        self.assertIn(
            "G1\n"
            "2024-02-03\t20.00\tShopB\tTravel\n"
            "2024-01-02\t10.00\tShopA\tFood\n"
            "\n",
            output
        )

    def test_json_format(self):
        output = self._run_main([str(self.test_dir), "--format", "json"])

        self.assertIn('"G1": [', output)
        self.assertIn('"establishment": "ShopB"', output)

    def test_missing_directory_exits_non_zero(self):
        with self.assertRaises(SystemExit) as ctx:
            self._run_main([str(self.test_dir / "missing")])

        self.assertEqual(ctx.exception.code, 1)

    def test_empty_argument_exits_non_zero(self):
        with self.assertRaises(SystemExit) as ctx:
            self._run_main([""])

        self.assertEqual(ctx.exception.code, 1)

    def test_prompts_when_no_argument(self):
        with mock.patch.object(main_mod, "get_directory_from_user", return_value=str(self.test_dir)):
            output = self._run_main([])

        self.assertIn("ShopA", output)

    def test_blank_prompt_exits_non_zero(self):
        with mock.patch.object(main_mod, "get_directory_from_user", return_value=""):
            with self.assertRaises(SystemExit) as ctx:
                self._run_main([])

        self.assertEqual(ctx.exception.code, 1)

    def test_bad_config_exits_non_zero(self):
        with self.assertRaises(SystemExit) as ctx:
            self._run_main([str(self.test_dir), "--config", str(self.test_dir / "nope.yaml")])

        self.assertEqual(ctx.exception.code, 1)

    def test_get_directory_from_user(self):
        stdin = io.StringIO("  /tmp/invoices  \n")
        stdout = io.StringIO()

        answer = main_mod.get_directory_from_user(stdin, stdout)

        self.assertEqual(answer, "/tmp/invoices")
        self.assertEqual(stdout.getvalue(), main_mod.PROMPT)

    def test_get_directory_from_user_eof(self):
        self.assertEqual(main_mod.get_directory_from_user(io.StringIO(""), io.StringIO()), "")

    def test_run_raises_scan_error(self):
        with self.assertRaises(ScanError):
            main_mod.run(str(self.test_dir / "missing"), AppSettings(), stdout=io.StringIO())

    def test_directory_argument_is_not_trimmed(self):
        spaced = self.test_dir / "inv "
        spaced.mkdir()
        (spaced / "invoice-G9-ShopZ-Misc-3.50-2024-03-04.pdf").write_text("")

        output = self._run_main([str(spaced)])

        self.assertIn("G9\n2024-03-04\t3.50\tShopZ\tMisc\n", output)

    def _write_undecodable_invoice(self):
        raw = os.path.join(os.fsencode(self.test_dir), b"invoice-G2-Caf\xe9-Food-1-2024-01-01.pdf")
        try:
            with open(raw, "wb"):
                pass
        except OSError:
            self.skipTest("filesystem rejects non-UTF-8 names")

    def test_undecodable_filename_reaches_the_report(self):
        self._write_undecodable_invoice()
        buffer = io.BytesIO()
        stdout = io.TextIOWrapper(buffer, encoding="utf-8")

        main_mod.run(str(self.test_dir), AppSettings(), stdout=stdout)

        self.assertIn(b"2024-01-01\t1\tCaf\xe9\tFood\n", buffer.getvalue())

    def test_undecodable_filename_reaches_the_json_report(self):
        self._write_undecodable_invoice()
        buffer = io.BytesIO()
        stdout = io.TextIOWrapper(buffer, encoding="utf-8")

        main_mod.run(str(self.test_dir), AppSettings(output_format="json"), stdout=stdout)

        self.assertIn(b'"establishment": "Caf\xe9"', buffer.getvalue())

    def test_run_is_repeatable(self):
        first, second = io.StringIO(), io.StringIO()

        main_mod.run(str(self.test_dir), AppSettings(), stdout=first)
        main_mod.run(str(self.test_dir), AppSettings(), stdout=second)

        self.assertEqual(first.getvalue(), second.getvalue())


if __name__ == "__main__":
    unittest.main()
