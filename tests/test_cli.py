import io
import json
import unittest
from unittest import mock

from unity_markup import cli
from tests._util import BREAKFAST_MENU, captured, tmp_json, tmp_text


class CliTests(unittest.TestCase):
    def setUp(self):
        self.good = str(BREAKFAST_MENU)
        self.bad_path = tmp_text('["x", "text", {"not": "allowed"}]')
        self.bad = str(self.bad_path)

    def tearDown(self):
        self.bad_path.unlink(missing_ok=True)

    def test_valid_document_exits_zero(self):
        with captured() as (out, _):
            code = cli.main([self.good])
        self.assertEqual(code, 0)
        self.assertIn("Valid Unity markup", out.getvalue())

    def test_invalid_document_exits_one(self):
        with captured() as (out, _):
            code = cli.main([self.good, self.bad])
        self.assertEqual(code, 1)
        self.assertIn(f"{self.bad}: Invalid Unity markup (1 error(s))", out.getvalue())
        self.assertIn("  - [2]: JSON Object not allowed as content", out.getvalue())

    def test_missing_file_exits_two(self):
        with captured() as (out, err):
            code = cli.main([self.bad, "/tmp/does-not-exist.json"])
        self.assertEqual(code, 2)
        self.assertIn("error: Document not found", err.getvalue())
        self.assertIn("Invalid Unity markup", out.getvalue())  # other files still reported

    def test_json_format(self):
        with captured() as (out, _):
            code = cli.main(["--format", "json", self.good, self.bad])
        self.assertEqual(code, 1)
        data = json.loads(out.getvalue())
        self.assertEqual([d["valid"] for d in data], [True, False])
        self.assertEqual(data[1]["errors"][0]["path"], "[2]")

    def test_markdown_format(self):
        with captured() as (out, _):
            cli.main(["--format", "markdown", self.bad])
        self.assertIn(f"## `{self.bad}`", out.getvalue())
        self.assertIn("| `[2]` | JSON Object not allowed as content", out.getvalue())

    def test_quiet_prints_nothing(self):
        with captured() as (out, _):
            code = cli.main(["--quiet", self.bad])
        self.assertEqual(code, 1)
        self.assertEqual(out.getvalue(), "")

    def test_stdin(self):
        with mock.patch("sys.stdin", io.StringIO('["x", {"a": 1}]')):
            with captured() as (out, _):
                code = cli.main(["-"])
        self.assertEqual(code, 0)
        self.assertIn("-: Valid Unity markup", out.getvalue())

    def test_version_flag(self):
        with captured() as (out, _):
            with self.assertRaises(SystemExit) as ctx:
                cli.main(["--version"])
        self.assertEqual(ctx.exception.code, 0)
        self.assertIn("unity-markup", out.getvalue())

    def test_no_files_is_usage_error(self):
        with captured():
            with self.assertRaises(SystemExit) as ctx:
                cli.main([])
        self.assertEqual(ctx.exception.code, 2)

    def test_args_file(self):
        args = tmp_text(f"--format\njson\n{self.good}\n", suffix=".txt")
        try:
            with captured() as (out, _):
                code = cli.main([f"@{args}"])
            self.assertEqual(code, 0)
            self.assertTrue(json.loads(out.getvalue())[0]["valid"])
        finally:
            args.unlink(missing_ok=True)


class CliConfigTests(unittest.TestCase):
    def test_config_supplies_defaults(self):
        cfg = tmp_json({"format": "json", "verbosity": "info"})
        try:
            files, options = cli.resolve_options(["--config", str(cfg), str(BREAKFAST_MENU)])
        finally:
            cfg.unlink(missing_ok=True)
        self.assertEqual(files, [str(BREAKFAST_MENU)])
        self.assertEqual(options, {"format": "json", "quiet": False, "verbosity": "INFO"})

    def test_explicit_flags_override_config(self):
        cfg = tmp_json({"format": "json", "quiet": True})
        try:
            _, options = cli.resolve_options(["--config", str(cfg), "--format", "markdown", "x.json"])
        finally:
            cfg.unlink(missing_ok=True)
        self.assertEqual(options["format"], "markdown")
        self.assertTrue(options["quiet"])

    def test_defaults_without_config(self):
        _, options = cli.resolve_options(["x.json"])
        self.assertEqual(options, {"format": "text", "quiet": False, "verbosity": "WARNING"})

    def test_bad_configs_exit_two(self):
        bad_configs = [
            tmp_json({"colour": "red"}),
            tmp_json({"format": "xml"}),
            tmp_json({"quiet": "yes"}),
            tmp_json({"verbosity": "LOUD"}),
            tmp_json(["format", "json"]),
            tmp_text("{ not json"),
        ]
        try:
            for cfg in bad_configs:
                with captured() as (_, err):
                    code = cli.main(["--config", str(cfg), str(BREAKFAST_MENU)])
                self.assertEqual(code, 2, cfg.read_text())
                self.assertTrue(err.getvalue().startswith("error: "))
        finally:
            for cfg in bad_configs:
                cfg.unlink(missing_ok=True)

    def test_missing_config_exits_two(self):
        with captured() as (_, err):
            code = cli.main(["--config", "/tmp/does-not-exist.json", str(BREAKFAST_MENU)])
        self.assertEqual(code, 2)
        self.assertIn("Document not found", err.getvalue())
