from orca_path.tools.path_tool import main

import contextlib
import io
import os
import tempfile
import unittest


def run(*argv):
    out, err = io.StringIO(), io.StringIO()
    with contextlib.redirect_stdout(out), contextlib.redirect_stderr(err):
        code = main(list(argv))
    return code, out.getvalue(), err.getvalue()


class TestPathTool(unittest.TestCase):
    def test_normalize(self):
        code, out, _ = run("normalize", "a///b/../c/", "/./a/../")
        self.assertEqual(code, 0)
        self.assertEqual(out.splitlines(), ["a/c", "/"])

    def test_split(self):
        code, out, _ = run("split", "a/b/c/")
        self.assertEqual(code, 0)
        self.assertEqual(out, "a/b/c\t\n")

    def test_absolute_and_relative(self):
        self.assertEqual(run("absolute", "../wrist", "--base", "/model/arm/elbow")[1], "/model/arm/wrist\n")
        self.assertEqual(run("relative", "/a/b/c", "--from", "/a/x/y")[1], "../../b/c\n")

    def test_accessors(self):
        self.assertEqual(run("parent", "/a/b")[1], "/a\n")
        self.assertEqual(run("name", "/a/b")[1], "b\n")
        self.assertEqual(run("level", "/a/b", "1")[1], "b\n")

    def test_errors(self):
        code, out, err = run("normalize", "/../a")
        self.assertEqual(code, 2)
        self.assertEqual(out, "")
        self.assertTrue(err.startswith("error: "))
        self.assertIn("/../a", err)

        self.assertEqual(run("relative", "a", "--from", "/b")[0], 2)
        self.assertEqual(run("level", "/a", "3")[0], 2)

    def test_grammar_file(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = os.path.join(tmpdir, "grammar.yaml")
            with open(path, "w", encoding="utf-8") as f:
                f.write("separator: ':'\n")
            code, out, _ = run("--grammar", path, "normalize", ":a::b:..:c")
        self.assertEqual(code, 0)
        self.assertEqual(out, ":a:c\n")

    def test_missing_grammar_file(self):
        code, _, err = run("--grammar", "/nonexistent/grammar.yaml", "normalize", "a")
        self.assertEqual(code, 2)
        self.assertIn("error:", err)

    def test_usage_error(self):
        with self.assertRaises(SystemExit):
            run("bogus")


if __name__ == "__main__":
    unittest.main()
