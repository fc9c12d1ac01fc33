from orca_path.component.path import normalize, split
from orca_path.component.errors import BoundaryViolationError, InvalidCharacterError
from orca_path.component.grammar import PathGrammar

import unittest


class TestNormalize(unittest.TestCase):
    def test_empty_and_root(self):
        self.assertEqual(normalize(""), "")
        self.assertEqual(normalize("/"), "/")
        self.assertEqual(normalize("///"), "/")
        self.assertEqual(normalize("."), "")

    def test_repeated_and_trailing_separators(self):
        self.assertEqual(normalize("a///b"), "a/b")
        self.assertEqual(normalize("a/b/c/"), "a/b/c")
        self.assertEqual(normalize("/a//b/"), "/a/b")

    def test_relative_elements(self):
        self.assertEqual(normalize("a///b/../c/"), "a/c")
        self.assertEqual(normalize("/./a/../"), "/")
        self.assertEqual(normalize("a/./b/."), "a/b")
        self.assertEqual(normalize("a/../b"), "b")
        self.assertEqual(normalize("/a/b/../../c"), "/c")

    def test_relative_path_keeps_leading_ascents(self):
        self.assertEqual(normalize("../a"), "../a")
        self.assertEqual(normalize("a/../.."), "..")
        self.assertEqual(normalize("../a/../.."), "../..")
        self.assertEqual(normalize("../../x/./y"), "../../x/y")
        self.assertEqual(normalize("./.."), "..")

    def test_absolute_path_cannot_ascend_above_root(self):
        with self.assertRaises(BoundaryViolationError) as ctx:
            normalize("/../a")
        self.assertEqual(ctx.exception.path, "/../a")

        with self.assertRaises(BoundaryViolationError):
            normalize("/a/../..")
        with self.assertRaises(BoundaryViolationError):
            normalize("/..")

    def test_invalid_characters(self):
        for bad in ("\\", "*", "+"):
            with self.assertRaises(InvalidCharacterError) as ctx:
                normalize(f"/a/b{bad}c")
            self.assertEqual(ctx.exception.character, bad)
            self.assertEqual(ctx.exception.path, f"/a/b{bad}c")

    def test_invalid_segment_is_rejected_even_if_cancelled(self):
        with self.assertRaises(InvalidCharacterError):
            normalize("a*/../b")

    def test_errors_are_value_errors(self):
        with self.assertRaises(ValueError):
            normalize("/../a")
        with self.assertRaises(ValueError):
            normalize("a+b")

    def test_non_string(self):
        with self.assertRaises(TypeError):
            normalize(None)

    def test_idempotent(self):
        samples = ["", "/", "a///b/../c/", "../a/../..", "/x/./y//z/..", "a/b/../../..", "./a"]
        for p in samples:
            once = normalize(p)
            self.assertEqual(normalize(once), once, p)

    def test_custom_grammar(self):
        grammar = PathGrammar(separator=":", invalid_chars="#")
        self.assertEqual(normalize(":a::b:..:c:", grammar), ":a:c")
        self.assertEqual(normalize("a/b", grammar), "a/b")
        with self.assertRaises(InvalidCharacterError):
            normalize("a#b", grammar)


class TestSplit(unittest.TestCase):
    def test_trailing_separator_gives_empty_tail(self):
        self.assertEqual(split("a/b/c/"), ("a/b/c", ""))

    def test_basic(self):
        self.assertEqual(split("a/b/c"), ("a/b", "c"))
        self.assertEqual(split("/a/b"), ("/a", "b"))

    def test_no_separator(self):
        self.assertEqual(split("abc"), ("", "abc"))
        self.assertEqual(split(".."), ("", ".."))

    def test_empty(self):
        self.assertEqual(split(""), ("", ""))

    def test_root_head_is_kept(self):
        self.assertEqual(split("/a"), ("/", "a"))
        self.assertEqual(split("/"), ("/", ""))
        self.assertEqual(split("//a"), ("/", "a"))

    def test_head_trailing_separators_stripped(self):
        self.assertEqual(split("a///b"), ("a", "b"))
        self.assertEqual(split("/a//"), ("/a", ""))

    def test_no_normalization_or_validation(self):
        self.assertEqual(split("a/../b*"), ("a/..", "b*"))

    def test_tail_never_contains_separator(self):
        for p in ["", "/", "a", "a/b", "a//b//", "/x/y/z", "../..", "a\\b/c"]:
            _, tail = split(p)
            self.assertNotIn("/", tail)


if __name__ == "__main__":
    unittest.main()
