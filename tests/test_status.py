"""Tests for reading build status text and output."""

import unittest

from bury_compilation import (
    CompilationOutput,
    WarningSearch,
    find_finish_line,
    has_warning,
    is_success,
    status_from_finish_line,
)


class TestIsSuccess(unittest.TestCase):
    def test_finished(self):
        self.assertTrue(is_success("finished\n"))
        self.assertTrue(is_success("compilation finished at noon"))

    def test_not_finished(self):
        self.assertFalse(is_success("exited abnormally with code 1\n"))
        self.assertFalse(is_success("interrupt\n"))
        self.assertFalse(is_success(""))
        self.assertFalse(is_success("FINISHED"))


class TestHasWarning(unittest.TestCase):
    def test_status_text(self):
        self.assertTrue(has_warning("finished with warning", None))

    def test_no_output(self):
        self.assertFalse(has_warning("finished\n", None))
        self.assertFalse(has_warning("finished\n", CompilationOutput("")))

    def test_forward_from_point(self):
        text = "a.c:1: warning: x\nb.c:2: error: y\n"
        self.assertTrue(has_warning("finished\n", CompilationOutput(text, 0)))
        self.assertFalse(has_warning("finished\n", CompilationOutput(text, 10)))

    def test_point_out_of_range(self):
        text = "warning"
        self.assertTrue(has_warning("", CompilationOutput(text, -5)))
        self.assertFalse(has_warning("", CompilationOutput(text, 100)))

    def test_whole_output(self):
        text = "a.c:1: warning: x\n"
        output = CompilationOutput(text, len(text))
        self.assertTrue(has_warning("finished\n", output, WarningSearch.OUTPUT))


class TestFinishLines(unittest.TestCase):
    def test_translation(self):
        self.assertEqual(status_from_finish_line("[Finished in 1.2s]"), "finished\n")
        self.assertEqual(status_from_finish_line("[Finished]"), "finished\n")
        self.assertEqual(status_from_finish_line("  [Finished in 0.0s]\n"), "finished\n")
        self.assertEqual(status_from_finish_line("[Finished in 1.2s with exit code 0]"), "finished\n")
        self.assertEqual(
            status_from_finish_line("[Finished in 1.2s with exit code 2]"),
            "exited abnormally with code 2\n"
        )
        self.assertEqual(
            status_from_finish_line("[Finished with exit code -11]"),
            "exited abnormally with code -11\n"
        )
        self.assertEqual(status_from_finish_line("[Cancelled]"), "interrupt\n")

    def test_not_finish_lines(self):
        self.assertIsNone(status_from_finish_line("Finished in 1.2s"))
        self.assertIsNone(status_from_finish_line("main.c:1: error: [Finished]x"))
        self.assertIsNone(status_from_finish_line(""))

    def test_find_last_finish_line(self):
        text = "make: ok\n[Finished in 0.5s with exit code 1]\nmore\n[Finished in 0.2s]\n"
        self.assertEqual(find_finish_line(text), "[Finished in 0.2s]")

    def test_find_none(self):
        self.assertIsNone(find_finish_line("gcc -c main.c\n"))


if __name__ == "__main__":
    unittest.main()
