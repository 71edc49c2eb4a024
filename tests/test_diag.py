import unittest

from tests import _bootstrap  # noqa: F401
from wgslpp.diag import (
    Diagnostic,
    DirectiveSequenceError,
    MalformedDirectiveError,
    MismatchedNestingError,
    PlaceholderError,
    PreprocessorError,
    UnmatchedEndifError,
)


class DiagnosticTests(unittest.TestCase):
    def test_str_with_location(self) -> None:
        diagnostic = Diagnostic("preprocess", "a.wgsl", "boom", 1, 4, "WGSL-PP-0101")
        self.assertEqual(str(diagnostic), "a.wgsl:1:4: preprocess: boom")

    def test_str_without_location(self) -> None:
        diagnostic = Diagnostic("preprocess", "a.wgsl", "boom")
        self.assertEqual(str(diagnostic), "a.wgsl: preprocess: boom")


class PreprocessorErrorTests(unittest.TestCase):
    def test_codes(self) -> None:
        self.assertEqual(DirectiveSequenceError("x").code, "WGSL-PP-0101")
        self.assertEqual(MalformedDirectiveError("x").code, "WGSL-PP-0102")
        self.assertEqual(UnmatchedEndifError("x").code, "WGSL-PP-0103")
        self.assertEqual(MismatchedNestingError("x").code, "WGSL-PP-0104")
        self.assertEqual(PlaceholderError("x").code, "WGSL-PP-0201")

    def test_explicit_code_overrides_class_code(self) -> None:
        self.assertEqual(PreprocessorError("x", code="CUSTOM").code, "CUSTOM")

    def test_message_location_suffix(self) -> None:
        self.assertEqual(str(PreprocessorError("boom", 0, 3)), "boom at 0:3")
        self.assertEqual(str(PreprocessorError("boom", 0, 3, filename="a.wgsl")), "boom at a.wgsl:0:3")
        self.assertEqual(str(PreprocessorError("boom")), "boom")

    def test_diagnostic_defaults_filename(self) -> None:
        error = UnmatchedEndifError("#endif not preceded by an #if", 2, 1)
        self.assertEqual(
            error.diagnostic,
            Diagnostic("preprocess", "<template>", "#endif not preceded by an #if", 2, 1, "WGSL-PP-0103"),
        )

    def test_placeholder_stage(self) -> None:
        error = PlaceholderError("Unknown placeholder: x", 0, 1, filename="a.wgsl")
        self.assertEqual(str(error.diagnostic), "a.wgsl:0:1: template: Unknown placeholder: x")

    def test_errors_are_value_errors(self) -> None:
        self.assertIsInstance(MismatchedNestingError("x"), ValueError)


if __name__ == "__main__":
    unittest.main()
