from wgslpp.conditional import Branch, ConditionalBlock
from wgslpp.diag import (
    Diagnostic,
    DirectiveSequenceError,
    MalformedDirectiveError,
    MismatchedNestingError,
    PlaceholderError,
    PreprocessorError,
    UnmatchedEndifError,
)
from wgslpp.options import PreprocessOptions
from wgslpp.preprocessor import format_value, preprocess
from wgslpp.scanner import DirectiveMatch, scan_directives
from wgslpp.template import split_template, wgsl

__all__ = [
    "Branch",
    "ConditionalBlock",
    "Diagnostic",
    "DirectiveMatch",
    "DirectiveSequenceError",
    "MalformedDirectiveError",
    "MismatchedNestingError",
    "PlaceholderError",
    "PreprocessOptions",
    "PreprocessorError",
    "UnmatchedEndifError",
    "format_value",
    "preprocess",
    "scan_directives",
    "split_template",
    "wgsl",
]
