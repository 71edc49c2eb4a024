from dataclasses import dataclass

DIRECTIVE_SEQUENCE = "WGSL-PP-0101"
MALFORMED_DIRECTIVE = "WGSL-PP-0102"
UNMATCHED_ENDIF = "WGSL-PP-0103"
MISMATCHED_NESTING = "WGSL-PP-0104"
UNKNOWN_PLACEHOLDER = "WGSL-PP-0201"

DEFAULT_FILENAME = "<template>"


@dataclass(frozen=True)
class Diagnostic:
    stage: str
    filename: str
    message: str
    segment: int | None = None
    column: int | None = None
    code: str | None = None

    def __str__(self) -> str:
        if self.segment is None or self.column is None:
            return f"{self.filename}: {self.stage}: {self.message}"
        return f"{self.filename}:{self.segment}:{self.column}: {self.stage}: {self.message}"


class PreprocessorError(ValueError):
    code = DIRECTIVE_SEQUENCE
    stage = "preprocess"

    def __init__(
        self,
        message: str,
        segment: int | None = None,
        column: int | None = None,
        *,
        filename: str | None = None,
        code: str | None = None,
    ) -> None:
        if segment is None or column is None:
            super().__init__(message)
        else:
            location = f"{filename}:{segment}:{column}" if filename is not None else f"{segment}:{column}"
            super().__init__(f"{message} at {location}")
        self.message = message
        self.segment = segment
        self.column = column
        self.filename = filename
        if code is not None:
            self.code = code

    @property
    def diagnostic(self) -> Diagnostic:
        return Diagnostic(
            self.stage,
            self.filename if self.filename is not None else DEFAULT_FILENAME,
            self.message,
            self.segment,
            self.column,
            self.code,
        )


class DirectiveSequenceError(PreprocessorError):
    code = DIRECTIVE_SEQUENCE


class MalformedDirectiveError(PreprocessorError):
    code = MALFORMED_DIRECTIVE


class UnmatchedEndifError(PreprocessorError):
    code = UNMATCHED_ENDIF


class MismatchedNestingError(PreprocessorError):
    code = MISMATCHED_NESTING


class PlaceholderError(PreprocessorError):
    code = UNKNOWN_PLACEHOLDER
    stage = "template"
