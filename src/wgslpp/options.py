from dataclasses import dataclass
from typing import Literal

from wgslpp.diag import DEFAULT_FILENAME

BoolLiterals = Literal["shader", "python"]


@dataclass(frozen=True)
class PreprocessOptions:
    filename: str = DEFAULT_FILENAME
    keep_directive_whitespace: bool = True
    bool_literals: BoolLiterals = "shader"

    def __post_init__(self) -> None:
        if not self.filename:
            raise ValueError("Diagnostic filename must not be empty")
        if self.bool_literals not in {"shader", "python"}:
            raise ValueError(f"Unsupported bool literal style: {self.bool_literals}")


def normalize_options(options: PreprocessOptions | None) -> PreprocessOptions:
    if options is None:
        return PreprocessOptions()
    if not isinstance(options, PreprocessOptions):
        raise TypeError(f"Expected PreprocessOptions, got {type(options).__name__}")
    return options
