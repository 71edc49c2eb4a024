from collections.abc import Sequence

from wgslpp.conditional import ConditionalBlock
from wgslpp.diag import MalformedDirectiveError, MismatchedNestingError, UnmatchedEndifError
from wgslpp.options import PreprocessOptions, normalize_options
from wgslpp.scanner import DirectiveMatch, scan_directives


def preprocess(
    strings: Sequence[str],
    values: Sequence[object] = (),
    *,
    options: PreprocessOptions | None = None,
) -> str:
    """Resolve ``#if``/``#elif``/``#else``/``#endif`` across a split template.

    ``strings`` are the literal segments and ``values`` the interpolated
    values between them, so ``len(strings) == len(values) + 1``. A value
    directly after ``#if`` or ``#elif`` selects the branch; every other
    value is inserted as text.
    """
    if isinstance(strings, str):
        raise TypeError("Expected a sequence of literal segments, got a str")
    if len(strings) != len(values) + 1:
        raise ValueError(
            f"Expected {len(values) + 1} literal segments for {len(values)} values, "
            f"got {len(strings)}"
        )
    return _Assembler(normalize_options(options)).process(strings, values)


def format_value(value: object, options: PreprocessOptions | None = None) -> str:
    if isinstance(value, bool) and normalize_options(options).bool_literals == "shader":
        return "true" if value else "false"
    return str(value)


class _Assembler:
    def __init__(self, options: PreprocessOptions) -> None:
        self._options = options
        self._stack: list[ConditionalBlock] = []
        self._block = ConditionalBlock.root()

    def process(self, strings: Sequence[str], values: Sequence[object]) -> str:
        for index, segment in enumerate(strings):
            has_value = index < len(values)
            value_consumed = False
            last_index = 0
            for match in scan_directives(segment):
                self._block.append_text(segment[last_index : match.start])
                if match.name == "if":
                    self._require_value_follows(match, segment, index, has_value)
                    value_consumed = True
                    self._stack.append(self._block)
                    self._block = ConditionalBlock(values[index])
                elif match.name == "elif":
                    self._require_value_follows(match, segment, index, has_value)
                    value_consumed = True
                    self._block.add_branch(
                        "elif",
                        values[index],
                        segment=index,
                        column=match.column,
                        filename=self._options.filename,
                    )
                elif match.name == "else":
                    self._block.add_branch(
                        "else",
                        segment=index,
                        column=match.column,
                        filename=self._options.filename,
                    )
                    self._block.append_text(self._trailing(match))
                elif match.name == "endif":
                    self._close_block(match, index)
                else:
                    # Not ours; emit it untouched.
                    self._block.append_text(match.text)
                last_index = match.end
            if last_index != len(segment):
                self._block.append_text(segment[last_index:])
            if has_value and not value_consumed:
                self._block.append_text(format_value(values[index], self._options))
        if self._stack:
            raise MismatchedNestingError(
                f"Mismatched #if/#endif count: {len(self._stack)} unclosed #if",
                filename=self._options.filename,
            )
        return self._block.resolve()

    def _close_block(self, match: DirectiveMatch, index: int) -> None:
        if not self._stack:
            raise UnmatchedEndifError(
                "#endif not preceded by an #if",
                index,
                match.column,
                filename=self._options.filename,
            )
        result = self._block.resolve()
        self._block = self._stack.pop()
        self._block.append_text(result, self._trailing(match))

    def _trailing(self, match: DirectiveMatch) -> str:
        return match.trailing if self._options.keep_directive_whitespace else ""

    def _require_value_follows(
        self, match: DirectiveMatch, segment: str, index: int, has_value: bool
    ) -> None:
        if match.end != len(segment) or not has_value:
            raise MalformedDirectiveError(
                f"#{match.name} must be immediately followed by a template expression "
                "(ie: ${value})",
                index,
                match.column,
                filename=self._options.filename,
            )
