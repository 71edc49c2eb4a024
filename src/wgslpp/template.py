import re
from collections.abc import Mapping, Sequence
from typing import Any

from wgslpp.diag import PlaceholderError
from wgslpp.options import PreprocessOptions, normalize_options
from wgslpp.preprocessor import preprocess

_PLACEHOLDER_RE = re.compile(r"\$(?:(?P<escape>\$)|\{(?P<name>[^{}]*)(?P<close>\}?))")
_IDENT_RE = re.compile(r"[A-Za-z_]\w*")
_CONVERSIONS = {"a": ascii, "r": repr, "s": str}


class _FormattedValue:
    # Selects by the raw value, renders as the formatted text.
    def __init__(self, value: object, text: str) -> None:
        self.value = value
        self.text = text

    def __bool__(self) -> bool:
        return bool(self.value)

    def __str__(self) -> str:
        return self.text


def split_template(
    source: str,
    values: Mapping[str, object],
    *,
    filename: str | None = None,
) -> tuple[tuple[str, ...], tuple[object, ...]]:
    strings: list[str] = []
    found: list[object] = []
    chunks: list[str] = []
    last_index = 0
    for match in _PLACEHOLDER_RE.finditer(source):
        chunks.append(source[last_index : match.start()])
        last_index = match.end()
        if match.group("escape") is not None:
            chunks.append("$")
            continue
        # Offset into the produced segment, like preprocessor diagnostics.
        column = sum(len(chunk) for chunk in chunks) + 1
        if not match.group("close"):
            raise PlaceholderError(
                "Unterminated placeholder", len(strings), column, filename=filename
            )
        name = match.group("name").strip()
        if _IDENT_RE.fullmatch(name) is None:
            raise PlaceholderError(
                f"Invalid placeholder name: {name!r}", len(strings), column, filename=filename
            )
        if name not in values:
            raise PlaceholderError(
                f"Unknown placeholder: {name}", len(strings), column, filename=filename
            )
        strings.append("".join(chunks))
        found.append(values[name])
        chunks = []
    chunks.append(source[last_index:])
    strings.append("".join(chunks))
    return tuple(strings), tuple(found)


def _interpolation_value(interpolation: Any) -> object:
    value = interpolation.value
    conversion = getattr(interpolation, "conversion", None)
    format_spec = getattr(interpolation, "format_spec", "")
    if conversion is None and not format_spec:
        return value
    if conversion is not None and conversion not in _CONVERSIONS:
        raise ValueError(f"Unsupported conversion: !{conversion}")
    converted = value if conversion is None else _CONVERSIONS[conversion](value)
    return _FormattedValue(value, format(converted, format_spec))


def _template_parts(template: object) -> tuple[Sequence[str], Sequence[object]]:
    strings = getattr(template, "strings", None)
    interpolations = getattr(template, "interpolations", None)
    if isinstance(strings, Sequence) and isinstance(interpolations, Sequence):
        return strings, tuple(_interpolation_value(item) for item in interpolations)
    found = getattr(template, "values", None)
    if isinstance(strings, Sequence) and isinstance(found, Sequence):
        return strings, found
    raise TypeError(
        f"Expected a str or a template with strings and values, got {type(template).__name__}"
    )


def wgsl(
    template: object,
    values: Mapping[str, object] | None = None,
    /,
    *,
    options: PreprocessOptions | None = None,
) -> str:
    normalized_options = normalize_options(options)
    if isinstance(template, str):
        strings, found = split_template(
            template, {} if values is None else values, filename=normalized_options.filename
        )
        return preprocess(strings, found, options=normalized_options)
    if values is not None:
        raise TypeError("Placeholder values are only accepted with a str template")
    strings, found = _template_parts(template)
    return preprocess(strings, found, options=normalized_options)
