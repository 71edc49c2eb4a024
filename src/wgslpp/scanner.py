import re
from collections.abc import Iterator
from dataclasses import dataclass

_DIRECTIVE_RE = re.compile(r"#(?P<name>\S*)(?P<trailing>\s*)")

CONDITIONAL_DIRECTIVES = frozenset({"if", "elif", "else", "endif"})


@dataclass(frozen=True)
class DirectiveMatch:
    text: str
    name: str
    trailing: str
    start: int
    end: int

    @property
    def is_conditional(self) -> bool:
        return self.name in CONDITIONAL_DIRECTIVES

    @property
    def column(self) -> int:
        return self.start + 1


def scan_directives(segment: str) -> Iterator[DirectiveMatch]:
    for match in _DIRECTIVE_RE.finditer(segment):
        yield DirectiveMatch(
            match.group(0),
            match.group("name"),
            match.group("trailing"),
            match.start(),
            match.end(),
        )
