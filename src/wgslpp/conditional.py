from dataclasses import dataclass
from typing import Literal

from wgslpp.diag import DirectiveSequenceError

BranchKind = Literal["elif", "else"]


@dataclass
class Branch:
    selected: bool
    text: str = ""


class ConditionalBlock:
    def __init__(self, selector: object) -> None:
        self.branches: list[Branch] = [Branch(bool(selector))]
        self.accepts_more_branches = True

    @classmethod
    def root(cls) -> "ConditionalBlock":
        block = cls(True)
        block.accepts_more_branches = False
        return block

    def add_branch(
        self,
        kind: BranchKind,
        selector: object = True,
        *,
        segment: int | None = None,
        column: int | None = None,
        filename: str | None = None,
    ) -> None:
        if kind not in {"elif", "else"}:
            raise ValueError(f"Unsupported branch kind: {kind}")
        if not self.accepts_more_branches:
            raise DirectiveSequenceError(
                f"#{kind} not preceded by an #if or #elif",
                segment,
                column,
                filename=filename,
            )
        self.accepts_more_branches = kind == "elif"
        self.branches.append(Branch(True if kind == "else" else bool(selector)))

    def append_text(self, *texts: str) -> None:
        branch = self.branches[-1]
        branch.text += "".join(texts)

    def resolve(self) -> str:
        for branch in self.branches:
            if branch.selected:
                return branch.text
        return ""
