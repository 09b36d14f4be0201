"""
In-memory model of a parsed Go source file.

Declarations are kept in source order and addressed by index. Each one owns
a flat token stream taken from the tree-sitter tree; renaming a declaration
only changes its ``name``, which the printer substitutes for the name token.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional


@dataclass(frozen=True)
class Token:
    """A printable leaf of the syntax tree."""

    text: str
    kind: str  # tree-sitter node type of the leaf
    parent_kind: str  # tree-sitter node type of the leaf's parent
    start_row: int
    end_row: int


@dataclass
class Declaration:
    """A top-level declaration of a Go source file."""

    kind: str  # "func", "method", "type", "import", "other"
    tokens: List[Token] = field(default_factory=list)
    name: Optional[str] = None
    name_index: Optional[int] = None
    params: List[str] = field(default_factory=list)
    results: List[str] = field(default_factory=list)
    has_result: bool = False  # true for an explicit "()" result list too

    @property
    def is_function(self) -> bool:
        return self.kind == "func"

    def has_args_or_returns(self) -> bool:
        return len(self.params) > 0 or self.has_result

    def substitutions(self) -> Dict[int, str]:
        """Token index -> replacement text for the printer."""
        if self.name_index is None or self.name is None:
            return {}
        return {self.name_index: self.name}
