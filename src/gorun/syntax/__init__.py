"""
Syntax package: parse Go source with tree-sitter, rename declarations and
print the result back as canonical source text.
"""

from .source_file import GoSourceFile, structurally_equal
from .swap import swap_simple_funcs
from .model import Declaration, Token

__all__ = [
    "GoSourceFile",
    "structurally_equal",
    "swap_simple_funcs",
    "Declaration",
    "Token",
]
