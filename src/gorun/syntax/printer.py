"""
Canonical printer for Go token streams.

The printer throws away comments and original spacing and re-emits tokens
with fixed rules, so two files that differ only in comments or whitespace
print identically. Every line break between two tokens in the source becomes
exactly one newline, which keeps Go's automatic semicolon insertion intact.
"""

from typing import Dict, List, Optional, Tuple

from tree_sitter import Node

from .model import Token

# Leaves whose inner structure must not be re-spaced
ATOMIC_KINDS = {"interpreted_string_literal", "raw_string_literal", "rune_literal"}

IDENTIFIER_KINDS = {
    "identifier",
    "field_identifier",
    "type_identifier",
    "package_identifier",
    "blank_identifier",
    "label_name",
}

OPENERS = {"{", "(", "["}
CLOSERS = {"}", ")", "]"}

NO_SPACE_BEFORE = {")", "]", ",", ";", ":", "++", "--"}
UNARY_OPERATORS = {"*", "&", "-", "+", "!", "^", "<-"}
UNARY_PARENTS = {"unary_expression", "pointer_type"}
TYPE_BRACKET_PARENTS = {"slice_type", "array_type", "implicit_length_array_type", "map_type"}
INDEX_BRACKET_PARENTS = {
    "index_expression",
    "slice_expression",
    "type_arguments",
    "type_parameter_list",
    "generic_type",
}
# Characters that could fuse with a preceding operator into a different token
OPERATOR_CHARS = set("+-*/%&|^<>=!:.")


def collect_tokens(node: Node, mark: Optional[Node] = None) -> Tuple[List[Token], Optional[int]]:
    """
    Flatten a node into printable tokens, dropping comments.

    Args:
        node: Root of the subtree to flatten
        mark: Optional leaf whose token index should be reported

    Returns:
        (tokens, index of ``mark`` or None)
    """
    tokens: List[Token] = []
    marked: List[int] = []

    def visit(current: Node, parent_kind: str) -> None:
        if current.type == "comment":
            return
        if current.child_count == 0 or current.type in ATOMIC_KINDS:
            text = current.text.decode("utf8")
            # Statement terminators ("\n") and zero-width MISSING leaves
            if not text.strip():
                return
            if mark is not None and current.start_byte == mark.start_byte and current.type == mark.type:
                marked.append(len(tokens))
            tokens.append(Token(
                text=text,
                kind=current.type,
                parent_kind=parent_kind,
                start_row=current.start_point[0],
                end_row=current.end_point[0],
            ))
            return
        for child in current.children:
            visit(child, current.type)

    parent = node.parent.type if node.parent is not None else ""
    visit(node, parent)
    return tokens, (marked[0] if marked else None)


def _is_word(token: Token) -> bool:
    return token.kind in IDENTIFIER_KINDS


def needs_space(prev: Token, cur: Token) -> bool:
    """Decide whether two tokens on the same line are separated by a space."""
    if prev.text in ("(", "["):
        return False
    if cur.text in NO_SPACE_BEFORE:
        return False
    if prev.text == "{" and cur.text == "}":
        return False
    if cur.text == ".":
        return False
    if prev.text == "." and (_is_word(cur) or cur.text == "("):
        return False
    if cur.text == "(":
        if _is_word(prev) or prev.text in (")", "]"):
            return False
        # func literals and func types, but keep "func (r T) Name()"
        if prev.text == "func" and prev.parent_kind != "method_declaration":
            return False
    if cur.text == "[":
        if prev.text == "map":
            return False
        if (_is_word(prev) or prev.text in (")", "]")) and cur.parent_kind in INDEX_BRACKET_PARENTS:
            return False
    if prev.text == "]" and prev.parent_kind in TYPE_BRACKET_PARENTS:
        return False
    if prev.text in UNARY_OPERATORS and prev.parent_kind in UNARY_PARENTS:
        return cur.text[:1] in OPERATOR_CHARS
    return True


def render_tokens(tokens: List[Token], substitutions: Optional[Dict[int, str]] = None) -> str:
    """
    Print a token stream canonically.

    Args:
        tokens: Tokens in source order
        substitutions: Token index -> text to print instead

    Returns:
        Source text without a trailing newline
    """
    substitutions = substitutions or {}
    out: List[str] = []
    depth = 0
    prev: Optional[Token] = None

    for i, token in enumerate(tokens):
        text = substitutions.get(i, token.text)
        if token.text in CLOSERS:
            depth = max(depth - 1, 0)

        if prev is not None:
            if token.start_row > prev.end_row:
                out.append("\n" + "\t" * depth)
            elif needs_space(prev, token):
                out.append(" ")

        out.append(text)
        if token.text in OPENERS:
            depth += 1
        prev = token

    return "".join(out)
