"""
GoSourceFile: a parsed Go source file that can be renamed and re-printed.

The file is held as a package name plus an ordered list of top-level
declarations. Lookups only look at top-level funcs, so funcs nested inside
other funcs are never matched.
"""

import shutil
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Callable, Iterator, List, Optional, Tuple, Union

from tree_sitter import Node

from gorun.exceptions import EmptyNameError, ParserError, SourceNotFoundError
from gorun.logging_config import logger
from .language_manager import get_go_parser
from .model import Declaration
from .printer import collect_tokens, render_tokens

DECLARATION_KINDS = {
    "function_declaration": "func",
    "method_declaration": "method",
    "type_declaration": "type",
    "import_declaration": "import",
}

PARAMETER_KINDS = {"parameter_declaration", "variadic_parameter_declaration"}

Cleaner = Callable[[], None]


class GoSourceFile:
    """
    Parsed Go source file.

    Use GoSourceFile.parse() to build one from a path.
    """

    def __init__(self, package_name: str, declarations: List[Declaration], file_path: Optional[str] = None):
        self.package_name = package_name
        self.declarations = declarations
        self.file_path = file_path

    @classmethod
    def parse(cls, file_path: Union[str, Path]) -> "GoSourceFile":
        """
        Parse a single Go source file.

        Raises:
            SourceNotFoundError: If the file does not exist.
            ParserError: If the file is not valid Go source.
        """
        path = Path(file_path)
        if not path.is_file():
            raise SourceNotFoundError(str(file_path))

        source = path.read_bytes()
        return cls.parse_bytes(source, str(file_path))

    @classmethod
    def parse_bytes(cls, source: bytes, file_path: str = "<source>") -> "GoSourceFile":
        """Parse Go source held in memory."""
        try:
            source.decode("utf-8")
        except UnicodeDecodeError as e:
            raise ParserError(file_path, "illegal UTF-8 encoding") from e

        tree = get_go_parser().parse(source)
        root = tree.root_node

        if root.has_error:
            error_node = _first_error_node(root)
            line, col = (error_node.start_point[0] + 1, error_node.start_point[1] + 1) if error_node else (1, 1)
            raise ParserError(file_path, f"syntax error at line {line}, column {col}")

        package_name = None
        declarations: List[Declaration] = []

        for child in root.named_children:
            if child.type == "comment":
                continue
            if child.type == "package_clause":
                package_name = _package_name(child)
                continue
            declarations.append(_build_declaration(child))

        if not package_name:
            raise ParserError(file_path, "expected 'package' clause")

        logger.debug(f"Parsed {file_path}: package {package_name}, {len(declarations)} declarations")
        return cls(package_name, declarations, file_path)

    # Lookup

    def find_function_index(self, fn: str) -> Optional[int]:
        """Index of the first top-level func named fn, or None."""
        if not fn:
            return None
        for i, decl in enumerate(self.declarations):
            if decl.is_function and decl.name == fn:
                return i
        return None

    def find_function(self, fn: str) -> Optional[Declaration]:
        """
        Returns the declaration of the top-level func named fn.

        If there is no declaration, it returns None.
        """
        index = self.find_function_index(fn)
        return self.declarations[index] if index is not None else None

    def contains_function(self, fn: str) -> bool:
        return self.find_function(fn) is not None

    # Mutation

    def rename_package(self, new_pkg: str) -> None:
        """Change the package name."""
        if not new_pkg:
            raise EmptyNameError("package name must be not empty")
        if self.package_name != new_pkg:
            logger.debug(f"Renaming package {self.package_name} -> {new_pkg}")
            self.package_name = new_pkg

    # Output

    def render(self) -> str:
        """Canonical source text: comments and extra whitespace removed."""
        parts = [f"package {self.package_name}"]
        for decl in self.declarations:
            parts.append(render_tokens(decl.tokens, decl.substitutions()))
        return "\n\n".join(parts) + "\n"

    def __str__(self) -> str:
        return self.render()

    def save_temp(self, dest_dir: Optional[Union[str, Path]] = None, filename: str = "main.go",
                  prefix: str = "gorun") -> Tuple[Path, Cleaner]:
        """
        Save the canonical source to a temp file.

        A fresh temp directory is created unless dest_dir is given. Returns the
        file path and a cleaner that removes what was created; the cleaner may
        be called any number of times. If writing fails, the cleaner is run
        before the error propagates.
        """
        if dest_dir is None:
            directory = Path(tempfile.mkdtemp(prefix=prefix))

            def cleaner() -> None:
                shutil.rmtree(directory, ignore_errors=True)
        else:
            directory = Path(dest_dir)
            target = directory / filename

            def cleaner() -> None:
                try:
                    target.unlink()
                except FileNotFoundError:
                    pass

        file_path = directory / filename
        try:
            file_path.write_text(self.render(), encoding="utf-8")
        except OSError:
            cleaner()
            raise

        logger.debug(f"Saved {self.file_path or 'source'} to {file_path}")
        return file_path, cleaner

    @contextmanager
    def temp_source(self, dest_dir: Optional[Union[str, Path]] = None, filename: str = "main.go",
                    prefix: str = "gorun") -> Iterator[Path]:
        """Context manager around save_temp() that always cleans up."""
        file_path, cleaner = self.save_temp(dest_dir, filename, prefix)
        try:
            yield file_path
        finally:
            cleaner()


def structurally_equal(want: Optional[GoSourceFile], got: Optional[GoSourceFile]) -> bool:
    """Two sources are equal iff their canonical renderings are equal."""
    if want is None or got is None:
        return want is None and got is None
    return want.render() == got.render()


def _first_error_node(node: Node) -> Optional[Node]:
    if node.type == "ERROR" or node.is_missing:
        return node
    for child in node.children:
        found = _first_error_node(child)
        if found is not None:
            return found
    return None


def _package_name(node: Node) -> Optional[str]:
    for child in node.named_children:
        if child.type == "package_identifier":
            return child.text.decode("utf8")
    return None


def _parameter_texts(node: Optional[Node]) -> List[str]:
    if node is None:
        return []
    if node.type == "parameter_list":
        return [c.text.decode("utf8") for c in node.named_children if c.type in PARAMETER_KINDS]
    # A single unparenthesized result type
    return [node.text.decode("utf8")]


def _build_declaration(node: Node) -> Declaration:
    kind = DECLARATION_KINDS.get(node.type, "other")

    if kind not in ("func", "method"):
        tokens, _ = collect_tokens(node)
        return Declaration(kind=kind, tokens=tokens)

    name_node = node.child_by_field_name("name")
    tokens, name_index = collect_tokens(node, mark=name_node)
    result_node = node.child_by_field_name("result")
    return Declaration(
        kind=kind,
        tokens=tokens,
        name=name_node.text.decode("utf8") if name_node is not None else None,
        name_index=name_index,
        params=_parameter_texts(node.child_by_field_name("parameters")),
        results=_parameter_texts(result_node),
        has_result=result_node is not None,
    )
