from typing import Optional

from tree_sitter import Language, Parser
import tree_sitter_go as tsgo

from gorun.logging_config import logger

# Global cache for the loaded language to avoid repeated loading
_go_language: Optional[Language] = None


def get_go_language() -> Language:
    """
    Loads the tree-sitter Go language.

    Caches the loaded language object for efficiency.
    """
    global _go_language
    if _go_language is None:
        _go_language = Language(tsgo.language())
        logger.debug("Successfully loaded language 'go'")
    return _go_language


def get_go_parser() -> Parser:
    """Create a parser for Go source. Parsers are cheap; languages are cached."""
    parser = Parser()
    parser.language = get_go_language()
    return parser
