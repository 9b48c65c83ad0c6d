"""Parse TypeScript/JavaScript test files with tree-sitter."""

import logging
from collections.abc import Iterable, Iterator
from pathlib import PurePath

import tree_sitter_typescript
from tree_sitter import Language, Node, Parser, Tree

logger = logging.getLogger(__name__)

TYPESCRIPT = Language(tree_sitter_typescript.language_typescript())
TSX = Language(tree_sitter_typescript.language_tsx())


class SourceParseError(Exception):
    """Error parsing a test source file."""

    def __init__(self, message: str, file_path: str, line: int | None = None):
        super().__init__(message)
        self.file_path = file_path
        self.line = line
        self.phase = "parsing"


def _language_for(file_path: str) -> Language:
    if PurePath(file_path).suffix in (".tsx", ".jsx"):
        return TSX
    return TYPESCRIPT


def parse_source(source_text: str, file_path: str = "<memory>") -> Tree:
    """Parse source text into a syntax tree.

    Args:
        source_text: Contents of a test file
        file_path: Path used to pick the grammar and for error messages

    Returns:
        The parsed tree-sitter Tree

    Raises:
        SourceParseError: If the source contains syntax errors
    """
    parser = Parser(_language_for(file_path))
    tree = parser.parse(source_text.encode("utf-8"))

    if tree.root_node.has_error:
        error_node = _first_error(tree.root_node)
        line = error_node.start_point[0] + 1 if error_node else None
        logger.debug(f"Syntax error in {file_path} at line {line}")
        raise SourceParseError(
            f"Syntax error in {file_path}" + (f" at line {line}" if line else ""),
            file_path=file_path,
            line=line,
        )

    logger.debug(f"Parsed {file_path}")
    return tree


def iter_nodes(root: Node, kinds: Iterable[str] | None = None) -> Iterator[Node]:
    """Yield nodes in pre-order (source order), optionally filtered by type.

    Uses an explicit stack so deep trees do not hit the recursion limit.
    """
    wanted = frozenset(kinds) if kinds is not None else None
    stack = [root]
    while stack:
        node = stack.pop()
        if wanted is None or node.type in wanted:
            yield node
        stack.extend(reversed(node.children))


def node_text(node: Node) -> str:
    """Source text covered by a node."""
    return node.text.decode("utf-8") if node.text is not None else ""


def line_number(node: Node) -> int:
    """1-based line where the node starts."""
    return node.start_point[0] + 1


def _first_error(root: Node) -> Node | None:
    for node in iter_nodes(root):
        if node.type == "ERROR" or node.is_missing:
            return node
    return None
