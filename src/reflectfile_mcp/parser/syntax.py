"""Statement forest handed from the parser to the reflection walker."""

from dataclasses import dataclass, field
from typing import Optional, Union

from .names import DeclarationKind, FullyQualifiedName


@dataclass
class NamespaceBlock:
    """A ``namespace`` statement.

    ``namespace Foo;`` has no statements of its own; the statements it
    governs follow it as siblings. ``namespace Foo { ... }`` and the
    unnamed ``namespace { ... }`` hold their statements directly.
    """
    name: Optional[str]                         # Written name, None for the global block
    statements: list["Statement"] = field(default_factory=list)
    braced: bool = False

    @property
    def children(self) -> list["Statement"]:
        return self.statements


@dataclass
class Declaration:
    """A class-like, function or constant declaration."""
    kind: DeclarationKind
    name: Optional[str]                         # None for anonymous forms
    body: list["Statement"] = field(default_factory=list)
    namespaced_name: Optional[FullyQualifiedName] = None  # Set by NameResolver

    @property
    def children(self) -> list["Statement"]:
        return self.body


@dataclass
class OtherStatement:
    """Any statement that neither opens a namespace nor declares a name."""
    type: str                                   # tree-sitter node type
    body: list["Statement"] = field(default_factory=list)

    @property
    def children(self) -> list["Statement"]:
        return self.body


Statement = Union[NamespaceBlock, Declaration, OtherStatement]


class SourceSyntaxError(Exception):
    """The parser rejected the source as syntactically invalid."""

    def __init__(self, message: str, line: int = 0, column: int = 0):
        super().__init__(f"{message} on line {line}, column {column}")
        self.message = message
        self.line = line
        self.column = column


def flatten_statements(statements: list[Statement], depth: int = 0) -> list[tuple[Statement, int]]:
    """Flatten a statement forest with depth information.

    Returns list of (statement, depth) tuples in source order.
    """
    result = []
    for statement in statements:
        result.append((statement, depth))
        result.extend(flatten_statements(statement.children, depth + 1))
    return result
