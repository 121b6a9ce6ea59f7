"""Statement traversal and the visitor that collects declarations."""

from enum import Enum
from typing import Optional

from ..parser.syntax import Declaration, NamespaceBlock, Statement
from .collector import DeclarationCollector
from .scope import NamespaceScope


class Visit(Enum):
    """What the traversal does after a statement has been entered."""
    CONTINUE = "continue"             # Visit the statement's children
    SKIP_CHILDREN = "skip_children"   # Move on to the next sibling
    STOP = "stop"                     # Abandon the whole traversal


class StatementVisitor:
    """Base visitor. Subclasses override the hooks they need."""

    def before_traverse(self, statements: list[Statement]) -> None:
        pass

    def enter(self, statement: Statement) -> Visit:
        return Visit.CONTINUE

    def after_traverse(self, statements: list[Statement]) -> None:
        pass


def traverse(statements: list[Statement], visitor: StatementVisitor) -> None:
    """Walk a statement forest depth-first in source order."""
    visitor.before_traverse(statements)
    _traverse(statements, visitor)
    visitor.after_traverse(statements)


def _traverse(statements: list[Statement], visitor: StatementVisitor) -> bool:
    """Returns False once the visitor has asked to stop."""
    for statement in statements:
        signal = visitor.enter(statement)
        if signal is Visit.STOP:
            return False
        if signal is Visit.CONTINUE and not _traverse(statement.children, visitor):
            return False
    return True


class ReflectionVisitor(StatementVisitor):
    """Collects the names of the top-level declarations of a source.

    Namespace blocks are descended into. Every other statement, declarations
    included, is a leaf: members, closures and declarations nested in
    function bodies or conditionals are never reported.
    """

    def __init__(self, strategy, collector: Optional[DeclarationCollector] = None):
        self.strategy = strategy
        self.collector = collector or DeclarationCollector()
        self.scope = NamespaceScope()

    def before_traverse(self, statements: list[Statement]) -> None:
        # Start at the global namespace
        self.scope.reset()

    def enter(self, statement: Statement) -> Visit:
        if isinstance(statement, NamespaceBlock):
            self.scope.enter_namespace(statement.name)
            return Visit.CONTINUE

        if isinstance(statement, Declaration):
            name = self.strategy.resolve(statement, self.scope)
            if name is not None:
                self.collector.collect(statement.kind, name)

        return Visit.SKIP_CHILDREN
