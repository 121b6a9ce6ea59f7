"""Strategies for computing the fully qualified name of a declaration.

Two strategies share one interface:

* ``LexicalStrategy`` joins the namespace the walker is currently in with
  the name as written.
* ``ResolvedStrategy`` trusts ``Declaration.namespaced_name``, which the
  ``NameResolver`` pass annotates beforehand, and skips declarations that
  carry no such name.

Pick one per reflector; do not mix them within a walk.
"""

from typing import Optional, Protocol

from ..parser.names import FullyQualifiedName
from ..parser.syntax import Declaration, NamespaceBlock, Statement
from .scope import NamespaceScope
from .visitor import StatementVisitor, Visit, traverse


class NameStrategy(Protocol):
    """Resolves a declaration to its fully qualified name, or None."""

    def prepare(self, statements: list[Statement]) -> None:
        ...

    def resolve(self, declaration: Declaration, scope: NamespaceScope) -> Optional[FullyQualifiedName]:
        ...


class LexicalStrategy:
    """Prefix the written name with the lexically current namespace."""

    def prepare(self, statements: list[Statement]) -> None:
        pass

    def resolve(self, declaration: Declaration, scope: NamespaceScope) -> Optional[FullyQualifiedName]:
        # Anonymous declarations have no name to qualify
        if not declaration.name:
            return None
        return FullyQualifiedName.concat(scope.current_prefix(), declaration.name)


class ResolvedStrategy:
    """Use the name annotated by a prior name-resolution pass."""

    def __init__(self, annotate: bool = True):
        # When False, the statements are expected to be annotated already
        self.annotate = annotate

    def prepare(self, statements: list[Statement]) -> None:
        if self.annotate:
            traverse(statements, NameResolver())

    def resolve(self, declaration: Declaration, scope: NamespaceScope) -> Optional[FullyQualifiedName]:
        return declaration.namespaced_name


class NameResolver(StatementVisitor):
    """Annotates every named declaration with its namespaced name.

    Unlike the reflection visitor this walks the whole forest, so nested
    declarations are annotated too. A ``namespace Foo;`` statement applies to
    every statement that follows it until the next namespace statement.
    """

    def __init__(self):
        self.scope = NamespaceScope()

    def before_traverse(self, statements: list[Statement]) -> None:
        self.scope.reset()

    def enter(self, statement: Statement) -> Visit:
        if isinstance(statement, NamespaceBlock):
            self.scope.enter_namespace(statement.name)
        elif isinstance(statement, Declaration) and statement.name:
            statement.namespaced_name = FullyQualifiedName.concat(
                self.scope.current_prefix(), statement.name
            )
        return Visit.CONTINUE


# Strategy registry
STRATEGY_REGISTRY = {
    "lexical": LexicalStrategy,
    "resolved": ResolvedStrategy,
}

DEFAULT_STRATEGY = "resolved"


def get_strategy(name: Optional[str] = None) -> NameStrategy:
    """Build a fresh strategy by registry name.

    Args:
        name: "lexical" or "resolved" (case-insensitive). Defaults to
            DEFAULT_STRATEGY.

    Raises:
        ValueError: If the name is not registered.
    """
    key = (name or DEFAULT_STRATEGY).strip().lower()
    if key not in STRATEGY_REGISTRY:
        raise ValueError(
            f"Unknown strategy: {name!r} (expected one of {', '.join(sorted(STRATEGY_REGISTRY))})"
        )
    return STRATEGY_REGISTRY[key]()
