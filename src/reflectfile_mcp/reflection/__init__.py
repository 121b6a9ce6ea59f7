"""Declaration reflection over parsed PHP sources."""

from .result import SourceReflectionResult
from .scope import NamespaceScope
from .collector import DeclarationCollector
from .visitor import Visit, StatementVisitor, ReflectionVisitor, traverse
from .strategies import (
    NameStrategy,
    LexicalStrategy,
    ResolvedStrategy,
    NameResolver,
    STRATEGY_REGISTRY,
    DEFAULT_STRATEGY,
    get_strategy,
)
from .reflector import SourceReflector, reflect_source

__all__ = [
    "SourceReflectionResult",
    "NamespaceScope",
    "DeclarationCollector",
    "Visit",
    "StatementVisitor",
    "ReflectionVisitor",
    "traverse",
    "NameStrategy",
    "LexicalStrategy",
    "ResolvedStrategy",
    "NameResolver",
    "STRATEGY_REGISTRY",
    "DEFAULT_STRATEGY",
    "get_strategy",
    "SourceReflector",
    "reflect_source",
]
