"""Ordered per-kind accumulation of declared names."""

from ..parser.names import DeclarationKind, FullyQualifiedName
from .result import SourceReflectionResult


class DeclarationCollector:
    """Appends fully qualified names to one ordered list per kind.

    Duplicates are kept: a file may declare the same name in two blocks.
    """

    def __init__(self):
        self._names: dict[DeclarationKind, list[str]] = {kind: [] for kind in DeclarationKind}

    def collect(self, kind: DeclarationKind, name: FullyQualifiedName) -> None:
        self._names[kind].append(str(name))

    def freeze(self) -> SourceReflectionResult:
        """Build the immutable result from everything collected so far."""
        return SourceReflectionResult(
            class_names=tuple(self._names[DeclarationKind.CLASS]),
            trait_names=tuple(self._names[DeclarationKind.TRAIT]),
            interface_names=tuple(self._names[DeclarationKind.INTERFACE]),
            enum_names=tuple(self._names[DeclarationKind.ENUM]),
            function_names=tuple(self._names[DeclarationKind.FUNCTION]),
            constant_names=tuple(self._names[DeclarationKind.CONSTANT]),
        )
