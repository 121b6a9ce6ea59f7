"""Immutable result of reflecting one source."""

from dataclasses import dataclass

from ..parser.names import DeclarationKind


@dataclass(frozen=True)
class SourceReflectionResult:
    """The declared names of a source, one tuple per declaration kind."""
    class_names: tuple[str, ...] = ()
    trait_names: tuple[str, ...] = ()
    interface_names: tuple[str, ...] = ()
    enum_names: tuple[str, ...] = ()
    function_names: tuple[str, ...] = ()
    constant_names: tuple[str, ...] = ()

    def names(self, kind: DeclarationKind) -> tuple[str, ...]:
        """Get the names declared with the given kind."""
        return {
            DeclarationKind.CLASS: self.class_names,
            DeclarationKind.TRAIT: self.trait_names,
            DeclarationKind.INTERFACE: self.interface_names,
            DeclarationKind.ENUM: self.enum_names,
            DeclarationKind.FUNCTION: self.function_names,
            DeclarationKind.CONSTANT: self.constant_names,
        }[kind]

    def is_empty(self) -> bool:
        return not any(self.names(kind) for kind in DeclarationKind)

    def to_dict(self) -> dict:
        """Convert to a JSON-friendly dict keyed by plural kind."""
        return {
            "classes": list(self.class_names),
            "traits": list(self.trait_names),
            "interfaces": list(self.interface_names),
            "enums": list(self.enum_names),
            "functions": list(self.function_names),
            "constants": list(self.constant_names),
        }
