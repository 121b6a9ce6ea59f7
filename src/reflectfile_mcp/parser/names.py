"""Declaration kinds and namespaced name value objects."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


NAMESPACE_SEPARATOR = "\\"


class DeclarationKind(Enum):
    """Kinds of top-level named declarations reported for a file."""
    CLASS = "class"
    TRAIT = "trait"
    INTERFACE = "interface"
    ENUM = "enum"
    FUNCTION = "function"
    CONSTANT = "const"

    @classmethod
    def from_keyword(cls, keyword: str) -> "DeclarationKind":
        """Look up a kind by its introducing keyword, ignoring case.

        Accepts the PHP keyword ("const") as well as the member name
        ("constant"), so "CLASS", "Class" and "class" are all the same kind.

        Raises:
            ValueError: If the keyword names no declaration kind.
        """
        key = keyword.strip().lower()
        for kind in cls:
            if key in (kind.value, kind.name.lower()):
                return kind
        raise ValueError(f"Unknown declaration keyword: {keyword!r}")


@dataclass(frozen=True)
class NamespacePrefix:
    """An ordered sequence of namespace segments. Empty means global."""
    segments: tuple[str, ...] = ()

    @classmethod
    def parse(cls, text: Optional[str]) -> "NamespacePrefix":
        """Parse a written namespace name such as ``Foo\\Bar``.

        A leading separator is ignored; ``None`` or an empty string is the
        global namespace.
        """
        if not text:
            return cls()
        parts = [part.strip() for part in text.split(NAMESPACE_SEPARATOR)]
        return cls(tuple(part for part in parts if part))

    @property
    def is_global(self) -> bool:
        return not self.segments

    def __str__(self) -> str:
        return NAMESPACE_SEPARATOR.join(self.segments)


GLOBAL_NAMESPACE = NamespacePrefix()


@dataclass(frozen=True)
class FullyQualifiedName:
    """A namespace prefix joined with a local identifier."""
    namespace: NamespacePrefix
    name: str

    @classmethod
    def concat(cls, namespace: Optional[NamespacePrefix], name: str) -> "FullyQualifiedName":
        return cls(namespace or GLOBAL_NAMESPACE, name)

    @property
    def segments(self) -> tuple[str, ...]:
        return self.namespace.segments + (self.name,)

    def __str__(self) -> str:
        """Serialize without a leading separator: ``Foo\\Bar`` or ``Bar``."""
        return NAMESPACE_SEPARATOR.join(self.segments)
