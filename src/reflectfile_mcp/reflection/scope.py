"""Namespace scope tracking for the reflection walker."""

from typing import Union

from ..parser.names import GLOBAL_NAMESPACE, NamespacePrefix


class NamespaceScope:
    """Holds the namespace prefix in effect while walking a file.

    PHP namespaces cannot nest, so a single cell is enough: entering a
    namespace replaces the prefix, and nothing is restored when a braced
    block ends. The prefix stays until the next namespace statement.
    """

    def __init__(self):
        self._prefix = GLOBAL_NAMESPACE

    def current_prefix(self) -> NamespacePrefix:
        return self._prefix

    def enter_namespace(self, name: Union[NamespacePrefix, str, None] = None) -> None:
        """Start a new namespace. ``None`` is the global namespace."""
        if isinstance(name, NamespacePrefix):
            self._prefix = name
        else:
            self._prefix = NamespacePrefix.parse(name)

    def reset(self) -> None:
        self._prefix = GLOBAL_NAMESPACE
