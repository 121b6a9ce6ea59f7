"""Parser package for building statement forests from PHP source."""

from .names import (
    NAMESPACE_SEPARATOR,
    GLOBAL_NAMESPACE,
    DeclarationKind,
    NamespacePrefix,
    FullyQualifiedName,
)
from .languages import LanguageSpec, LANGUAGE_EXTENSIONS, PHP_SPEC
from .syntax import (
    NamespaceBlock,
    Declaration,
    OtherStatement,
    Statement,
    SourceSyntaxError,
    flatten_statements,
)
from .extractor import parse_source

__all__ = [
    "NAMESPACE_SEPARATOR",
    "GLOBAL_NAMESPACE",
    "DeclarationKind",
    "NamespacePrefix",
    "FullyQualifiedName",
    "LanguageSpec",
    "LANGUAGE_EXTENSIONS",
    "PHP_SPEC",
    "NamespaceBlock",
    "Declaration",
    "OtherStatement",
    "Statement",
    "SourceSyntaxError",
    "flatten_statements",
    "parse_source",
]
