"""Build the statement forest of a PHP source using tree-sitter."""

from typing import Optional, Union
from tree_sitter_language_pack import get_parser

from .languages import LanguageSpec, PHP_SPEC
from .names import DeclarationKind
from .syntax import Declaration, NamespaceBlock, OtherStatement, SourceSyntaxError, Statement


def parse_source(source: Union[str, bytes], spec: LanguageSpec = PHP_SPEC) -> list[Statement]:
    """Parse source code into a forest of top-level statements.

    Args:
        source: Raw source code, as text or as the bytes read from disk
        spec: Grammar mapping to build statements with

    Returns:
        List of statements in source order. Content outside ``<?php`` tags
        yields no statements.

    Raises:
        SourceSyntaxError: If tree-sitter reports an error or missing node.
    """
    source_bytes = source.encode("utf-8") if isinstance(source, str) else source

    parser = get_parser(spec.ts_language)
    tree = parser.parse(source_bytes)

    root = tree.root_node
    if root.has_error:
        raise _syntax_error(root, source_bytes)

    return _build_statements(root, spec, source_bytes)


def _build_statements(node, spec: LanguageSpec, source_bytes: bytes) -> list[Statement]:
    """Convert the named children of a node into statements."""
    statements = []
    for child in node.named_children:
        if child.type in spec.ignored_node_types:
            continue
        statements.extend(_build_statement(child, spec, source_bytes))
    return statements


def _build_statement(node, spec: LanguageSpec, source_bytes: bytes) -> list[Statement]:
    """Convert one node. A constant statement may declare several names."""
    if node.type == spec.namespace_node_type:
        body = node.child_by_field_name(spec.body_field)
        return [NamespaceBlock(
            name=_field_text(node, spec, source_bytes),
            statements=_build_statements(body, spec, source_bytes) if body is not None else [],
            braced=body is not None,
        )]

    if node.type in spec.declaration_node_types:
        return [Declaration(
            kind=spec.declaration_node_types[node.type],
            name=_field_text(node, spec, source_bytes),
            body=_body_statements(node, spec, source_bytes),
        )]

    if node.type == spec.constant_node_type:
        return [
            Declaration(kind=DeclarationKind.CONSTANT, name=_constant_name(element, spec, source_bytes))
            for element in node.named_children
            if element.type == spec.constant_element_type
        ]

    return [OtherStatement(type=node.type, body=_body_statements(node, spec, source_bytes))]


def _body_statements(node, spec: LanguageSpec, source_bytes: bytes) -> list[Statement]:
    body = node.child_by_field_name(spec.body_field)
    if body is None:
        return []
    return _build_statements(body, spec, source_bytes)


def _constant_name(element, spec: LanguageSpec, source_bytes: bytes) -> Optional[str]:
    """Constant elements carry their name as the first identifier child."""
    for child in element.named_children:
        if child.type == spec.identifier_node_type:
            return _node_text(child, source_bytes)
    return None


def _field_text(node, spec: LanguageSpec, source_bytes: bytes) -> Optional[str]:
    """Extract the name from an AST node."""
    if node.type not in spec.name_fields:
        return None

    name_node = node.child_by_field_name(spec.name_fields[node.type])
    if name_node is not None:
        return _node_text(name_node, source_bytes)

    return None


def _node_text(node, source_bytes: bytes) -> str:
    return source_bytes[node.start_byte:node.end_byte].decode("utf-8", errors="replace").strip()


def _syntax_error(root, source_bytes: bytes) -> SourceSyntaxError:
    """Describe the first error or missing node below the root."""
    node = _first_error(root)
    if node is None:
        node = root
    line = node.start_point[0] + 1
    column = node.start_point[1] + 1

    if node.is_missing:
        message = f"Syntax error, missing '{node.type}'"
    elif node.type == "ERROR":
        snippet = _node_text(node, source_bytes).split("\n")[0][:40]
        message = f"Syntax error, unexpected '{snippet}'" if snippet else "Syntax error"
    else:
        message = "Syntax error"

    return SourceSyntaxError(message, line=line, column=column)


def _first_error(node):
    if node.type == "ERROR" or node.is_missing:
        return node
    for child in node.children:
        if child.has_error:
            found = _first_error(child)
            if found is not None:
                return found
    return None
