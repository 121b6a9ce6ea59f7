"""Grammar mapping from tree-sitter PHP node types to statement kinds."""

from dataclasses import dataclass

from .names import DeclarationKind


@dataclass
class LanguageSpec:
    """Specification for building the statement forest from a language's AST."""
    # tree-sitter language name (for tree-sitter-language-pack)
    ts_language: str

    # Node type that opens a namespace (braced or semicolon form)
    namespace_node_type: str

    # Node types that declare a named type or function
    # Maps node_type -> declaration kind
    declaration_node_types: dict[str, DeclarationKind]

    # How to extract the declared name from a node
    # Maps node_type -> child field name containing the name
    name_fields: dict[str, str]

    # Statement that declares one or more constants, and the node type of
    # each individual constant inside it
    constant_node_type: str
    constant_element_type: str

    # Node type holding an identifier (constant names carry no field)
    identifier_node_type: str

    # Field holding the nested statements of a node
    body_field: str

    # Named nodes that are not statements at all
    ignored_node_types: list[str]


# File extension to language mapping
LANGUAGE_EXTENSIONS = {
    ".php": "php",
    ".phtml": "php",
    ".inc": "php",
}


# PHP specification. Keywords are matched case-insensitively by the grammar
# itself, so "CLASS Foo {}" still yields a class_declaration node.
PHP_SPEC = LanguageSpec(
    ts_language="php",
    namespace_node_type="namespace_definition",
    declaration_node_types={
        "class_declaration": DeclarationKind.CLASS,
        "trait_declaration": DeclarationKind.TRAIT,
        "interface_declaration": DeclarationKind.INTERFACE,
        "enum_declaration": DeclarationKind.ENUM,
        "function_definition": DeclarationKind.FUNCTION,
    },
    name_fields={
        "namespace_definition": "name",
        "class_declaration": "name",
        "trait_declaration": "name",
        "interface_declaration": "name",
        "enum_declaration": "name",
        "function_definition": "name",
    },
    constant_node_type="const_declaration",
    constant_element_type="const_element",
    identifier_node_type="name",
    body_field="body",
    ignored_node_types=["php_tag", "text", "text_interpolation", "comment"],
)
