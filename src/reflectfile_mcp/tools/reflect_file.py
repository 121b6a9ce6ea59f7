"""Reflect file tool - declared names of one PHP file."""

from pathlib import Path
from typing import Optional

from ..errors import ReflectionError
from ..parser import DeclarationKind
from ..reflected_file import ReflectedFile
from ..reflection import SourceReflectionResult, get_strategy


def reflect_file(
    path: str,
    strategy: Optional[str] = None,
    kind: Optional[str] = None,
) -> dict:
    """Report the top-level declarations of a PHP file.

    Args:
        path: Path to the file (absolute or relative, supports ~)
        strategy: Name strategy ("lexical" or "resolved")
        kind: Optional declaration kind to restrict the output to

    Returns:
        Dict with the file's name, path and declared names, or an error
    """
    try:
        name_strategy = get_strategy(strategy)
        kind_filter = DeclarationKind.from_keyword(kind) if kind else None
    except ValueError as e:
        return {"error": str(e)}

    try:
        reflected = ReflectedFile(Path(path).expanduser(), name_strategy)
        result = reflected.result
    except ReflectionError as e:
        return {"error": str(e)}

    return {
        "file": reflected.file_name,
        "path": reflected.path_name,
        **format_names(result, kind_filter),
    }


def format_names(result: SourceReflectionResult, kind: Optional[DeclarationKind] = None) -> dict:
    """Convert a result to output format, optionally keeping only one kind."""
    names = result.to_dict()
    if kind is None:
        return names

    key = _OUTPUT_KEYS[kind]
    return {key: names[key]}


_OUTPUT_KEYS = {
    DeclarationKind.CLASS: "classes",
    DeclarationKind.TRAIT: "traits",
    DeclarationKind.INTERFACE: "interfaces",
    DeclarationKind.ENUM: "enums",
    DeclarationKind.FUNCTION: "functions",
    DeclarationKind.CONSTANT: "constants",
}
