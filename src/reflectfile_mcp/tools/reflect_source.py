"""Reflect source tool - declared names of a PHP source string."""

from typing import Optional

from ..errors import ReflectionError
from ..parser import DeclarationKind
from ..reflection import get_strategy, reflect_source as reflect
from .reflect_file import format_names


def reflect_source(
    source: str,
    strategy: Optional[str] = None,
    kind: Optional[str] = None,
) -> dict:
    """Report the top-level declarations of a PHP source.

    The source must open with ``<?php`` like a file would; anything before
    the tag is inline HTML.
    """
    try:
        name_strategy = get_strategy(strategy)
        kind_filter = DeclarationKind.from_keyword(kind) if kind else None
    except ValueError as e:
        return {"error": str(e)}

    try:
        result = reflect(source, name_strategy)
    except ReflectionError as e:
        return {"error": str(e)}

    return format_names(result, kind_filter)
