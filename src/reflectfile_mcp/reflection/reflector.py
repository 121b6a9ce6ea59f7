"""Source reflector: one pass over a statement forest, one frozen result."""

from typing import Optional, Union

from ..errors import ParseFailure
from ..parser import SourceSyntaxError, Statement, parse_source
from .collector import DeclarationCollector
from .result import SourceReflectionResult
from .strategies import NameStrategy, get_strategy
from .visitor import ReflectionVisitor, traverse


class SourceReflector:
    """Reports the declarations of an already parsed source.

    The reflector never parses; it walks the statements it is given exactly
    once and collects all six kinds in that single pass.
    """

    def __init__(self, strategy: Optional[NameStrategy] = None):
        self.strategy = strategy if strategy is not None else get_strategy()

    def reflect(self, statements: Optional[list[Statement]]) -> SourceReflectionResult:
        """Collect the declared names of a statement forest.

        Raises:
            ValueError: If there is no tree, because parsing never produced one.
        """
        if statements is None:
            raise ValueError("Cannot reflect without a syntax tree")

        self.strategy.prepare(statements)

        visitor = ReflectionVisitor(self.strategy, DeclarationCollector())
        traverse(statements, visitor)

        return visitor.collector.freeze()


def reflect_source(
    source: Union[str, bytes],
    strategy: Optional[NameStrategy] = None,
) -> SourceReflectionResult:
    """Parse and reflect a PHP source.

    Args:
        source: PHP source, as text or raw bytes
        strategy: Name strategy; defaults to the resolved strategy

    Returns:
        The declared names of the source

    Raises:
        ParseFailure: When the source could not be parsed.
    """
    try:
        statements = parse_source(source)
    except SourceSyntaxError as error:
        raise ParseFailure(f"The source could not be parsed: {error}") from error

    return SourceReflector(strategy).reflect(statements)
