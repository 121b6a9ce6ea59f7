"""Exceptions raised while reflecting a file or a source."""

from typing import Optional

from .parser.syntax import SourceSyntaxError


class ReflectionError(Exception):
    """Base class for reflection failures."""


class FileAccessError(ReflectionError):
    """The file to reflect does not exist or could not be read."""


class ParseFailure(ReflectionError):
    """The source could not be parsed.

    The parser's own error is kept as ``__cause__``.
    """

    @property
    def diagnostic(self) -> Optional[SourceSyntaxError]:
        cause = self.__cause__
        return cause if isinstance(cause, SourceSyntaxError) else None
