"""Reflection of a PHP file on disk."""

import logging
import os
from pathlib import Path
from typing import Optional, Union

from .errors import FileAccessError
from .parser.names import DeclarationKind
from .reflection import NameStrategy, SourceReflectionResult, reflect_source

logger = logging.getLogger(__name__)


class ReflectedFile:
    """Reports the declarations of a file without loading it.

    The names come from parsing the file, so only what the file itself
    declares is reported, never what it merely references or what happens
    to be loaded already.
    """

    def __init__(
        self,
        file_or_path: Union[str, os.PathLike],
        strategy: Optional[NameStrategy] = None,
    ):
        """Read the file to reflect.

        Args:
            file_or_path: Path of the file to reflect
            strategy: Name strategy; defaults to the resolved strategy

        Raises:
            FileAccessError: When the file does not exist or could not be read.
        """
        path = Path(file_or_path)

        if not path.is_file():
            raise FileAccessError(f'File "{file_or_path}" does not exist')

        try:
            raw_source = path.read_bytes()
        except OSError as e:
            raise FileAccessError(f'File "{file_or_path}" could not be read') from e

        logger.debug("Read %d bytes from %s", len(raw_source), path)

        self._path = path
        self._raw_source = raw_source
        self._strategy = strategy
        self._result: Optional[SourceReflectionResult] = None

    @property
    def file_name(self) -> str:
        return self._path.name

    @property
    def path_name(self) -> str:
        return str(self._path)

    @property
    def raw_source(self) -> bytes:
        return self._raw_source

    @property
    def source(self) -> str:
        """The source of the file, verbatim."""
        return self._raw_source.decode("utf-8", errors="replace")

    @property
    def result(self) -> SourceReflectionResult:
        """The declared names of the file, parsed on first access.

        Raises:
            ParseFailure: When the file could not be parsed.
        """
        if self._result is None:
            self._result = reflect_source(self._raw_source, self._strategy)
            logger.debug("Reflected %s: %s", self._path, self._result)
        return self._result

    @property
    def class_names(self) -> list[str]:
        return list(self.result.class_names)

    @property
    def trait_names(self) -> list[str]:
        return list(self.result.trait_names)

    @property
    def interface_names(self) -> list[str]:
        return list(self.result.interface_names)

    @property
    def enum_names(self) -> list[str]:
        return list(self.result.enum_names)

    @property
    def function_names(self) -> list[str]:
        return list(self.result.function_names)

    @property
    def constant_names(self) -> list[str]:
        return list(self.result.constant_names)

    def names(self, kind: DeclarationKind) -> list[str]:
        return list(self.result.names(kind))

    def __str__(self) -> str:
        return self.source

    def __repr__(self) -> str:
        return f"ReflectedFile({self.path_name!r})"


def open_file(
    file_or_path: Union[str, os.PathLike],
    strategy: Optional[NameStrategy] = None,
) -> ReflectedFile:
    """Open a file for reflection. See ``ReflectedFile``."""
    return ReflectedFile(file_or_path, strategy)
