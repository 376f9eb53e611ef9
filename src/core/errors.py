from __future__ import annotations

import enum
from typing import Optional


class FilezError(Exception):
    """Base error for file store operations."""

    @property
    def source(self) -> Optional[BaseException]:
        # Underlying cause, set via `raise ... from err`
        return self.__cause__


class ValidationError(FilezError):
    """Raised when user input is invalid."""


class ReadError(FilezError):
    """Raised when a file cannot be opened, read or decoded."""

    def __init__(self, path: str) -> None:
        super().__init__(f"error reading `{path}`")
        self.path = path


class WriteError(FilezError):
    """Raised when a file or its parent directories cannot be written."""

    def __init__(self, path: str) -> None:
        super().__init__(f"error writing `{path}`")
        self.path = path


class ListErrorKind(enum.Enum):
    PARSE_GLOB = "parse_glob"
    READ_PATH = "read_path"


class ListError(FilezError):
    """Raised when a glob expression cannot be parsed or enumerated."""

    def __init__(self, expression: str, kind: ListErrorKind) -> None:
        super().__init__(f"error listing `{expression}`")
        self.expression = expression
        self.kind = kind


class GlobPatternError(ValueError):
    """Raised for malformed glob syntax."""

    def __init__(self, pos: int, msg: str) -> None:
        super().__init__(f"Pattern syntax error near position {pos}: {msg}")
        self.pos = pos
        self.msg = msg
