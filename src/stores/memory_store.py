"""In-memory FileStore implementation.

Keeps file contents in a dict keyed by relative path. Directories are
implicit, so writes never need to create parents. Useful as a test double
for code that depends on a FileStore.
"""

from __future__ import annotations

import errno
import logging
import os
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional

from core.errors import GlobPatternError, ListError, ListErrorKind, ReadError, WriteError
from core.paths import glob_match, split_posix, validate_pattern

logger = logging.getLogger(__name__)


def _key(path: str) -> str:
    # "./a.txt" and "a.txt" name the same file on disk too
    return "/".join(seg for seg in split_posix(path) if seg != ".")


class MemoryFileStore:
    def __init__(self, files: Optional[Mapping[str, str]] = None) -> None:
        self._files: Dict[str, str] = {}
        for path, content in (files or {}).items():
            self._files[_key(path)] = content

    @property
    def files(self) -> Mapping[str, str]:
        return MappingProxyType(self._files)

    async def read(self, path: str) -> str:
        key = _key(path)
        if key not in self._files:
            logger.debug("read of missing in-memory path %s", path)
            raise ReadError(path) from FileNotFoundError(
                errno.ENOENT, os.strerror(errno.ENOENT), path
            )
        return self._files[key]

    async def write(self, path: str, content: str) -> None:
        key = _key(path)
        if not key:
            raise WriteError(path) from OSError("could not get parent directory")
        self._files[key] = content

    def list(self, expression: str) -> List[str]:
        try:
            validate_pattern(expression)
        except GlobPatternError as e:
            raise ListError(expression, ListErrorKind.PARSE_GLOB) from e

        return sorted(p for p in self._files if glob_match(p, expression))
