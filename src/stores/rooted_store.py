from __future__ import annotations

import asyncio
import logging
import os
from typing import List

from core.errors import GlobPatternError, ListError, ListErrorKind, ReadError, WriteError
from core.paths import iter_glob


"""Directory-rooted FileStore implementation.

Every relative path is joined onto a fixed parent directory before it
reaches the OS. Paths are not sanitized: '..' segments can leave the root.
"""

logger = logging.getLogger(__name__)


class RootedFileStore:
    # On-disk implementation of FileStore.

    def __init__(self, root: str) -> None:
        # Not validated; the root may not exist yet.
        self._root = root

    @property
    def root(self) -> str:
        return self._root

    def _with_root(self, path: str) -> str:
        return f"{self._root}/{path}"

    async def read(self, path: str) -> str:
        full = self._with_root(path)

        def _do() -> str:
            # newline="" keeps the text exactly as stored
            with open(full, "r", encoding="utf-8", newline="") as f:
                return f.read()

        try:
            return await asyncio.to_thread(_do)
        except (OSError, UnicodeDecodeError) as e:
            logger.debug("read failed for %s: %s", full, e)
            raise ReadError(path) from e

    async def write(self, path: str, content: str) -> None:
        full = self._with_root(path)
        parent = os.path.dirname(full)

        # A filesystem root is its own dirname and has no parent to create.
        target = os.path.normpath(full)
        if os.path.dirname(target) == target:
            raise WriteError(path) from OSError("could not get parent directory")

        def _do() -> None:
            os.makedirs(parent, exist_ok=True)
            with open(full, "w", encoding="utf-8", newline="") as f:
                f.write(content)

        try:
            await asyncio.to_thread(_do)
        except (OSError, UnicodeEncodeError) as e:
            logger.debug("write failed for %s: %s", full, e)
            raise WriteError(path) from e

    def list(self, expression: str) -> List[str]:
        try:
            matches = iter_glob(self._root, expression)
        except GlobPatternError as e:
            raise ListError(expression, ListErrorKind.PARSE_GLOB) from e

        out: List[str] = []
        try:
            for full, rel in matches:
                if not os.path.isfile(full):
                    continue
                try:
                    rel.encode("utf-8")
                except UnicodeEncodeError:
                    # Undecodable names surface as surrogate escapes; drop them.
                    logger.debug("skipping non-text path %r", full)
                    continue
                out.append(rel)
        except OSError as e:
            logger.debug("listing %s under %s failed: %s", expression, self._root, e)
            raise ListError(expression, ListErrorKind.READ_PATH) from e

        return out
