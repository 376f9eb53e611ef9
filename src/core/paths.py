from __future__ import annotations

import fnmatch
import os
from typing import Iterator, Tuple

from core.errors import GlobPatternError

"""
Glob utilities shared by the file stores.

Provides pattern validation, a component-wise '**' supporting matcher for
in-memory paths, and a directory walker that expands a pattern on disk.
"""

_MAGIC = frozenset("*?[")


def split_posix(p: str) -> Tuple[str, ...]:
    """Split a POSIX path into non-empty segments."""
    s = (p or "").replace("\\", "/").strip("/")
    if not s:
        return tuple()
    return tuple(seg for seg in s.split("/") if seg)


def pattern_segments(pattern: str) -> Tuple[str, ...]:
    """Split a glob pattern into the components the matchers walk.

    "." components are dropped and runs of "**" collapse into one, so each
    match is reached by exactly one route.
    """
    out = []
    for seg in split_posix(pattern):
        if seg == ".":
            continue
        if seg == "**" and out and out[-1] == "**":
            continue
        out.append(seg)
    return tuple(out)


def has_magic(segment: str) -> bool:
    return any(c in _MAGIC for c in segment)


def validate_pattern(pattern: str) -> None:
    """Reject malformed glob syntax.

    Raises GlobPatternError for runs of three or more '*', a '**' that
    shares its path component with other characters, and '[' classes
    with no closing ']'.
    """
    n = len(pattern)
    i = 0
    while i < n:
        c = pattern[i]
        if c == "*":
            start = i
            while i < n and pattern[i] == "*":
                i += 1
            count = i - start
            if count > 2:
                raise GlobPatternError(
                    start + 2, "wildcards are either regular `*` or recursive `**`"
                )
            if count == 2:
                if start > 0 and pattern[start - 1] != "/":
                    raise GlobPatternError(
                        start, "recursive wildcards must form a single path component"
                    )
                if i < n and pattern[i] != "/":
                    raise GlobPatternError(
                        i, "recursive wildcards must form a single path component"
                    )
        elif c == "[":
            j = i + 1
            if j < n and pattern[j] == "!":
                j += 1
            # A ']' right after the opener is a literal member.
            if j < n and pattern[j] == "]":
                j += 1
            close = pattern.find("]", j)
            if close < 0:
                raise GlobPatternError(i, "invalid range pattern")
            i = close + 1
        else:
            i += 1


def glob_match(rel_path: str, pattern: str) -> bool:
    """Match a relative file path against a glob pattern with '**' support.

    A trailing '**' only matches directories, so it never matches a file.
    """
    parts = split_posix(rel_path)
    pats = pattern_segments(pattern)
    if pats[-1:] == ("**",):
        return False

    def rec(i: int, j: int) -> bool:
        if j == len(pats):
            return i == len(parts)

        token = pats[j]
        if token == "**":
            return rec(i, j + 1) or (i < len(parts) and rec(i + 1, j))

        return (
            i < len(parts)
            and fnmatch.fnmatchcase(parts[i], token)
            and rec(i + 1, j + 1)
        )

    return rec(0, 0)


def iter_glob(base: str, pattern: str) -> Iterator[Tuple[str, str]]:
    """Expand `pattern` under the directory `base`.

    Yields (full_path, rel_path) pairs, where rel_path joins the matched
    components with '/'. "." components are skipped; other literal components
    are kept as written. Entries of every type are yielded; callers filter.
    Directories are visited in sorted name order. OSError from reading a
    directory propagates.
    """
    validate_pattern(pattern)
    return _expand(base, "", pattern_segments(pattern))


def _join_rel(rel: str, name: str) -> str:
    return f"{rel}/{name}" if rel else name


def _sorted_entries(dir_path: str):
    with os.scandir(dir_path) as it:
        return sorted(it, key=lambda e: e.name)


def _expand(dir_path: str, rel: str, segs: Tuple[str, ...]) -> Iterator[Tuple[str, str]]:
    if not segs:
        yield dir_path, rel
        return

    seg, rest = segs[0], segs[1:]

    if seg == "**":
        if not os.path.isdir(dir_path):
            return
        # Zero directories first, then descend keeping '**' in front.
        yield from _expand(dir_path, rel, rest)
        for entry in _sorted_entries(dir_path):
            if entry.is_dir():
                yield from _expand(entry.path, _join_rel(rel, entry.name), segs)
        return

    if has_magic(seg):
        if not os.path.isdir(dir_path):
            return
        for entry in _sorted_entries(dir_path):
            if not fnmatch.fnmatchcase(entry.name, seg):
                continue
            if rest and not entry.is_dir():
                continue
            yield from _expand(entry.path, _join_rel(rel, entry.name), rest)
        return

    candidate = os.path.join(dir_path, seg)
    if rest:
        if os.path.isdir(candidate):
            yield from _expand(candidate, _join_rel(rel, seg), rest)
    elif os.path.lexists(candidate):
        yield candidate, _join_rel(rel, seg)
