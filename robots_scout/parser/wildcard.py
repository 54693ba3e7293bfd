# File: robots_scout/parser/wildcard.py
"""Glob-style matching where ``*`` stands for any run of characters."""

from __future__ import annotations

WILDCARD = "*"


def matches(haystack: str, pattern: str) -> bool:
    """Return True if *haystack* matches the ``*``-glob *pattern*.

    Literal segments between asterisks must appear in order. A pattern that does
    not start with ``*`` is anchored at the beginning of *haystack*. The final
    literal segment is *not* anchored at the end: ``"Target"`` matches
    ``"Tar*get"`` as well as ``"Tar and a target getaway"``.
    """
    if WILDCARD not in pattern:
        return haystack == pattern
    if pattern == WILDCARD:
        return True

    segments = pattern.split(WILDCARD)
    position = 0
    if not pattern.startswith(WILDCARD):
        head = segments.pop(0)
        if not haystack.startswith(head):
            return False
        position = len(head)

    for segment in segments:
        if not segment:
            continue
        found = haystack.find(segment, position)
        if found < 0:
            return False
        position = found + len(segment)
    return True


__all__ = ["WILDCARD", "matches"]
