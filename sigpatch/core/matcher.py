"""
Signature matching over raw byte buffers.

A plain sliding-window scan: every offset is tested against the template,
skipping wildcard positions. Overlapping matches are all reported.
"""

from typing import Optional

from .pattern import PatternTemplate


def matches_at(template: PatternTemplate, buffer: bytes, offset: int) -> bool:
    """
    Check whether the template matches the buffer at a given offset.

    Args:
        template: Compiled search template
        buffer: Bytes to inspect
        offset: Start of the window

    Returns:
        True if every non-wildcard byte is equal
    """
    if offset < 0 or offset + len(template) > len(buffer):
        return False
    return all(
        template.is_wildcard(j) or buffer[offset + j] == b
        for j, b in enumerate(template.data)
    )


def _iter_matches(template: PatternTemplate, buffer: bytes):
    if len(buffer) < len(template):
        return

    if not template.wildcards:
        # Exact signature: bytes.find gives the same offsets, overlaps included
        offset = buffer.find(template.data)
        while offset >= 0:
            yield offset
            offset = buffer.find(template.data, offset + 1)
        return

    for offset in range(len(buffer) - len(template) + 1):
        if matches_at(template, buffer, offset):
            yield offset


def find_first(template: PatternTemplate, buffer: bytes) -> Optional[int]:
    """
    Find the first offset where the template matches.

    Returns:
        Smallest matching offset, or None if there is no match or the
        buffer is shorter than the template
    """
    return next(_iter_matches(template, buffer), None)


def find_all(template: PatternTemplate, buffer: bytes) -> list[int]:
    """
    Find every offset where the template matches.

    Returns:
        Ascending list of offsets; empty if the buffer is shorter than the
        template
    """
    return list(_iter_matches(template, buffer))
