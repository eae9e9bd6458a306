"""
x86 NOP canonicalization.

Replacement signatures often blank out code with runs of single-byte NOPs
(0x90). This module rewrites each run into the recommended multi-byte NOP
encodings of the same total length, so the patched code decodes as a few
long NOPs instead of many short ones.
"""

from dataclasses import replace
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .pattern import PatternTemplate

NOP = 0x90

# Longest chunk rewritten in one piece
MAX_NOP_CHUNK = 8

# Total length -> canonical encoding
NOP_TABLE: dict[int, bytes] = {
    2: bytes([0x66, 0x90]),  # xchg ax, ax
    3: bytes([0x0F, 0x1F, 0x00]),  # nop dword ptr [rax]
    4: bytes([0x0F, 0x1F, 0x40, 0x00]),  # nop dword ptr [rax + 00]
    5: bytes([0x0F, 0x1F, 0x44, 0x00, 0x00]),  # nop dword ptr [rax + rax + 00]
    6: bytes([0x66, 0x0F, 0x1F, 0x44, 0x00, 0x00]),  # nop word ptr [rax + rax + 00]
    7: bytes([0x0F, 0x1F, 0x80, 0x00, 0x00, 0x00, 0x00]),  # nop dword ptr [rax + 00000000]
    8: bytes([0x0F, 0x1F, 0x84, 0x00, 0x00, 0x00, 0x00, 0x00]),  # nop dword ptr [rax + rax + 00000000]
    9: bytes([0x66, 0x0F, 0x1F, 0x84, 0x00, 0x00, 0x00, 0x00, 0x00]),  # nop word ptr [rax + rax + 00000000]
}


def find_nop_runs(template: "PatternTemplate") -> list[tuple[int, int]]:
    """
    Find maximal runs of 0x90 among non-wildcard positions.

    Returns:
        List of (start, length) tuples in ascending order
    """
    runs = []
    start = None

    for i, b in enumerate(template.data):
        if b == NOP and not template.is_wildcard(i):
            if start is None:
                start = i
        elif start is not None:
            runs.append((start, i - start))
            start = None

    if start is not None:
        runs.append((start, len(template.data) - start))

    return runs


def canonicalize_nops(template: "PatternTemplate") -> "PatternTemplate":
    """
    Rewrite every run of single-byte NOPs into canonical multi-byte NOPs.

    Runs longer than MAX_NOP_CHUNK are split into consecutive chunks; each
    chunk with a NOP_TABLE entry is overwritten with that encoding. Single
    0x90 bytes are left alone.

    Args:
        template: Template to canonicalize (usually a replacement)

    Returns:
        New template of identical length and wildcard set
    """
    data = bytearray(template.data)

    for start, length in find_nop_runs(template):
        for chunk_start in range(start, start + length, MAX_NOP_CHUNK):
            chunk_len = min(MAX_NOP_CHUNK, start + length - chunk_start)
            encoding = NOP_TABLE.get(chunk_len)
            if encoding is not None:
                data[chunk_start : chunk_start + chunk_len] = encoding

    return replace(template, data=bytes(data))
