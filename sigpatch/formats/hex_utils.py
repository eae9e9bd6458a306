"""
sigpatch - Hex String Utilities

Utilities for parsing and formatting the space-separated hex signatures used
in patch-set files. A token is either a one or two digit hex byte or a
wildcard containing "?".
"""

import re
from typing import List, Optional

WILDCARD_CHAR = "?"

_HEX_TOKEN = re.compile(r"[0-9A-Fa-f]{1,2}")


def is_wildcard_token(token: str) -> bool:
    """Return True if the token marks a wildcard position ("?" or "??")."""
    return WILDCARD_CHAR in token


def parse_hex_token(token: str) -> Optional[int]:
    """
    Parse a single signature token.

    Args:
        token: Hex byte ("8B", "0f", "9") or wildcard ("?", "??")

    Returns:
        Byte value 0-255, or None for a wildcard

    Raises:
        ValueError: If the token is neither a hex byte nor a wildcard

    Example:
        >>> parse_hex_token("8B")
        139
        >>> parse_hex_token("??") is None
        True
    """
    if is_wildcard_token(token):
        return None
    if not _HEX_TOKEN.fullmatch(token):
        raise ValueError(f"Invalid hex byte token: {token!r}")
    return int(token, 16)


def parse_signature(signature: str) -> List[Optional[int]]:
    """
    Parse whitespace-separated signature text into byte values.

    Args:
        signature: Signature text (e.g., "E8 ? ? ? 90")

    Returns:
        List with one entry per token; wildcards are None

    Raises:
        ValueError: If the signature is empty or contains a bad token

    Example:
        >>> parse_signature("E8 ? 90")
        [232, None, 144]
    """
    tokens = signature.split()
    if not tokens:
        raise ValueError("Signature is empty")
    return [parse_hex_token(token) for token in tokens]


def format_signature(data: bytes, wildcards=frozenset()) -> str:
    """
    Format bytes back to signature text, rendering wildcard positions as "?".

    Example:
        >>> format_signature(bytes([0xE8, 0, 0x90]), {1})
        'E8 ? 90'
    """
    return " ".join(
        WILDCARD_CHAR if i in wildcards else f"{b:02X}" for i, b in enumerate(data)
    )
