"""
sigpatch - Pattern Templates

Compiled form of a hex signature: the bytes to compare plus the set of
positions that match (or, in a replacement, preserve) any byte.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable

from ..formats.hex_utils import format_signature, parse_signature
from .errors import PatternParseError
from .nops import canonicalize_nops as _canonicalize_nops

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PatternTemplate:
    """
    Immutable byte/wildcard template.

    Bytes at wildcard positions carry no meaning and are stored as 0.
    """

    data: bytes
    wildcards: frozenset[int] = field(default_factory=frozenset)

    def __post_init__(self):
        if not self.data:
            raise PatternParseError("Pattern is empty")
        for index in self.wildcards:
            if not 0 <= index < len(self.data):
                raise PatternParseError(
                    f"Wildcard position {index} outside pattern of length {len(self.data)}"
                )

    @classmethod
    def from_bytes(cls, data: bytes, wildcards: Iterable[int] = ()) -> "PatternTemplate":
        """
        Build a template from raw bytes.

        Args:
            data: Template bytes
            wildcards: Positions to treat as wildcards

        Returns:
            PatternTemplate with wildcard positions zeroed

        Raises:
            PatternParseError: If data is empty or a wildcard is out of range
        """
        wildcards = frozenset(wildcards)
        zeroed = bytes(0 if i in wildcards else b for i, b in enumerate(data))
        return cls(zeroed, wildcards)

    def __len__(self) -> int:
        return len(self.data)

    def is_wildcard(self, index: int) -> bool:
        return index in self.wildcards

    def __str__(self) -> str:
        return format_signature(self.data, self.wildcards)

    def __repr__(self) -> str:
        return f"PatternTemplate({str(self)!r})"


def compile_pattern(text: str, canonicalize_nops: bool = False) -> PatternTemplate:
    """
    Compile signature text into a PatternTemplate.

    Args:
        text: Whitespace-separated tokens, e.g. "83 3D ? ? 75 ?"
        canonicalize_nops: Rewrite runs of 0x90 into multi-byte NOPs
            (used for replacement templates only)

    Returns:
        Compiled template

    Raises:
        PatternParseError: If the text is empty or has a malformed token
    """
    try:
        values = parse_signature(text)
    except ValueError as e:
        raise PatternParseError(f"Cannot compile pattern {text!r}: {e}") from e

    wildcards = frozenset(i for i, value in enumerate(values) if value is None)
    template = PatternTemplate(
        bytes(0 if value is None else value for value in values), wildcards
    )

    if canonicalize_nops:
        template = _canonicalize_nops(template)

    logger.debug("Compiled pattern %r -> %s", text, template)
    return template
