"""
SignaturePatch implementation for search-and-replace byte patches.
"""

import logging

from ...formats.hex_utils import format_signature
from ..errors import PatchLengthError
from ..matcher import find_all
from ..pattern import PatternTemplate, compile_pattern
from .base import BinaryPatch

logger = logging.getLogger(__name__)


class SignaturePatch(BinaryPatch):
    """
    A patch that rewrites every occurrence of a byte signature.

    The search template may contain wildcards to widen matching. Wildcards in
    the replacement template keep whatever byte is in the buffer at that
    position when the match is rewritten.
    """

    def __init__(
        self,
        name: str,
        search: PatternTemplate,
        replacement: PatternTemplate,
        order: int = 0,
        description: str = "",
    ):
        """
        Create a signature patch.

        Args:
            name: Short identifier for the patch
            search: Template to locate
            replacement: Template written over each match
            order: Sort key within a patch set (ascending)
            description: Human-readable description of what the patch does

        Raises:
            PatchLengthError: If search and replacement lengths differ
        """
        if len(search) != len(replacement):
            raise PatchLengthError(
                f"Patch '{name}': search is {len(search)} bytes but replacement "
                f"is {len(replacement)} bytes"
            )

        self.name = name
        self.search = search
        self.replacement = replacement
        self.order = order
        self.description = description

    @classmethod
    def from_strings(
        cls,
        name: str,
        pattern: str,
        patch: str,
        order: int = 0,
        description: str = "",
    ) -> "SignaturePatch":
        """
        Compile a patch from signature text.

        The replacement has its NOP runs canonicalized; the search pattern is
        used exactly as written.

        Raises:
            PatternParseError: If either signature is malformed
            PatchLengthError: If the compiled lengths differ
        """
        return cls(
            name,
            compile_pattern(pattern),
            compile_pattern(patch, canonicalize_nops=True),
            order=order,
            description=description,
        )

    def find_matches(self, buffer: bytearray) -> list[int]:
        return find_all(self.search, buffer)

    def build_replacement(self, buffer: bytearray, offset: int) -> bytes:
        """
        Resolve the replacement bytes for a match at the given offset.

        Wildcard positions take the buffer's current byte at the same
        absolute position.
        """
        return bytes(
            buffer[offset + j] if self.replacement.is_wildcard(j) else b
            for j, b in enumerate(self.replacement.data)
        )

    def apply(self, buffer: bytearray) -> list[int]:
        """
        Rewrite every match of the search template.

        Matches are located once against the buffer as it is on entry, then
        rewritten in ascending order.

        Args:
            buffer: Binary contents to modify in place

        Returns:
            Offsets that were rewritten
        """
        matches = self.find_matches(buffer)
        logger.info("    Found %d match(es)", len(matches))

        for offset in matches:
            patched = self.build_replacement(buffer, offset)
            buffer[offset : offset + len(patched)] = patched
            logger.debug("0x%X: %s", offset, format_signature(patched))

        return matches

    def __repr__(self) -> str:
        return (
            f"SignaturePatch(name={self.name!r}, order={self.order}, "
            f"search={str(self.search)!r}, replacement={str(self.replacement)!r})"
        )
