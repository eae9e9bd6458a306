"""
Binary Patching System.

This package provides a declarative system for applying signature patches to
binaries. Patches locate byte patterns (with optional wildcards) and rewrite
every occurrence in place.

Usage:
    from sigpatch.core.patches import SignaturePatch

    patch = SignaturePatch.from_strings(
        "skip_check", "74 ? 8B 45", "EB ? 8B 45", order=0
    )
    if patch.can_apply(buffer):
        offsets = patch.apply(buffer)
"""

from ..errors import (
    EmptyBufferError,
    PatchError,
    PatchLengthError,
    PatchSetError,
    PatternParseError,
)
from .base import BinaryPatch
from .signature_patch import SignaturePatch

__all__ = [
    "BinaryPatch",
    "SignaturePatch",
    "PatchError",
    "PatternParseError",
    "PatchLengthError",
    "EmptyBufferError",
    "PatchSetError",
]
