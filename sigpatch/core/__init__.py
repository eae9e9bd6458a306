"""
Core patching functionality.

This package contains signature compilation, NOP canonicalization, the
matcher, patch application, and binary file I/O.
"""

from .errors import (
    EmptyBufferError,
    PatchError,
    PatchLengthError,
    PatchSetError,
    PatternParseError,
)
from .pattern import PatternTemplate, compile_pattern
from .nops import NOP_TABLE, canonicalize_nops
from .matcher import find_all, find_first
from .patches import BinaryPatch, SignaturePatch
from .patch_sequence import PatchResult, PatchSequence
from .binary_file import BinaryFile, default_output_path

__all__ = [
    "PatternTemplate",
    "compile_pattern",
    "NOP_TABLE",
    "canonicalize_nops",
    "find_first",
    "find_all",
    "BinaryPatch",
    "SignaturePatch",
    "PatchResult",
    "PatchSequence",
    "BinaryFile",
    "default_output_path",
    "PatchError",
    "PatternParseError",
    "PatchLengthError",
    "EmptyBufferError",
    "PatchSetError",
]
