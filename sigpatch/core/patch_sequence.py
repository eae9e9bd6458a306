"""
sigpatch - Patch Sequence

Runs an ordered list of patches over a single working buffer.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable

from .errors import EmptyBufferError
from .patches.base import BinaryPatch

logger = logging.getLogger(__name__)


@dataclass
class PatchResult:
    """Outcome of running one patch."""

    name: str
    offsets: list[int] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.offsets)


class PatchSequence:
    """
    Owns the working buffer and applies patches to it in order.

    Patches are kept sorted by their ``order`` key. The sort is stable, so
    patches sharing a key run in the order they were added.
    """

    def __init__(self, buffer: bytearray, patches: Iterable[BinaryPatch] = ()):
        """
        Args:
            buffer: Binary contents to patch in place
            patches: Initial patches (any order)
        """
        self.buffer = buffer
        self._patches: list[BinaryPatch] = []
        self.extend(patches)

    @property
    def patches(self) -> tuple[BinaryPatch, ...]:
        """Patches in the order they will run."""
        return tuple(self._patches)

    def add_patch(self, patch: BinaryPatch) -> "PatchSequence":
        self._patches.append(patch)
        self._patches.sort(key=lambda p: p.order)
        return self

    def extend(self, patches: Iterable[BinaryPatch]) -> "PatchSequence":
        self._patches.extend(patches)
        self._patches.sort(key=lambda p: p.order)
        return self

    def load(self, patch_set) -> "PatchSequence":
        """
        Add every patch from a loaded patch set.

        Args:
            patch_set: Object with ``name`` and ``patches`` attributes
        """
        logger.debug("Loading patch set: %s", patch_set.name)
        return self.extend(patch_set.patches)

    def run(self) -> list[PatchResult]:
        """
        Apply all patches to the buffer in order.

        Returns:
            One PatchResult per patch, in the order they ran

        Raises:
            EmptyBufferError: If the buffer has no data
        """
        if not self.buffer:
            raise EmptyBufferError("No data to patch")

        results = []
        for patch in self._patches:
            logger.info("Running patch: %s", patch.name)
            offsets = patch.apply(self.buffer)
            results.append(PatchResult(patch.name, offsets))

        return results
