"""
Binary patch base class.

Provides the foundation for declarative signature patches that locate byte
patterns in a buffer and rewrite them in place.
"""

from abc import ABC, abstractmethod


class BinaryPatch(ABC):
    """
    Base class for declarative binary patches.

    Patches search a mutable buffer for the locations they target and
    rewrite those locations in place. The buffer is passed into every call
    and is never retained by the patch.
    """

    name: str
    description: str
    order: int

    @abstractmethod
    def find_matches(self, buffer: bytearray) -> list[int]:
        """
        Locate every offset this patch would rewrite.

        Args:
            buffer: Current binary contents

        Returns:
            Ascending list of match offsets (empty if nothing matches)
        """
        pass

    @abstractmethod
    def apply(self, buffer: bytearray) -> list[int]:
        """
        Apply this patch to the buffer.

        Finding nothing is not an error; the returned list is simply empty.

        Args:
            buffer: Binary contents to modify in place

        Returns:
            Offsets that were rewritten
        """
        pass

    def can_apply(self, buffer: bytearray) -> bool:
        """
        Check if this patch would modify anything.

        Args:
            buffer: Current binary contents

        Returns:
            True if at least one match is present
        """
        return bool(self.find_matches(buffer))
