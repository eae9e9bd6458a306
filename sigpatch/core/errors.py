"""
Exceptions raised while compiling, loading, and applying patches.
"""


class PatchError(Exception):
    """Base class for all patching errors."""

    pass


class PatternParseError(PatchError, ValueError):
    """Raised when signature text cannot be compiled into a template."""

    pass


class PatchLengthError(PatchError, ValueError):
    """Raised when search and replacement templates differ in length."""

    pass


class EmptyBufferError(PatchError):
    """Raised when there is no data to patch or save."""

    pass


class PatchSetError(PatchError):
    """Raised when a patch-set definition is structurally invalid."""

    pass
