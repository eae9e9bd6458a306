"""
sigpatch - Binary File

Loads a binary into memory for patching and writes the result back out.
"""

import logging
from pathlib import Path

from .errors import EmptyBufferError

logger = logging.getLogger(__name__)

PATCHED_SUFFIX = "_patched"


def default_output_path(input_path: str) -> str:
    """
    Default output location: same directory, file name suffixed "_patched".

    Example:
        >>> default_output_path("bin/app.exe")
        'bin/app.exe_patched'
    """
    path = Path(input_path)
    return str(path.with_name(path.name + PATCHED_SUFFIX))


class BinaryFile:
    """
    In-memory copy of a binary file.

    The input file is never modified; ``save()`` writes to ``output_path``.
    """

    def __init__(self, input_path: str, output_path: str):
        """
        Load binary for patching.

        Args:
            input_path: Source file (read-only)
            output_path: Output file path (will be created/overwritten)

        Raises:
            OSError: If the input cannot be read
        """
        with open(input_path, "rb") as f:
            self.data = bytearray(f.read())

        self.input_path = input_path
        self.output_path = output_path

    def save(self):
        """
        Write patched data to the output file.

        Raises:
            EmptyBufferError: If there is no data to write
            OSError: If the output cannot be written
        """
        if not self.data:
            raise EmptyBufferError("No data supplied")

        if Path(self.output_path).exists():
            logger.warning("Output file already exists, overwriting: %s", self.output_path)

        logger.info("Saving to: %s", self.output_path)
        with open(self.output_path, "wb") as f:
            f.write(self.data)

    @classmethod
    def from_file(cls, input_path: str, output_path: str | None = None) -> "BinaryFile":
        """
        Create BinaryFile from file path.

        Args:
            input_path: Source file
            output_path: Output file (default: <input>_patched)

        Returns:
            BinaryFile instance
        """
        if output_path is None:
            output_path = default_output_path(input_path)

        return cls(input_path, output_path)
