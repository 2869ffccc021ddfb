from typing import TypeAlias

ByteCount: TypeAlias = int

UNIT_MULTIPLIERS = {
    "": 1,
    "B": 1,
    "K": 1024,
    "M": 1024 * 1024,
    "G": 1024 * 1024 * 1024,
}

# chunk sizes are limited to a signed 64-bit integer
MAX_BYTE_COUNT: ByteCount = 2**63 - 1


class ChunkerError(Exception):
    """Base class for every error reported to the user by the chunker command."""


class InvalidSize(ChunkerError, ValueError):
    pass


class InvalidFormat(InvalidSize):
    """The size string does not look like ``<digits>[ ][K|M|G|B][B]``."""


class InvalidMagnitude(InvalidSize):
    """The size is well formed but its value cannot be used as a byte count."""


class InputOpenError(ChunkerError, OSError):
    pass


class OutputCreateError(ChunkerError, OSError):
    pass


class CopyError(ChunkerError, OSError):
    pass
