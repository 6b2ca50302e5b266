"""Error types raised at the boundaries of datapack generation."""


class BlockForgeError(Exception):
    """Base class for BlockForge errors."""


class PayloadError(BlockForgeError):
    """The request payload is missing or is not a JSON object."""


class PackagingError(BlockForgeError):
    """The datapack archive could not be assembled."""
