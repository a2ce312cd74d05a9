"""Exceptions raised by texkit."""


class TexkitError(Exception):
    """Base class for all texkit errors."""
    pass


class InvalidChannelError(TexkitError, ValueError):
    """Raised when a channel identifier is not one of R, G, B or A."""
    pass


class BufferSizeError(TexkitError, ValueError):
    """Raised when buffer data does not match its declared dimensions."""
    pass
