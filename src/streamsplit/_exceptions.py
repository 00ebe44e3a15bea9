"""Exceptions raised by splitters."""


class SplitError(Exception):
    """Base class of all splitting errors."""


class InvalidArgument(SplitError, ValueError):
    """Raised when a splitter is constructed with an unusable argument, e.g.
    an empty separator."""


class SourceReadError(SplitError, OSError):
    """Wraps an exception raised while reading from the underlying source.

    The splitter which raised it cannot be used anymore.
    """

    def __init__(self, message, cause=None):
        super().__init__(message)
        self.cause = cause

    def __str__(self):
        if self.cause is None:
            return super().__str__()
        return f"{super().__str__()}: {self.cause!r}"
