"""
Exception types raised by ship and module entities.

Two kinds of failure exist: an input build could not be imported (or
exported), or the caller asked for an operation that would break one of the
entity invariants.
"""


class EdForgeError(Exception):
    """Base class for all errors raised by this package."""


class ImportExportError(EdForgeError, ValueError):
    """A build-like input failed decoding or structural validation."""


class IllegalStateError(EdForgeError, RuntimeError):
    """An operation would violate an entity invariant."""
