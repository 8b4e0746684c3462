"""Error taxonomy shared by the store, the resolver, and the services.

Storage errors and input errors are kept distinct so callers can map
them to different outcomes (server error vs. client error).
"""

from __future__ import annotations


class ConfError(Exception):
    """Base class for all confctl errors."""


class InvalidRequestError(ConfError):
    """A request body or argument is malformed or missing a required value."""


class StorageUnavailableError(ConfError):
    """The graph store failed to answer a read or write."""


class ConstraintViolationError(ConfError):
    """A write violated a store constraint (duplicate edge, missing reference)."""
