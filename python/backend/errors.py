"""Exception types raised by the quiz backend."""

from __future__ import annotations


class QueezeError(Exception):
    """Base class for every error the backend raises on purpose."""


class NotFoundError(QueezeError):
    """No stored record exists for the requested key."""


class MalformedRecordError(QueezeError):
    """A persisted line could not be parsed into a record."""


class StoreIOError(QueezeError):
    """A score or save file could not be read or written."""


class InvalidTransitionError(QueezeError):
    """An operation was applied to a session in the wrong phase."""


class InvalidUsernameError(QueezeError):
    """The entered username cannot be used for scores or saves."""
