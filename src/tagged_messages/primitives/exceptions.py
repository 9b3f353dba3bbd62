"""Exceptions for tagged-messages."""

from __future__ import annotations


class TaggedMessageError(Exception):
    """Root exception for the tagged-messages package."""


class MessageMismatchError(TaggedMessageError, TypeError):
    """Raised when a value is not a message produced by the expected constructor.

    Usage: ``TaggedConstructor.expect()`` raises this instead of returning
    ``None`` so dispatch code can fail loudly on an unexpected message kind.
    """

    def __init__(self, candidate: object, constructor: object) -> None:
        self.candidate = candidate
        self.constructor = constructor
        super().__init__(f"{candidate!r} was not created by {constructor!r}")
