"""Primitives: exceptions, tag generation."""

from __future__ import annotations

from .exceptions import MessageMismatchError, TaggedMessageError
from .tag import IdentityTagGenerator, ITagGenerator, Tag

__all__ = [
    "ITagGenerator",
    "IdentityTagGenerator",
    "MessageMismatchError",
    "Tag",
    "TaggedMessageError",
]
