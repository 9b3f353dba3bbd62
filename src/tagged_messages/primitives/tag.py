"""Identity tokens that distinguish one message constructor from another."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True, eq=False)
class Tag:
    """
    Opaque identity token.

    Equality and hashing are identity-based: every instance is distinct from
    every other object, including another ``Tag`` with the same ``name``.
    The name only shows up in ``repr`` and log output.

    Examples:
        >>> Tag("Ping") == Tag("Ping")
        False
    """

    name: str | None = None

    def __repr__(self) -> str:
        label = self.name if self.name is not None else "anonymous"
        return f"<Tag {label} at {id(self):#x}>"


class ITagGenerator(Protocol):
    """
    Protocol for default tag allocation strategies.
    Whatever it returns must compare by identity, never by value.
    """

    def next_tag(self, name: str | None = None) -> object:
        """Allocates a fresh tag, optionally labelled with *name*."""
        ...


class IdentityTagGenerator(ITagGenerator):
    """
    Default tag generator.
    Each call allocates a new ``Tag``; no counters, no shared state.
    """

    def next_tag(self, name: str | None = None) -> Tag:
        """Returns a new, never-before-seen ``Tag``."""
        return Tag(name)
