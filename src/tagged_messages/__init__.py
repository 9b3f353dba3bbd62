"""tagged-messages — identity-tagged message constructors for dispatch code.

Zero infrastructure dependencies. pydantic for the immutable message model.
"""

from __future__ import annotations

# ── Factory ──────────────────────────────────────────────────────
from .factory import TaggedConstructor, make_constructor

# ── Messages ─────────────────────────────────────────────────────
from .message import Message

# ── Primitives ──────────────────────────────────────────────────
from .primitives import (
    IdentityTagGenerator,
    ITagGenerator,
    MessageMismatchError,
    Tag,
    TaggedMessageError,
)

__all__: list[str] = [
    # Factory
    "TaggedConstructor",
    "make_constructor",
    # Messages
    "Message",
    # Primitives
    "ITagGenerator",
    "IdentityTagGenerator",
    "MessageMismatchError",
    "Tag",
    "TaggedMessageError",
]
