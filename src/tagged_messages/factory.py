"""TaggedConstructor factory — builds message constructors with identity matching."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Generic, cast

from typing_extensions import TypeVar

from .message import Message
from .primitives.exceptions import MessageMismatchError
from .primitives.tag import IdentityTagGenerator

if TYPE_CHECKING:
    from typing import TypeGuard

    from .primitives.tag import ITagGenerator

logger = logging.getLogger(__name__)

T = TypeVar("T", default=None)

_MISSING: Any = object()
# Immutable scalars compare by value so equal literals alias each other.
_VALUE_TAG_TYPES = (str, bytes, int, float, bool)
_default_generator = IdentityTagGenerator()


class TaggedConstructor(Generic[T]):
    """
    Builds messages of one kind and recognises them again.

    ``create`` (also reachable by calling the constructor itself) stamps a
    payload with this constructor's tag; ``match`` tests whether an arbitrary
    value carries that same tag. Both close over one tag object and share no
    other state, so instances are safe to use from any thread.

    Instances are normally obtained through :func:`make_constructor`.
    """

    __slots__ = ("_name", "_tag")

    def __init__(self, tag: object, name: str | None = None) -> None:
        self._tag = tag
        self._name = name

    def create(self, payload: T = None) -> Message[T]:  # type: ignore[assignment]
        """Wrap *payload* in a message carrying this constructor's tag."""
        return Message(tag=self._tag, payload=payload)

    __call__ = create

    def match(self, candidate: object) -> TypeGuard[Message[T]]:
        """Return ``True`` if *candidate* was created by this constructor.

        Tags are compared by identity, except for immutable scalars (``str``,
        ``bytes``, ``int``, ``float``, ``bool``) of the exact same type, which
        compare by value. Deep-equal objects never alias. Anything without a
        readable ``tag`` attribute (``None``, numbers, dicts, objects whose
        ``tag`` lookup raises) simply yields ``False``.
        """
        if candidate is None:
            return False
        try:
            candidate_tag = getattr(candidate, "tag", _MISSING)
            return _same_tag(candidate_tag, self._tag)
        except Exception:
            return False

    def as_message(self, candidate: object) -> Message[T] | None:
        """Return *candidate* if it matches, otherwise ``None``."""
        if self.match(candidate):
            return candidate
        return None

    def expect(self, candidate: object) -> Message[T]:
        """Return *candidate* if it matches.

        Raises:
            MessageMismatchError: If *candidate* was not created by this
                constructor.
        """
        if self.match(candidate):
            return candidate
        logger.debug("Rejected %r: not created by %r", candidate, self)
        raise MessageMismatchError(candidate, self)

    def payload_of(self, candidate: object) -> T:
        """Return the payload of *candidate*, see :meth:`expect`."""
        return cast("T", self.expect(candidate).payload)

    def __repr__(self) -> str:
        label = self._name if self._name is not None else "anonymous"
        return f"TaggedConstructor({label}, tag={self._tag!r})"


def _same_tag(candidate_tag: object, tag: object) -> bool:
    if candidate_tag is tag:
        return True
    return (
        type(candidate_tag) is type(tag)
        and isinstance(tag, _VALUE_TAG_TYPES)
        and candidate_tag == tag
    )


def make_constructor(
    tag: object = _MISSING,
    *,
    name: str | None = None,
    tag_generator: ITagGenerator | None = None,
) -> TaggedConstructor[Any]:
    """Create a new :class:`TaggedConstructor`.

    Args:
        tag: Explicit identity for the constructor. Any value is accepted and
            used verbatim; constructors built with the same value recognise
            each other's messages. When omitted, a fresh tag is allocated.
        name: Optional label used for the allocated tag and in ``repr``.
        tag_generator: Strategy for allocating the default tag. Defaults to
            :class:`IdentityTagGenerator`.

    Usage::

        Ping = make_constructor(name="Ping")
        Pong: TaggedConstructor[dict[str, int]] = make_constructor(name="Pong")

        Ping.match(Ping())             # True
        Ping.match(Pong({"n": 1}))     # False
        Pong({"n": 5}).payload["n"]    # 5
    """
    if tag is _MISSING:
        generator = tag_generator if tag_generator is not None else _default_generator
        tag = generator.next_tag(name)
    constructor: TaggedConstructor[Any] = TaggedConstructor(tag, name)
    logger.debug("Created %r", constructor)
    return constructor


__all__ = ["TaggedConstructor", "make_constructor"]
