"""Message — immutable tag/payload pair produced by a TaggedConstructor."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Generic, TypeVar, cast

from pydantic import BaseModel, ConfigDict, PrivateAttr

if TYPE_CHECKING:
    from collections.abc import Iterator

T = TypeVar("T")


class Message(BaseModel, Generic[T]):
    """An immutable message: a payload stamped with its constructor's tag.

    The tag is held as a private attribute and is not part of the model's
    fields, so it never appears in ``model_dump()``. It still takes part in
    equality: two messages are equal only when their payloads are equal *and*
    their tags are equal (``Tag`` objects compare by identity).

    Consumers should not compare ``tag`` values themselves; route messages with
    ``TaggedConstructor.match()`` instead.

    The tag can only be set at construction time; assigning ``tag`` or ``_tag``
    afterwards raises. Because ``__init__`` requires the tag, ``model_validate``
    and ``model_validate_json`` are not supported entry points: build messages
    with a constructor (or ``Message(tag=..., payload=...)``) instead.

    Usage::

        Ping = make_constructor(name="Ping")
        msg = Ping.create()
        msg.payload  # None
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    payload: T
    _tag: Any = PrivateAttr(default=None)

    def __init__(self, *, tag: object, **data: Any) -> None:
        """
        Initialize a Message.

        Args:
            tag: Identity of the constructor that produced this message.
            **data: Model fields, i.e. ``payload``.
        """
        super().__init__(**data)
        cast("dict[str, Any]", self.__pydantic_private__)["_tag"] = tag

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "_tag":
            raise AttributeError("Message tag is read-only")
        super().__setattr__(name, value)

    @property
    def tag(self) -> object:
        """Read-only tag. Opaque; use ``TaggedConstructor.match()`` to test it."""
        return self._tag

    def __repr_args__(self) -> Iterator[tuple[str | None, Any]]:
        yield "tag", self._tag
        yield from super().__repr_args__()


__all__ = ["Message"]
