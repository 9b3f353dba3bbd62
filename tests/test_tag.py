"""Tests for Tag and tag generators."""

from __future__ import annotations

import dataclasses

import pytest

from tagged_messages.primitives.tag import IdentityTagGenerator, Tag


def test_tags_with_same_name_are_distinct() -> None:
    """Equality is identity-based, names do not matter."""
    assert Tag("Ping") != Tag("Ping")
    assert Tag() != Tag()


def test_tag_equals_itself_and_is_hashable() -> None:
    tag = Tag("Ping")
    assert tag == tag
    assert len({tag, tag, Tag("Ping")}) == 2


def test_tag_is_immutable() -> None:
    tag = Tag("Ping")
    with pytest.raises(dataclasses.FrozenInstanceError):
        tag.name = "Pong"  # type: ignore[misc]


def test_tag_repr_shows_label() -> None:
    assert "Ping" in repr(Tag("Ping"))
    assert "anonymous" in repr(Tag())


def test_identity_generator_never_repeats() -> None:
    generator = IdentityTagGenerator()
    tags = [generator.next_tag() for _ in range(100)]
    assert len(set(tags)) == 100


def test_identity_generator_labels_tag() -> None:
    tag = IdentityTagGenerator().next_tag("Ping")
    assert isinstance(tag, Tag)
    assert tag.name == "Ping"
