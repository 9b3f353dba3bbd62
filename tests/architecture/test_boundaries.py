from pytest_archon import archrule


def test_primitives_isolation() -> None:
    """
    Primitives are the foundation.
    They must not import messages or the factory.
    """
    (
        archrule("primitives_isolation")
        .match("tagged_messages.primitives*")
        .should_not_import("tagged_messages.message*")
        .should_not_import("tagged_messages.factory*")
        .check("tagged_messages")
    )


def test_message_layering() -> None:
    """
    The message model depends on nothing above it.
    """
    (
        archrule("message_layering")
        .match("tagged_messages.message*")
        .should_not_import("tagged_messages.factory*")
        .check("tagged_messages")
    )
