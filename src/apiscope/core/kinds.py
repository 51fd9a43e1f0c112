"""Kinds of API reference entries shared by the lifespan and search layers."""

from enum import StrEnum


class EntryKind(StrEnum):
    """Discriminator for API reference entries."""

    CLASS = "class"
    EVENT = "event"
    METHOD = "method"
    NAMESPACE = "namespace"

    @classmethod
    def member_kinds(cls) -> "tuple[EntryKind, ...]":
        """Kinds owned by a class, in listing order."""
        return (cls.EVENT, cls.NAMESPACE, cls.METHOD)
