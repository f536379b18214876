#!/usr/bin/env python3
"""
UML-specific types and enums for xmi2uml project.
"""

from typing import NewType, Optional
from enum import Enum

# ---------- Type aliases for UML elements ----------
XmiId = NewType('XmiId', str)
ElementName = NewType('ElementName', str)
XmiType = NewType('XmiType', str)


# ---------- Enums for UML elements ----------
class RelationKind(str, Enum):
    """Relationship kind of an association, seen from its owning class."""
    ASSOCIATION = "association"
    AGGREGATION = "aggregation"
    INHERITANCE = "inheritance"
    GENERALIZATION = "generalization"


class CardinalityMin(str, Enum):
    """Symbolic lower bound codes."""
    MANDATORY = "M"
    CONDITIONAL = "C"


class LinkKind(Enum):
    """Kind of an EA link record (the tag name under ``links``)."""
    ASSOCIATION = "Association"
    GENERALIZATION = "Generalization"
    NOTE_LINK = "NoteLink"
    OTHER = "Other"

    @classmethod
    def from_tag(cls, tag: Optional[str]) -> "LinkKind":
        for kind in cls:
            if kind is not cls.OTHER and kind.value == tag:
                return kind
        return cls.OTHER


class Direction(Enum):
    """Endpoint of a link."""
    START = "start"
    END = "end"

    def opposite(self) -> "Direction":
        if self is Direction.START:
            return Direction.END
        return Direction.START


class ConnectorEnd(Enum):
    """Position inside a connector record."""
    SOURCE = "source"
    TARGET = "target"

    @classmethod
    def for_direction(cls, direction: Direction) -> "ConnectorEnd":
        # link start is the connector source, link end the connector target
        if direction is Direction.START:
            return cls.SOURCE
        return cls.TARGET


class Relation(Enum):
    """Child relations walked by the tree selector."""
    PACKAGED_ELEMENT = "packagedElement"
    OWNED_ATTRIBUTE = "ownedAttribute"
    OWNED_OPERATION = "ownedOperation"
    OWNED_LITERAL = "ownedLiteral"
