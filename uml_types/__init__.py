#!/usr/bin/env python3
"""
Types module for xmi2uml project.
Centralized type definitions organized by domain.
"""

# Public types export
from .base import XmlValue

from .uml import (
    XmiId, ElementName, XmiType,
    RelationKind, CardinalityMin, LinkKind, Direction, ConnectorEnd,
    Relation
)

from .xml import DialectName

from .protocols import NameResolver

__all__ = [
    # Base types
    'XmlValue',

    # UML types
    'XmiId', 'ElementName', 'XmiType',
    'RelationKind', 'CardinalityMin', 'LinkKind', 'Direction', 'ConnectorEnd',
    'Relation',

    # XML types
    'DialectName',

    # Protocols
    'NameResolver'
]
