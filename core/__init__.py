#!/usr/bin/env python3
"""
Core package: UML document model and the XMI resolution engine.
"""

# Re-export commonly used core components
from .uml_model import (
    Association, Attribute, Cardinality, Constraint, DataType, Diagram,
    Document, Enumeration, EnumerationLiteral, Operation, Package, UmlClass
)
from .errors import XmiParseError, XmiStructureError, UnsupportedDialectError

__all__ = [
    'Association', 'Attribute', 'Cardinality', 'Constraint', 'DataType', 'Diagram',
    'Document', 'Enumeration', 'EnumerationLiteral', 'Operation', 'Package', 'UmlClass',
    'XmiParseError', 'XmiStructureError', 'UnsupportedDialectError'
]
