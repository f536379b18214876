"""
Immutable UML document graph produced by the model assembler.

Every entity is a frozen dataclass and every sequence a tuple, so a parsed
``Document`` can be shared freely once assembly has finished.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any, Dict, Iterator, List, Optional, Tuple

from uml_types import CardinalityMin, ElementName, RelationKind, XmiId


# ---------- Cardinality ----------
@dataclass(frozen=True)
class Cardinality:
    min: Optional[CardinalityMin] = None
    max: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        return self.min is None and self.max is None


# ---------- Class members ----------
@dataclass(frozen=True)
class Attribute:
    xmi_id: XmiId
    name: Optional[str]
    type: Optional[str]
    type_xmi_id: Optional[XmiId] = None
    is_derived: bool = False
    cardinality: Cardinality = field(default_factory=Cardinality)
    definition: Optional[str] = None


@dataclass(frozen=True)
class Operation:
    xmi_id: XmiId
    name: Optional[str]
    return_type_xmi_id: Optional[XmiId] = None
    definition: Optional[str] = None


@dataclass(frozen=True)
class Constraint:
    name: Optional[str]
    type: Optional[str] = None
    weight: Optional[str] = None
    status: Optional[str] = None


@dataclass(frozen=True)
class Association:
    """One relationship of a class, computed from that class's viewpoint."""
    xmi_id: XmiId
    member_end: str
    member_end_type: RelationKind
    member_end_cardinality: Cardinality = field(default_factory=Cardinality)
    member_end_attribute_name: Optional[str] = None
    member_end_xmi_id: Optional[XmiId] = None
    owner_end: Optional[str] = None
    owner_end_xmi_id: Optional[XmiId] = None
    definition: Optional[str] = None


# ---------- Classifiers ----------
@dataclass(frozen=True)
class UmlClass:
    xmi_id: XmiId
    name: ElementName
    is_abstract: bool = False
    definition: Optional[str] = None
    stereotype: Optional[str] = None
    attributes: Tuple[Attribute, ...] = ()
    associations: Tuple[Association, ...] = ()
    operations: Tuple[Operation, ...] = ()
    constraints: Tuple[Constraint, ...] = ()


@dataclass(frozen=True)
class DataType(UmlClass):
    """A class without exposed inheritance semantics."""


@dataclass(frozen=True)
class EnumerationLiteral:
    xmi_id: XmiId
    name: Optional[str]
    type: Optional[str] = None
    definition: Optional[str] = None


@dataclass(frozen=True)
class Enumeration:
    xmi_id: XmiId
    name: ElementName
    values: Tuple[EnumerationLiteral, ...] = ()
    definition: Optional[str] = None
    stereotype: Optional[str] = None


@dataclass(frozen=True)
class Diagram:
    xmi_id: XmiId
    name: Optional[str]
    definition: Optional[str] = None
    package_xmi_id: Optional[XmiId] = None


# ---------- Containers ----------
@dataclass(frozen=True)
class Package:
    xmi_id: XmiId
    name: Optional[str]
    definition: Optional[str] = None
    stereotype: Optional[str] = None
    packages: Tuple["Package", ...] = ()
    classes: Tuple[UmlClass, ...] = ()
    enums: Tuple[Enumeration, ...] = ()
    data_types: Tuple[DataType, ...] = ()
    diagrams: Tuple[Diagram, ...] = ()

    def walk(self) -> Iterator["Package"]:
        """This package and all nested packages, pre-order."""
        yield self
        for child in self.packages:
            yield from child.walk()


@dataclass(frozen=True)
class Document:
    name: Optional[str]
    packages: Tuple[Package, ...] = ()

    def walk_packages(self) -> Iterator[Package]:
        for package in self.packages:
            yield from package.walk()

    @property
    def classes(self) -> List[UmlClass]:
        return [k for p in self.walk_packages() for k in p.classes]

    @property
    def enums(self) -> List[Enumeration]:
        return [e for p in self.walk_packages() for e in p.enums]

    @property
    def data_types(self) -> List[DataType]:
        return [d for p in self.walk_packages() for d in p.data_types]

    @property
    def diagrams(self) -> List[Diagram]:
        return [d for p in self.walk_packages() for d in p.diagrams]

    def find_class(self, name: str) -> Optional[UmlClass]:
        for klass in self.classes:
            if klass.name == name:
                return klass
        return None

    def to_dict(self) -> Dict[str, Any]:
        """Plain data (str/bool/None/list/dict) for serializers."""
        return asdict(self, dict_factory=_plain_dict)


def _plain_value(v: Any) -> Any:
    if isinstance(v, Enum):
        return v.value
    if isinstance(v, tuple):
        return [_plain_value(x) for x in v]
    return v


def _plain_dict(items: List[Tuple[str, Any]]) -> Dict[str, Any]:
    return {k: _plain_value(v) for k, v in items}


__all__ = [
    "Cardinality",
    "Attribute",
    "Operation",
    "Constraint",
    "Association",
    "UmlClass",
    "DataType",
    "EnumerationLiteral",
    "Enumeration",
    "Diagram",
    "Package",
    "Document",
]
