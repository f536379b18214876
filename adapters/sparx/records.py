"""
Typed records read from the Enterprise Architect ``xmi:Extension`` section.

The UML model subtree is consumed directly as lxml elements; the vendor
extension is flattened into these records once per document, because the
resolver queries it by identifier over and over.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from uml_types import ConnectorEnd, Direction, LinkKind, XmiId


@dataclass(frozen=True)
class LinkRecord:
    """One entry of an element's ``links`` list (``<Association start= end=/>``)."""
    xmi_id: Optional[XmiId]
    tag: str
    start: Optional[XmiId]
    end: Optional[XmiId]

    @property
    def kind(self) -> LinkKind:
        return LinkKind.from_tag(self.tag)

    def endpoint(self, direction: Direction) -> Optional[XmiId]:
        if direction is Direction.START:
            return self.start
        return self.end

    def direction_of(self, xmi_id: XmiId) -> Direction:
        """Which end ``xmi_id`` sits on; anything but the start counts as the end."""
        if self.start == xmi_id:
            return Direction.START
        return Direction.END


@dataclass(frozen=True)
class ConstraintRecord:
    name: Optional[str]
    type: Optional[str] = None
    weight: Optional[str] = None
    status: Optional[str] = None


@dataclass(frozen=True)
class ConnectorEndRecord:
    xmi_idref: Optional[XmiId] = None
    model_name: Optional[str] = None
    multiplicity: Optional[str] = None
    role_name: Optional[str] = None
    aggregation: Optional[str] = None
    documentation: Optional[str] = None
    constraints: Tuple[ConstraintRecord, ...] = ()


@dataclass(frozen=True)
class ConnectorRecord:
    xmi_idref: Optional[XmiId]
    source: ConnectorEndRecord
    target: ConnectorEndRecord

    def end(self, position: ConnectorEnd) -> ConnectorEndRecord:
        if position is ConnectorEnd.SOURCE:
            return self.source
        return self.target


@dataclass(frozen=True)
class ElementProperties:
    documentation: Optional[str] = None
    stereotype: Optional[str] = None
    is_abstract: Optional[bool] = None


@dataclass(frozen=True)
class ElementRecord:
    xmi_idref: Optional[XmiId]
    properties: ElementProperties
    links: Tuple[LinkRecord, ...] = ()
    constraints: Tuple[ConstraintRecord, ...] = ()


@dataclass(frozen=True)
class DiagramRecord:
    xmi_id: Optional[XmiId]
    name: Optional[str]
    documentation: Optional[str]
    package: Optional[XmiId]


__all__ = [
    "LinkRecord",
    "ConstraintRecord",
    "ConnectorEndRecord",
    "ConnectorRecord",
    "ElementProperties",
    "ElementRecord",
    "DiagramRecord",
]
