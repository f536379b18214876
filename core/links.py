"""
Link resolution: turns the EA ``links`` and ``connectors`` records of a class
into ``Association`` records seen from that class.

For a class ``X`` every link is classified by its kind:

* ``NoteLink`` never produces anything;
* ``Generalization`` points at the supertype when ``X`` is the link start
  (kind ``inheritance``) and at the subtype otherwise (kind
  ``generalization``);
* ``Association`` takes cardinality, role and aggregation from the connector
  with the same id, at the connector end opposite to ``X``;
* every other kind (Dependency, Realisation, Aggregation...) is ignored.

Every lookup miss drops the link; nothing in here raises on bad references.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from adapters.sparx import SparxAdapter
from adapters.sparx.records import ConnectorEndRecord, LinkRecord
from core.cardinality import normalize, normalize_upper_literal, parse_multiplicity
from core.tree import TreeSelector
from core.uml_model import Association, Cardinality
from uml_types import ConnectorEnd, Direction, LinkKind, NameResolver, Relation, RelationKind, XmiId

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MemberEnd:
    xmi_id: XmiId
    name: Optional[str]
    kind: RelationKind
    cardinality: Cardinality = field(default_factory=Cardinality)
    attribute_name: Optional[str] = None


@dataclass(frozen=True)
class OwnedAttributeRef:
    """An owned attribute that backs an association end."""
    name: Optional[str]
    type_xmi_id: Optional[XmiId]
    cardinality: Cardinality


class LinkResolver:
    def __init__(self, adapter: SparxAdapter, index: NameResolver, selector: TreeSelector) -> None:
        self.adapter = adapter
        self.index = index
        self.selector = selector
        self._association_attributes: Optional[List[OwnedAttributeRef]] = None

    # ---------- names ----------
    def resolve_name(self, xmi_id: Optional[XmiId], position: ConnectorEnd) -> Optional[str]:
        """Identifier index first, then the ``model`` pointer of a connector end."""
        if not xmi_id:
            return None
        name = self.index.resolve(xmi_id)
        if name is None:
            name = self.adapter.connector_end_name(xmi_id, position)
        if name is None:
            logger.debug("Unresolved link endpoint %s", xmi_id)
        return name

    # ---------- owned attribute cross-reference ----------
    def _collect_association_attributes(self) -> List[OwnedAttributeRef]:
        refs: List[OwnedAttributeRef] = []
        for element in self.selector.select_all_packaged_elements(self.adapter.model):
            for attr in self.adapter.children_of(element, Relation.OWNED_ATTRIBUTE):
                if not self.adapter.attribute(attr, "association"):
                    continue
                refs.append(OwnedAttributeRef(
                    name=self.adapter.attribute(attr, "name"),
                    type_xmi_id=self.adapter.type_ref(attr),
                    cardinality=normalize(
                        self.adapter.bound_value(attr, "lowerValue"),
                        normalize_upper_literal(self.adapter.bound_value(attr, "upperValue")),
                    ),
                ))
        logger.debug("%d association-backed owned attributes", len(refs))
        return refs

    def owned_attribute_for(self, member_id: XmiId) -> Optional[OwnedAttributeRef]:
        if self._association_attributes is None:
            self._association_attributes = self._collect_association_attributes()
        for ref in self._association_attributes:
            if ref.type_xmi_id == member_id:
                return ref
        return None

    def _owned_attribute_end(self, member_id: XmiId) -> Tuple[Cardinality, Optional[str]]:
        ref = self.owned_attribute_for(member_id)
        if ref is None:
            return Cardinality(), None
        return ref.cardinality, ref.name

    # ---------- connectors ----------
    def _connector_end(self, link: LinkRecord, position: ConnectorEnd) -> Optional[ConnectorEndRecord]:
        connector = self.adapter.connector_by_id(link.xmi_id)
        if connector is None:
            logger.debug("No connector record for link %s", link.xmi_id)
            return None
        return connector.end(position)

    def _is_owning_aggregation(self, end: ConnectorEndRecord) -> bool:
        return (end.aggregation or "").lower() in self.adapter.uml.owning_aggregations

    # ---------- member end ----------
    def _generalization_end(self, link: LinkRecord, owner_dir: Direction) -> Optional[MemberEnd]:
        member_dir = owner_dir.opposite()
        member_id = link.endpoint(member_dir)
        if not member_id:
            return None
        if owner_dir is Direction.START:
            kind = RelationKind.INHERITANCE
        else:
            kind = RelationKind.GENERALIZATION
        cardinality, _ = self._owned_attribute_end(member_id)
        return MemberEnd(
            xmi_id=member_id,
            name=self.resolve_name(member_id, ConnectorEnd.for_direction(member_dir)),
            kind=kind,
            cardinality=cardinality,
        )

    def _association_end(self, link: LinkRecord, owner_dir: Direction) -> Optional[MemberEnd]:
        member_dir = owner_dir.opposite()
        member_id = link.endpoint(member_dir)
        if not member_id:
            return None
        position = ConnectorEnd.for_direction(member_dir)
        end = self._connector_end(link, position)
        if end is None:
            cardinality, role, owning = Cardinality(), None, False
        else:
            cardinality = parse_multiplicity(end.multiplicity)
            role = end.role_name
            owning = self._is_owning_aggregation(end)
        if role or owning:
            kind = RelationKind.AGGREGATION
        else:
            kind = RelationKind.ASSOCIATION
        return MemberEnd(
            xmi_id=member_id,
            name=self.resolve_name(member_id, position),
            kind=kind,
            cardinality=cardinality,
            attribute_name=role,
        )

    def member_end(self, link: LinkRecord, owner_dir: Direction) -> Optional[MemberEnd]:
        kind = link.kind
        if kind is LinkKind.NOTE_LINK:
            return None
        if kind is LinkKind.GENERALIZATION:
            return self._generalization_end(link, owner_dir)
        if kind is LinkKind.ASSOCIATION:
            return self._association_end(link, owner_dir)
        logger.debug("Ignoring %s link %s", link.tag, link.xmi_id)
        return None

    # ---------- associations ----------
    def resolve_link(self, owner_id: XmiId, link: LinkRecord) -> Optional[Association]:
        if link.kind is LinkKind.NOTE_LINK:
            return None
        if not link.start or not link.end:
            logger.debug("Ignoring %s link %s without both endpoints", link.tag, link.xmi_id)
            return None

        owner_dir = link.direction_of(owner_id)
        member = self.member_end(link, owner_dir)
        if member is None or member.name is None:
            return None
        if member.kind is RelationKind.AGGREGATION and not member.attribute_name:
            logger.debug("Suppressing unnamed aggregation end %s of link %s", member.xmi_id, link.xmi_id)
            return None

        owner_end = self.resolve_name(link.endpoint(owner_dir), ConnectorEnd.for_direction(owner_dir))
        member_position = ConnectorEnd.for_direction(owner_dir.opposite())
        end = self._connector_end(link, member_position)
        return Association(
            xmi_id=link.xmi_id,
            member_end=member.name,
            member_end_type=member.kind,
            member_end_cardinality=member.cardinality,
            member_end_attribute_name=member.attribute_name,
            member_end_xmi_id=member.xmi_id,
            owner_end=owner_end,
            owner_end_xmi_id=owner_id,
            definition=end.documentation if end is not None else None,
        )

    def associations_for(self, xmi_id: XmiId) -> Tuple[Association, ...]:
        """Associations of one class, in link order, without structural duplicates."""
        result: List[Association] = []
        for link in self.adapter.links_of(xmi_id):
            association = self.resolve_link(xmi_id, link)
            if association is not None and association not in result:
                result.append(association)
        return tuple(result)


__all__ = ["LinkResolver", "MemberEnd", "OwnedAttributeRef"]
