"""
XMI 20131001 / UML 20131001 exports (EA "ea-xmi-2.5.1").

Differences from the 2.1 layout:

* sub-packages may also appear as ``nestedPackage``;
* links are discovered by scanning every element record, since a link is
  not guaranteed to be listed under each of its participants;
* connector ends may carry the multiplicity on ``role`` instead of ``type``;
* documentation may be a ``documentation`` child instead of an attribute;
* class constraints moved to the connector ``source``/``target`` records.
"""
from __future__ import annotations

from typing import Dict, List, Optional, Set, Tuple

from uml_types import ConnectorEnd, Relation, XmiId
from utils.xml import optional_text

from .base import Node, SparxAdapter
from .records import ConstraintRecord, LinkRecord


class Xmi2013Adapter(SparxAdapter):

    dialect = "xmi2013"
    relation_tags = dict(SparxAdapter.relation_tags)
    relation_tags[Relation.PACKAGED_ELEMENT] = ("packagedElement", "nestedPackage")

    _links_by_element: Optional[Dict[str, Tuple[LinkRecord, ...]]] = None

    def _scan_links(self) -> Dict[str, Tuple[LinkRecord, ...]]:
        found: Dict[str, List[LinkRecord]] = {}
        seen: Dict[str, Set[str]] = {}
        for _, links in self.elements_with_links():
            for link in links:
                for endpoint in (link.start, link.end):
                    if not endpoint:
                        continue
                    key = link.xmi_id or f"{link.tag}:{link.start}:{link.end}"
                    if key in seen.setdefault(endpoint, set()):
                        continue
                    seen[endpoint].add(key)
                    found.setdefault(endpoint, []).append(link)
        return {xmi_id: tuple(links) for xmi_id, links in found.items()}

    def links_of(self, xmi_id: XmiId) -> Tuple[LinkRecord, ...]:
        if self._links_by_element is None:
            self._links_by_element = self._scan_links()
        return self._links_by_element.get(xmi_id, ())

    def class_constraints(self, xmi_id: XmiId) -> Tuple[ConstraintRecord, ...]:
        constraints: List[ConstraintRecord] = []
        for connector in self.connectors():
            for position in (ConnectorEnd.SOURCE, ConnectorEnd.TARGET):
                end = connector.end(position)
                if end.xmi_idref == xmi_id:
                    constraints.extend(end.constraints)
        return tuple(constraints)

    def _end_multiplicity(self, role: Optional[Node], type_node: Optional[Node]) -> Optional[str]:
        if role is not None:
            value = optional_text(role.get("multiplicity"))
            if value is not None:
                return value
        return super()._end_multiplicity(role, type_node)

    def _properties_documentation(self, element: Node, props: Node) -> Optional[str]:
        value = super()._properties_documentation(element, props)
        if value is None:
            value = self._documentation(element)
        return value


__all__ = ["Xmi2013Adapter"]
