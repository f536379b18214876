"""
Dialect adapter base for Enterprise Architect XMI exports.

The adapter is the only place that knows tag names and attribute paths.
The resolution core talks to it through a small capability surface:
``children_of``, ``type_of``, ``attribute``, ``find_element``,
``elements_with_links``, ``links_of``, ``connector_by_id`` and a handful of
property/documentation lookups. Dialect subclasses override the hooks whose
paths differ between exporter generations.
"""
from __future__ import annotations

import logging
from typing import Dict, Iterator, List, Optional, Sequence, Tuple, Union

from lxml import etree

from core.errors import XmiStructureError
from meta import MetaBundle, META_BY_DIALECT
from uml_types import ConnectorEnd, Relation, XmiId, XmiType
from utils.xml import optional_text, xml_bool

from .records import (
    ConnectorEndRecord,
    ConnectorRecord,
    ConstraintRecord,
    DiagramRecord,
    ElementProperties,
    ElementRecord,
    LinkRecord,
)

logger = logging.getLogger(__name__)

Node = etree._Element
SourceTree = Union[etree._ElementTree, etree._Element]


class SparxAdapter:
    """Typed access to one parsed EA XMI document."""

    dialect: str = ""
    relation_tags: Dict[Relation, Tuple[str, ...]] = {
        relation: (relation.value,) for relation in Relation
    }

    def __init__(self, source: SourceTree, meta: Optional[MetaBundle] = None) -> None:
        if isinstance(source, etree._ElementTree):
            source = source.getroot()
        self.root: Node = source
        self.meta: MetaBundle = meta or META_BY_DIALECT[self.dialect]
        self.xml = self.meta.xml
        self.uml = self.meta.uml

        self.model: Node = self._find_model()
        self.extension: Optional[Node] = self._find_extension()

        self._elements: Dict[str, ElementRecord] = {}
        self._element_order: List[ElementRecord] = []
        self._member_docs: Dict[str, str] = {}
        self._connectors: Dict[str, ConnectorRecord] = {}
        self._connector_order: List[ConnectorRecord] = []
        self._diagrams: List[DiagramRecord] = []
        self._read_extension()

    # ---------- document structure ----------
    def _find_model(self) -> Node:
        if self.root.tag == self.xml.model_tag:
            return self.root
        model = self.root.find(self.xml.model_tag)
        if model is None:
            model = next(self.root.iter(self.xml.model_tag), None)
        if model is None:
            raise XmiStructureError(
                f"No {self.uml.model_type} element found under <{etree.QName(self.root).localname}>"
            )
        return model

    def _find_extension(self) -> Optional[Node]:
        extensions = self.root.findall(self.xml.extension_tag)
        for ext in extensions:
            if ext.get("extender") == "Enterprise Architect":
                return ext
        if extensions:
            return extensions[0]
        logger.debug("Document has no xmi:Extension section")
        return None

    def _extension_nodes(self, path: str) -> List[Node]:
        if self.extension is None:
            return []
        return self.extension.findall(path)

    def _read_extension(self) -> None:
        for node in self._extension_nodes("elements/element"):
            record = self._read_element(node)
            self._element_order.append(record)
            if record.xmi_idref:
                self._elements[record.xmi_idref] = record
            for member in node.findall("attributes/attribute") + node.findall("operations/operation"):
                member_id = member.get(self.xml.xmi_idref)
                doc = self._documentation(member)
                if member_id and doc is not None:
                    self._member_docs[member_id] = doc

        for node in self._extension_nodes("connectors/connector"):
            connector = self._read_connector(node)
            self._connector_order.append(connector)
            if connector.xmi_idref:
                self._connectors[connector.xmi_idref] = connector

        for node in self._extension_nodes("diagrams/diagram"):
            self._diagrams.append(self._read_diagram(node))

        logger.debug(
            "%s extension: %d elements, %d connectors, %d diagrams",
            self.dialect, len(self._element_order), len(self._connector_order), len(self._diagrams),
        )

    # ---------- generic node access ----------
    def attribute(self, node: Node, name: str) -> Optional[str]:
        return node.get(self.xml.qualify(name))

    def xmi_id(self, node: Node) -> Optional[XmiId]:
        return node.get(self.xml.xmi_id)

    def type_of(self, node: Node) -> Optional[XmiType]:
        return node.get(self.xml.xmi_type)

    def is_type(self, node: Node, kind: str) -> bool:
        return self.type_of(node) == kind

    def children_of(self, node: Node, relation: Relation) -> List[Node]:
        tags = self.relation_tags[relation]
        return [child for child in node if isinstance(child.tag, str) and child.tag in tags]

    def type_ref(self, node: Node) -> Optional[XmiId]:
        """Type reference of a property/parameter: ``<type xmi:idref=../>`` or ``@type``."""
        type_node = node.find("type")
        if type_node is not None:
            ref = type_node.get(self.xml.xmi_idref)
            if ref:
                return ref
        return optional_text(node.get("type"))

    def bound_value(self, node: Node, tag: str) -> Optional[str]:
        value_node = node.find(tag)
        if value_node is None:
            return None
        return value_node.get("value")

    def operation_return_type(self, node: Node) -> Optional[XmiId]:
        ref = self.type_ref(node)
        if ref:
            return ref
        for param in node.findall("ownedParameter"):
            if param.get("direction") == "return":
                return self.type_ref(param)
        return None

    def iter_identified(self) -> Iterator[Tuple[str, str]]:
        """Every ``(xmi:id, name)`` pair in the document, extension sections included."""
        id_attr = self.xml.xmi_id
        for node in self.root.iter():
            if not isinstance(node.tag, str):
                continue
            xmi_id = node.get(id_attr)
            name = node.get("name")
            if xmi_id and name is not None:
                yield xmi_id, name

    # ---------- extension lookups ----------
    def find_element(self, xmi_id: Optional[XmiId]) -> Optional[ElementRecord]:
        if not xmi_id:
            return None
        return self._elements.get(xmi_id)

    def elements_with_links(self) -> List[Tuple[XmiId, Tuple[LinkRecord, ...]]]:
        return [(rec.xmi_idref, rec.links) for rec in self._element_order if rec.xmi_idref and rec.links]

    def links_of(self, xmi_id: XmiId) -> Tuple[LinkRecord, ...]:
        raise NotImplementedError

    def connector_by_id(self, link_id: Optional[XmiId]) -> Optional[ConnectorRecord]:
        if not link_id:
            return None
        return self._connectors.get(link_id)

    def connectors(self) -> Sequence[ConnectorRecord]:
        return tuple(self._connector_order)

    def connector_end_name(self, xmi_id: Optional[XmiId], position: ConnectorEnd) -> Optional[str]:
        """Name carried by the ``model`` pointer of a connector end referencing ``xmi_id``."""
        if not xmi_id:
            return None
        for connector in self._connector_order:
            end = connector.end(position)
            if end.xmi_idref == xmi_id and end.model_name:
                return end.model_name
        return None

    def properties_of(self, xmi_id: Optional[XmiId]) -> Optional[ElementProperties]:
        record = self.find_element(xmi_id)
        if record is None:
            return None
        return record.properties

    def documentation_of(self, member_id: Optional[XmiId]) -> Optional[str]:
        if not member_id:
            return None
        return self._member_docs.get(member_id)

    def diagrams(self) -> Sequence[DiagramRecord]:
        return tuple(self._diagrams)

    def class_constraints(self, xmi_id: XmiId) -> Tuple[ConstraintRecord, ...]:
        raise NotImplementedError

    # ---------- record readers ----------
    def _documentation(self, node: Optional[Node]) -> Optional[str]:
        if node is None:
            return None
        doc = node.find("documentation")
        if doc is None:
            return None
        value = doc.get("value")
        if value is None:
            value = doc.text
        return optional_text(value)

    def _properties_documentation(self, element: Node, props: Node) -> Optional[str]:
        return optional_text(props.get("documentation"))

    def _read_properties(self, element: Node) -> ElementProperties:
        props = element.find("properties")
        if props is None:
            return ElementProperties()
        return ElementProperties(
            documentation=self._properties_documentation(element, props),
            stereotype=optional_text(props.get("stereotype")),
            is_abstract=xml_bool(props.get("isAbstract")),
        )

    def _read_link(self, node: Node) -> LinkRecord:
        return LinkRecord(
            xmi_id=node.get(self.xml.xmi_id),
            tag=etree.QName(node).localname,
            start=optional_text(node.get("start")),
            end=optional_text(node.get("end")),
        )

    def _read_constraint(self, node: Node) -> ConstraintRecord:
        return ConstraintRecord(
            name=node.get("name"),
            type=node.get("type"),
            weight=node.get("weight"),
            status=node.get("status"),
        )

    def _read_element(self, node: Node) -> ElementRecord:
        links = node.find("links")
        return ElementRecord(
            xmi_idref=node.get(self.xml.xmi_idref),
            properties=self._read_properties(node),
            links=tuple(
                self._read_link(link) for link in (links if links is not None else ())
                if isinstance(link.tag, str)
            ),
            constraints=tuple(self._read_constraint(c) for c in node.findall("constraints/constraint")),
        )

    def _end_multiplicity(self, role: Optional[Node], type_node: Optional[Node]) -> Optional[str]:
        if type_node is None:
            return None
        return optional_text(type_node.get("multiplicity"))

    def _read_connector_end(self, node: Optional[Node]) -> ConnectorEndRecord:
        if node is None:
            return ConnectorEndRecord()
        model = node.find("model")
        role = node.find("role")
        type_node = node.find("type")
        return ConnectorEndRecord(
            xmi_idref=node.get(self.xml.xmi_idref),
            model_name=optional_text(model.get("name")) if model is not None else None,
            multiplicity=self._end_multiplicity(role, type_node),
            role_name=optional_text(role.get("name")) if role is not None else None,
            aggregation=optional_text(type_node.get("aggregation")) if type_node is not None else None,
            documentation=self._documentation(node),
            constraints=tuple(self._read_constraint(c) for c in node.findall("constraints/constraint")),
        )

    def _read_connector(self, node: Node) -> ConnectorRecord:
        return ConnectorRecord(
            xmi_idref=node.get(self.xml.xmi_idref),
            source=self._read_connector_end(node.find("source")),
            target=self._read_connector_end(node.find("target")),
        )

    def _read_diagram(self, node: Node) -> DiagramRecord:
        model = node.find("model")
        props = node.find("properties")
        return DiagramRecord(
            xmi_id=node.get(self.xml.xmi_id),
            name=props.get("name") if props is not None else None,
            documentation=self._properties_documentation(node, props) if props is not None else None,
            package=model.get("package") if model is not None else None,
        )


__all__ = ["SparxAdapter", "Node", "SourceTree"]
