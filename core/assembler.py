"""
Model assembler: composes the ``Document`` graph top-down from the model
subtree, the identifier index and the link resolver.
"""
from __future__ import annotations

import logging
from typing import Optional, Tuple

from adapters.sparx import SparxAdapter
from adapters.sparx.base import Node
from app.config import DEFAULT_CONFIG, ParserConfig
from core.cardinality import normalize, normalize_upper_literal
from core.errors import XmiStructureError
from core.id_index import IdIndex
from core.links import LinkResolver
from core.tree import TreeSelector
from core.uml_model import (
    Attribute,
    Constraint,
    DataType,
    Diagram,
    Document,
    Enumeration,
    EnumerationLiteral,
    Operation,
    Package,
    UmlClass,
)
from uml_types import ElementName, Relation, XmiId
from utils.xml import decode_entities

logger = logging.getLogger(__name__)


class ModelAssembler:
    """Builds one ``Document`` from one adapter.

    The identifier index is created here and shared with the link resolver;
    it is filled on the first name lookup and read-only afterwards.
    """

    def __init__(self, adapter: SparxAdapter, config: Optional[ParserConfig] = None,
                 index: Optional[IdIndex] = None) -> None:
        self.adapter = adapter
        self.config = config or DEFAULT_CONFIG
        self.index = index or IdIndex(adapter.iter_identified)
        self.selector = TreeSelector(adapter.children_of, adapter.type_of)
        self.links = LinkResolver(adapter, self.index, self.selector)

    # ---------- entry ----------
    def assemble(self) -> Document:
        model = self.adapter.model
        package_nodes = self.selector.select_children(model, (self.adapter.uml.package_type,))
        if not package_nodes:
            raise XmiStructureError(f"Model {self.adapter.attribute(model, 'name')!r} contains no packages")
        packages = tuple(self.serialize_package(node) for node in package_nodes)
        return Document(name=self.adapter.attribute(model, "name"), packages=packages)

    # ---------- helpers ----------
    def _text(self, value: Optional[str]) -> Optional[str]:
        if self.config.decode_html_entities:
            return decode_entities(value)
        return value

    def _property(self, xmi_id: Optional[XmiId], name: str):
        props = self.adapter.properties_of(xmi_id)
        if props is None:
            return None
        return getattr(props, name)

    def _definition(self, xmi_id: Optional[XmiId]) -> Optional[str]:
        return self._text(self._property(xmi_id, "documentation"))

    def _stereotype(self, xmi_id: Optional[XmiId]) -> Optional[str]:
        return self._property(xmi_id, "stereotype")

    def _member_definition(self, member_id: Optional[XmiId]) -> Optional[str]:
        return self._text(self.adapter.documentation_of(member_id))

    # ---------- packages ----------
    def serialize_package(self, node: Node) -> Package:
        uml = self.adapter.uml
        xmi_id = self.adapter.xmi_id(node)
        children = self.selector.select_children(node, (uml.package_type,))
        return Package(
            xmi_id=xmi_id,
            name=self.adapter.attribute(node, "name"),
            definition=self._definition(xmi_id),
            stereotype=self._stereotype(xmi_id),
            packages=tuple(self.serialize_package(child) for child in children),
            classes=self.serialize_classes(node),
            enums=self.serialize_enums(node),
            data_types=self.serialize_data_types(node),
            diagrams=self.serialize_diagrams(xmi_id),
        )

    # ---------- classifiers ----------
    def serialize_classes(self, package: Node) -> Tuple[UmlClass, ...]:
        nodes = self.selector.select_children(package, self.adapter.uml.class_like_types)
        return tuple(self.serialize_class(node) for node in nodes)

    def serialize_class(self, node: Node, cls=UmlClass) -> UmlClass:
        xmi_id = self.adapter.xmi_id(node)
        return cls(
            xmi_id=xmi_id,
            name=ElementName(self.adapter.attribute(node, "name") or ""),
            is_abstract=self._is_abstract(node, xmi_id),
            definition=self._definition(xmi_id),
            stereotype=self._stereotype(xmi_id),
            attributes=self.serialize_attributes(node),
            associations=self.links.associations_for(xmi_id) if xmi_id else (),
            operations=self.serialize_operations(node),
            constraints=self.serialize_constraints(xmi_id),
        )

    def _is_abstract(self, node: Node, xmi_id: Optional[XmiId]) -> bool:
        value = self._property(xmi_id, "is_abstract")
        if value is None:
            return self.adapter.attribute(node, "isAbstract") == "true"
        return value

    def serialize_data_types(self, package: Node) -> Tuple[DataType, ...]:
        nodes = self.selector.select_children(package, (self.adapter.uml.datatype_type,))
        return tuple(self.serialize_class(node, cls=DataType) for node in nodes)

    def serialize_enums(self, package: Node) -> Tuple[Enumeration, ...]:
        nodes = self.selector.select_children(package, (self.adapter.uml.enum_type,))
        return tuple(self.serialize_enum(node) for node in nodes)

    def serialize_enum(self, node: Node) -> Enumeration:
        xmi_id = self.adapter.xmi_id(node)
        literals = []
        for literal in self.adapter.children_of(node, Relation.OWNED_LITERAL):
            literal_id = self.adapter.xmi_id(literal)
            type_ref = self.adapter.type_ref(literal)
            literals.append(EnumerationLiteral(
                xmi_id=literal_id,
                name=self.adapter.attribute(literal, "name"),
                type=self.index.resolve(type_ref) or type_ref,
                definition=self._member_definition(literal_id),
            ))
        return Enumeration(
            xmi_id=xmi_id,
            name=ElementName(self.adapter.attribute(node, "name") or ""),
            values=tuple(literals),
            definition=self._definition(xmi_id),
            stereotype=self._stereotype(xmi_id),
        )

    # ---------- members ----------
    def serialize_attributes(self, klass: Node) -> Tuple[Attribute, ...]:
        property_type = self.adapter.uml.property_type
        attributes = []
        for attr in self.adapter.children_of(klass, Relation.OWNED_ATTRIBUTE):
            if not self.adapter.is_type(attr, property_type):
                continue
            # association ends are reported as associations
            if self.adapter.attribute(attr, "association"):
                continue
            attr_id = self.adapter.xmi_id(attr)
            type_ref = self.adapter.type_ref(attr)
            attributes.append(Attribute(
                xmi_id=attr_id,
                name=self.adapter.attribute(attr, "name"),
                type=self.index.resolve(type_ref) or type_ref,
                type_xmi_id=type_ref,
                is_derived=self.adapter.attribute(attr, "isDerived") == "true",
                cardinality=normalize(
                    self.adapter.bound_value(attr, "lowerValue"),
                    normalize_upper_literal(self.adapter.bound_value(attr, "upperValue")),
                ),
                definition=self._member_definition(attr_id),
            ))
        return tuple(attributes)

    def serialize_operations(self, klass: Node) -> Tuple[Operation, ...]:
        operations = []
        for op in self.adapter.children_of(klass, Relation.OWNED_OPERATION):
            if self.adapter.attribute(op, "association"):
                continue
            op_id = self.adapter.xmi_id(op)
            operations.append(Operation(
                xmi_id=op_id,
                name=self.adapter.attribute(op, "name"),
                return_type_xmi_id=self.adapter.operation_return_type(op),
                definition=self._member_definition(op_id),
            ))
        return tuple(operations)

    def serialize_constraints(self, xmi_id: Optional[XmiId]) -> Tuple[Constraint, ...]:
        if not xmi_id:
            return ()
        return tuple(
            Constraint(
                name=self._text(record.name),
                type=record.type,
                weight=record.weight,
                status=record.status,
            )
            for record in self.adapter.class_constraints(xmi_id)
        )

    # ---------- diagrams ----------
    def serialize_diagrams(self, package_id: Optional[XmiId]) -> Tuple[Diagram, ...]:
        if not self.config.include_diagrams or not package_id:
            return ()
        return tuple(
            Diagram(
                xmi_id=record.xmi_id,
                name=record.name,
                definition=self._text(record.documentation),
                package_xmi_id=record.package,
            )
            for record in self.adapter.diagrams()
            if record.package == package_id
        )


__all__ = ["ModelAssembler"]
