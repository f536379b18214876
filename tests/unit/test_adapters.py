#!/usr/bin/env python3
"""
Unit tests for the EA dialect adapters: detection and per-dialect paths.
"""

from __future__ import annotations

import logging

import pytest
from lxml import etree

from adapters.sparx import (
    Xmi21Adapter,
    Xmi2013Adapter,
    create_adapter,
    detect_dialect,
    xmi_namespace,
)
from core.errors import UnsupportedDialectError, XmiParseError, XmiStructureError
from uml_types import ConnectorEnd, LinkKind, Relation

PACKAGE = '<packagedElement xmi:type="uml:Package" xmi:id="P1" name="P"/>'

CONNECTOR = (
    '<connectors><connector xmi:idref="L1">'
    '<source xmi:idref="A"><model name="A"/><role/><type multiplicity="1" aggregation="none"/>'
    '<constraints><constraint name="x &amp;gt; 0" type="Invariant" weight="0.00" status="Approved"/></constraints>'
    '</source>'
    '<target xmi:idref="B"><model name="B"/><role name="bs" multiplicity="0..*"/><type multiplicity="1" aggregation="shared"/>'
    '<documentation value="the Bs"/></target>'
    '<properties ea_type="Association"/>'
    '</connector></connectors>'
)


def _root(data: bytes):
    return etree.fromstring(data)


class TestDialectDetection:

    def test_detects_both_dialects(self, make_xmi):
        assert detect_dialect(_root(make_xmi(PACKAGE, dialect="xmi21"))) == "xmi21"
        assert detect_dialect(_root(make_xmi(PACKAGE, dialect="xmi2013"))) == "xmi2013"

    def test_create_adapter_picks_class(self, make_xmi):
        assert isinstance(create_adapter(_root(make_xmi(PACKAGE, dialect="xmi21"))), Xmi21Adapter)
        assert isinstance(create_adapter(_root(make_xmi(PACKAGE, dialect="xmi2013"))), Xmi2013Adapter)

    def test_accepts_element_tree(self, make_xmi):
        tree = etree.ElementTree(_root(make_xmi(PACKAGE)))
        assert xmi_namespace(tree) == "http://schema.omg.org/spec/XMI/2.1"
        assert create_adapter(tree).dialect == "xmi21"

    def test_unknown_namespace_is_rejected(self):
        data = (
            b'<xmi:XMI xmlns:xmi="http://www.omg.org/spec/XMI/20110701" '
            b'xmlns:uml="http://www.omg.org/spec/UML/20110701">'
            b'<uml:Model xmi:type="uml:Model" name="M"/></xmi:XMI>'
        )
        with pytest.raises(UnsupportedDialectError) as exc_info:
            detect_dialect(_root(data))
        assert exc_info.value.namespace == "http://www.omg.org/spec/XMI/20110701"
        assert isinstance(exc_info.value, XmiParseError)

    def test_forced_dialect_adopts_document_namespaces(self, caplog):
        data = (
            b'<xmi:XMI xmlns:xmi="http://www.omg.org/spec/XMI/20110701" '
            b'xmlns:uml="http://www.omg.org/spec/UML/20110701">'
            b'<uml:Model xmi:type="uml:Model" name="M">'
            b'<packagedElement xmi:type="uml:Package" xmi:id="P1" name="P"/>'
            b'</uml:Model></xmi:XMI>'
        )
        with caplog.at_level(logging.WARNING):
            adapter = create_adapter(_root(data), "xmi2013")
        assert isinstance(adapter, Xmi2013Adapter)
        assert adapter.xml.xmi_ns == "http://www.omg.org/spec/XMI/20110701"
        assert adapter.model.get("name") == "M"
        assert "forced dialect" in caplog.text

    def test_unknown_forced_dialect(self, make_xmi):
        with pytest.raises(ValueError):
            create_adapter(_root(make_xmi(PACKAGE)), "xmi99")

    def test_missing_namespace(self):
        with pytest.raises(XmiStructureError):
            detect_dialect(_root(b"<root/>"))

    def test_missing_model(self):
        data = b'<xmi:XMI xmlns:xmi="http://schema.omg.org/spec/XMI/2.1"/>'
        with pytest.raises(XmiStructureError):
            create_adapter(_root(data))


class TestCommonAccess:

    def test_extension_prefers_enterprise_architect(self):
        data = (
            b'<xmi:XMI xmlns:xmi="http://schema.omg.org/spec/XMI/2.1" xmlns:uml="http://schema.omg.org/spec/UML/2.1">'
            b'<uml:Model xmi:type="uml:Model" name="M"/>'
            b'<xmi:Extension extender="Other"><elements><element xmi:idref="X"><properties stereotype="wrong"/></element></elements></xmi:Extension>'
            b'<xmi:Extension extender="Enterprise Architect"><elements><element xmi:idref="X"><properties stereotype="right"/></element></elements></xmi:Extension>'
            b'</xmi:XMI>'
        )
        adapter = create_adapter(_root(data))
        assert adapter.properties_of("X").stereotype == "right"

    def test_no_extension_section(self):
        data = (
            b'<xmi:XMI xmlns:xmi="http://schema.omg.org/spec/XMI/2.1" xmlns:uml="http://schema.omg.org/spec/UML/2.1">'
            b'<uml:Model xmi:type="uml:Model" name="M"/></xmi:XMI>'
        )
        adapter = create_adapter(_root(data))
        assert adapter.extension is None
        assert adapter.links_of("X") == ()
        assert adapter.diagrams() == ()

    def test_attribute_qualifies_prefixed_names(self, make_xmi):
        adapter = create_adapter(_root(make_xmi(PACKAGE)))
        (package,) = adapter.children_of(adapter.model, Relation.PACKAGED_ELEMENT)
        assert adapter.attribute(package, "xmi:id") == "P1"
        assert adapter.attribute(package, "name") == "P"
        assert adapter.is_type(package, "uml:Package")

    def test_element_records(self, make_xmi):
        ext = (
            '<elements><element xmi:idref="A" xmi:type="uml:Class" name="A">'
            '<model package="P1"/>'
            '<properties documentation="Doc of A" stereotype="FeatureType" isAbstract="true"/>'
            '<attributes><attribute xmi:idref="A_x" name="x"><documentation value="the x"/></attribute></attributes>'
            '<links><Association xmi:id="L1" start="A" end="B"/><Dependency xmi:id="D1" start="A" end="C"/></links>'
            '</element></elements>'
        )
        adapter = create_adapter(_root(make_xmi(PACKAGE, ext)))
        assert adapter.find_element("A").xmi_idref == "A"
        props = adapter.properties_of("A")
        assert props.documentation == "Doc of A"
        assert props.stereotype == "FeatureType"
        assert props.is_abstract is True
        assert adapter.documentation_of("A_x") == "the x"
        assert adapter.documentation_of("missing") is None
        kinds = [link.kind for link in adapter.links_of("A")]
        assert kinds == [LinkKind.ASSOCIATION, LinkKind.OTHER]
        assert adapter.elements_with_links()[0][0] == "A"

    def test_diagrams(self, make_xmi):
        ext = (
            '<diagrams><diagram xmi:id="D1"><model package="P1"/>'
            '<properties name="Overview" documentation="First"/></diagram></diagrams>'
        )
        (diagram,) = create_adapter(_root(make_xmi(PACKAGE, ext))).diagrams()
        assert diagram.xmi_id == "D1"
        assert diagram.name == "Overview"
        assert diagram.documentation == "First"
        assert diagram.package == "P1"


class TestXmi21Paths:

    def test_connector_end_reads_type_multiplicity(self, make_xmi):
        adapter = create_adapter(_root(make_xmi(PACKAGE, CONNECTOR, "xmi21")))
        connector = adapter.connector_by_id("L1")
        assert connector.xmi_idref == "L1"
        target = connector.end(ConnectorEnd.TARGET)
        assert target.multiplicity == "1"
        assert target.role_name == "bs"
        assert target.aggregation == "shared"
        assert target.documentation == "the Bs"
        assert adapter.connector_end_name("B", ConnectorEnd.TARGET) == "B"

    def test_class_constraints_from_element(self, make_xmi):
        ext = (
            '<elements><element xmi:idref="A" name="A"><constraints>'
            '<constraint name="a &amp;lt; b" type="Invariant" weight="1" status="Proposed"/>'
            '</constraints></element></elements>' + CONNECTOR
        )
        adapter = create_adapter(_root(make_xmi(PACKAGE, ext, "xmi21")))
        (constraint,) = adapter.class_constraints("A")
        assert constraint.name == "a &lt; b"
        assert constraint.status == "Proposed"
        assert adapter.class_constraints("B") == ()


class TestXmi2013Paths:

    def test_connector_end_prefers_role_multiplicity(self, make_xmi):
        adapter = create_adapter(_root(make_xmi(PACKAGE, CONNECTOR, "xmi2013")))
        connector = adapter.connector_by_id("L1")
        assert connector.end(ConnectorEnd.TARGET).multiplicity == "0..*"
        # no role multiplicity on the source: falls back to type
        assert connector.end(ConnectorEnd.SOURCE).multiplicity == "1"

    def test_class_constraints_from_connector_ends(self, make_xmi):
        adapter = create_adapter(_root(make_xmi(PACKAGE, CONNECTOR, "xmi2013")))
        (constraint,) = adapter.class_constraints("A")
        assert constraint.name == "x &gt; 0"
        assert constraint.type == "Invariant"
        assert adapter.class_constraints("B") == ()

    def test_documentation_child_fallback(self, make_xmi):
        ext = (
            '<elements><element xmi:idref="A" name="A"><properties stereotype="S"/>'
            '<documentation value="From child"/></element>'
            '<element xmi:idref="B" name="B"><properties documentation="From attribute"/>'
            '<documentation value="ignored"/></element></elements>'
        )
        adapter = create_adapter(_root(make_xmi(PACKAGE, ext, "xmi2013")))
        assert adapter.properties_of("A").documentation == "From child"
        assert adapter.properties_of("B").documentation == "From attribute"

        adapter21 = create_adapter(_root(make_xmi(PACKAGE, ext, "xmi21")))
        assert adapter21.properties_of("A").documentation is None

    def test_links_found_by_flat_scan(self, make_xmi):
        ext = (
            '<elements>'
            '<element xmi:idref="A" name="A"><links><Association xmi:id="L1" start="A" end="B"/></links></element>'
            '<element xmi:idref="B" name="B"><links><Association xmi:id="L1" start="A" end="B"/>'
            '<Generalization xmi:id="G1" start="B" end="C"/></links></element>'
            '</elements>'
        )
        adapter = create_adapter(_root(make_xmi(PACKAGE, ext, "xmi2013")))
        assert [link.xmi_id for link in adapter.links_of("A")] == ["L1"]
        assert [link.xmi_id for link in adapter.links_of("B")] == ["L1", "G1"]
        assert [link.xmi_id for link in adapter.links_of("C")] == ["G1"]
