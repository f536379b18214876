#!/usr/bin/env python3
"""
Unit tests for the recursive tree selector.
"""

from __future__ import annotations

from lxml import etree

from adapters.sparx import create_adapter
from core.tree import TreeSelector
from uml_types import Relation

MODEL = (
    '<packagedElement xmi:type="uml:Package" xmi:id="P1" name="P1">'
    '  <packagedElement xmi:type="uml:Class" xmi:id="C1" name="A"/>'
    '  <packagedElement xmi:type="uml:Package" xmi:id="P2" name="P2">'
    '    <packagedElement xmi:type="uml:Class" xmi:id="C2" name="B"/>'
    '    <packagedElement xmi:type="uml:DataType" xmi:id="D1" name="D"/>'
    '  </packagedElement>'
    '  <packagedElement xmi:type="uml:Enumeration" xmi:id="E1" name="E">'
    '    <ownedLiteral xmi:type="uml:EnumerationLiteral" xmi:id="E1L1" name="x"/>'
    '  </packagedElement>'
    '</packagedElement>'
    '<packagedElement xmi:type="uml:Package" xmi:id="P3" name="P3"/>'
)


def _selector(make_xmi, dialect="xmi21", model=MODEL):
    adapter = create_adapter(etree.fromstring(make_xmi(model, dialect=dialect)))
    return adapter, TreeSelector(adapter.children_of, adapter.type_of)


def _ids(adapter, nodes):
    return [adapter.xmi_id(n) for n in nodes]


class TestTreeSelector:

    def test_select_is_preorder_and_filters_by_type(self, make_xmi):
        adapter, selector = _selector(make_xmi)
        classes = selector.select(adapter.model, "uml:Class")
        assert _ids(adapter, classes) == ["C1", "C2"]

        packages = selector.select(adapter.model, "uml:Package")
        assert _ids(adapter, packages) == ["P1", "P2", "P3"]

    def test_childless_node_is_still_tested(self, make_xmi):
        adapter, selector = _selector(make_xmi)
        # P3 has no children but still matches
        assert "P3" in _ids(adapter, selector.select(adapter.model, "uml:Package"))

    def test_select_without_kind_returns_everything(self, make_xmi):
        adapter, selector = _selector(make_xmi)
        ids = _ids(adapter, selector.select_all_packaged_elements(adapter.model))
        # the model itself has no xmi:id
        assert ids == [None, "P1", "C1", "P2", "C2", "D1", "E1", "P3"]

    def test_select_children_is_one_level(self, make_xmi):
        adapter, selector = _selector(make_xmi)
        p1 = selector.select(adapter.model, "uml:Package")[0]
        assert _ids(adapter, selector.select_children(p1)) == ["C1", "P2", "E1"]
        assert _ids(adapter, selector.select_children(p1, ("uml:Class",))) == ["C1"]
        assert _ids(adapter, selector.select_children(p1, ("uml:Class", "uml:Enumeration"))) == ["C1", "E1"]

    def test_other_relations(self, make_xmi):
        adapter, selector = _selector(make_xmi)
        enum = selector.select(adapter.model, "uml:Enumeration")[0]
        literals = selector.select_children(enum, relation=Relation.OWNED_LITERAL)
        assert _ids(adapter, literals) == ["E1L1"]

    def test_nested_package_relation_in_2013(self, make_xmi):
        model = (
            '<packagedElement xmi:type="uml:Package" xmi:id="P1" name="P1">'
            '<nestedPackage xmi:type="uml:Package" xmi:id="P2" name="P2">'
            '<packagedElement xmi:type="uml:Class" xmi:id="C2" name="B"/>'
            '</nestedPackage>'
            '</packagedElement>'
        )
        adapter, selector = _selector(make_xmi, "xmi2013", model)
        assert _ids(adapter, selector.select(adapter.model, "uml:Class")) == ["C2"]

        adapter21, selector21 = _selector(make_xmi, "xmi21", model)
        assert selector21.select(adapter21.model, "uml:Class") == []
