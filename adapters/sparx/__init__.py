"""
Enterprise Architect XMI dialect adapters.
"""
from __future__ import annotations

import logging
from dataclasses import replace
from typing import Dict, Optional, Type

from lxml import etree

from core.errors import UnsupportedDialectError, XmiStructureError
from meta import META_BY_DIALECT, MetaBundle

from .base import SparxAdapter, SourceTree
from .xmi21 import Xmi21Adapter
from .xmi2013 import Xmi2013Adapter

logger = logging.getLogger(__name__)

ADAPTERS: Dict[str, Type[SparxAdapter]] = {
    Xmi21Adapter.dialect: Xmi21Adapter,
    Xmi2013Adapter.dialect: Xmi2013Adapter,
}


def _root_of(source: SourceTree) -> etree._Element:
    if isinstance(source, etree._ElementTree):
        return source.getroot()
    return source


def xmi_namespace(source: SourceTree) -> Optional[str]:
    root = _root_of(source)
    qname = etree.QName(root)
    if qname.localname == "XMI" and qname.namespace:
        return qname.namespace
    return root.nsmap.get("xmi")


def detect_dialect(source: SourceTree) -> str:
    namespace = xmi_namespace(source)
    if namespace is None:
        raise XmiStructureError("Document declares no XMI namespace")
    for name, meta in META_BY_DIALECT.items():
        if meta.xml.xmi_ns == namespace:
            return name
    raise UnsupportedDialectError(namespace)


def create_adapter(source: SourceTree, dialect: Optional[str] = None) -> SparxAdapter:
    """Pick the adapter for ``source``; ``dialect`` overrides detection."""
    root = _root_of(source)
    if dialect is None:
        dialect = detect_dialect(root)
    if dialect not in ADAPTERS:
        raise ValueError(f"Unknown dialect {dialect!r}; expected one of {sorted(ADAPTERS)}")

    meta: MetaBundle = META_BY_DIALECT[dialect]
    namespace = xmi_namespace(root)
    if namespace and namespace != meta.xml.xmi_ns:
        logger.warning("Reading %s namespace with forced dialect %s", namespace, dialect)
        meta = replace(meta, xml=replace(
            meta.xml,
            xmi_ns=namespace,
            uml_ns=root.nsmap.get("uml") or meta.xml.uml_ns,
        ))
    elif root.nsmap.get("uml") and root.nsmap["uml"] != meta.xml.uml_ns:
        meta = replace(meta, xml=replace(meta.xml, uml_ns=root.nsmap["uml"]))
    return ADAPTERS[dialect](root, meta)


__all__ = [
    "ADAPTERS",
    "SparxAdapter",
    "Xmi21Adapter",
    "Xmi2013Adapter",
    "create_adapter",
    "detect_dialect",
    "xmi_namespace",
]
