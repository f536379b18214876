"""
XMI 2.1 / UML 2.1 exports (EA "ea-xmi-2.4.2").
"""
from __future__ import annotations

from typing import Tuple

from uml_types import XmiId

from .base import SparxAdapter
from .records import ConstraintRecord, LinkRecord


class Xmi21Adapter(SparxAdapter):
    """Links live in each element's own ``links`` list; constraints on the element."""

    dialect = "xmi21"

    def links_of(self, xmi_id: XmiId) -> Tuple[LinkRecord, ...]:
        record = self.find_element(xmi_id)
        if record is None:
            return ()
        return record.links

    def class_constraints(self, xmi_id: XmiId) -> Tuple[ConstraintRecord, ...]:
        record = self.find_element(xmi_id)
        if record is None:
            return ()
        return record.constraints


__all__ = ["Xmi21Adapter"]
