"""
Generic recursive selection over the source tree.
"""
from __future__ import annotations

from typing import Any, Callable, List, Optional, Sequence

from uml_types import Relation, XmiType

Node = Any
ChildrenOf = Callable[[Node, Relation], Sequence[Node]]
TypeOf = Callable[[Node], Optional[XmiType]]


class TreeSelector:
    """Depth-first, pre-order collection of nodes of a given ``xmi:type``.

    ``children_of`` and ``type_of`` come from the dialect adapter, so the same
    walk serves package-of-packages, element trees and "any packaged element"
    queries.
    """

    def __init__(self, children_of: ChildrenOf, type_of: TypeOf) -> None:
        self._children_of = children_of
        self._type_of = type_of

    def _matches(self, node: Node, kind: Optional[str]) -> bool:
        return kind is None or self._type_of(node) == kind

    def select(self, root: Node, kind: Optional[str] = None,
               relation: Relation = Relation.PACKAGED_ELEMENT) -> List[Node]:
        result: List[Node] = []
        self._iterate(result, root, kind, relation)
        return result

    def _iterate(self, result: List[Node], node: Node, kind: Optional[str], relation: Relation) -> None:
        if self._matches(node, kind):
            result.append(node)
        for sub_node in self._children_of(node, relation):
            if self._children_of(sub_node, relation):
                self._iterate(result, sub_node, kind, relation)
            elif self._matches(sub_node, kind):
                result.append(sub_node)

    def select_children(self, parent: Node, kinds: Sequence[str] = (),
                        relation: Relation = Relation.PACKAGED_ELEMENT) -> List[Node]:
        """Immediate children only; no filter when ``kinds`` is empty."""
        return [
            child for child in self._children_of(parent, relation)
            if not kinds or self._type_of(child) in kinds
        ]

    def select_all_packaged_elements(self, root: Node, kind: Optional[str] = None) -> List[Node]:
        return self.select(root, kind, Relation.PACKAGED_ELEMENT)


__all__ = ["TreeSelector"]
