"""
Identifier index: ``xmi:id -> name`` for every named element of one document.
"""
from __future__ import annotations

import logging
from typing import Callable, Dict, Iterable, Iterator, Optional, Tuple

from uml_types import XmiId

logger = logging.getLogger(__name__)

IdNamePairs = Callable[[], Iterable[Tuple[str, str]]]


class IdIndex:
    """Lazily built, read-only identifier index.

    ``source`` yields ``(id, name)`` pairs from one exhaustive walk of the
    source tree. It is consumed once, on the first lookup. Duplicate ids keep
    the last name seen.
    """

    def __init__(self, source: IdNamePairs) -> None:
        self._source = source
        self._names: Optional[Dict[str, str]] = None

    def _build(self) -> Dict[str, str]:
        names: Dict[str, str] = {}
        for xmi_id, name in self._source():
            if xmi_id in names and names[xmi_id] != name:
                logger.debug("Duplicate xmi:id %s (%r replaces %r)", xmi_id, name, names[xmi_id])
            names[xmi_id] = name
        logger.debug("Identifier index built with %d entries", len(names))
        return names

    @property
    def names(self) -> Dict[str, str]:
        if self._names is None:
            self._names = self._build()
        return self._names

    @property
    def is_built(self) -> bool:
        return self._names is not None

    def resolve(self, xmi_id: Optional[XmiId]) -> Optional[str]:
        if not xmi_id:
            return None
        return self.names.get(xmi_id)

    get = resolve

    def __contains__(self, xmi_id: object) -> bool:
        return xmi_id in self.names

    def __len__(self) -> int:
        return len(self.names)

    def __iter__(self) -> Iterator[str]:
        return iter(self.names)


__all__ = ["IdIndex"]
