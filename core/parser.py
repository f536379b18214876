"""
Parser front-end: file/bytes -> lxml tree -> dialect adapter -> Document.
"""
from __future__ import annotations

import logging
import os
from typing import Optional, Union

from lxml import etree

from adapters.sparx import create_adapter
from app.config import DEFAULT_CONFIG, ParserConfig
from core.assembler import ModelAssembler
from core.errors import XmiStructureError
from core.uml_model import Document

logger = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]


class XmiParser:
    """Parse Enterprise Architect XMI exports into ``Document`` graphs.

    One parser may be reused; every call builds its own adapter and
    identifier index.
    """

    def __init__(self, config: Optional[ParserConfig] = None) -> None:
        self.config = config or DEFAULT_CONFIG

    def _xml_parser(self) -> etree.XMLParser:
        return etree.XMLParser(
            recover=self.config.recover,
            huge_tree=self.config.huge_tree,
            remove_comments=True,
            resolve_entities=False,
        )

    def parse(self, path: PathLike) -> Document:
        logger.info("Parsing %s", os.fspath(path))
        try:
            tree = etree.parse(os.fspath(path), self._xml_parser())
        except etree.XMLSyntaxError as e:
            raise XmiStructureError(f"Malformed XML in {os.fspath(path)}: {e}") from e
        return self.parse_tree(tree)

    def parse_string(self, data: Union[str, bytes]) -> Document:
        if isinstance(data, str):
            data = data.encode("utf-8")
        try:
            root = etree.fromstring(data, self._xml_parser())
        except etree.XMLSyntaxError as e:
            raise XmiStructureError(f"Malformed XML: {e}") from e
        return self.parse_tree(root)

    def parse_tree(self, tree: Union[etree._ElementTree, etree._Element]) -> Document:
        if isinstance(tree, etree._ElementTree):
            tree = tree.getroot()
        if tree is None:
            raise XmiStructureError("Empty document")
        adapter = create_adapter(tree, self.config.dialect)
        document = ModelAssembler(adapter, self.config).assemble()
        logger.info(
            "Parsed %s model %r: %d packages, %d classes, %d enums",
            adapter.dialect, document.name,
            sum(1 for _ in document.walk_packages()), len(document.classes), len(document.enums),
        )
        return document


def parse(path: PathLike, config: Optional[ParserConfig] = None) -> Document:
    return XmiParser(config).parse(path)


def parse_string(data: Union[str, bytes], config: Optional[ParserConfig] = None) -> Document:
    return XmiParser(config).parse_string(data)


__all__ = ["XmiParser", "parse", "parse_string"]
