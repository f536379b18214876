#!/usr/bin/env python3
"""
xmi2uml - read Enterprise Architect XMI exports into an immutable UML document.

    >>> import xmi2uml
    >>> doc = xmi2uml.parse("model.xmi")
    >>> [p.name for p in doc.packages]

Supports the XMI 2.1 ("ea-xmi-2.4.2") and XMI 20131001 ("ea-xmi-2.5.1")
export layouts.
"""
from app.cli import main
from app.config import DEFAULT_CONFIG, ParserConfig
from core.errors import UnsupportedDialectError, XmiParseError, XmiStructureError
from core.parser import XmiParser, parse, parse_string
from core.uml_model import Document

__all__ = [
    "parse",
    "parse_string",
    "XmiParser",
    "ParserConfig",
    "DEFAULT_CONFIG",
    "Document",
    "XmiParseError",
    "XmiStructureError",
    "UnsupportedDialectError",
    "main",
]

if __name__ == "__main__":
    raise SystemExit(main())
