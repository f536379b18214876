from __future__ import annotations

import html
from typing import Optional

from uml_types import XmlValue


def xml_text(v: XmlValue) -> str:
    return "" if v is None else str(v)


def optional_text(v: Optional[str]) -> Optional[str]:
    """Empty attribute values count as absent."""
    if v is None:
        return None
    v = v.strip()
    return v or None


def xml_bool(v: Optional[str]) -> Optional[bool]:
    if v is None:
        return None
    v = v.strip().lower()
    if v == "true":
        return True
    if v == "false":
        return False
    return None


def decode_entities(v: Optional[str]) -> Optional[str]:
    """Decode HTML entities left in EA free-text fields (``&lt;``, ``&#xA;``...)."""
    if v is None:
        return None
    return html.unescape(v)


__all__ = ["xml_text", "optional_text", "xml_bool", "decode_entities"]
