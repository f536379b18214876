"""
Cardinality normalization.

Lower bounds are mapped to symbolic optionality codes, upper bounds pass
through verbatim. Missing input never turns into a guessed default.
"""
from __future__ import annotations

from typing import Dict, Optional

from core.uml_model import Cardinality
from meta import DEFAULT_META
from uml_types import CardinalityMin
from utils.xml import optional_text

LOWER_VALUE_MAPPINGS: Dict[str, CardinalityMin] = {
    "0": CardinalityMin.CONDITIONAL,
    "1": CardinalityMin.MANDATORY,
}


def cardinality_min_value(value: Optional[str]) -> Optional[CardinalityMin]:
    value = optional_text(value)
    if value is None:
        return None
    return LOWER_VALUE_MAPPINGS.get(value)


def cardinality_max_value(value: Optional[str]) -> Optional[str]:
    return optional_text(value)


def normalize(min_raw: Optional[str], max_raw: Optional[str]) -> Cardinality:
    return Cardinality(min=cardinality_min_value(min_raw), max=cardinality_max_value(max_raw))


def normalize_upper_literal(value: Optional[str]) -> Optional[str]:
    """Map the ``LiteralUnlimitedNatural`` encoding of "unbounded" to ``*``."""
    value = optional_text(value)
    uml = DEFAULT_META.uml
    if value == uml.unlimited_literal_value:
        return uml.unlimited_multiplicity
    return value


def parse_multiplicity(text: Optional[str]) -> Cardinality:
    """Normalize an EA connector multiplicity such as ``0..*`` or ``1``.

    A single value ``n`` is read as ``1..n``, which is how the exporter's
    consumers have always interpreted it.
    """
    text = optional_text(text)
    if text is None:
        return Cardinality()
    parts = [p.strip() for p in text.split("..")]
    if len(parts) == 1:
        parts.insert(0, "1")
    lower, upper = parts[0], parts[-1]
    return normalize(lower, upper)


__all__ = [
    "LOWER_VALUE_MAPPINGS",
    "cardinality_min_value",
    "cardinality_max_value",
    "normalize",
    "normalize_upper_literal",
    "parse_multiplicity",
]
