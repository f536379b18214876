from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from uml_types import DialectName


@dataclass
class ParserConfig:
    # ===== INPUT =====
    dialect: Optional[DialectName] = None      # "xmi21", "xmi2013"; None = detect from namespace
    recover: bool = False                      # lxml recover mode for damaged exports
    huge_tree: bool = False                    # lift lxml depth/size limits

    # ===== ASSEMBLY =====
    decode_html_entities: bool = True          # definitions and constraint names
    include_diagrams: bool = True

    # ===== OUTPUT (CLI) =====
    output_format: str = "json"                # "json", "yaml"
    indent: int = 2


DEFAULT_CONFIG = ParserConfig()

__all__ = [
    "ParserConfig",
    "DEFAULT_CONFIG",
]
