#!/usr/bin/env python3
"""
XML/XMI types for xmi2uml project.
"""

from typing import Literal

# ---------- Type aliases for XML/XMI ----------
DialectName = Literal["xmi21", "xmi2013"]
