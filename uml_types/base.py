#!/usr/bin/env python3
"""
Base types for xmi2uml project.
"""

from typing import Union

# ---------- Common type aliases ----------
XmlValue = Union[str, int, float, bool, None]
