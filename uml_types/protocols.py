#!/usr/bin/env python3
"""
Protocols shared between the resolution core and the dialect adapters.
"""

from typing import Optional, Protocol

from .uml import XmiId


# ---------- Protocol definitions ----------
class NameResolver(Protocol):
    """Anything that can turn an identifier into a display name."""
    def resolve(self, xmi_id: Optional[XmiId]) -> Optional[str]: ...
