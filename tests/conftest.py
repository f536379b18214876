import os
import sys

import pytest

# Ensure project root is first on sys.path so the local packages are used
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

FIXTURES_DIR = os.path.join(os.path.dirname(__file__), "fixtures")

NAMESPACES = {
    "xmi21": (
        'xmlns:uml="http://schema.omg.org/spec/UML/2.1" '
        'xmlns:xmi="http://schema.omg.org/spec/XMI/2.1"'
    ),
    "xmi2013": (
        'xmlns:uml="http://www.omg.org/spec/UML/20131001" '
        'xmlns:xmi="http://www.omg.org/spec/XMI/20131001"'
    ),
}


def build_xmi(model_body: str, extension_body: str = "", dialect: str = "xmi21",
              model_name: str = "EA_Model") -> bytes:
    """Wrap model and extension fragments into a minimal EA export."""
    return (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        f'<xmi:XMI {NAMESPACES[dialect]}>'
        f'<uml:Model xmi:type="uml:Model" name="{model_name}">{model_body}</uml:Model>'
        f'<xmi:Extension extender="Enterprise Architect">{extension_body}</xmi:Extension>'
        '</xmi:XMI>'
    ).encode("utf-8")


@pytest.fixture
def make_xmi():
    return build_xmi


@pytest.fixture
def fixture_path():
    def _path(name: str) -> str:
        return os.path.join(FIXTURES_DIR, name)
    return _path
