"""Hard failures raised while reading an XMI document."""


class XmiParseError(ValueError):
    """Base class for unrecoverable XMI input problems."""


class XmiStructureError(XmiParseError):
    """A structural part of the document (root model, package list) is missing."""


class UnsupportedDialectError(XmiParseError):
    """The XMI namespace does not match any known exporter dialect."""

    def __init__(self, namespace: str) -> None:
        super().__init__(f"Unsupported XMI dialect namespace: {namespace!r}")
        self.namespace = namespace


__all__ = ["XmiParseError", "XmiStructureError", "UnsupportedDialectError"]
