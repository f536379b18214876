from dataclasses import dataclass
from typing import Dict

Namespace = str
AttributeName = str


@dataclass(frozen=True)
class XmlMetaModel:
    xmi_ns: Namespace = "http://schema.omg.org/spec/XMI/2.1"
    uml_ns: Namespace = "http://schema.omg.org/spec/UML/2.1"

    @property
    def xmi_id(self) -> AttributeName:
        return f"{{{self.xmi_ns}}}id"

    @property
    def xmi_idref(self) -> AttributeName:
        return f"{{{self.xmi_ns}}}idref"

    @property
    def xmi_type(self) -> AttributeName:
        return f"{{{self.xmi_ns}}}type"

    @property
    def extension_tag(self) -> str:
        return f"{{{self.xmi_ns}}}Extension"

    @property
    def model_tag(self) -> str:
        return f"{{{self.uml_ns}}}Model"

    @property
    def nsmap(self) -> Dict[str, Namespace]:
        return {"xmi": self.xmi_ns, "uml": self.uml_ns}

    def qualify(self, name: str) -> str:
        """Turn ``xmi:id`` style names into Clark notation; plain names pass through."""
        prefix, sep, local = name.partition(":")
        if not sep:
            return name
        ns = self.nsmap.get(prefix)
        if ns is None:
            return name
        return f"{{{ns}}}{local}"


XMI21_XML = XmlMetaModel()
XMI2013_XML = XmlMetaModel(
    xmi_ns="http://www.omg.org/spec/XMI/20131001",
    uml_ns="http://www.omg.org/spec/UML/20131001",
)
