from dataclasses import dataclass
from typing import Dict

from .xml_meta import XmlMetaModel, XMI21_XML, XMI2013_XML
from .uml_meta import UmlMetaModel


@dataclass(frozen=True)
class MetaBundle:
    dialect: str
    xml: XmlMetaModel
    uml: UmlMetaModel


XMI21_META = MetaBundle(dialect="xmi21", xml=XMI21_XML, uml=UmlMetaModel())
XMI2013_META = MetaBundle(dialect="xmi2013", xml=XMI2013_XML, uml=UmlMetaModel())

DEFAULT_META = XMI21_META

META_BY_DIALECT: Dict[str, MetaBundle] = {
    XMI21_META.dialect: XMI21_META,
    XMI2013_META.dialect: XMI2013_META,
}
