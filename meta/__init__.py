from .xml_meta import XmlMetaModel
from .uml_meta import UmlMetaModel
from .default_model import MetaBundle, DEFAULT_META, XMI21_META, XMI2013_META, META_BY_DIALECT

__all__ = [
    "XmlMetaModel",
    "UmlMetaModel",
    "MetaBundle",
    "DEFAULT_META",
    "XMI21_META",
    "XMI2013_META",
    "META_BY_DIALECT",
]
