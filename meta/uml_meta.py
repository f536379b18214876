from dataclasses import dataclass
from typing import Tuple

ElementType = str


@dataclass(frozen=True)
class UmlMetaModel:
    model_type: ElementType = "uml:Model"
    package_type: ElementType = "uml:Package"
    class_type: ElementType = "uml:Class"
    association_class_type: ElementType = "uml:AssociationClass"
    enum_type: ElementType = "uml:Enumeration"
    datatype_type: ElementType = "uml:DataType"
    property_type: ElementType = "uml:Property"

    # LiteralUnlimitedNatural encodes "unbounded" as -1
    unlimited_literal_value: str = "-1"
    unlimited_multiplicity: str = "*"

    owning_aggregations: Tuple[str, ...] = ("shared", "composite")

    @property
    def class_like_types(self) -> Tuple[ElementType, ...]:
        return (self.class_type, self.association_class_type)
