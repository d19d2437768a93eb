"""
Leaf records: Unit, UpAxis, AltitudeMode.

These hold no nested records. UpAxis and AltitudeMode are closed
literal sets; Unit is a pair of optional attributes on <unit>.
"""

from __future__ import annotations

import warnings
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional

from collada_asset.conversion import (
    XmlConversion,
    format_float,
    get_attribute,
    make_element,
    parse_float,
)
from collada_asset.errors import InvalidAttrData, InvalidData, MissingElement


class UpAxis(Enum):
    """
    Which axis points up in a right-handed coordinate system.

    | Value | Right Axis | Up Axis    | In Axis    |
    | X_UP  | Negative Y | Positive X | Positive Z |
    | Y_UP  | Positive X | Positive Y | Positive Z |
    | Z_UP  | Positive X | Positive Z | Negative Y |
    """

    X_UP = "X_UP"
    Y_UP = "Y_UP"
    Z_UP = "Z_UP"

    @classmethod
    def from_literal(cls, text: str) -> UpAxis:
        """
        Decode the text of an <up_axis> element.

        Raises:
            InvalidData: If text is not one of X_UP, Y_UP, Z_UP
        """
        try:
            return cls(text)
        except ValueError:
            raise InvalidData(elem="up_axis", data=text) from None


class AltitudeMode(Enum):
    """
    How an altitude value is measured.

    RELATIVE_TO_GROUND: meters above terrain at the given lat/long
    ABSOLUTE: meters above sea level
    """

    RELATIVE_TO_GROUND = "relativeToGround"
    ABSOLUTE = "absolute"

    @classmethod
    def from_literal(cls, text: str) -> AltitudeMode:
        """
        Decode the mode attribute of an <altitude> element.

        Raises:
            InvalidAttrData: If text is not absolute or relativeToGround
        """
        try:
            return cls(text)
        except ValueError:
            raise InvalidAttrData(elem="altitude", attr="mode", data=text) from None


@dataclass
class Unit(XmlConversion):
    """
    Distance unit of the asset.

    Properties:
        name: Name of the unit, need not be a real-world measure (optional)
        meter: How many real-world meters in one unit (optional)

    Unset properties are omitted on encode, never written as empty attributes.
    """

    name: Optional[str] = None
    meter: Optional[float] = None

    def parse(self, node: ET.Element) -> None:
        if node.tag != "unit":
            raise MissingElement(structure="unit", elem="unit")

        self.name = get_attribute(node, "name")

        meter = get_attribute(node, "meter")
        if meter is not None:
            self.meter = parse_float(meter, "unit")
            if self.meter <= 0:
                warnings.warn(
                    f"<unit> meter should be positive, got {meter}", UserWarning
                )

    def encode(self) -> ET.Element:
        attrib: Dict[str, str] = {}
        if self.name is not None:
            attrib["name"] = self.name
        if self.meter is not None:
            attrib["meter"] = format_float(self.meter)
        return make_element("unit", attrib)


__all__ = ["UpAxis", "AltitudeMode", "Unit"]
