"""
Location record: geographic coverage of an asset.

Wire shape is rigid:

    <coverage>
        <geographic_location>
            <longitude>-105.2830</longitude>
            <latitude>40.0170</latitude>
            <altitude mode="relativeToGround">0</altitude>
        </geographic_location>
    </coverage>
"""

from __future__ import annotations

import warnings
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from enum import Enum
from typing import Set

from collada_asset.conversion import (
    XmlConversion,
    format_float,
    get_attribute,
    get_text,
    iter_children,
    make_element,
    parse_float,
)
from collada_asset.errors import (
    Invalid,
    InvalidChild,
    MissingAttr,
    MissingData,
    MissingElement,
)
from collada_asset.units import AltitudeMode


class LocationField(Enum):
    """Children of <geographic_location>, in canonical write order."""

    LONGITUDE = "longitude"
    LATITUDE = "latitude"
    ALTITUDE = "altitude"


@dataclass
class Location(XmlConversion):
    """
    Geographic location of an asset.

    Properties:
        longitude: Degrees, east positive
        latitude: Degrees, north positive
        altitude: Meters, interpreted according to mode
        mode: AltitudeMode (defaults to RELATIVE_TO_GROUND)

    IMPORTANT:
        Altitude is written as an integer. Fractional meters do not
        survive encode.
    """

    longitude: float = 0.0
    latitude: float = 0.0
    altitude: float = 0.0
    mode: AltitudeMode = AltitudeMode.RELATIVE_TO_GROUND

    def parse(self, node: ET.Element) -> None:
        if node.tag != "coverage":
            raise MissingElement(structure="location", elem="coverage")

        children = list(iter_children(node))
        if len(children) != 1 or children[0].tag != "geographic_location":
            raise MissingElement(structure="location", elem="geographic_location")

        seen: Set[LocationField] = set()
        for child in iter_children(children[0]):
            try:
                field = LocationField(child.tag)
            except ValueError:
                raise InvalidChild(
                    child=child.tag, parent="geographic_location"
                ) from None

            if field in seen:
                raise Invalid(
                    msg="<geographic_location> element must have 3 children: "
                    "<longitude>, <latitude>, <altitude>"
                )
            seen.add(field)

            text = get_text(child)
            if text is None:
                raise MissingData(elem=child.tag)

            if field is LocationField.LONGITUDE:
                self.longitude = parse_float(text, child.tag)
            elif field is LocationField.LATITUDE:
                self.latitude = parse_float(text, child.tag)
            elif field is LocationField.ALTITUDE:
                self.altitude = parse_float(text, child.tag)
                mode = get_attribute(child, "mode")
                if mode is None:
                    raise MissingAttr(elem="altitude", attr="mode")
                self.mode = AltitudeMode.from_literal(mode)

        for field in LocationField:
            if field not in seen:
                raise MissingElement(structure="geographic_location", elem=field.value)

    def encode(self) -> ET.Element:
        altitude = int(self.altitude)
        if altitude != self.altitude:
            warnings.warn(
                f"Altitude {self.altitude} truncated to {altitude} on encode",
                UserWarning,
            )

        geo = make_element(
            "geographic_location",
            children=[
                make_element("longitude", text=format_float(self.longitude)),
                make_element("latitude", text=format_float(self.latitude)),
                make_element(
                    "altitude", {"mode": self.mode.value}, text=str(altitude)
                ),
            ],
        )
        return make_element("coverage", children=[geo])


__all__ = ["LocationField", "Location"]
