"""
Technique record: a vendor/platform specific data island.

The content of a technique is defined by its profile's own schema,
which this package does not know. The entire <technique> element is
kept as an opaque payload and written back unchanged.
"""

from __future__ import annotations

import copy
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from typing import Optional

from collada_asset.conversion import (
    XmlConversion,
    elements_equal,
    get_attribute,
    make_element,
)
from collada_asset.errors import InvalidAttrData, MissingAttr, MissingElement


@dataclass(eq=False)
class Technique(XmlConversion):
    """
    Information needed by a specific platform or program.

    Properties:
        profile:
            Vendor-defined string naming the platform/target (required)
            Examples: "Max", "MAYA", "blender"

        xmlns:
            Schema namespace the payload follows, when the element carries
            a plain "xmlns" attribute (optional)

        data:
            The full original <technique> element, including its own
            tag, attributes and children. None for a hand-built technique.

    Equality compares the encoded trees, not payload identity.
    """

    profile: str = ""
    xmlns: Optional[str] = None
    data: Optional[ET.Element] = None

    def parse(self, node: ET.Element) -> None:
        if node.tag != "technique":
            raise MissingElement(structure="technique", elem="technique")

        profile = get_attribute(node, "profile")
        if profile is None:
            raise MissingAttr(elem="technique", attr="profile")
        if not profile:
            raise InvalidAttrData(elem="technique", attr="profile", data=profile)

        self.profile = profile
        # ElementTree turns xmlns declarations in source text into tag
        # namespaces, so this is only present on hand-built elements
        self.xmlns = get_attribute(node, "xmlns")
        self.data = copy.deepcopy(node)

    def encode(self) -> ET.Element:
        if self.data is None:
            node = make_element("technique", {"profile": self.profile})
        else:
            # The payload already holds the whole <technique> tag
            node = copy.deepcopy(self.data)
            node.set("profile", self.profile)
        if self.xmlns is not None:
            node.set("xmlns", self.xmlns)
        return node

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Technique):
            return NotImplemented
        return (
            self.profile == other.profile
            and self.xmlns == other.xmlns
            and elements_equal(self.encode(), other.encode())
        )


__all__ = ["Technique"]
