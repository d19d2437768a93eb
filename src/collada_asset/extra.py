"""
Extra record: extension point carrying one or more techniques.

An <extra> may embed its own <asset>, which makes this the first
record that recurses back into the root record type.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Dict, List, Optional

from collada_asset.conversion import (
    XmlConversion,
    get_attribute,
    get_child,
    iter_children,
    make_element,
)
from collada_asset.errors import InvalidChild, MissingElement
from collada_asset.technique import Technique

if TYPE_CHECKING:
    from collada_asset.asset import Asset


class ExtraChild(Enum):
    """Recognized children of <extra>."""

    ASSET = "asset"
    TECHNIQUE = "technique"


@dataclass
class Extra(XmlConversion):
    """
    Arbitrary additional information attached to a parent structure.

    Properties:
        id: Unique identifier (optional)
        name: Human-readable name (optional)
        type: Hint for the kind of information held (optional)
        asset: Nested asset metadata for this extra (optional)
        techniques: One or more techniques, in document order

    INVARIANTS:
        - At least one technique on the wire
        - The nested asset does not count towards techniques
    """

    id: Optional[str] = None
    name: Optional[str] = None
    type: Optional[str] = None
    asset: Optional["Asset"] = None
    techniques: List[Technique] = field(default_factory=list)

    def parse(self, node: ET.Element) -> None:
        # Asset and Extra refer to each other
        from collada_asset.asset import Asset

        self.id = get_attribute(node, "id")
        self.name = get_attribute(node, "name")
        self.type = get_attribute(node, "type")

        asset_node = get_child(node, ExtraChild.ASSET.value)
        if asset_node is not None:
            self.asset = Asset.from_element(asset_node)

        if get_child(node, ExtraChild.TECHNIQUE.value) is None:
            raise MissingElement(structure="extra", elem="technique")

        for child in iter_children(node):
            try:
                kind = ExtraChild(child.tag)
            except ValueError:
                raise InvalidChild(child=child.tag, parent="extra") from None

            if kind is ExtraChild.TECHNIQUE:
                self.techniques.append(Technique.from_element(child))
            elif kind is ExtraChild.ASSET:
                # Already parsed above
                continue

    def encode(self) -> ET.Element:
        attrib: Dict[str, str] = {}
        if self.id is not None:
            attrib["id"] = self.id
        if self.name is not None:
            attrib["name"] = self.name
        if self.type is not None:
            attrib["type"] = self.type

        children: List[ET.Element] = []
        if self.asset is not None:
            children.append(self.asset.encode())
        children.extend(t.encode() for t in self.techniques)

        return make_element("extra", attrib, children=children)


__all__ = ["ExtraChild", "Extra"]
