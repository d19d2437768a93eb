"""
Asset record: the root metadata block of a COLLADA document.

Owns the full validation order for <asset> and the canonical child
order used on encode.

Example:
    <asset>
        <contributor>
            <author>John Smith</author>
        </contributor>
        <created>2008-01-28T20:51:36Z</created>
        <keywords>foo bar baz</keywords>
        <modified>2008-01-28T20:51:36Z</modified>
        <unit meter="0.01" name="centimeter"/>
        <up_axis>Z_UP</up_axis>
    </asset>
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Set

from collada_asset.contributor import Contributor
from collada_asset.conversion import (
    XmlConversion,
    get_text,
    iter_children,
    make_element,
)
from collada_asset.errors import InvalidChild, MissingData, MissingElement
from collada_asset.extra import Extra
from collada_asset.location import Location
from collada_asset.units import Unit, UpAxis


class AssetChild(Enum):
    """Recognized children of <asset>, in canonical write order."""

    CONTRIBUTOR = "contributor"
    COVERAGE = "coverage"
    CREATED = "created"
    KEYWORDS = "keywords"
    MODIFIED = "modified"
    REVISION = "revision"
    SUBJECT = "subject"
    TITLE = "title"
    UNIT = "unit"
    UP_AXIS = "up_axis"
    EXTRA = "extra"


# Children that are parsed by a sub-record instead of read as text
_NESTED_CHILDREN = {
    AssetChild.CONTRIBUTOR,
    AssetChild.COVERAGE,
    AssetChild.EXTRA,
    AssetChild.UNIT,
}

_REQUIRED_CHILDREN = (AssetChild.CREATED, AssetChild.MODIFIED)


@dataclass
class Asset(XmlConversion):
    """
    Asset metadata for a parent element.

    Properties:
        contributors: Authoring records, in document order
        location: Geographic coverage (optional)
        created: Creation timestamp, ISO 8601 text (required)
        keywords: Whitespace-separated tokens of <keywords>
        modified: Last modification timestamp, ISO 8601 text (required)
        revision: Revision string (optional)
        subject: Topical subject (optional)
        title: Title (optional)
        unit: Distance unit (optional)
        up_axis: Up axis (optional)
        extras: Extension blocks, in document order

    IMPORTANT:
        Keywords are rejoined with single spaces on encode, so the
        original spacing of <keywords> is not preserved.
    """

    contributors: List[Contributor] = field(default_factory=list)
    location: Optional[Location] = None
    created: str = ""
    keywords: List[str] = field(default_factory=list)
    modified: str = ""
    revision: Optional[str] = None
    subject: Optional[str] = None
    title: Optional[str] = None
    unit: Optional[Unit] = None
    up_axis: Optional[UpAxis] = None
    extras: List[Extra] = field(default_factory=list)

    def parse(self, node: ET.Element) -> None:
        seen: Set[AssetChild] = set()

        for child in iter_children(node):
            try:
                kind = AssetChild(child.tag)
            except ValueError:
                raise InvalidChild(child=child.tag, parent="asset") from None
            seen.add(kind)

            if kind in _NESTED_CHILDREN:
                self._parse_nested(kind, child)
                continue

            text = get_text(child)
            if text is None:
                raise MissingData(elem=child.tag)

            if kind is AssetChild.CREATED:
                self.created = text
            elif kind is AssetChild.KEYWORDS:
                self.keywords.extend(text.split())
            elif kind is AssetChild.MODIFIED:
                self.modified = text
            elif kind is AssetChild.REVISION:
                self.revision = text
            elif kind is AssetChild.SUBJECT:
                self.subject = text
            elif kind is AssetChild.TITLE:
                self.title = text
            elif kind is AssetChild.UP_AXIS:
                self.up_axis = UpAxis.from_literal(text)

        for kind in _REQUIRED_CHILDREN:
            if kind not in seen:
                raise MissingElement(structure="asset", elem=kind.value)

    def _parse_nested(self, kind: AssetChild, child: ET.Element) -> None:
        if kind is AssetChild.CONTRIBUTOR:
            self.contributors.append(Contributor.from_element(child))
        elif kind is AssetChild.COVERAGE:
            self.location = Location.from_element(child)
        elif kind is AssetChild.EXTRA:
            self.extras.append(Extra.from_element(child))
        elif kind is AssetChild.UNIT:
            self.unit = Unit.from_element(child)

    def encode(self) -> ET.Element:
        children: List[ET.Element] = [c.encode() for c in self.contributors]

        if self.location is not None:
            children.append(self.location.encode())

        children.append(make_element("created", text=self.created))
        if self.keywords:
            children.append(make_element("keywords", text=" ".join(self.keywords)))
        children.append(make_element("modified", text=self.modified))

        if self.revision is not None:
            children.append(make_element("revision", text=self.revision))
        if self.subject is not None:
            children.append(make_element("subject", text=self.subject))
        if self.title is not None:
            children.append(make_element("title", text=self.title))
        if self.unit is not None:
            children.append(self.unit.encode())
        if self.up_axis is not None:
            children.append(make_element("up_axis", text=self.up_axis.value))

        children.extend(x.encode() for x in self.extras)

        return make_element("asset", children=children)


__all__ = ["AssetChild", "Asset"]
