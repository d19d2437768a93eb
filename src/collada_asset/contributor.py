"""
Contributor record: authoring information for an asset.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from collada_asset.conversion import (
    XmlConversion,
    get_text,
    iter_children,
    make_element,
)
from collada_asset.errors import InvalidChild, MissingData, MissingElement


class ContributorField(Enum):
    """Recognized children of <contributor>, in canonical write order."""

    AUTHOR = "author"
    AUTHOR_EMAIL = "author_email"
    AUTHOR_WEBSITE = "author_website"
    AUTHORING_TOOL = "authoring_tool"
    COMMENTS = "comments"
    COPYRIGHT = "copyright"
    SOURCE_DATA = "source_data"


@dataclass
class Contributor(XmlConversion):
    """
    One contributor to an asset.

    All seven fields are independently optional. Each maps to exactly one
    child element whose tag equals the field name, so read order does not
    matter; write order follows ContributorField.

    Example:
        <contributor>
            <author>Bob the artist</author>
            <copyright>Bob's game shack: all rights reserved</copyright>
        </contributor>
    """

    author: Optional[str] = None
    author_email: Optional[str] = None
    author_website: Optional[str] = None
    authoring_tool: Optional[str] = None
    comments: Optional[str] = None
    copyright: Optional[str] = None
    source_data: Optional[str] = None

    def parse(self, node: ET.Element) -> None:
        if node.tag != "contributor":
            raise MissingElement(structure="contributor", elem="contributor")

        for child in iter_children(node):
            try:
                field = ContributorField(child.tag)
            except ValueError:
                raise InvalidChild(child=child.tag, parent="contributor") from None

            text = get_text(child)
            if text is None:
                raise MissingData(elem=child.tag)

            # Field names match tag names one to one
            setattr(self, field.value, text)

    def encode(self) -> ET.Element:
        children: List[ET.Element] = []
        for field in ContributorField:
            value = getattr(self, field.value)
            if value is not None:
                children.append(make_element(field.value, text=value))
        return make_element("contributor", children=children)


__all__ = ["ContributorField", "Contributor"]
