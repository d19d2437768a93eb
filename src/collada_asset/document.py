"""
XML text entry points for <asset> blocks.

Thin wrappers that turn XML text (or a file) into an Asset and back.
They do not read or write a full COLLADA document.
"""

import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Union

from collada_asset.asset import Asset
from collada_asset.errors import Invalid, MissingElement


def parse_asset_string(xml_text: str) -> Asset:
    """
    Parse XML text whose root element is <asset>.

    Args:
        xml_text: XML document text

    Returns:
        Populated Asset

    Raises:
        Invalid: If the text is not well-formed XML
        MissingElement: If the root element is not <asset>
        ColladaError: On any validation failure inside <asset>
    """
    try:
        root = ET.fromstring(xml_text)
    except ET.ParseError as e:
        raise Invalid(msg=f"malformed XML: {e}") from e

    if root.tag != "asset":
        raise MissingElement(structure="document", elem="asset")

    return Asset.from_element(root)


def parse_asset_file(filepath: Union[str, Path]) -> Asset:
    """
    Parse a UTF-8 XML file whose root element is <asset>.

    Raises:
        FileNotFoundError: If the file doesn't exist
        ColladaError: If parsing fails
    """
    try:
        with open(filepath, "r", encoding="utf-8") as f:
            content = f.read()
    except FileNotFoundError:
        raise FileNotFoundError(f"Asset file not found: {filepath}")

    return parse_asset_string(content)


def encode_asset_string(asset: Asset, indent: bool = True) -> str:
    """Encode an Asset and serialize it as XML text."""
    root = asset.encode()
    if indent:
        ET.indent(root)
    return ET.tostring(root, encoding="unicode")


__all__ = [
    "parse_asset_string",
    "parse_asset_file",
    "encode_asset_string",
]
