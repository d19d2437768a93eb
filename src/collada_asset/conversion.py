"""
Conversion contract and generic tree interface.

Every record type implements XmlConversion:
    parse(node)  -> validates node and populates self in place
    encode()     -> builds a new element representing self

Container records delegate to member records through this contract
without knowing their internals.

The records never touch xml.etree.ElementTree directly. They go through
the small set of helpers below (construct node, get attribute, get child
by tag, iterate children, get text), so the core can be retargeted to
another tree implementation by rewriting this module alone.
"""

from __future__ import annotations

import math
import re
import xml.etree.ElementTree as ET
from abc import ABC, abstractmethod
from typing import Dict, Iterable, Iterator, Optional, Type, TypeVar

from collada_asset.errors import ParseError


T = TypeVar("T", bound="XmlConversion")


class XmlConversion(ABC):
    """
    Base class for all records that map to an XML element.

    IMPORTANT:
        parse() is only defined on a freshly constructed instance.
        Calling it twice on the same record is not supported.

        encode() never raises for a record that parsed successfully
        or was built with valid field values.
    """

    @abstractmethod
    def parse(self, node: ET.Element) -> None:
        """
        Validate node and populate this record.

        Raises:
            ColladaError: On the first validation failure
        """

    @abstractmethod
    def encode(self) -> ET.Element:
        """Build a new element representing this record."""

    @classmethod
    def from_element(cls: Type[T], node: ET.Element) -> T:
        """Construct a default record and parse node into it."""
        record = cls()
        record.parse(node)
        return record


# ---------------------------------------------------------------------------
# Tree interface
# ---------------------------------------------------------------------------

def make_element(
    tag: str,
    attrib: Optional[Dict[str, str]] = None,
    text: Optional[str] = None,
    children: Iterable[ET.Element] = (),
) -> ET.Element:
    """Construct a new element with optional attributes, text and children."""
    node = ET.Element(tag, dict(attrib or {}))
    node.text = text
    node.extend(children)
    return node


def get_attribute(node: ET.Element, name: str) -> Optional[str]:
    return node.get(name)


def get_child(node: ET.Element, tag: str) -> Optional[ET.Element]:
    """Return the first direct child with the given tag, or None."""
    return node.find(tag)


def iter_children(node: ET.Element) -> Iterator[ET.Element]:
    return iter(list(node))


def get_text(node: ET.Element) -> Optional[str]:
    """
    Return the element text with surrounding whitespace removed.

    Whitespace-only or absent text is reported as None, so that
    <created>  </created> and <created/> are both treated as empty.
    """
    if node.text is None:
        return None
    text = node.text.strip()
    return text or None


def elements_equal(a: ET.Element, b: ET.Element) -> bool:
    """
    Structural comparison of two element trees.

    Compares tag, attributes, text and children recursively.
    Tail text is ignored since it belongs to the parent's content.
    Surrounding whitespace in text is ignored, so pretty-printed and
    compact forms of the same tree compare equal.
    """
    if a.tag != b.tag or a.attrib != b.attrib:
        return False
    if (a.text or "").strip() != (b.text or "").strip():
        return False
    if len(a) != len(b):
        return False
    return all(elements_equal(x, y) for x, y in zip(a, b))


# ---------------------------------------------------------------------------
# Value helpers
# ---------------------------------------------------------------------------

# Decimal literal with optional exponent; no underscores, padding or inf/nan
_FLOAT_RE = re.compile(r"[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?")


def parse_float(text: str, elem: str) -> float:
    """
    Convert text to a finite float.

    Accepts plain decimal literals only ("1.33", "-2", ".5", "1e3").
    Python extensions such as "1_000", padded text, "inf" and "nan" are
    rejected, as are literals that overflow to infinity ("1e400").

    Raises:
        ParseError: If text is not a valid finite number
    """
    if not _FLOAT_RE.fullmatch(text):
        raise ParseError(elem=elem, data=text)
    value = float(text)
    if not math.isfinite(value):
        raise ParseError(elem=elem, data=text)
    return value


def format_float(value: float) -> str:
    """Shortest text that reads back as the same float (1.33 -> '1.33')."""
    return repr(float(value))


__all__ = [
    "XmlConversion",
    "make_element",
    "get_attribute",
    "get_child",
    "iter_children",
    "get_text",
    "elements_equal",
    "parse_float",
    "format_float",
]
