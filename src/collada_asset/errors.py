"""
Error taxonomy for COLLADA asset parsing.

Every validation failure raised by a record's `parse` is a subclass of
ColladaError. Each kind carries the structured context needed to point
at the offending element, attribute or data.

ARCHITECTURAL RULE:
    Errors describe WHAT is wrong with the input tree.
    They never attempt recovery. The first failure aborts the parse.
"""

from typing import Optional


class ColladaError(Exception):
    """Base class for all asset validation failures."""

    description = "COLLADA error"


class ParseError(ColladaError):
    """
    Raised when a text value cannot be converted (e.g. a malformed float).

    Properties:
        elem: Element (or attribute owner) holding the value, if known
        data: The text that failed to convert, if known
    """

    description = "Parse error"

    def __init__(self, elem: Optional[str] = None, data: Optional[str] = None):
        self.elem = elem
        self.data = data
        if elem is None:
            message = "Unable to parse data"
        else:
            message = f"Unable to parse data in <{elem}>: {data!r}"
        super().__init__(message)


class Invalid(ColladaError):
    """General validation failure with a free-form message."""

    description = "Invalid collada"

    def __init__(self, msg: str):
        self.msg = msg
        super().__init__(f"Invalid collada: {msg}")


class InvalidChild(ColladaError):
    """Element contains a child that is not allowed there."""

    description = "Invalid child"

    def __init__(self, child: str, parent: str):
        self.child = child
        self.parent = parent
        super().__init__(f"Element <{parent}> has invalid child <{child}>")


class InvalidAttr(ColladaError):
    """Element contains an attribute that is not allowed there."""

    description = "Invalid attribute"

    def __init__(self, elem: str, attr: str):
        self.elem = elem
        self.attr = attr
        super().__init__(f"Element <{elem}> has invalid attribute '{attr}'")


class InvalidData(ColladaError):
    """Element text is not one of the accepted values."""

    description = "Invalid data"

    def __init__(self, elem: str, data: str):
        self.elem = elem
        self.data = data
        super().__init__(f"Element <{elem}> has invalid data: {data}")


class InvalidAttrData(InvalidData):
    """
    Attribute value is not one of the accepted values.

    A subclass of InvalidData so that callers catching invalid data
    also see invalid attribute values.
    """

    description = "Invalid attribute data"

    def __init__(self, elem: str, attr: str, data: str):
        self.attr = attr
        ColladaError.__init__(
            self,
            f"Element <{elem}> has attribute '{attr}' with invalid data: {data}",
        )
        self.elem = elem
        self.data = data


class MissingElement(ColladaError):
    """A required element was not found while parsing a structure."""

    description = "Missing required element"

    def __init__(self, structure: str, elem: str):
        self.structure = structure
        self.elem = elem
        super().__init__(
            f"Parsing '{structure}' but required <{elem}> element not found"
        )


class MissingAttr(ColladaError):
    """A required attribute is absent from an element."""

    description = "Missing required attribute"

    def __init__(self, elem: str, attr: str):
        self.elem = elem
        self.attr = attr
        super().__init__(f"Element <{elem}> is missing required attribute: {attr}")


class MissingData(ColladaError):
    """Element has no text where text is required, e.g. <created/>."""

    description = "Missing required element data"

    def __init__(self, elem: str):
        self.elem = elem
        super().__init__(f"Element <{elem}> is missing required data")


__all__ = [
    "ColladaError",
    "ParseError",
    "Invalid",
    "InvalidChild",
    "InvalidAttr",
    "InvalidData",
    "InvalidAttrData",
    "MissingElement",
    "MissingAttr",
    "MissingData",
]
