"""
COLLADA Asset Mapping Package

Typed records for the <asset> block of a COLLADA document, with a
parse/encode pair that maps each record to and from a generic
xml.etree.ElementTree element.

ARCHITECTURAL GUARANTEE:
------------------------
This package contains ZERO knowledge of:
    - Geometry, scenes, materials or animation
    - File layout of a full COLLADA document
    - XML namespaces

This package defines ASSET METADATA only.

Every record validates on parse and never fails on encode.
"""

__version__ = "0.1.0"
