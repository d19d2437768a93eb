"""
Tests for leaf records: Unit, UpAxis, AltitudeMode.
"""

import xml.etree.ElementTree as ET

import pytest
from collada_asset.asset import Asset
from collada_asset.errors import InvalidAttrData, InvalidData, MissingElement, ParseError
from collada_asset.units import AltitudeMode, Unit, UpAxis


class TestUpAxis:
    """Test the up axis literal set."""

    @pytest.mark.parametrize("literal", ["X_UP", "Y_UP", "Z_UP"])
    def test_literal_roundtrip(self, literal):
        assert UpAxis.from_literal(literal).value == literal

    @pytest.mark.parametrize("literal", ["W_UP", "z_up", "", "Y_UP "])
    def test_invalid_literal(self, literal):
        with pytest.raises(InvalidData) as exc_info:
            UpAxis.from_literal(literal)
        assert exc_info.value.elem == "up_axis"
        assert exc_info.value.data == literal


class TestAltitudeMode:
    """Test the altitude mode literal set."""

    @pytest.mark.parametrize("literal", ["absolute", "relativeToGround"])
    def test_literal_roundtrip(self, literal):
        assert AltitudeMode.from_literal(literal).value == literal

    def test_variants(self):
        assert AltitudeMode.from_literal("absolute") is AltitudeMode.ABSOLUTE
        assert AltitudeMode.from_literal("relativeToGround") is AltitudeMode.RELATIVE_TO_GROUND

    @pytest.mark.parametrize("literal", ["Absolute", "floating", ""])
    def test_invalid_literal(self, literal):
        with pytest.raises(InvalidData) as exc_info:
            AltitudeMode.from_literal(literal)
        assert isinstance(exc_info.value, InvalidAttrData)
        assert exc_info.value.elem == "altitude"
        assert exc_info.value.attr == "mode"
        assert exc_info.value.data == literal


class TestUnitParse:
    """Test parsing <unit>."""

    def test_parse_both_attributes(self):
        u = Unit.from_element(ET.fromstring('<unit meter="1.33" name="meter" />'))
        assert u.name == "meter"
        assert u.meter == 1.33

    def test_parse_name_only(self):
        u = Unit.from_element(ET.fromstring('<unit name="furlong" />'))
        assert u.name == "furlong"
        assert u.meter is None

    def test_parse_meter_only(self):
        u = Unit.from_element(ET.fromstring('<unit meter="0.01" />'))
        assert u.name is None
        assert u.meter == 0.01

    def test_parse_empty(self):
        u = Unit.from_element(ET.fromstring("<unit/>"))
        assert u == Unit()

    def test_malformed_meter(self):
        with pytest.raises(ParseError) as exc_info:
            Unit.from_element(ET.fromstring('<unit meter="one" />'))
        assert exc_info.value.elem == "unit"
        assert exc_info.value.data == "one"

    @pytest.mark.parametrize("meter", ["1_000", " 1 ", "inf", "nan"])
    def test_meter_must_be_plain_finite_decimal(self, meter):
        with pytest.raises(ParseError) as exc_info:
            Unit.from_element(ET.fromstring(f'<unit meter="{meter}" />'))
        assert exc_info.value.data == meter

    def test_meter_with_underscores_rejected_inside_asset(self):
        node = ET.fromstring(
            "<asset><created>c</created><modified>m</modified>"
            '<unit meter="1_000"/></asset>'
        )
        with pytest.raises(ParseError) as exc_info:
            Asset.from_element(node)
        assert exc_info.value.elem == "unit"

    def test_non_positive_meter_warns(self):
        with pytest.warns(UserWarning, match="positive"):
            u = Unit.from_element(ET.fromstring('<unit meter="-2" />'))
        assert u.meter == -2.0

    def test_wrong_tag(self):
        with pytest.raises(MissingElement) as exc_info:
            Unit.from_element(ET.fromstring('<units meter="1" />'))
        assert exc_info.value.structure == "unit"
        assert exc_info.value.elem == "unit"


class TestUnitEncode:
    """Test encoding <unit>."""

    def test_encode_both(self):
        e = Unit(name="meter", meter=1.33).encode()
        assert e.tag == "unit"
        assert e.attrib == {"name": "meter", "meter": "1.33"}
        assert e.text is None
        assert len(e) == 0

    def test_encode_omits_unset(self):
        assert Unit().encode().attrib == {}
        assert Unit(name="inch").encode().attrib == {"name": "inch"}
        assert Unit(meter=2.0).encode().attrib == {"meter": "2.0"}

    def test_roundtrip(self):
        u = Unit(name="centimeter", meter=0.01)
        assert Unit.from_element(u.encode()) == u
