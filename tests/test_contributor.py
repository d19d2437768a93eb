"""
Tests for the Contributor record.
"""

import xml.etree.ElementTree as ET

import pytest
from collada_asset.contributor import Contributor, ContributorField
from collada_asset.errors import InvalidChild, MissingData, MissingElement


FULL_CONTRIBUTOR = """
<contributor>
    <author>Bob the artist</author>
    <author_email>bob@bobartist.com</author_email>
    <author_website>http://www.bobartist.com</author_website>
    <authoring_tool>Super3DmodelMaker3000</authoring_tool>
    <comments>This is a big Tank</comments>
    <copyright>Bob's game shack: all rights reserved</copyright>
    <source_data>c:/models/tanks.s3d</source_data>
</contributor>"""


class TestContributorParse:
    """Test parsing <contributor>."""

    def test_parse_all_fields(self):
        c = Contributor.from_element(ET.fromstring(FULL_CONTRIBUTOR))
        assert c.author == "Bob the artist"
        assert c.author_email == "bob@bobartist.com"
        assert c.author_website == "http://www.bobartist.com"
        assert c.authoring_tool == "Super3DmodelMaker3000"
        assert c.comments == "This is a big Tank"
        assert c.copyright == "Bob's game shack: all rights reserved"
        assert c.source_data == "c:/models/tanks.s3d"

    def test_parse_partial(self):
        xml = """
        <contributor>
            <author>Master of disaster</author>
            <copyright>Disaster Dungeon (c) 2016</copyright>
        </contributor>"""
        c = Contributor.from_element(ET.fromstring(xml))
        assert c.author == "Master of disaster"
        assert c.copyright == "Disaster Dungeon (c) 2016"
        assert c.author_email is None
        assert c.author_website is None
        assert c.authoring_tool is None
        assert c.comments is None
        assert c.source_data is None

    def test_read_order_irrelevant(self):
        xml = "<contributor><copyright>c</copyright><author>a</author></contributor>"
        c = Contributor.from_element(ET.fromstring(xml))
        assert c == Contributor(author="a", copyright="c")

    def test_empty_contributor(self):
        assert Contributor.from_element(ET.fromstring("<contributor/>")) == Contributor()

    def test_wrong_tag(self):
        with pytest.raises(MissingElement) as exc_info:
            Contributor.from_element(ET.fromstring("<author>x</author>"))
        assert exc_info.value.structure == "contributor"
        assert exc_info.value.elem == "contributor"

    @pytest.mark.parametrize("field", [f.value for f in ContributorField])
    def test_empty_child_is_missing_data(self, field):
        xml = f"<contributor><{field}></{field}></contributor>"
        with pytest.raises(MissingData) as exc_info:
            Contributor.from_element(ET.fromstring(xml))
        assert exc_info.value.elem == field

    def test_unknown_child(self):
        xml = "<contributor><author>a</author><nickname>b</nickname></contributor>"
        with pytest.raises(InvalidChild) as exc_info:
            Contributor.from_element(ET.fromstring(xml))
        assert exc_info.value.child == "nickname"
        assert exc_info.value.parent == "contributor"

    def test_unknown_empty_child(self):
        """Unknown tags are rejected before their text is checked."""
        with pytest.raises(InvalidChild):
            Contributor.from_element(ET.fromstring("<contributor><nickname/></contributor>"))


class TestContributorEncode:
    """Test encoding <contributor>."""

    def test_encode_fixed_order(self):
        c = Contributor.from_element(ET.fromstring(FULL_CONTRIBUTOR))
        e = c.encode()
        assert e.tag == "contributor"
        assert [ch.tag for ch in e] == [f.value for f in ContributorField]
        assert e.find("comments").text == "This is a big Tank"

    def test_encode_partial(self):
        c = Contributor(source_data="file.s3d", author="Master of disaster")
        e = c.encode()
        assert [ch.tag for ch in e] == ["author", "source_data"]
        assert e[0].text == "Master of disaster"
        assert e[1].text == "file.s3d"

    def test_encode_empty(self):
        e = Contributor().encode()
        assert e.tag == "contributor"
        assert len(e) == 0

    def test_roundtrip(self):
        c = Contributor.from_element(ET.fromstring(FULL_CONTRIBUTOR))
        assert Contributor.from_element(c.encode()) == c
