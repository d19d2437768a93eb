"""
Example asset builder.

Builds a fully populated Asset touching every record type: a contributor,
a location, a unit and up axis, and an extra carrying a nested asset and
two techniques with vendor payloads.
"""
from collada_asset.asset import Asset
from collada_asset.contributor import Contributor
from collada_asset.conversion import make_element
from collada_asset.extra import Extra
from collada_asset.location import Location
from collada_asset.technique import Technique
from collada_asset.units import AltitudeMode, Unit, UpAxis


def build_example_asset(timestamp: str = "2008-01-28T20:51:36Z") -> Asset:
    asset = Asset(created=timestamp, modified=timestamp)

    asset.contributors = [
        Contributor(
            author="Bob the artist",
            author_email="bob@bobartist.com",
            authoring_tool="Super3DmodelMaker3000",
            copyright="Bob's game shack: all rights reserved",
        ),
    ]
    asset.location = Location(
        longitude=-105.25,
        latitude=40.0,
        altitude=1655.0,
        mode=AltitudeMode.ABSOLUTE,
    )
    asset.keywords = ["tank", "vehicle", "lowpoly"]
    asset.revision = "rev_v5"
    asset.title = "Big Tank"
    asset.unit = Unit(name="centimeter", meter=0.01)
    asset.up_axis = UpAxis.Z_UP

    # Vendor payloads are opaque, so they are built as raw elements
    max_payload = make_element(
        "technique",
        {"profile": "Max"},
        children=[
            make_element("param", {"name": "wow", "type": "string"}, text="animated"),
            make_element("uhoh", text="no schema for this"),
        ],
    )
    blender_payload = make_element(
        "technique",
        {"profile": "blender"},
        children=[make_element("layer", {"sid": "0"}, text="1")],
    )

    extra = Extra(id="tank-extra", name="tank-extra", type="basic")
    extra.asset = Asset(created=timestamp, modified=timestamp, title="Tank payload")
    extra.techniques = [
        Technique(profile="Max", data=max_payload),
        Technique(profile="blender", data=blender_payload),
    ]
    asset.extras = [extra]

    return asset
