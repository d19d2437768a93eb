"""
Serialization helpers for asset records (Asset, Extra, Technique, etc.).

Each record maps to a plain dict of built-in types, so an asset can be
stored as JSON or YAML and rebuilt without going back through XML.
Enum fields are stored by their literal value ("Z_UP", "absolute").

Technique payloads are written as nested element dicts:
    {"tag": ..., "attrib": {...}, "text": ..., "children": [...]}
"""
from __future__ import annotations

import json
import xml.etree.ElementTree as ET
from typing import Any, Dict

import yaml

from collada_asset.asset import Asset
from collada_asset.contributor import Contributor, ContributorField
from collada_asset.conversion import make_element
from collada_asset.extra import Extra
from collada_asset.location import Location
from collada_asset.technique import Technique
from collada_asset.units import AltitudeMode, Unit, UpAxis


def element_to_dict(node: ET.Element | None) -> Dict[str, Any] | None:
    if node is None:
        return None
    return {
        "tag": node.tag,
        "attrib": dict(node.attrib),
        "text": node.text,
        "children": [element_to_dict(c) for c in node],
    }


def element_from_dict(d: Dict[str, Any] | None) -> ET.Element | None:
    if d is None:
        return None
    return make_element(
        d["tag"],
        d.get("attrib", {}),
        text=d.get("text"),
        children=[element_from_dict(c) for c in d.get("children", [])],
    )


def unit_to_dict(u: Unit | None) -> Dict[str, Any] | None:
    if u is None:
        return None
    return {"name": u.name, "meter": u.meter}


def unit_from_dict(d: Dict[str, Any] | None) -> Unit | None:
    if d is None:
        return None
    return Unit(name=d.get("name"), meter=d.get("meter"))


def contributor_to_dict(c: Contributor) -> Dict[str, Any]:
    return {f.value: getattr(c, f.value) for f in ContributorField}


def contributor_from_dict(d: Dict[str, Any]) -> Contributor:
    return Contributor(**{f.value: d.get(f.value) for f in ContributorField})


def location_to_dict(loc: Location | None) -> Dict[str, Any] | None:
    if loc is None:
        return None
    return {
        "longitude": loc.longitude,
        "latitude": loc.latitude,
        "altitude": loc.altitude,
        "mode": loc.mode.value,
    }


def location_from_dict(d: Dict[str, Any] | None) -> Location | None:
    if d is None:
        return None
    return Location(
        longitude=d["longitude"],
        latitude=d["latitude"],
        altitude=d["altitude"],
        mode=AltitudeMode(d.get("mode", AltitudeMode.RELATIVE_TO_GROUND.value)),
    )


def technique_to_dict(t: Technique) -> Dict[str, Any]:
    return {
        "profile": t.profile,
        "xmlns": t.xmlns,
        "data": element_to_dict(t.data),
    }


def technique_from_dict(d: Dict[str, Any]) -> Technique:
    return Technique(
        profile=d["profile"],
        xmlns=d.get("xmlns"),
        data=element_from_dict(d.get("data")),
    )


def extra_to_dict(x: Extra) -> Dict[str, Any]:
    return {
        "id": x.id,
        "name": x.name,
        "type": x.type,
        "asset": asset_to_dict(x.asset) if x.asset is not None else None,
        "techniques": [technique_to_dict(t) for t in x.techniques],
    }


def extra_from_dict(d: Dict[str, Any]) -> Extra:
    asset = d.get("asset")
    return Extra(
        id=d.get("id"),
        name=d.get("name"),
        type=d.get("type"),
        asset=asset_from_dict(asset) if asset is not None else None,
        techniques=[technique_from_dict(t) for t in d.get("techniques", [])],
    )


def asset_to_dict(a: Asset) -> Dict[str, Any]:
    return {
        "contributors": [contributor_to_dict(c) for c in a.contributors],
        "location": location_to_dict(a.location),
        "created": a.created,
        "keywords": list(a.keywords),
        "modified": a.modified,
        "revision": a.revision,
        "subject": a.subject,
        "title": a.title,
        "unit": unit_to_dict(a.unit),
        "up_axis": a.up_axis.value if a.up_axis is not None else None,
        "extras": [extra_to_dict(x) for x in a.extras],
    }


def asset_from_dict(d: Dict[str, Any]) -> Asset:
    a = Asset(created=d.get("created", ""), modified=d.get("modified", ""))
    a.contributors = [contributor_from_dict(c) for c in d.get("contributors", [])]
    a.location = location_from_dict(d.get("location"))
    a.keywords = list(d.get("keywords", []))
    a.revision = d.get("revision")
    a.subject = d.get("subject")
    a.title = d.get("title")
    a.unit = unit_from_dict(d.get("unit"))
    up_axis = d.get("up_axis")
    a.up_axis = UpAxis(up_axis) if up_axis is not None else None
    a.extras = [extra_from_dict(x) for x in d.get("extras", [])]
    return a


def asset_to_json(a: Asset) -> str:
    return json.dumps(asset_to_dict(a), sort_keys=True)


def asset_from_json(s: str) -> Asset:
    d = json.loads(s)
    return asset_from_dict(d)


def asset_to_yaml(a: Asset) -> str:
    return yaml.safe_dump(asset_to_dict(a))


def asset_from_yaml(s: str) -> Asset:
    d = yaml.safe_load(s)
    return asset_from_dict(d)
