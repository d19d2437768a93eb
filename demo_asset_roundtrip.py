#!/usr/bin/env python3
"""
Demo: Encode an example asset to XML, parse it back, export to YAML.
"""

from collada_asset.document import encode_asset_string, parse_asset_string
from collada_asset.examples import build_example_asset
from collada_asset.serialization import asset_to_yaml


def main():
    asset = build_example_asset()

    print("=" * 80)
    print("ASSET ROUND-TRIP DEMO")
    print("=" * 80)

    xml_text = encode_asset_string(asset)
    print("\nXML:")
    print("-" * 80)
    print(xml_text)

    restored = parse_asset_string(xml_text)
    print("\nRound-trip equal:", restored == asset)

    print("\nYAML:")
    print("-" * 80)
    print(asset_to_yaml(restored))


if __name__ == "__main__":
    main()
