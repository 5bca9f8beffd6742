"""
Pytest configuration and shared fixtures.
"""

import pytest
import requests

from campuscoffee.models import CampusType, Pos, PosType
from campuscoffee.osm.models import OsmNode


NODE_XML = """<?xml version="1.0" encoding="UTF-8"?>
<osm version="0.6" generator="openstreetmap-cgimap">
 <node id="5589879349" visible="true" version="4" lat="49.4122362" lon="8.7077883">
  <tag k="addr:city" v="Heidelberg"/>
  <tag k="addr:housenumber" v="1"/>
  <tag k="addr:postcode" v="69117"/>
  <tag k="addr:street" v="Grabengasse"/>
  <tag k="amenity" v="cafe"/>
  <tag k="name" v="Campus Café"/>
 </node>
</osm>
"""


@pytest.fixture
def node_xml():
    """Fixture for an OSM API 0.6 node document."""
    return NODE_XML


@pytest.fixture
def create_tags():
    """Fixture that returns a function to build a complete tag map."""

    def _create_tags(**overrides):
        tags = {
            "name": "Campus Café",
            "addr:street": "Grabengasse",
            "addr:housenumber": "1",
            "addr:city": "Heidelberg",
            "addr:postcode": "69117",
        }
        # Keyword arguments cannot contain ":", so "addr_city" means "addr:city"
        for key, value in overrides.items():
            key = key.replace("addr_", "addr:")
            if value is None:
                tags.pop(key, None)
            else:
                tags[key] = value
        return tags

    return _create_tags


@pytest.fixture
def create_node(create_tags):
    """Fixture that returns a function to create OsmNode instances."""

    def _create_node(node_id=5589879349, tags=None, **kwargs):
        return OsmNode(
            node_id=node_id,
            lat=kwargs.get("lat", 49.4122362),
            lon=kwargs.get("lon", 8.7077883),
            tags=create_tags() if tags is None else tags,
        )

    return _create_node


@pytest.fixture
def create_pos():
    """Fixture that returns a function to create unsaved Pos instances."""

    def _create_pos(name="Campus Café", **kwargs):
        return Pos(
            id=kwargs.get("id"),
            name=name,
            description=kwargs.get("description", "Cafe"),
            type=kwargs.get("type", PosType.CAFE),
            campus=kwargs.get("campus", CampusType.ALTSTADT),
            street=kwargs.get("street", "Grabengasse"),
            house_number=kwargs.get("house_number", "1"),
            postal_code=kwargs.get("postal_code", 69117),
            city=kwargs.get("city", "Heidelberg"),
        )

    return _create_pos


class FakeSession:
    """
    Stands in for requests.Session, records requests and replays canned results.

    nodes maps a node ID to (status_code, text); IDs missing from it get a 404.
    Without nodes every request gets status_code/text.
    """

    def __init__(self, status_code=200, text="", error=None, nodes=None):
        self.status_code = status_code
        self.text = text
        self.error = error
        self.nodes = nodes
        self.calls = []
        self.closed = False

    def get(self, url, headers=None, timeout=None):
        self.calls.append({"url": url, "headers": headers, "timeout": timeout})
        if self.error is not None:
            raise self.error
        status_code, text = self.status_code, self.text
        if self.nodes is not None:
            status_code, text = self.nodes.get(int(url.rsplit("/", 1)[-1]), (404, ""))
        response = requests.Response()
        response.status_code = status_code
        response.reason = "OK" if status_code < 400 else "Error"
        response.url = url
        response._content = text.encode("utf-8")
        response.encoding = "utf-8"
        return response

    def close(self):
        self.closed = True


@pytest.fixture
def create_session():
    """Fixture that returns a function to create FakeSession instances."""

    def _create_session(status_code=200, text="", error=None, nodes=None):
        return FakeSession(status_code=status_code, text=text, error=error, nodes=nodes)

    return _create_session
