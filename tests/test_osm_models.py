import pytest

from campuscoffee.osm.models import OsmNode


def test_tags_are_copied_on_construction():
    tags = {"name": "Café Extrablatt"}
    node = OsmNode(node_id=1, tags=tags)

    tags["name"] = "Changed"

    assert node.tags["name"] == "Café Extrablatt"


def test_tags_cannot_be_modified():
    node = OsmNode(node_id=1, tags={"amenity": "cafe"})

    with pytest.raises(TypeError):
        node.tags["amenity"] = "bar"
    with pytest.raises(TypeError):
        del node.tags["amenity"]


def test_default_and_missing_tags():
    assert dict(OsmNode(node_id=1).tags) == {}
    assert OsmNode(node_id=1, tags=None).tags is None
