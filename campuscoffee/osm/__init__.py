"""
OpenStreetMap import

- Models: OsmNode
- Parser: OSM API XML parsing
- API client: node fetching
- Converter: OsmNode -> Pos
"""

from .models import OsmNode
from .parser import OsmXmlParser, OsmXmlParseError
from .api_client import OsmApiClient
from .converter import OsmToPosConverter

__all__ = [
    "OsmNode",
    "OsmXmlParser",
    "OsmXmlParseError",
    "OsmApiClient",
    "OsmToPosConverter",
]
