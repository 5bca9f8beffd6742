"""
OSM response parser

Parses OpenStreetMap API 0.6 XML documents into OsmNode objects
"""

from typing import Dict, Optional
from xml.etree.ElementTree import Element

from defusedxml import ElementTree

from .models import OsmNode


class OsmXmlParseError(ValueError):
    """Raised when a document does not describe an OSM node"""


class OsmXmlParser:
    """Parses OSM API XML responses"""
    
    @staticmethod
    def parse_node(xml: str, node_id: int) -> OsmNode:
        """
        Parse the first <node> element of an OSM API response
        
        Expected shape:
            <osm>
              <node id="..." lat="49.41" lon="8.71">
                <tag k="name" v="Campus Cafe"/>
              </node>
            </osm>
        
        Args:
            xml: Raw XML text
            node_id: ID of the requested node, stored on the result
            
        Returns:
            OsmNode with coordinates (if present) and all tags
            
        Raises:
            OsmXmlParseError: If the document contains no node element
                or its coordinates are not numbers
            xml.etree.ElementTree.ParseError: If the text is not well-formed XML
        """
        root = ElementTree.fromstring(xml)
        
        node_elem = next(root.iter("node"), None)
        if node_elem is None:
            raise OsmXmlParseError("No node element found in XML")
        
        return OsmNode(
            node_id=node_id,
            lat=OsmXmlParser._parse_coordinate(node_elem, "lat"),
            lon=OsmXmlParser._parse_coordinate(node_elem, "lon"),
            tags=OsmXmlParser._parse_tags(node_elem)
        )
    
    @staticmethod
    def _parse_coordinate(elem: Element, attribute: str) -> Optional[float]:
        value = elem.get(attribute)
        if value is None:
            return None
        try:
            return float(value)
        except ValueError as e:
            raise OsmXmlParseError(f"Invalid {attribute} value: {value!r}") from e
    
    @staticmethod
    def _parse_tags(elem: Element) -> Dict[str, str]:
        # Later duplicates of a key win
        return {
            tag.get("k", ""): tag.get("v", "")
            for tag in elem.iter("tag")
        }
