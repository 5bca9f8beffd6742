"""
OSM node to POS conversion

Maps the loosely structured tags of an OSM node onto a Pos:
- required address tags are validated
- POS type is picked by an ordered rule table
- campus is resolved by resolve_campus()
- description is built from description/shop/amenity/cuisine tags
"""

import re
from typing import Callable, Dict, List, Mapping, Optional, Tuple
from loguru import logger

from ..config import get_config
from ..exceptions import OsmNodeMissingFieldsError
from ..models import CampusType, Pos, PosType
from .models import OsmNode


REQUIRED_TAGS = ("name", "addr:street", "addr:housenumber", "addr:city", "addr:postcode")

DEFAULT_DESCRIPTION = "Point of Sale"

AMENITY_TYPES: Dict[str, PosType] = {
    "cafe": PosType.CAFE,
    "restaurant": PosType.RESTAURANT,
    "bar": PosType.BAR,
    "pub": PosType.BAR,
    "fast_food": PosType.FAST_FOOD,
}

Tags = Mapping[str, str]

# Ordered (predicate, result) pairs, first match wins
POS_TYPE_RULES: List[Tuple[Callable[[Tags], bool], Callable[[Tags], PosType]]] = [
    (lambda tags: "amenity" in tags,
     lambda tags: AMENITY_TYPES.get(tags["amenity"].lower(), PosType.CAFE)),
    (lambda tags: tags.get("shop", "").lower() == "bakery",
     lambda tags: PosType.BAKERY),
    (lambda tags: "coffee" in tags.get("cuisine", "").lower(),
     lambda tags: PosType.CAFE),
]

DEFAULT_POS_TYPE = PosType.CAFE

_POSTAL_CODE = re.compile(r"[+-]?0*\d{1,10}")

# Postal codes are stored as 32-bit integers
MIN_POSTAL_CODE = -2 ** 31
MAX_POSTAL_CODE = 2 ** 31 - 1


def determine_pos_type(tags: Tags) -> PosType:
    """Apply POS_TYPE_RULES in order, CAFE if nothing matches"""
    for matches, result in POS_TYPE_RULES:
        if matches(tags):
            return result(tags)
    return DEFAULT_POS_TYPE


def resolve_campus(
    city: Optional[str],
    lat: Optional[float],
    lon: Optional[float]
) -> CampusType:
    """
    Resolve the campus a POS belongs to
    
    Always returns the configured default campus for now. city and
    coordinates are accepted so a coordinate-based lookup can replace
    this without changing callers.
    """
    return get_config().default_campus


def capitalize(value: Optional[str]) -> Optional[str]:
    """Uppercase the first character, leave the rest unchanged"""
    if not value:
        return value
    return value[0].upper() + value[1:]


def build_description(tags: Tags) -> str:
    """
    Build a POS description from OSM tags
    
    Priority:
    1. non-blank "description" tag, verbatim
    2. capitalized "shop" (or else "amenity"), followed by " - <cuisine>"
    3. DEFAULT_DESCRIPTION
    """
    explicit = tags.get("description")
    if explicit and explicit.strip():
        return explicit
    
    description = ""
    if "shop" in tags:
        description = capitalize(tags["shop"])
    elif "amenity" in tags:
        description = capitalize(tags["amenity"])
    
    cuisine = tags.get("cuisine")
    if cuisine and cuisine.strip():
        if description:
            description += " - "
        description += cuisine
    
    return description or DEFAULT_DESCRIPTION


class OsmToPosConverter:
    """Converts OSM nodes into new (not yet stored) Pos objects"""
    
    def convert(self, node: OsmNode) -> Pos:
        """
        Convert an OSM node to a Pos
        
        Raises:
            OsmNodeMissingFieldsError: If the node has no tags, a required
                tag is missing or blank, or addr:postcode is not numeric
        """
        if not node.tags:
            logger.error(f"OSM node {node.node_id} has no tags")
            raise OsmNodeMissingFieldsError(node.node_id)
        
        tags = node.tags
        
        for key in REQUIRED_TAGS:
            value = tags.get(key)
            if value is None or not value.strip():
                logger.error(f"OSM node {node.node_id} is missing required field: {key}")
                raise OsmNodeMissingFieldsError(node.node_id)
        
        postal_code_str = tags["addr:postcode"]
        if (not _POSTAL_CODE.fullmatch(postal_code_str)
                or not MIN_POSTAL_CODE <= int(postal_code_str) <= MAX_POSTAL_CODE):
            logger.error(f"OSM node {node.node_id} has invalid postal code: {postal_code_str}")
            raise OsmNodeMissingFieldsError(node.node_id)
        
        pos = Pos(
            name=tags["name"],
            description=build_description(tags),
            type=determine_pos_type(tags),
            campus=resolve_campus(tags["addr:city"], node.lat, node.lon),
            street=tags["addr:street"],
            house_number=tags["addr:housenumber"],
            postal_code=int(postal_code_str),
            city=tags["addr:city"]
        )
        
        logger.debug(
            f"Converted OSM node {node.node_id} to POS: name={pos.name}, "
            f"street={pos.street} {pos.house_number}, city={pos.city}"
        )
        return pos
