"""
OSM data models

Data class for an OSM node fetched from the OpenStreetMap API
"""

from types import MappingProxyType
from typing import Mapping, Optional
from dataclasses import dataclass, field


@dataclass(frozen=True)
class OsmNode:
    """
    Represents an OSM node (point) with its tags
    
    tags is stored as a read-only mapping, the node cannot change once built.
    """
    node_id: int
    lat: Optional[float] = None
    lon: Optional[float] = None
    tags: Optional[Mapping[str, str]] = field(default_factory=dict)
    
    def __post_init__(self):
        if self.tags is not None and not isinstance(self.tags, MappingProxyType):
            object.__setattr__(self, "tags", MappingProxyType(dict(self.tags)))
