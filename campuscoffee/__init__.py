"""
Campus Coffee - Points of Sale with OpenStreetMap import
"""

from .exceptions import (
    CampusCoffeeError,
    DuplicatePosNameError,
    OsmNodeMissingFieldsError,
    OsmNodeNotFoundError,
    PosNotFoundError,
)
from .models import CampusType, Pos, PosType
from .repository import InMemoryPosRepository, PosRepository
from .service import PosService

__all__ = [
    "CampusCoffeeError",
    "DuplicatePosNameError",
    "OsmNodeMissingFieldsError",
    "OsmNodeNotFoundError",
    "PosNotFoundError",
    "CampusType",
    "Pos",
    "PosType",
    "InMemoryPosRepository",
    "PosRepository",
    "PosService",
]
