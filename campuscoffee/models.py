"""
Pydantic models for Point of Sale data
"""

from datetime import datetime
from enum import Enum
from typing import Optional
from pydantic import BaseModel


class PosType(str, Enum):
    """Kinds of Point of Sale"""
    CAFE = "CAFE"
    RESTAURANT = "RESTAURANT"
    BAR = "BAR"
    FAST_FOOD = "FAST_FOOD"
    BAKERY = "BAKERY"


class CampusType(str, Enum):
    """University campuses a POS can belong to"""
    ALTSTADT = "ALTSTADT"
    BERGHEIM = "BERGHEIM"
    INF = "INF"


class Pos(BaseModel):
    """
    A Point of Sale (cafe, restaurant, bakery, ...)

    id and timestamps stay None until the POS has been stored.
    """
    id: Optional[int] = None
    name: str
    description: str
    type: PosType
    campus: CampusType
    street: str
    house_number: str
    postal_code: int
    city: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
