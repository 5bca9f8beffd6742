"""
Domain errors

Every error carries the value that identifies what failed so callers
(CLI, HTTP layer) can report it without parsing the message.
"""


class CampusCoffeeError(Exception):
    """Base class for all domain errors"""


class OsmNodeNotFoundError(CampusCoffeeError):
    """The OSM node could not be fetched (not found, network error, unusable XML)"""

    def __init__(self, node_id: int):
        self.node_id = node_id
        super().__init__(f"OSM node {node_id} not found")


class OsmNodeMissingFieldsError(CampusCoffeeError):
    """The OSM node lacks tags required to build a POS"""

    def __init__(self, node_id: int):
        self.node_id = node_id
        super().__init__(f"OSM node {node_id} is missing required fields")


class DuplicatePosNameError(CampusCoffeeError):
    """A POS with the same name already exists"""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"POS with name '{name}' already exists")


class PosNotFoundError(CampusCoffeeError):
    def __init__(self, pos_id: int):
        self.pos_id = pos_id
        super().__init__(f"POS with ID {pos_id} not found")
