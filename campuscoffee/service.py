"""
POS service

Business operations on POS, including the import of a POS from an
OpenStreetMap node (fetch -> convert -> upsert).
"""

from typing import List, Optional
from loguru import logger

from .exceptions import DuplicatePosNameError
from .models import Pos
from .osm.api_client import OsmApiClient
from .osm.converter import OsmToPosConverter
from .repository import PosRepository


class PosService:
    """
    Handles POS business logic on top of a PosRepository
    
    Usage:
        service = PosService(InMemoryPosRepository(), OsmApiClient())
        pos = service.import_from_osm_node(5589879349)
    """
    
    def __init__(
        self,
        repository: PosRepository,
        osm_client: OsmApiClient,
        converter: Optional[OsmToPosConverter] = None
    ):
        self.repository = repository
        self.osm_client = osm_client
        self.converter = converter or OsmToPosConverter()
    
    def clear(self) -> None:
        logger.warning("Clearing all POS data")
        self.repository.clear()
    
    def get_all(self) -> List[Pos]:
        logger.debug("Retrieving all POS")
        return self.repository.get_all()
    
    def get_by_id(self, pos_id: int) -> Pos:
        logger.debug(f"Retrieving POS with ID: {pos_id}")
        return self.repository.get_by_id(pos_id)
    
    def upsert(self, pos: Pos) -> Pos:
        """
        Create a POS (no ID) or update an existing one
        
        Raises:
            PosNotFoundError: If pos.id is set but no such POS exists
            DuplicatePosNameError: If another POS already has the name
        """
        if pos.id is None:
            logger.info(f"Creating new POS: {pos.name}")
        else:
            logger.info(f"Updating POS with ID: {pos.id}")
            # Must exist before the update
            self.repository.get_by_id(pos.id)
        return self._perform_upsert(pos)
    
    def import_from_osm_node(self, node_id: int) -> Pos:
        """
        Import a POS from an OpenStreetMap node
        
        Raises:
            OsmNodeNotFoundError: If the node cannot be fetched
            OsmNodeMissingFieldsError: If the node lacks required tags
            DuplicatePosNameError: If a POS with the node's name exists
        """
        logger.info(f"Importing POS from OpenStreetMap node {node_id}...")
        
        node = self.osm_client.fetch_node(node_id)
        saved = self.upsert(self.converter.convert(node))
        
        logger.info(f"Successfully imported POS '{saved.name}' from OSM node {node_id}")
        return saved
    
    def _perform_upsert(self, pos: Pos) -> Pos:
        try:
            saved = self.repository.upsert(pos)
        except DuplicatePosNameError as e:
            logger.error(f"Error upserting POS '{pos.name}': {e}")
            raise
        logger.info(f"Successfully upserted POS with ID: {saved.id}")
        return saved
