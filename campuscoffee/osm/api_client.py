"""
OpenStreetMap API client

Fetches single nodes from the OSM API 0.6 (XML). Every failure on the
fetch path (HTTP error, network error, empty body, unusable XML) is
reported as OsmNodeNotFoundError. Single attempt, no retries.
"""

from typing import Optional
from xml.etree.ElementTree import ParseError

import requests
from loguru import logger

from ..config import get_config
from ..exceptions import OsmNodeNotFoundError
from .models import OsmNode
from .parser import OsmXmlParser


class OsmApiClient:
    """Client for fetching nodes from the OpenStreetMap API"""
    
    def __init__(
        self,
        session: Optional[requests.Session] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        parser: Optional[OsmXmlParser] = None
    ):
        self.config = get_config()
        # Only sessions created here are closed by close()
        self._owns_session = session is None
        self.session = session or requests.Session()
        self.base_url = base_url or self.config.api.osm_api_url
        self.timeout = timeout if timeout is not None else self.config.api.request_timeout
        self.parser = parser or OsmXmlParser()
    
    def close(self):
        if self._owns_session:
            self.session.close()
    
    def __enter__(self):
        return self
    
    def __exit__(self, *exc_info):
        self.close()
    
    def node_url(self, node_id: int) -> str:
        return f"{self.base_url.rstrip('/')}/{node_id}"
    
    def fetch_node(self, node_id: int) -> OsmNode:
        """
        Fetch an OSM node by ID
        
        Args:
            node_id: Positive OSM node ID
            
        Returns:
            Parsed OsmNode
            
        Raises:
            ValueError: If node_id is not a positive integer
            OsmNodeNotFoundError: If the node cannot be fetched or parsed
        """
        if isinstance(node_id, bool) or not isinstance(node_id, int) or node_id <= 0:
            raise ValueError(f"node_id must be a positive integer, got {node_id!r}")
        
        logger.info(f"Fetching OSM node {node_id} from OpenStreetMap API")
        
        headers = {"User-Agent": self.config.api.user_agent}
        
        try:
            response = self.session.get(
                self.node_url(node_id),
                headers=headers,
                timeout=self.timeout
            )
            response.raise_for_status()
        except requests.exceptions.HTTPError as e:
            logger.error(f"OSM node {node_id} not found: HTTP {e.response.status_code}")
            raise OsmNodeNotFoundError(node_id) from e
        except requests.exceptions.RequestException as e:
            logger.error(f"Error fetching OSM node {node_id}: {e}")
            raise OsmNodeNotFoundError(node_id) from e
        
        if not response.text:
            logger.error(f"Empty response from OSM API for node {node_id}")
            raise OsmNodeNotFoundError(node_id)
        
        try:
            node = self.parser.parse_node(response.text, node_id)
        except (ParseError, ValueError) as e:
            logger.error(f"Error parsing OSM XML for node {node_id}: {e}")
            raise OsmNodeNotFoundError(node_id) from e
        
        logger.info(f"Successfully fetched OSM node {node_id}: {(node.tags or {}).get('name')}")
        return node
