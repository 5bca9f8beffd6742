"""
Configuration settings for Campus Coffee
"""

from dataclasses import dataclass, field
from typing import Optional
import os

from .models import CampusType


@dataclass
class APIConfig:
    """API endpoints and configuration"""
    # OpenStreetMap API 0.6, node ID is appended to this URL
    osm_api_url: str = field(default_factory=lambda: os.environ.get(
        "CAMPUSCOFFEE_OSM_API_URL",
        "https://www.openstreetmap.org/api/0.6/node/"
    ))
    
    # None leaves the timeout to the transport default
    request_timeout: Optional[float] = None
    
    # User agent for API requests (required by the OSM API usage policy)
    user_agent: str = "CampusCoffee/1.0"


@dataclass
class AppConfig:
    """Application configuration"""
    # API config
    api: APIConfig = field(default_factory=APIConfig)
    
    # Campus assigned to imported POS until coordinate-based lookup exists
    default_campus: CampusType = CampusType.ALTSTADT


# Global config instance
config = AppConfig()


def get_config() -> AppConfig:
    """Get global configuration"""
    return config


def validate_config(config: AppConfig) -> None:
    """
    Validate that all required configuration values are set.
    Raises ValueError if any required value is missing or invalid.
    """
    errors = []
    
    if config.api is None:
        errors.append("api configuration is required but not set")
    else:
        if not config.api.osm_api_url:
            errors.append("api.osm_api_url is required but not set")
        elif not config.api.osm_api_url.startswith(("http://", "https://")):
            errors.append(f"api.osm_api_url must be an http(s) URL, got {config.api.osm_api_url}")
        if config.api.request_timeout is not None and config.api.request_timeout <= 0:
            errors.append(f"api.request_timeout must be positive, got {config.api.request_timeout}")
        if not config.api.user_agent:
            errors.append("api.user_agent is required but not set")
    
    if not isinstance(config.default_campus, CampusType):
        errors.append(f"default_campus must be a CampusType, got {config.default_campus!r}")
    
    if errors:
        error_msg = "Configuration validation failed:\n" + "\n".join(f"  - {e}" for e in errors)
        raise ValueError(error_msg)
