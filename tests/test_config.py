import pytest

from campuscoffee.config import APIConfig, AppConfig, get_config, validate_config
from campuscoffee.models import CampusType


def test_default_config_is_valid():
    validate_config(AppConfig())


def test_get_config_returns_global_instance():
    assert get_config() is get_config()
    assert get_config().default_campus == CampusType.ALTSTADT


def test_osm_api_url_from_environment(monkeypatch):
    monkeypatch.setenv("CAMPUSCOFFEE_OSM_API_URL", "https://osm.example.org/node/")
    assert APIConfig().osm_api_url == "https://osm.example.org/node/"


def test_default_osm_api_url(monkeypatch):
    monkeypatch.delenv("CAMPUSCOFFEE_OSM_API_URL", raising=False)
    assert APIConfig().osm_api_url == "https://www.openstreetmap.org/api/0.6/node/"


def test_validate_config_collects_errors():
    config = AppConfig(api=APIConfig(osm_api_url="ftp://osm", request_timeout=0, user_agent=""))

    with pytest.raises(ValueError) as excinfo:
        validate_config(config)

    message = str(excinfo.value)
    assert "osm_api_url" in message
    assert "request_timeout" in message
    assert "user_agent" in message
