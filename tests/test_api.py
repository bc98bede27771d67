import json

import pytest
from fastapi.testclient import TestClient

from siteconfig.core.config import Settings
from siteconfig.core.exceptions import SchemaViolation
from siteconfig.main import create_app
from siteconfig.services.loader import dump_site_config


@pytest.fixture
def client(site_config):
    return TestClient(create_app(site_config=site_config))


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


def test_read_site_config(client, site_data):
    body = client.get("/api/v1/site/config").json()
    assert body["code"] == 200
    assert body["data"] == site_data


def test_read_menu(client):
    data = client.get("/api/v1/site/menu").json()["data"]
    assert data == [{"label": "Articles", "href": "/"}, {"label": "About me", "href": "/pages/about"}]


def test_read_contacts_omits_unused_channels(client):
    data = client.get("/api/v1/site/contacts").json()["data"]
    channels = [item["channel"] for item in data]
    assert "facebook" not in channels
    assert "telegram" not in channels
    assert channels[0] == "email"


def test_read_features(client):
    data = client.get("/api/v1/site/features").json()["data"]
    assert data == {"comments": False, "analytics": True, "katex": False}


def test_config_loaded_at_startup(tmp_path, site_config):
    path = tmp_path / "site.toml"
    path.write_text(dump_site_config(site_config, "toml"), encoding="utf-8")
    app = create_app(settings=Settings(SITE_CONFIG_PATH=path))

    with TestClient(app) as client:
        assert client.get("/api/v1/site/config").json()["data"]["title"] == "Evan Schultz"
    assert app.state.site_config == site_config


def test_invalid_config_stops_startup(tmp_path, minimal_data):
    minimal_data["postsPerPage"] = 0
    path = tmp_path / "site.json"
    path.write_text(json.dumps(minimal_data), encoding="utf-8")
    app = create_app(settings=Settings(SITE_CONFIG_PATH=path))

    with pytest.raises(SchemaViolation):
        with TestClient(app):
            pass
