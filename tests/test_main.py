"""Tests de la configuración y del arranque desde el CLI."""

from unittest.mock import patch

import main
from config import get_api_config
from loaders.store import PRODUCTS_PATH, REGIONS_PATH


CONFIG = {
    "base_url": "https://api.example.com",
    "timeout": 3.0,
    "max_retries": 1,
    "store_name": "Pasteleria de Prueba",
}


class TestConfig:

    def test_defaults(self, monkeypatch):
        for name in ("API_URL", "API_TIMEOUT", "API_MAX_RETRIES", "STORE_NAME"):
            monkeypatch.delenv(name, raising=False)

        config = get_api_config()

        assert config["base_url"] == ""
        assert config["timeout"] == 10.0
        assert config["max_retries"] == 1
        assert config["store_name"] == "Pasteleria Mil Sabores"

    def test_from_environment(self, monkeypatch):
        monkeypatch.setenv("API_URL", "https://api.milsabores.cl")
        monkeypatch.setenv("API_TIMEOUT", "2.5")
        monkeypatch.setenv("API_MAX_RETRIES", "3")

        config = get_api_config()

        assert config["base_url"] == "https://api.milsabores.cl"
        assert config["timeout"] == 2.5
        assert config["max_retries"] == 3


class TestLoadStore:

    def test_build_loader_uses_config(self):
        loader = main.build_loader(CONFIG)

        assert loader.http.base_url == "https://api.example.com"
        assert loader.http.timeout == 3.0
        assert loader.store_name == "Pasteleria de Prueba"

    def test_load_store(self):
        payloads = {
            PRODUCTS_PATH: [{"code": "P1", "categoria": "Tortas"}],
            REGIONS_PATH: [{"region": "Maule", "comunas": ["Talca"]}],
        }

        with patch("loaders.http_client.HttpClient.get", side_effect=payloads.get):
            store = main.load_store(CONFIG)

        assert store.catalog.store_name == "Pasteleria de Prueba"
        assert [p.code for p in store.products] == ["P1"]
        assert store.comunas_for_region_slug("maule")[0].id == "maule-talca"

    def test_load_store_without_api_url(self):
        store = main.load_store({**CONFIG, "base_url": ""})

        assert store.products == []
        assert store.catalog.categories == []
        assert store.regions == []
