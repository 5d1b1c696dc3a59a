"""Pytest configuration for the test suite."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from es_connector.config import clear_settings_cache
from tests.helpers import KEYSTORE_SECRET, TRUSTSTORE_SECRET


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch):
    """Keep connector variables from the outer environment out of tests."""
    for name in list(os.environ):
        if name.startswith(("ELASTICSEARCH_", "SEARCHGUARD_", "ES_CONNECTOR_")):
            monkeypatch.delenv(name)
    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def tls_properties() -> dict[str, str]:
    """Properties for a TLS connection with both stores and passwords."""
    return {
        "elasticsearch.host": "search.example.com",
        "elasticsearch.tls.enabled": "true",
        "elasticsearch.tls.keystore-path": "/etc/es/keystore.jks",
        "elasticsearch.tls.keystore-password": KEYSTORE_SECRET,
        "elasticsearch.tls.truststore-path": "/etc/es/truststore.jks",
        "elasticsearch.tls.truststore-password": TRUSTSTORE_SECRET,
    }


@pytest.fixture
def properties_file(tmp_path: Path) -> Path:
    """A catalog properties file for a plain connection."""
    path = tmp_path / "elasticsearch.properties"
    path.write_text(
        "\n".join(
            [
                "# Elasticsearch catalog",
                "connector.name=elasticsearch",
                "elasticsearch.host=search.example.com",
                "elasticsearch.port=9201",
                "elasticsearch.scroll-size=500",
                "elasticsearch.max-request-retry-time=20s",
            ]
        )
    )
    return path
