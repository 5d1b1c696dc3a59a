"""Tests for configuration loading."""

import json
from datetime import timedelta

import pytest

from es_connector.config.loader import (
    env_properties,
    load_properties,
    load_settings,
    read_config_file,
    read_properties,
)
from es_connector.errors import (
    ConfigurationError,
    SettingsValidationError,
    ViolationKind,
)


def test_read_properties_skips_comments_and_blank_lines():
    text = """
# comment
! another comment

elasticsearch.host = search.example.com
elasticsearch.port:9201
elasticsearch.tls.keystore-path=C:/certs/ks.jks
"""
    assert read_properties(text) == {
        "elasticsearch.host": "search.example.com",
        "elasticsearch.port": "9201",
        "elasticsearch.tls.keystore-path": "C:/certs/ks.jks",
    }


def test_read_properties_bare_key_is_empty():
    assert read_properties("elasticsearch.host") == {"elasticsearch.host": ""}


def test_read_config_file_properties(properties_file):
    properties = read_config_file(properties_file)

    assert properties["connector.name"] == "elasticsearch"
    assert properties["elasticsearch.scroll-size"] == "500"


def test_read_config_file_nested_json(tmp_path):
    path = tmp_path / "elasticsearch.json"
    path.write_text(
        json.dumps(
            {
                "elasticsearch": {
                    "host": "search.example.com",
                    "scroll-size": 50,
                    "tls": {"enabled": True},
                }
            }
        )
    )

    assert read_config_file(path) == {
        "elasticsearch.host": "search.example.com",
        "elasticsearch.scroll-size": 50,
        "elasticsearch.tls.enabled": True,
    }


def test_read_config_file_missing(tmp_path):
    with pytest.raises(ConfigurationError, match="not found"):
        read_config_file(tmp_path / "missing.properties")


def test_read_config_file_invalid_json(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json")

    with pytest.raises(ConfigurationError, match="Invalid JSON"):
        read_config_file(path)


def test_env_properties_maps_variable_names():
    environ = {
        "ELASTICSEARCH_HOST": "env.example.com",
        "ELASTICSEARCH_TLS_VERIFY_HOSTNAMES": "false",
        "ELASTICSEARCH_MAX_REQUEST_RETRY_TIME": "30s",
        "ELASTICSEARCH_CLUSTER_NAME": "legacy",
        "UNRELATED": "ignored",
    }

    assert env_properties(environ) == {
        "elasticsearch.host": "env.example.com",
        "elasticsearch.tls.verify-hostnames": "false",
        "elasticsearch.max-request-retry-time": "30s",
        "elasticsearch.cluster-name": "legacy",
    }


def test_env_properties_reads_process_environment(monkeypatch):
    monkeypatch.setenv("ELASTICSEARCH_PORT", "9400")

    assert env_properties() == {"elasticsearch.port": "9400"}


def test_load_properties_precedence(properties_file):
    environ = {"ELASTICSEARCH_PORT": "9300", "ELASTICSEARCH_SCROLL_SIZE": "100"}

    properties = load_properties(
        properties_file, environ, {"elasticsearch.scroll-size": "10"}
    )

    assert properties["elasticsearch.host"] == "search.example.com"
    assert properties["elasticsearch.port"] == "9300"
    assert properties["elasticsearch.scroll-size"] == "10"
    assert "connector.name" not in properties


def test_load_settings_from_file(properties_file):
    settings = load_settings(properties_file, environ={})

    assert settings.host == "search.example.com"
    assert settings.port == 9201
    assert settings.scroll_size == 500
    assert settings.max_retry_time == timedelta(seconds=20)
    assert settings.retry_policy.schedule()[-1] == timedelta(seconds=8)


def test_load_settings_without_file_uses_environment():
    settings = load_settings(environ={"ELASTICSEARCH_HOST": "env.example.com"})
    assert settings.host == "env.example.com"


def test_load_settings_keyword_overrides(properties_file):
    settings = load_settings(properties_file, environ={}, scroll_size=42)
    assert settings.scroll_size == 42


def test_load_settings_rejects_retired_environment_key(properties_file):
    environ = {"SEARCHGUARD_SSL_KEYSTORE_PASSWORD": "secret"}

    with pytest.raises(SettingsValidationError) as exc_info:
        load_settings(properties_file, environ=environ)

    [violation] = exc_info.value.violations
    assert violation.kind is ViolationKind.RETIRED_KEY_USED
    assert violation.key == "searchguard.ssl.keystore-password"
    assert "secret" not in str(exc_info.value)


def test_load_settings_reports_file_problems_together(tmp_path):
    path = tmp_path / "elasticsearch.properties"
    path.write_text(
        "elasticsearch.max-hits=1000\n"
        "elasticsearch.scroll-size=0\n"
        "elasticsearch.max-request-retries=0\n"
    )

    with pytest.raises(SettingsValidationError) as exc_info:
        load_settings(path, environ={})

    assert sorted(exc_info.value.keys) == [
        "elasticsearch.host",
        "elasticsearch.max-hits",
        "elasticsearch.max-request-retries",
        "elasticsearch.scroll-size",
    ]
