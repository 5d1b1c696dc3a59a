"""Configuration key names shared by the loader, validation and CLI."""

# Consumed by the host to pick the connector, never a connector setting
CONNECTOR_NAME_KEY = "connector.name"

RETIRED_KEYS: frozenset[str] = frozenset(
    {
        "elasticsearch.max-hits",
        "elasticsearch.cluster-name",
        "searchguard.ssl.certificate-format",
        "searchguard.ssl.pemcert-filepath",
        "searchguard.ssl.pemkey-filepath",
        "searchguard.ssl.pemkey-password",
        "searchguard.ssl.pemtrustedcas-filepath",
        "searchguard.ssl.keystore-filepath",
        "searchguard.ssl.keystore-password",
        "searchguard.ssl.truststore-filepath",
        "searchguard.ssl.truststore-password",
    }
)

SENSITIVE_KEYS: frozenset[str] = frozenset(
    {
        "elasticsearch.tls.keystore-password",
        "elasticsearch.tls.truststore-password",
    }
)


def env_var_name(key: str) -> str:
    """Environment variable for a key, e.g. ``ELASTICSEARCH_TLS_ENABLED``."""
    return key.upper().replace(".", "_").replace("-", "_")


def is_sensitive(key: str) -> bool:
    return key in SENSITIVE_KEYS
