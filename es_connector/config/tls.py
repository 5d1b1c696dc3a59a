"""TLS settings for the cluster connection."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, SecretStr


class TlsSettings(BaseModel):
    """Key store, trust store and hostname verification settings.

    Combinations are not validated here. The network layer decides what
    ``enabled`` without a key store or trust store means (platform trust
    material).
    """

    model_config = ConfigDict(frozen=True)

    enabled: bool = False
    keystore_path: Path | None = None
    keystore_password: SecretStr | None = None
    truststore_path: Path | None = None
    truststore_password: SecretStr | None = None
    verify_hostnames: bool = True

    @property
    def has_keystore(self) -> bool:
        return self.keystore_path is not None

    @property
    def has_truststore(self) -> bool:
        return self.truststore_path is not None
