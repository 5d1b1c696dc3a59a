"""Runtime configuration settings."""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from es_connector.shared.project import get_project_root


class RuntimeConfig(BaseSettings):
    """Runtime configuration settings."""

    debug: bool = Field(False, alias="DEBUG")
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    config_path: Path = Field(
        Path("etc/catalog/elasticsearch.properties"), alias="ES_CONNECTOR_CONFIG"
    )

    model_config = SettingsConfigDict(
        env_file=get_project_root() / ".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    @property
    def effective_log_level(self) -> str:
        return "DEBUG" if self.debug else self.log_level.upper()
