"""Configuration management for lovense-cloud.

Loads settings from a YAML configuration file with environment variable
overrides for the Lovense developer token and uid. Supports .env files.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, SecretStr
from pydantic_settings import BaseSettings

from lovense_cloud.domain.models import DEFAULT_UID, Credentials

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path("config/lovense-cloud.yaml")

LOVENSE_COMMAND_URL = "https://api.lovense.com/api/lan/v2/command"
LOVENSE_QR_URL = "https://api.lovense.com/api/lan/getQrCode"


class ServerConfig(BaseModel):
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8787, ge=1, le=65535)
    name: str = Field(default="lovense-cloud", description="Advertised server name")
    version: str = Field(default="1.0.0", description="Advertised server version")


class RelayConfig(BaseModel):
    command_url: str = Field(default=LOVENSE_COMMAND_URL)
    qr_url: str = Field(default=LOVENSE_QR_URL)
    uname: str = Field(default="Mai", description="Display name sent with QR pairing requests")
    timeout: float | None = Field(
        default=None, gt=0, description="Request timeout in seconds (None keeps the httpx default)"
    )


class LoggingConfig(BaseModel):
    level: str = Field(default="INFO")
    format: str = Field(
        default="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    file: str | None = Field(default=None)


class Settings(BaseSettings):
    """Root configuration for the lovense-cloud service.

    Loads from YAML file and supports environment variable overrides.
    Reads .env files automatically.
    """

    model_config = {
        "env_prefix": "LOVENSE_CLOUD_",
        "env_nested_delimiter": "__",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    # Lovense developer credentials
    lovense_token: SecretStr = Field(default=SecretStr(""))
    lovense_uid: str = Field(default=DEFAULT_UID)

    # Configuration sections
    server: ServerConfig = Field(default_factory=ServerConfig)
    relay: RelayConfig = Field(default_factory=RelayConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    def credentials(self) -> Credentials:
        """Build the credential pair used for outbound calls."""
        return Credentials(
            token=self.lovense_token.get_secret_value(),
            uid=self.lovense_uid or DEFAULT_UID,
        )


def load_settings(config_path: Path | str | None = None) -> Settings:
    """Load settings from YAML + .env + environment variables.

    Priority: env vars > .env file > YAML file > defaults
    """
    path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH

    # Load .env file manually for non-prefixed vars
    _load_dotenv()

    yaml_data = {}
    if path.exists():
        with open(path) as f:
            yaml_data = yaml.safe_load(f) or {}
        logger.info("Loaded configuration from %s", path)
    else:
        logger.warning("Config file %s not found, using defaults + env vars", path)

    _apply_env_overrides(yaml_data)

    return Settings(**yaml_data)


def _load_dotenv() -> None:
    """Load .env file into os.environ if it exists."""
    env_path = Path(".env")
    if not env_path.exists():
        return
    with open(env_path) as f:
        for line in f:
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            if "=" in line:
                key, _, value = line.partition("=")
                key = key.strip()
                value = value.strip()
                if not os.environ.get(key):
                    os.environ[key] = value


def _apply_env_overrides(yaml_data: dict) -> None:
    """Apply the un-prefixed LOVENSE_TOKEN / LOVENSE_UID variables."""
    token = os.environ.get("LOVENSE_TOKEN", "")
    uid = os.environ.get("LOVENSE_UID", "")

    if token:
        yaml_data["lovense_token"] = token
    if uid:
        yaml_data["lovense_uid"] = uid
