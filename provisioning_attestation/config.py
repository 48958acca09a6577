import logging
import os
from typing import Literal, Optional
import yaml
from pydantic import BaseModel, ConfigDict, ValidationError

from .errors import InvalidConfigurationError

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "PROVISIONING_ATTESTATION_CONFIG"
DEFAULT_CONFIG_PATH = "config/provisioning_attestation.yml"


class CodecSettings(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    # Emit the inactive payload slot as null instead of omitting it
    include_null_payloads: bool = False
    indent: Optional[int] = None
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"


def load_settings(config_path: Optional[str] = None) -> CodecSettings:
    """
    Load codec settings from YAML.

    Lookup order: explicit path, $PROVISIONING_ATTESTATION_CONFIG, then
    config/provisioning_attestation.yml in the working directory. Without
    any of them the defaults are used.
    """
    if not config_path:
        config_path = os.environ.get(CONFIG_ENV_VAR)
    if not config_path:
        if not os.path.exists(DEFAULT_CONFIG_PATH):
            return CodecSettings()
        config_path = DEFAULT_CONFIG_PATH

    try:
        with open(config_path, "r") as f:
            config = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise InvalidConfigurationError(
            f"Failed to load settings from {config_path}: {e}"
        ) from e

    if not isinstance(config, dict):
        raise InvalidConfigurationError(
            f"Settings file {config_path} must contain a mapping"
        )

    try:
        settings = CodecSettings.model_validate(config.get("codec", {}) or {})
    except ValidationError as e:
        raise InvalidConfigurationError(
            f"Invalid settings in {config_path}: {e}"
        ) from e

    logger.debug(f"Loaded codec settings from {config_path}")
    return settings
