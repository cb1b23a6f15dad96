"""Configuration for relvar construction."""

import logging
from pathlib import Path
from typing import Union

import yaml
from pydantic import BaseModel, ConfigDict, field_validator

from .folding import DEFAULT_LOCALE

logger = logging.getLogger(__name__)


class RelvarConfig(BaseModel):
    """Settings shared by the relvars built from it.

    Attributes:
        locale: Locale used to fold attribute names.
        validate_defaults: Check attribute defaults when the heading is built
            instead of on the first add that uses them.
    """
    model_config = ConfigDict(extra="forbid", frozen=True)

    locale: str = DEFAULT_LOCALE
    validate_defaults: bool = True

    @field_validator("locale")
    @classmethod
    def locale_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("locale cannot be blank")
        return v.strip()


def load_config(config_path: Union[str, Path]) -> RelvarConfig:
    """
    Loads a relvar configuration from a YAML file.

    Args:
        config_path: Path to the YAML configuration file.

    Returns:
        A RelvarConfig object.

    Raises:
        FileNotFoundError: If the config_path does not exist.
        yaml.YAMLError: If the YAML is malformed.
        pydantic.ValidationError: If the configuration does not match the model.
    """
    try:
        with open(config_path, 'r') as f:
            raw_config = yaml.safe_load(f)
    except FileNotFoundError:
        logger.error(f"Configuration file not found at path: {config_path}")
        raise
    except yaml.YAMLError as e:
        logger.error(f"Error parsing YAML configuration file at {config_path}: {e}")
        raise

    if raw_config is None:
        logger.error(f"Configuration file at {config_path} is empty.")
        raise ValueError(f"Configuration file {config_path} is empty or invalid.")

    config = RelvarConfig(**raw_config)
    logger.info(f"Loaded relvar configuration from {config_path}")
    return config
