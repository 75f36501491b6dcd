"""
Configuration model and YAML I/O for solarwind.

This module defines the Pydantic model for the HTTP client settings, plus
helper functions for loading and saving it as YAML.

Key model:
- ClientConfig: NOAA base URL, request timeout, default interval, user agent.

Key functions:
- load_config(path) -> ClientConfig: Load and validate from YAML.
- save_config(config, path): Serialize to YAML.

Product definitions (headers, column types, URL slugs) are not user
configuration; they live in product_registry.py and products/*.yaml.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Literal, get_args

import yaml
from pydantic import BaseModel, Field, model_validator

from solarwind.exceptions import ConfigValidationError

logger = logging.getLogger(__name__)

# Time spans NOAA publishes for each product. Readings are one per minute
# whatever the span, minus the two most recent minutes.
Interval = Literal["5-minute", "2-hour", "6-hour", "1-day", "3-day", "7-day"]
INTERVALS: tuple[str, ...] = get_args(Interval)

DEFAULT_BASE_URL = "https://services.swpc.noaa.gov/products/solar-wind"


class ClientConfig(BaseModel):
    """Settings for fetching NOAA solar wind products."""

    base_url: str = Field(
        DEFAULT_BASE_URL,
        description="Directory URL holding the {slug}-{interval}.json files",
    )
    timeout: float = Field(30.0, gt=0, description="Request timeout in seconds")
    default_interval: Interval = Field(
        "5-minute", description="Interval used when a call does not name one"
    )
    user_agent: str = Field(
        "solarwind-python", description="User-Agent header sent to NOAA"
    )

    @model_validator(mode="after")
    def _normalize_base_url(self) -> ClientConfig:
        """Require an http(s) URL and drop any trailing slash."""
        if not self.base_url.startswith(("http://", "https://")):
            raise ValueError(
                f"base_url must be an http:// or https:// URL, got '{self.base_url}'"
            )
        self.base_url = self.base_url.rstrip("/")
        return self


def load_config(path: str | Path) -> ClientConfig:
    """Load and validate a YAML file into a ClientConfig model.

    Raises:
        FileNotFoundError: If the config file does not exist.
        ConfigValidationError: If the file is empty.
        pydantic.ValidationError: If the YAML content fails schema validation.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f)
    if raw is None:
        raise ConfigValidationError(f"Config file is empty: {path}")
    logger.info("Loaded config from %s", path)
    return ClientConfig.model_validate(raw)


def save_config(config: ClientConfig, path: str | Path) -> None:
    """Serialize a ClientConfig to YAML with a header comment."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    data = config.model_dump(mode="json")
    with open(path, "w", encoding="utf-8") as f:
        f.write("# solarwind client configuration\n\n")
        yaml.dump(data, f, default_flow_style=False, sort_keys=False)
    logger.info("Saved config to %s", path)
