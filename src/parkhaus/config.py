"""Configuration models and loading utilities."""

import os
import re
from decimal import Decimal
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, field_validator

DEFAULT_FLOORS = ["EG", "1. OG", "2. OG"]
DEFAULT_PLATE_PATTERN = r"^[A-Z]{2}\s[0-9]{1,6}$"  # e.g. "ZH 12345"


class GarageConfig(BaseModel):
    """Garage layout configuration."""

    floors: list[str] = Field(default_factory=lambda: list(DEFAULT_FLOORS))
    slots_per_floor: int = Field(default=6, ge=1)

    @field_validator("floors")
    @classmethod
    def check_floors(cls, v: list[str]) -> list[str]:
        """Floors must be a non-empty list of unique names."""
        if not v:
            raise ValueError("at least one floor is required")
        if len(set(v)) != len(v):
            raise ValueError(f"floor names must be unique: {v}")
        return v


class PricingConfig(BaseModel):
    """Park-out pricing configuration."""

    price_per_minute: Decimal = Field(default=Decimal("0.50"), gt=0)
    currency: str = "CHF"

    @field_validator("currency", mode="before")
    @classmethod
    def resolve_env_var(cls, v: str) -> str:
        """Resolve environment variable references like ${VAR_NAME}."""
        if isinstance(v, str) and v.startswith("${") and v.endswith("}"):
            env_var = v[2:-1]
            return os.environ.get(env_var, "CHF")
        return v


class ValidationConfig(BaseModel):
    """License plate validation configuration."""

    plate_pattern: str = DEFAULT_PLATE_PATTERN

    @field_validator("plate_pattern")
    @classmethod
    def check_pattern(cls, v: str) -> str:
        try:
            re.compile(v)
        except re.error as e:
            raise ValueError(f"invalid plate pattern {v!r}: {e}") from e
        return v


class APIConfig(BaseModel):
    """API server configuration."""

    host: str = "0.0.0.0"
    port: int = 8000


class AppConfig(BaseModel):
    """Main application configuration."""

    garage: GarageConfig = GarageConfig()
    pricing: PricingConfig = PricingConfig()
    validation: ValidationConfig = ValidationConfig()
    api: APIConfig = APIConfig()


def load_config(path: str | Path) -> AppConfig:
    """
    Load configuration from a YAML file.

    Args:
        path: Path to the configuration file

    Returns:
        Validated AppConfig instance

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If config is invalid
    """
    config_path = Path(path)

    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(config_path) as f:
        data = yaml.safe_load(f)

    # An empty file means "all defaults"
    return AppConfig(**(data or {}))


def get_config_path() -> Path:
    """Get the default configuration file path."""
    # Check for config in current directory first
    local_config = Path("config/config.yaml")
    if local_config.exists():
        return local_config

    # Check for config in parent directory (for Docker)
    parent_config = Path("/app/config/config.yaml")
    if parent_config.exists():
        return parent_config

    return local_config  # Return default even if doesn't exist
