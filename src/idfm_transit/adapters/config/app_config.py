"""12-factor configuration adapter using environment variables and TOML config."""

import logging
import tomllib
from pathlib import Path
from typing import Any

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_NAVITIA_BASE_URL = "https://prim.iledefrance-mobilites.fr/marketplace/v2/navitia"


def _normalize_base_url(url: str) -> str:
    return url.rstrip("/")


def _check_timeout(seconds: int) -> int:
    if seconds <= 0:
        raise ValueError("navitia_api_timeout must be greater than 0")
    return seconds


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Navitia API configuration
    prim_api_key: str = Field(
        default="",
        validation_alias=AliasChoices("prim_api_key", "expo_public_prim_api_key"),
        description="Static API key sent with every Navitia request",
    )
    navitia_base_url: str = Field(
        default=DEFAULT_NAVITIA_BASE_URL, description="Root of the Navitia journey-planning API"
    )
    navitia_api_timeout: int = Field(
        default=10, description="Timeout for Navitia API requests in seconds"
    )

    # Query bounds
    lines_count: int = Field(default=500, description="Maximum lines fetched per catalog query")
    stop_points_count: int = Field(
        default=500, description="Maximum stop points fetched for a line"
    )
    nearby_count: int = Field(default=10, description="Maximum stations returned by nearby search")
    nearby_distance_meters: int = Field(
        default=1000, description="Search radius for nearby stations in meters"
    )
    min_query_length: int = Field(
        default=2, description="Autocomplete queries shorter than this are not sent"
    )

    log_level: str = Field(default="INFO", description="Logging level name")

    # Optional TOML file with a [navitia] table overriding the values above
    config_file: str | None = Field(
        default=None,
        description="Path to TOML configuration file overriding Navitia settings",
    )

    @field_validator("navitia_base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Strip the trailing slash so relative paths can be appended."""
        return _normalize_base_url(v)

    @field_validator("navitia_api_timeout")
    @classmethod
    def validate_timeout(cls, v: int) -> int:
        """Validate timeout is positive."""
        return _check_timeout(v)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a known logging level name."""
        level = v.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {v}")
        return level

    def _load_toml_data(self) -> dict[str, Any]:
        """Load and parse the TOML file."""
        if not self.config_file:
            raise ValueError("config_file must be set to load overrides")

        config_path = Path(self.config_file)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, "rb") as f:
            return tomllib.load(f)

    def load_overrides(self) -> "AppConfig":
        """Apply the [navitia] table of config_file, if one is configured.

        Returns:
            This configuration, updated in place.
        """
        if not self.config_file:
            return self

        navitia = self._load_toml_data().get("navitia", {})
        if not isinstance(navitia, dict):
            raise ValueError("TOML config 'navitia' must be a table")

        if "base_url" in navitia:
            self.navitia_base_url = _normalize_base_url(navitia["base_url"])
        if "timeout" in navitia:
            self.navitia_api_timeout = _check_timeout(int(navitia["timeout"]))
        for key in (
            "lines_count",
            "stop_points_count",
            "nearby_count",
            "nearby_distance_meters",
            "min_query_length",
        ):
            if key in navitia:
                setattr(self, key, int(navitia[key]))

        return self
