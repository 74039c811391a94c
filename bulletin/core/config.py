"""Configuration management for bulletin."""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
import yaml

from bulletin.core.exceptions import ConfigurationError

ID_STRATEGIES = ("counter", "uuid", "clock")


class BulletinConfig(BaseSettings):
    """
    Configuration for record structures.

    Can be loaded from:
    - Environment variables (prefix: BULLETIN_)
    - YAML file
    - Direct initialization

    Example:
        >>> config = BulletinConfig(id_strategy="uuid", id_prefix="rec_")
        >>> config = BulletinConfig.from_yaml("bulletin.yaml")
        >>> config = BulletinConfig()
    """

    model_config = SettingsConfigDict(
        env_prefix="BULLETIN_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        validate_default=True,
    )

    id_strategy: str = Field(
        default="counter",
        description="Id supplier used for new records (counter, uuid, clock)",
    )
    id_prefix: str = Field(
        default="",
        description="Prefix prepended to counter and uuid ids",
    )
    id_width: int = Field(
        default=0,
        ge=0,
        le=32,
        description="Zero padding for counter ids (0 = no padding)",
    )
    uuid_length: int = Field(
        default=12,
        ge=4,
        le=32,
        description="Number of hex characters kept from uuid4 ids",
    )
    clock_digits: int = Field(
        default=6,
        ge=1,
        le=12,
        description="Digits kept from the millisecond clock for clock ids",
    )

    validate_fields: bool = Field(
        default=True,
        description="Reject blank title/date/author values",
    )
    check_invariants: bool = Field(
        default=False,
        description="Verify structural invariants after every mutation (debug)",
    )

    @field_validator("id_strategy")
    @classmethod
    def validate_id_strategy(cls, v: str) -> str:
        """Normalize and check the id strategy name."""
        v = v.strip().lower()
        if v not in ID_STRATEGIES:
            raise ValueError(f"id_strategy must be one of {ID_STRATEGIES}, got {v!r}")
        return v

    @classmethod
    def find_config_yaml(cls) -> Path | None:
        """
        Search for bulletin.yaml in standard locations.

        Search order:
        1. Current working directory
        2. User home directory (~/.bulletin/bulletin.yaml)

        Returns:
            Path to bulletin.yaml if found, None otherwise
        """
        search_paths = [
            Path.cwd() / "bulletin.yaml",
            Path.home() / ".bulletin" / "bulletin.yaml",
        ]

        for path in search_paths:
            if path.exists():
                return path

        return None

    @classmethod
    def from_yaml(cls, path: Path | str | None = None) -> BulletinConfig:
        """
        Load configuration from YAML file.

        Environment variables win over values from the file.

        Args:
            path: Path to YAML configuration file. If None, searches standard locations.

        Returns:
            BulletinConfig instance

        Raises:
            FileNotFoundError: If no config file could be found
            ConfigurationError: If the file is not a YAML mapping
        """
        if path is None:
            path = cls.find_config_yaml()
            if path is None:
                raise FileNotFoundError(
                    "Config file not found. Searched:\n"
                    "  1. ./bulletin.yaml\n"
                    "  2. ~/.bulletin/bulletin.yaml"
                )
        else:
            path = Path(path)
            if not path.exists():
                raise FileNotFoundError(f"Config file not found: {path}")

        with open(path, encoding="utf-8") as f:
            yaml_data = yaml.safe_load(f) or {}

        if not isinstance(yaml_data, dict):
            raise ConfigurationError(f"Config file must contain a mapping: {path}")

        result_data = {}

        for key, value in yaml_data.items():
            env_key = f"BULLETIN_{key.upper()}"
            if env_key in os.environ:
                continue
            result_data[key] = value

        return cls(**result_data)

    def to_yaml(self, path: Path | str) -> None:
        """
        Save configuration to YAML file.

        Args:
            path: Path to save YAML configuration
        """
        path = Path(path)
        with open(path, "w", encoding="utf-8") as f:
            yaml.dump(
                self.model_dump(mode="json"),
                f,
                default_flow_style=False,
                sort_keys=False,
            )

    def __repr__(self) -> str:
        return (
            f"BulletinConfig(id_strategy={self.id_strategy!r}, id_prefix={self.id_prefix!r}, "
            f"check_invariants={self.check_invariants})"
        )
