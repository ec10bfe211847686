"""
Configuration management using Pydantic models loaded from YAML.
"""

from pathlib import Path
from typing import List, Optional, Sequence

import yaml
from pydantic import BaseModel, Field, field_validator

from .domain.durations import DEFAULT_MIN_SERVICE_DURATION
from .domain.exceptions import ConfigurationError
from .domain.models import Service
from .domain.time_validation import DEFAULT_PAST_BUFFER_MINUTES, DEFAULT_TIMEZONE


class DefaultsConfig(BaseModel):
    """Default settings for availability lookups."""
    min_service_duration: int = DEFAULT_MIN_SERVICE_DURATION
    past_buffer_minutes: int = DEFAULT_PAST_BUFFER_MINUTES

    @field_validator("min_service_duration")
    @classmethod
    def validate_min_service_duration(cls, value: int) -> int:
        """Ensure the minimum service duration is positive."""
        if value <= 0:
            raise ValueError("min_service_duration must be greater than zero")
        return value

    @field_validator("past_buffer_minutes")
    @classmethod
    def validate_past_buffer(cls, value: int) -> int:
        if value < 0:
            raise ValueError("past_buffer_minutes must not be negative")
        return value


class ServiceConfig(BaseModel):
    """Service offered by the provider."""
    name: str
    duration: int  # minutes

    @field_validator("duration")
    @classmethod
    def validate_duration(cls, value: int) -> int:
        """Ensure service duration is positive."""
        if value <= 0:
            raise ValueError("duration must be greater than zero")
        return value

    def to_service(self) -> Service:
        return Service(name=self.name, duration=self.duration)


class AppConfig(BaseModel):
    """Application configuration."""
    defaults: DefaultsConfig = Field(default_factory=DefaultsConfig)
    timezone: str = DEFAULT_TIMEZONE
    schedule_file: Optional[Path] = None
    services: List[ServiceConfig] = Field(default_factory=list)

    @field_validator("services")
    @classmethod
    def validate_services(cls, value: List[ServiceConfig]) -> List[ServiceConfig]:
        """Ensure service names are unique."""
        seen: set[str] = set()
        for service in value:
            key = service.name.lower()
            if key in seen:
                raise ValueError(f"Duplicate service name detected: {service.name}")
            seen.add(key)
        return value

    @classmethod
    def load_from_yaml(cls, config_path: Path) -> "AppConfig":
        """
        Load configuration from YAML file.

        Args:
            config_path: Path to the YAML config file

        Returns:
            AppConfig instance

        Raises:
            FileNotFoundError: If config file doesn't exist
            ConfigurationError: If the file is not valid YAML or not a mapping
        """
        if not config_path.exists():
            raise FileNotFoundError(
                f"Config file not found: {config_path}\n"
                f"Please create a config.yaml file. See config.example.yaml for reference."
            )

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ConfigurationError(f"Invalid YAML in {config_path}: {exc}") from exc

        if not isinstance(data, dict):
            raise ConfigurationError("Config file must contain a mapping at the root level.")

        config = cls(**data)
        if config.schedule_file is not None and not config.schedule_file.is_absolute():
            config.schedule_file = config_path.parent / config.schedule_file
        return config

    def find_service(self, name: str) -> ServiceConfig | None:
        """Find a service by name (case-insensitive)."""
        for service in self.services:
            if service.name.lower() == name.lower():
                return service
        return None

    def resolve_services(self, names: Sequence[str]) -> List[Service]:
        """
        Resolve service names to services.

        Args:
            names: Configured service names

        Returns:
            List of Service objects in the order given

        Raises:
            ValueError: If any name is unknown
        """
        resolved: List[Service] = []
        unknown: List[str] = []

        for name in names:
            service = self.find_service(name)
            if service is None:
                unknown.append(name)
                continue
            resolved.append(service.to_service())

        if unknown:
            missing = ", ".join(sorted(set(unknown)))
            raise ValueError(
                f"Unknown service(s): {missing}. "
                "Ensure they exist in the configuration."
            )

        return resolved


def get_default_config_path() -> Path:
    """Get the default configuration file path."""
    # Look for config.yaml in current directory
    current_dir = Path.cwd()
    config_path = current_dir / "config.yaml"

    if not config_path.exists():
        # Try in the project root (parent of the package)
        project_root = Path(__file__).parent.parent
        config_path = project_root / "config.yaml"

    return config_path
