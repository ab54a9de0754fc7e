"""Settings and configuration management using Pydantic."""

import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Literal, Optional, Tuple, Type

import yaml
from pydantic import Field, field_validator
from pydantic.fields import FieldInfo
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

CONFIG_FILE = Path("config.yaml")


class YamlConfigSettingsSource(PydanticBaseSettingsSource):
    """
    Settings source that loads values from ``config.yaml`` in the
    current working directory.
    """

    def _load(self) -> Dict[str, Any]:
        if not CONFIG_FILE.exists():
            return {}
        encoding = self.config.get("env_file_encoding")
        try:
            content = yaml.safe_load(CONFIG_FILE.read_text(encoding))
        except (OSError, yaml.YAMLError) as e:
            print(f"Warning: Failed to load {CONFIG_FILE}: {e}")
            return {}
        return content if isinstance(content, dict) else {}

    def get_field_value(self, field: FieldInfo, field_name: str) -> Tuple[Any, str, bool]:
        return self._load().get(field_name), field_name, False

    def __call__(self) -> Dict[str, Any]:
        return {k: v for k, v in self._load().items() if k in self.settings_cls.model_fields}


class Settings(BaseSettings):
    """Deck Clock configuration settings."""

    model_config = SettingsConfigDict(
        env_prefix="DECKCLOCK_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: Type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> Tuple[PydanticBaseSettingsSource, ...]:
        # First source wins: env vars override config.yaml
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            YamlConfigSettingsSource(settings_cls),
            file_secret_settings,
        )

    # Clock face
    variant: Literal["digital", "analog"] = Field(
        default="digital",
        description="Clock face to render",
    )
    width: int = Field(
        default=144,
        ge=16,
        description="Surface width in pixels",
    )
    height: int = Field(
        default=144,
        ge=16,
        description="Surface height in pixels",
    )
    digital_colors: Dict[str, str] = Field(
        default_factory=dict,
        description="Palette overrides for the digital face (lineOn, lineOff, background)",
    )
    analog_colors: Dict[str, str] = Field(
        default_factory=dict,
        description="Palette overrides for the analog face (hour, minute, second, stroke, background)",
    )

    # Clock service
    clock_update_interval: float = Field(
        default=1.0,
        gt=0,
        description="Clock update interval in seconds",
    )
    clock_output_path: Path = Field(
        default=Path("/tmp/deckclock.png"),
        description="Path to save the rendered clock PNG",
    )

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )
    log_file: Optional[Path] = Field(
        default=None,
        description="Log file path",
    )

    # Development
    debug: bool = Field(
        default=False,
        description="Enable debug mode",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_level(cls, v: Any) -> Any:
        """Accept lowercase level names."""
        if isinstance(v, str):
            return v.upper()
        return v

    @field_validator("clock_output_path", "log_file", mode="before")
    @classmethod
    def expand_path(cls, v: Any) -> Any:
        """Expand environment variables and user paths."""
        if isinstance(v, str):
            v = os.path.expandvars(os.path.expanduser(v))
            return Path(v)
        return v

    def colors_for(self, variant: str) -> Dict[str, str]:
        """Return the configured palette overrides for a clock variant."""
        if variant == "analog":
            return dict(self.analog_colors)
        return dict(self.digital_colors)

    def ensure_directories(self) -> None:
        """Ensure required directories exist."""
        self.clock_output_path.parent.mkdir(parents=True, exist_ok=True)
        if self.log_file:
            self.log_file.parent.mkdir(parents=True, exist_ok=True)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
