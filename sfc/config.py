"""Configuration loading for SFC.

:class:`Settings` is a ``pydantic-settings`` model. Values resolve from, in
order of precedence:

1. explicit overrides passed to :class:`ConfigurationProvider`,
2. environment variables named ``SFC_<SECTION>__<KEY>`` (secrets belong here),
3. a YAML file (``--config``, ``$SFC_CONFIG`` or ``./sfc.yaml``),
4. the defaults declared on the section models.

A field without a default that no source provides is reported as missing;
endpoints and credentials are never guessed.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Literal, Optional, TypeVar

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)

from sfc.errors import ConfigurationError, MissingConfigurationError
from sfc.llm.client import DEFAULT_MODEL

logger = logging.getLogger(__name__)

ENV_PREFIX = "SFC_"
CONFIG_ENV_VAR = "SFC_CONFIG"
DEFAULT_CONFIG_FILE = "sfc.yaml"

SectionT = TypeVar("SectionT", bound=BaseModel)


# ---------------------------------------------------------------------------
# Section models
# ---------------------------------------------------------------------------


class StorageOptions(BaseModel):
    backend: Literal["json", "memory"] = "json"
    path: str = "~/.sfc/data"
    retry_delay_seconds: float = Field(default=1.0, ge=0)


class ContentSafetyOptions(BaseModel):
    provider: Literal["keyword", "anthropic"] = "keyword"
    severity_threshold: int = Field(default=4, ge=0)


class TextAnalyticsOptions(BaseModel):
    provider: Literal["keyword", "anthropic"] = "keyword"
    max_key_phrases: int = Field(default=10, ge=1)


class AnthropicOptions(BaseModel):
    api_key: str = Field(min_length=1)
    model: str = DEFAULT_MODEL
    timeout_seconds: float = Field(default=30.0, gt=0)


class CacheOptions(BaseModel):
    enabled: bool = True
    ttl_seconds: float = Field(default=3600.0, gt=0)


class FeedbackOptions(BaseModel):
    min_length: int = Field(default=10, ge=1)
    max_length: int = Field(default=1000, ge=1)


class LoggingOptions(BaseModel):
    level: str = "INFO"
    json_output: bool = Field(default=False, alias="json")

    model_config = ConfigDict(populate_by_name=True)


# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------


class Settings(BaseSettings):
    """Every section the application needs, fully resolved."""

    storage: StorageOptions = Field(default_factory=StorageOptions)
    content_safety: ContentSafetyOptions = Field(default_factory=ContentSafetyOptions)
    text_analytics: TextAnalyticsOptions = Field(default_factory=TextAnalyticsOptions)
    cache: CacheOptions = Field(default_factory=CacheOptions)
    feedback: FeedbackOptions = Field(default_factory=FeedbackOptions)
    logging: LoggingOptions = Field(default_factory=LoggingOptions)
    anthropic: Optional[AnthropicOptions] = None

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_nested_delimiter="__",
        env_ignore_empty=True,
        extra="ignore",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return init_settings, env_settings, YamlConfigSettingsSource(settings_cls)

    @property
    def needs_anthropic(self) -> bool:
        return "anthropic" in (self.content_safety.provider, self.text_analytics.provider)


def resolve_config_path(path: Optional[str | Path] = None) -> Optional[Path]:
    """Return the YAML file to read, or ``None`` if there is none.

    An explicitly named file (argument or ``$SFC_CONFIG``) must exist; the
    default ``./sfc.yaml`` is optional.
    """
    explicit = path or os.environ.get(CONFIG_ENV_VAR)
    if not explicit:
        default = Path(DEFAULT_CONFIG_FILE)
        return default if default.is_file() else None

    config_path = Path(explicit).expanduser()
    if not config_path.is_file():
        raise ConfigurationError(f"Configuration file not found: {config_path}")
    return config_path


# ---------------------------------------------------------------------------
# Provider
# ---------------------------------------------------------------------------


class ConfigurationProvider:
    """Resolves typed configuration sections from overrides, environment and YAML."""

    def __init__(self, config_path: Optional[str | Path] = None, **overrides: Any) -> None:
        self.config_path = resolve_config_path(config_path)
        self._overrides = overrides

    @property
    def sources(self) -> list[str]:
        sources = ["environment"]
        if self.config_path is not None:
            sources.append(str(self.config_path))
        return sources

    def _settings_class(self) -> type[Settings]:
        if self.config_path is None:
            return Settings

        class FileSettings(Settings):
            model_config = SettingsConfigDict(yaml_file=self.config_path)

        return FileSettings

    def load(self) -> Settings:
        """Resolve every section, failing fast.

        Raises :class:`MissingConfigurationError` listing every required key
        no source provided, or :class:`ConfigurationError` for invalid values.
        """
        try:
            settings = self._settings_class()(**self._overrides)
        except ValidationError as exc:
            missing = [
                ":".join([str(err["loc"][0]), ".".join(str(p) for p in err["loc"][1:])])
                for err in exc.errors()
                if err["type"] == "missing"
            ]
            if missing:
                raise MissingConfigurationError(missing, self.sources) from exc
            raise ConfigurationError(f"Invalid configuration: {exc}") from exc
        except yaml.YAMLError as exc:
            raise ConfigurationError(f"Invalid YAML in {self.config_path}: {exc}") from exc
        except (AttributeError, TypeError, ValueError) as exc:
            raise ConfigurationError(
                f"{self.config_path} must contain a mapping of sections"
            ) from exc

        if settings.needs_anthropic and settings.anthropic is None:
            raise MissingConfigurationError(["anthropic:api_key"], self.sources)
        if settings.feedback.min_length > settings.feedback.max_length:
            raise ConfigurationError("feedback:min_length must not exceed feedback:max_length")

        logger.debug("Configuration loaded from %s", ", ".join(self.sources))
        return settings

    def get_section(self, section: str, model: type[SectionT]) -> SectionT:
        """Return *section* validated as *model*.

        An optional section that no source provides is reported with the
        required keys of *model* as missing.
        """
        value = getattr(self.load(), section, None)
        if value is None:
            missing = [
                f"{section}:{name}"
                for name, field in model.model_fields.items()
                if field.is_required()
            ]
            raise MissingConfigurationError(missing, self.sources)
        if isinstance(value, model):
            return value
        return model.model_validate(value.model_dump(by_alias=True))


def load_settings(provider: Optional[ConfigurationProvider] = None) -> Settings:
    """Resolve the application settings, by default from environment and ``./sfc.yaml``."""
    return (provider or ConfigurationProvider()).load()
