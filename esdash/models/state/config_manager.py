"""Settings loading from YAML file, environment, and CLI overrides."""

from __future__ import annotations

import logging
import os
from pathlib import Path

import yaml
from pydantic import ValidationError

from esdash.constants.defaults import (
    CONFIG_PATH_DEFAULT,
    CONFIG_PATH_ENV_VAR,
    ES_URL_ENV_VAR,
)
from esdash.models.state.app_settings import AppSettings, ConfigError, ConfigLoadError

logger = logging.getLogger(__name__)


class ConfigManager:
    """Resolve ``AppSettings`` from their sources.

    Precedence, lowest first: model defaults, the YAML settings file, the
    ``ES_URL`` environment variable, then the ``url`` override.
    """

    @staticmethod
    def config_path(path: Path | str | None = None) -> Path:
        if path is not None:
            return Path(path).expanduser()
        return Path(os.environ.get(CONFIG_PATH_ENV_VAR, CONFIG_PATH_DEFAULT)).expanduser()

    @staticmethod
    def _read_file(path: Path) -> dict:
        if not path.is_file():
            logger.debug("No settings file at %s", path)
            return {}
        try:
            with open(path, encoding="utf-8") as handle:
                content = yaml.safe_load(handle)
        except (OSError, yaml.YAMLError) as exc:
            raise ConfigLoadError(f"Cannot read settings from {path}: {exc}") from exc
        if content is None:
            return {}
        if not isinstance(content, dict):
            raise ConfigLoadError(f"Settings file {path} must contain a mapping")
        return content

    @classmethod
    def load(
        cls, path: Path | str | None = None, url: str | None = None
    ) -> AppSettings:
        """Load settings.

        Raises:
            ConfigLoadError: If the file is unreadable or fails validation.
        """
        return cls._build(cls._read_file(cls.config_path(path)), url)

    @classmethod
    def defaults(cls, url: str | None = None) -> AppSettings:
        """Default settings with only the environment and ``url`` overrides applied."""
        return cls._build({}, url)

    @staticmethod
    def _build(values: dict, url: str | None) -> AppSettings:
        env_url = os.environ.get(ES_URL_ENV_VAR)
        if env_url:
            values["es_url"] = env_url
        if url:
            values["es_url"] = url
        try:
            return AppSettings.model_validate(values)
        except ValidationError as exc:
            raise ConfigLoadError(f"Invalid settings: {exc}") from exc


__all__ = ["AppSettings", "ConfigError", "ConfigLoadError", "ConfigManager"]
