"""Application settings models."""

from pydantic import BaseModel, ConfigDict, Field

from esdash.constants.defaults import (
    ES_URL_DEFAULT,
    PAGE_SIZE_DEFAULT,
    REFRESH_INTERVAL_DEFAULT,
    THEME_DEFAULT,
)
from esdash.constants.limits import PAGE_SIZE_MAX, PAGE_SIZE_MIN, REFRESH_INTERVAL_MIN
from esdash.constants.timeouts import CLUSTER_REQUEST_TIMEOUT


class AppSettings(BaseModel):
    """Application settings model with validation."""

    model_config = ConfigDict(populate_by_name=True)

    # Connection
    es_url: str = ES_URL_DEFAULT
    request_timeout: float = Field(default=CLUSTER_REQUEST_TIMEOUT, gt=0)

    # UI preferences
    theme: str = THEME_DEFAULT
    refresh_interval: int = Field(
        default=REFRESH_INTERVAL_DEFAULT, ge=REFRESH_INTERVAL_MIN
    )  # seconds
    page_size: int = Field(default=PAGE_SIZE_DEFAULT, ge=PAGE_SIZE_MIN, le=PAGE_SIZE_MAX)


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigLoadError(ConfigError):
    """Raised when settings fail to load."""
