"""Transformer configuration with validation."""
import logging
from functools import lru_cache
from typing import Literal, Optional

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from reco.core.exceptions import TransformerConfigurationError
from reco.scoring.pareto import ParetoScoreTransformer

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Scoring settings, read from the environment and .env."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    APP_ENV: Literal["development", "staging", "production"] = "development"

    # Pareto transformer
    PARETO_MAX_SCORE: int = Field(default=100, ge=1)
    PARETO_EIGHTY_PERCENT_LEVEL: int = Field(
        default=10,
        description="Raw score at which the transformer yields 80% of PARETO_MAX_SCORE",
    )
    PARETO_MINIMUM_THRESHOLD: int = Field(default=0, ge=0)

    @field_validator("PARETO_EIGHTY_PERCENT_LEVEL")
    @classmethod
    def validate_eighty_percent_level(cls, v: int) -> int:
        if v == 0:
            raise ValueError("PARETO_EIGHTY_PERCENT_LEVEL must be nonzero")
        if v < 0:
            raise ValueError("PARETO_EIGHTY_PERCENT_LEVEL must be positive")
        return v


@lru_cache
def get_settings() -> Settings:
    return Settings()


def _configuration_error(exc: ValidationError) -> TransformerConfigurationError:
    first = exc.errors()[0]
    parameter = str(first["loc"][0]) if first.get("loc") else "settings"
    return TransformerConfigurationError(
        parameter, first.get("input"), first.get("msg", "invalid value")
    )


def build_pareto_transformer(
    settings: Optional[Settings] = None,
) -> ParetoScoreTransformer:
    """
    Build a ParetoScoreTransformer from settings.

    Args:
        settings: Explicit settings; defaults to the cached environment settings.

    Raises:
        TransformerConfigurationError: if the environment holds an invalid value.
    """
    if settings is None:
        try:
            settings = get_settings()
        except ValidationError as exc:
            raise _configuration_error(exc) from exc

    transformer = ParetoScoreTransformer(
        max_score=settings.PARETO_MAX_SCORE,
        eighty_percent_level=settings.PARETO_EIGHTY_PERCENT_LEVEL,
        minimum_threshold=settings.PARETO_MINIMUM_THRESHOLD,
    )
    logger.info("Built %r (env=%s)", transformer, settings.APP_ENV)
    return transformer
