"""Configuration - Environment-driven settings and logging setup.

Every scoring constant can be recalibrated through a GUTSCORE_* environment
variable without touching the core, e.g. GUTSCORE_DIVERSITY_TARGET=25.
"""

import logging
import math
import os
from collections.abc import Mapping
from dataclasses import dataclass, field, fields, replace

from ..core.gutscore import (
    COMPONENT_MAX,
    DEFAULT_PARAMETERS,
    ParameterError,
    ScoringParameters,
)


logger = logging.getLogger(__name__)

ENV_PREFIX = "GUTSCORE_"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class ConfigError(ValueError):
    """Raised when an environment setting cannot be used."""


@dataclass
class ScoringConfig:
    """Configuration for running the score.

    Attributes:
        parameters: Scoring constants
        log_level: Logging level name
    """

    parameters: ScoringParameters = field(default_factory=lambda: DEFAULT_PARAMETERS)
    log_level: str = "INFO"


def _env_name(parameter: str) -> str:
    return f"{ENV_PREFIX}{parameter.upper()}"


def _validate_fallbacks(params: ScoringParameters) -> None:
    for name in ("neutral_symptom_score", "baseline_trend_score"):
        if not 0 <= getattr(params, name) <= COMPONENT_MAX:
            raise ConfigError(f"{_env_name(name)} must be between 0 and {COMPONENT_MAX:g}")


def load_scoring_parameters(environ: Mapping[str, str] | None = None) -> ScoringParameters:
    """Build scoring parameters from defaults plus environment overrides.

    Args:
        environ: Environment mapping (defaults to os.environ)

    Returns:
        ScoringParameters with any overrides applied

    Raises:
        ConfigError: If an override is not a number or out of range
    """
    if environ is None:
        environ = os.environ

    overrides: dict[str, int | float] = {}
    for param in fields(ScoringParameters):
        raw = environ.get(_env_name(param.name))
        if raw is None or not raw.strip():
            continue
        try:
            overrides[param.name] = param.type(raw.strip())
        except ValueError:
            raise ConfigError(
                f"{_env_name(param.name)} must be a {param.type.__name__}, got {raw!r}"
            ) from None
        if not math.isfinite(overrides[param.name]):
            raise ConfigError(f"{_env_name(param.name)} must be a finite number, got {raw!r}")

    try:
        params = replace(DEFAULT_PARAMETERS, **overrides)
    except ParameterError as e:
        raise ConfigError(f"{_env_name(e.parameter)}: {e}") from None
    _validate_fallbacks(params)

    if overrides:
        logger.info("Scoring parameter overrides: %s", overrides)
    return params


def _parse_log_level(raw: str) -> str:
    level = raw.strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ConfigError(f"{ENV_PREFIX}LOG_LEVEL is not a logging level: {raw!r}")
    return level


def load_scoring_config(environ: Mapping[str, str] | None = None) -> ScoringConfig:
    """Load the full scoring configuration from the environment."""
    if environ is None:
        environ = os.environ

    log_level = _parse_log_level(environ.get(f"{ENV_PREFIX}LOG_LEVEL", "INFO"))

    return ScoringConfig(
        parameters=load_scoring_parameters(environ),
        log_level=log_level,
    )


def configure_logging(level: str | None = None) -> None:
    """Configure root logging for processes that run the scorer.

    Args:
        level: Level name, e.g. ScoringConfig.log_level (defaults to
            GUTSCORE_LOG_LEVEL, then INFO)

    Raises:
        ConfigError: If the level is not a logging level name
    """
    if level is None:
        level = os.environ.get(f"{ENV_PREFIX}LOG_LEVEL", "INFO")

    logging.basicConfig(level=_parse_log_level(level), format=LOG_FORMAT)
