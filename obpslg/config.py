# obpslg/config.py

import logging
from dataclasses import dataclass
from fractions import Fraction

import yaml

from .constants import (
    DEFAULT_DOUBLE_PLAY_RATIO,
    DEFAULT_INFIELD_HIT_RATIO,
    DEFAULT_PRODUCTIVE_OUT_RATIO,
)
from .errors import ConfigurationError

logger = logging.getLogger(__name__)


def load_config(config_path):
    """Loads the YAML configuration file."""
    logger.info(f"Loading configuration from: {config_path}")
    try:
        with open(config_path, 'r') as f:
            config_data = yaml.safe_load(f)
    except FileNotFoundError:
        logger.error(f"Error: Configuration file not found at {config_path}")
        raise
    except yaml.YAMLError as e:
        logger.error(f"Error parsing YAML configuration: {e}")
        raise ConfigurationError(f"Invalid YAML in {config_path}: {e}") from e

    if not isinstance(config_data, dict):
        raise ConfigurationError(f"Configuration file {config_path} must contain a mapping at the top level.")
    logger.info("Configuration loaded successfully.")
    return config_data


def parse_ratio(name, value, default):
    """
    Reads a probability from config. Accepts a number or a "numerator/denominator" string
    so league totals can be written down as they were counted.
    """
    if value is None:
        return default
    try:
        ratio = float(Fraction(str(value).strip()))
    except (ValueError, ZeroDivisionError) as e:
        raise ConfigurationError(f"Simulation parameter '{name}' is not a valid ratio: {value!r}") from e
    if not 0.0 <= ratio <= 1.0:
        raise ConfigurationError(f"Simulation parameter '{name}' must be between 0 and 1, got {ratio:.4f}.")
    return ratio


@dataclass(frozen=True)
class ModelParams:
    """Sub-event probabilities applied on outs in play and singles."""

    productive_out_ratio: float = DEFAULT_PRODUCTIVE_OUT_RATIO
    double_play_ratio: float = DEFAULT_DOUBLE_PLAY_RATIO
    infield_hit_ratio: float = DEFAULT_INFIELD_HIT_RATIO

    @classmethod
    def from_sim_params(cls, sim_params):
        params = cls(
            productive_out_ratio=parse_ratio('productive_out_ratio', sim_params.get('productive_out_ratio'),
                                             DEFAULT_PRODUCTIVE_OUT_RATIO),
            double_play_ratio=parse_ratio('double_play_ratio', sim_params.get('double_play_ratio'),
                                          DEFAULT_DOUBLE_PLAY_RATIO),
            infield_hit_ratio=parse_ratio('infield_hit_ratio', sim_params.get('infield_hit_ratio'),
                                          DEFAULT_INFIELD_HIT_RATIO),
        )
        if params.double_play_ratio + params.productive_out_ratio > 1.0:
            logger.warning(f"double_play_ratio + productive_out_ratio = "
                           f"{params.double_play_ratio + params.productive_out_ratio:.4f} exceeds 1. "
                           f"Outs in play with a runner on first will never be plain outs.")
        logger.debug(f"Model params: {params}")
        return params
