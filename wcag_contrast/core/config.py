"""Threshold configuration from environment variables.

Recognised variables (contrast ratios, each between 1 and 21):
  WCAG_CONTRAST_AA          default 4.5
  WCAG_CONTRAST_AA_LARGE    default 3.0
  WCAG_CONTRAST_AAA         default 7.0
  WCAG_CONTRAST_AAA_LARGE   default 4.5

Unset or blank variables keep the WCAG default. Nothing is read from disk;
callers that keep settings in a file load it into a mapping themselves.
"""

import logging
import os
from collections.abc import Mapping
from dataclasses import fields

from wcag_contrast.core.types import Thresholds

logger = logging.getLogger(__name__)

ENV_PREFIX = 'WCAG_CONTRAST_'


def env_name(field_name: str) -> str:
    """Variable name for a Thresholds field, e.g. aa_large -> WCAG_CONTRAST_AA_LARGE."""
    return ENV_PREFIX + field_name.upper()


def _parse_ratio(name: str, raw: str) -> float:
    try:
        value = float(raw)
    except ValueError:
        raise ValueError(f'{name} must be a number, got {raw!r}') from None
    if not 1 <= value <= 21:
        raise ValueError(f'{name} must be between 1 and 21, got {value}')
    return value


def load_thresholds(environ: Mapping[str, str] | None = None) -> Thresholds:
    """Build Thresholds from WCAG_CONTRAST_* variables.

    Reads os.environ unless another mapping is given. Raises ValueError naming
    the variable when a value is not a ratio between 1 and 21.
    """
    source = os.environ if environ is None else environ
    overrides: dict[str, float] = {}
    for f in fields(Thresholds):
        name = env_name(f.name)
        raw = source.get(name, '').strip()
        if raw:
            overrides[f.name] = _parse_ratio(name, raw)
            logger.debug('%s overridden: %s', name, overrides[f.name])
    return Thresholds(**overrides)
