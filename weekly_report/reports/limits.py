import logging
import os
from dataclasses import dataclass, fields, replace
from typing import Mapping, Optional


logger = logging.getLogger(__name__)

ENV_PREFIX = "FIELD_LIMIT_"


@dataclass(frozen=True)
class FieldLimits:
    """Maximum character counts per report field"""

    name: int = 40
    year_label: int = 10
    content: int = 20  # per day
    prev_goal: int = 25
    current_goal: int = 25
    achieved_points: int = 30
    issues: int = 30
    notes: int = 30


DEFAULT_FIELD_LIMITS = FieldLimits()


def load_field_limits(env: Optional[Mapping[str, str]] = None) -> FieldLimits:
    """Read FIELD_LIMIT_<FIELD> overrides, e.g. FIELD_LIMIT_CONTENT=40"""
    env = os.environ if env is None else env
    overrides = {}
    for limit_field in fields(FieldLimits):
        key = f"{ENV_PREFIX}{limit_field.name.upper()}"
        raw = env.get(key)
        if not raw:
            continue
        try:
            value = int(raw)
        except ValueError:
            raise ValueError(f"{key} must be an integer, got {raw!r}") from None
        if value <= 0:
            raise ValueError(f"{key} must be positive, got {value}")
        overrides[limit_field.name] = value

    if overrides:
        logger.info(f"Field limit overrides: {overrides}")
    return replace(DEFAULT_FIELD_LIMITS, **overrides)
