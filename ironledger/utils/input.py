"""Validation of free-form user input before it enters the domain model."""

import logging
import math

logger = logging.getLogger(__name__)

# Plausible bodyweight bounds, in the same unit as lifted weights.
MIN_BODYWEIGHT = 50.0
MAX_BODYWEIGHT = 500.0


def parse_bodyweight(value: str | float | int | None) -> float | None:
    """Normalize a bodyweight entry.

    Empty, non-numeric, non-finite or out-of-range entries are treated as
    "not provided" and return None.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        trimmed = value.strip()
        if not trimmed:
            return None
        try:
            parsed = float(trimmed)
        except ValueError:
            logger.debug(f"Ignoring non-numeric bodyweight {value!r}")
            return None
    else:
        parsed = float(value)

    if not math.isfinite(parsed):
        return None
    if not MIN_BODYWEIGHT <= parsed <= MAX_BODYWEIGHT:
        logger.debug(f"Ignoring out-of-range bodyweight {parsed}")
        return None
    return parsed
