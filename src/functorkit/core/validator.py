from __future__ import annotations

"""
Configuration Validation Service.

Ensures the configuration dictionary conforms to the expected schema before
the CLI acts on it. Handles type coercion and default value injection.
"""

import logging
from typing import Any, Dict, List, Optional, Tuple

from functorkit.domain.config import OUTPUT_FORMATS, get_default_config
from functorkit.infra.logging.config import _LEVEL_MAP

logger = logging.getLogger(__name__)

# Upper bound for generated sample depth; deeper random trees grow exponentially
MAX_SAMPLE_DEPTH = 16


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_config(
        config: Any,
        *,
        strict: bool = False,
) -> Tuple[Dict[str, Any], List[str]]:
    """
    Validate and normalize the provided configuration dictionary.

    Args:
        config: Raw configuration data (usually a dictionary).
        strict: If True, raises exceptions on invalid values instead of coercing.

    Returns:
        Tuple[Dict[str, Any], List[str]]: The normalized configuration and
                                          a list of warnings.
    """
    warnings: List[str] = []
    defaults = get_default_config()

    if not isinstance(config, dict):
        msg = f"Invalid config type: expected dict, received {type(config).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using defaults.")
        logger.warning(msg)
        return defaults, warnings

    merged: Dict[str, Any] = dict(defaults)
    merged.update(config)

    unknown = sorted(set(config) - set(defaults))
    for key in unknown:
        warnings.append(f"Unknown field '{key}' ignored.")
        merged.pop(key)

    merged["log_level"] = _as_level(merged.get("log_level"), defaults["log_level"], warnings, strict)
    merged["log_file"] = _as_optional_str(merged.get("log_file"), "log_file", warnings, strict)
    merged["law_samples"] = _as_int(
        merged.get("law_samples"), defaults["law_samples"], "law_samples", 1, None, warnings, strict
    )
    merged["max_depth"] = _as_int(
        merged.get("max_depth"), defaults["max_depth"], "max_depth", 1, MAX_SAMPLE_DEPTH, warnings, strict
    )
    merged["seed"] = _as_optional_int(merged.get("seed"), "seed", warnings, strict)
    merged["output_format"] = _as_choice(
        merged.get("output_format"), defaults["output_format"], "output_format",
        OUTPUT_FORMATS, warnings, strict
    )

    return merged, warnings


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE COERCION
# -----------------------------------------------------------------------------

def _as_level(value: Any, fallback: str, warnings: List[str], strict: bool) -> str:
    """Normalize a logging level name."""
    if value is None:
        return fallback
    if isinstance(value, str) and value.strip().upper() in _LEVEL_MAP:
        return value.strip().upper()

    msg = f"Invalid field 'log_level': unsupported value {value!r}."
    if strict:
        raise ValueError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_optional_str(value: Any, field: str, warnings: List[str], strict: bool) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, str):
        v = value.strip()
        return v or None

    msg = f"Invalid field '{field}': expected str, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Ignored.")
    return None


def _as_int(
        value: Any,
        fallback: int,
        field: str,
        minimum: int,
        maximum: Optional[int],
        warnings: List[str],
        strict: bool,
) -> int:
    """Coerce to int and clamp into [minimum, maximum]."""
    if value is None:
        return fallback

    number: Optional[int] = None
    if isinstance(value, int) and not isinstance(value, bool):
        number = value
    elif not strict and isinstance(value, str):
        number = _parse_int(value)
        if number is not None:
            warnings.append(f"Field '{field}' converted from '{value}' to {number}.")

    if number is None:
        msg = f"Invalid field '{field}': expected int, received {type(value).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using fallback.")
        return fallback

    if number < minimum or (maximum is not None and number > maximum):
        bound = f"[{minimum}, {maximum}]" if maximum is not None else f">= {minimum}"
        msg = f"Field '{field}' out of range: {number} (allowed {bound})."
        if strict:
            raise ValueError(msg)
        clamped = max(minimum, number if maximum is None else min(number, maximum))
        warnings.append(f"{msg} Clamped to {clamped}.")
        return clamped

    return number


def _as_optional_int(value: Any, field: str, warnings: List[str], strict: bool) -> Optional[int]:
    if value is None:
        return None
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if not strict and isinstance(value, str) and _parse_int(value) is not None:
        return _parse_int(value)

    msg = f"Invalid field '{field}': expected int or null, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Ignored.")
    return None


def _as_choice(
        value: Any,
        fallback: str,
        field: str,
        choices: Tuple[str, ...],
        warnings: List[str],
        strict: bool,
) -> str:
    if value is None:
        return fallback
    if isinstance(value, str) and value.strip().lower() in choices:
        return value.strip().lower()

    msg = f"Invalid field '{field}': expected one of {', '.join(choices)}, received {value!r}."
    if strict:
        raise ValueError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _parse_int(text: str) -> Optional[int]:
    try:
        return int(text.strip())
    except ValueError:
        return None
