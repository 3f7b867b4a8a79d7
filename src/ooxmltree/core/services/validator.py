from __future__ import annotations

"""
Configuration Validation Service.

Ensures that configuration dictionaries coming from disk or the command
line conform to the expected schema. Coerces types where the intent is
unambiguous and falls back to defaults otherwise, reporting every
correction as a warning.
"""

import logging
from typing import Any, Dict, List, Optional, Tuple

from ooxmltree.domain.config import get_default_config
from ooxmltree.infra.archive_codec import COMPRESSION_METHODS

logger = logging.getLogger(__name__)

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_config(
        config: Any,
        *,
        strict: bool = False,
) -> Tuple[Dict[str, Any], List[str]]:
    """
    Validate and normalize a configuration dictionary.

    Args:
        config: Raw configuration data (usually a dictionary).
        strict: If True, raise on invalid values instead of falling back.

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

    merged["compression"] = _as_choice(
        merged.get("compression"), tuple(COMPRESSION_METHODS), defaults["compression"],
        "compression", warnings, strict,
    )
    merged["compress_level"] = _as_level(merged.get("compress_level"), warnings, strict)
    merged["log_level"] = _as_choice(
        str(merged.get("log_level") or "").upper() or None, _LOG_LEVELS, defaults["log_level"],
        "log_level", warnings, strict,
    )
    merged["save_error_log"] = _as_bool(
        merged.get("save_error_log"), defaults["save_error_log"], "save_error_log", warnings, strict,
    )
    merged["accepted_suffixes"] = _normalize_suffixes(
        merged.get("accepted_suffixes"), defaults["accepted_suffixes"], warnings, strict,
    )

    return merged, warnings

# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE COERCION
# -----------------------------------------------------------------------------

def _as_choice(
        value: Any,
        choices: Tuple[str, ...],
        fallback: str,
        field: str,
        warnings: List[str],
        strict: bool,
) -> str:
    if value is None:
        return fallback
    if isinstance(value, str) and value.strip().lower() in [c.lower() for c in choices]:
        return next(c for c in choices if c.lower() == value.strip().lower())

    msg = f"Invalid field '{field}': {value!r} is not one of {', '.join(choices)}."
    if strict:
        raise ValueError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_level(value: Any, warnings: List[str], strict: bool) -> Optional[int]:
    """Accept None or an int in 0-9."""
    if value is None:
        return None
    if isinstance(value, int) and not isinstance(value, bool) and 0 <= value <= 9:
        return value

    msg = f"Invalid field 'compress_level': expected int 0-9, received {value!r}."
    if strict:
        raise ValueError(msg)
    warnings.append(f"{msg} Using codec default.")
    return None


def _as_bool(value: Any, fallback: bool, field: str, warnings: List[str], strict: bool) -> bool:
    """Coerce various input types into native booleans."""
    if isinstance(value, bool):
        return value
    if value is None:
        return fallback

    if not strict:
        if isinstance(value, (int, float)) and value in (0, 1):
            warnings.append(f"Field '{field}' converted from number {value} to bool.")
            return bool(value)
        if isinstance(value, str):
            s = value.strip().lower()
            if s in ("true", "1", "yes", "y"):
                warnings.append(f"Field '{field}' converted from '{value}' to True.")
                return True
            if s in ("false", "0", "no", "n"):
                warnings.append(f"Field '{field}' converted from '{value}' to False.")
                return False

    msg = f"Invalid field '{field}': expected bool, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback

# -----------------------------------------------------------------------------
# PRIVATE HELPERS: DOMAIN NORMALIZATION
# -----------------------------------------------------------------------------

def _normalize_suffixes(value: Any, fallback: List[str], warnings: List[str], strict: bool) -> List[str]:
    """Ensure every accepted suffix is a lowercase, dot-prefixed string."""
    if value is None:
        return list(fallback)

    if isinstance(value, str) and not strict:
        value = [x for x in value.split(",")]
        warnings.append("Field 'accepted_suffixes' converted from CSV string to list.")

    if not isinstance(value, list):
        msg = f"Invalid field 'accepted_suffixes': expected list[str], received {type(value).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using fallback.")
        return list(fallback)

    out: List[str] = []
    for item in value:
        if not isinstance(item, str):
            msg = f"Invalid suffix {item!r}: expected str."
            if strict:
                raise TypeError(msg)
            warnings.append(f"{msg} Item discarded.")
            continue
        s = item.strip().lower()
        if not s:
            continue
        if not s.startswith("."):
            if strict:
                raise ValueError(f"Invalid suffix '{item}': must start with '.'.")
            warnings.append(f"Suffix '{item}' corrected to '.{s}'.")
            s = "." + s
        out.append(s)
    return out if out else list(fallback)
