"""
Runtime Configuration Management

Allows runtime access and modification of the tunable well-being
settings without code changes.
"""

from typing import Any, Dict

from .parameters import EXPERIENCE_LIMIT, NEED_RANGE


# Runtime overrides (missing key = use default)
_runtime_overrides: Dict[str, Any] = {}

_DEFAULTS: Dict[str, Any] = {
    # Raise InvalidNeedsError from StateOfTheWorld instead of falling back
    "strict_needs": False,
    "default_need_value": NEED_RANGE.default,
}


def get_settings() -> Dict[str, Any]:
    """
    Get current configuration (runtime overrides + defaults).

    Limits are reported for reference but cannot be overridden.
    """
    return {
        "strict_needs": _runtime_overrides.get("strict_needs", _DEFAULTS["strict_needs"]),
        "default_need_value": _runtime_overrides.get(
            "default_need_value",
            _DEFAULTS["default_need_value"]
        ),
        "experience_limit": EXPERIENCE_LIMIT,
        "need_min": NEED_RANGE.minimum,
        "need_max": NEED_RANGE.maximum,
    }


def set_settings(settings: Dict[str, Any], validate: bool = True) -> Dict[str, Any]:
    """
    Set runtime overrides.

    Args:
        settings: Dict of setting_name -> value
        validate: If True, validate ranges; types are always checked

    Returns:
        {
            "success": bool,
            "updated": List[str],
            "errors": List[str]
        }
    """
    updated = []
    errors = []

    for name, value in settings.items():
        if name not in _DEFAULTS:
            errors.append(f"Unknown setting: {name}")
            continue

        if name == "strict_needs":
            if not isinstance(value, bool):
                errors.append(f"strict_needs must be a boolean, got {value!r}")
                continue
            _runtime_overrides[name] = value

        elif name == "default_need_value":
            if isinstance(value, bool):
                errors.append(f"default_need_value must be a number, got {value!r}")
                continue
            try:
                value = float(value)
            except (TypeError, ValueError, OverflowError):
                errors.append(f"default_need_value must be a number, got {value!r}")
                continue
            if validate and not NEED_RANGE.contains(value):
                errors.append(
                    f"default_need_value={value} out of range "
                    f"[{NEED_RANGE.minimum}, {NEED_RANGE.maximum}]"
                )
                continue
            _runtime_overrides[name] = value

        updated.append(name)

    return {
        "success": len(errors) == 0,
        "updated": updated,
        "errors": errors
    }


def get_effective_setting(name: str) -> Any:
    """Get effective setting value (runtime override or default)."""
    if name not in _DEFAULTS:
        raise ValueError(f"Unknown setting: {name}")
    return _runtime_overrides.get(name, _DEFAULTS[name])


def clear_overrides() -> None:
    """Clear all runtime overrides, revert to defaults"""
    _runtime_overrides.clear()
