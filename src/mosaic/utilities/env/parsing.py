import os

TRUE_FLAG_VALUES = {"true", "1", "yes", "on"}
NONE_VALUES = {"none", "off", ""}


def _env_flag(env_var: str, *, default: bool = False) -> bool:
    """Return the boolean value of ``env_var`` respecting common true strings."""

    value = os.environ.get(env_var)
    if value is None:
        return default
    return value.strip().lower() in TRUE_FLAG_VALUES


def _env_int(env_var: str, *, default: int, minimum: int | None = None) -> int:
    """Return the integer value of ``env_var`` with optional bounds checking."""

    value = os.environ.get(env_var)
    if value is None:
        return default
    try:
        parsed = int(value)
    except ValueError as exc:
        raise ValueError(f"{env_var} must be an integer") from exc
    if minimum is not None and parsed < minimum:
        raise ValueError(f"{env_var} must be at least {minimum}")
    return parsed


def _env_optional_float(
    env_var: str,
    *,
    default: float | None,
    minimum: float | None = None,
) -> float | None:
    """Return the float value of ``env_var``; ``none`` maps to ``None``."""

    value = os.environ.get(env_var)
    if value is None:
        return default
    if value.strip().lower() in NONE_VALUES:
        return None
    try:
        parsed = float(value)
    except ValueError as exc:
        raise ValueError(f"{env_var} must be a float or 'none'") from exc
    if minimum is not None and parsed < minimum:
        raise ValueError(f"{env_var} must be at least {minimum}")
    return parsed
