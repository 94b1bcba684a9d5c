"""String interpolation for translated messages."""

import re
from typing import Mapping, Optional, Union

PLACEHOLDER_PATTERN = re.compile(r"\{(\w+)\}")

# Above this magnitude integral floats keep their exponent form
_INTEGRAL_FLOAT_LIMIT = 1e21


def _format_value(value: Union[str, int, float]) -> str:
    # 1.0 renders as "1", the way numbers read in messages
    if (
        isinstance(value, float)
        and value.is_integer()
        and abs(value) < _INTEGRAL_FLOAT_LIMIT
    ):
        return str(int(value))
    return str(value)


def interpolate(
    template: str,
    params: Optional[Mapping[str, Union[str, int, float]]] = None,
) -> str:
    """Interpolate parameters into a template string.

    Every ``{name}`` placeholder is replaced with the string form of
    ``params[name]``; floats with no fractional part render without ``.0``.
    Placeholders without a parameter are kept verbatim and replacement values
    are never scanned again.

    Args:
        template: Template string with {key} placeholders.
        params: Values to interpolate.

    Returns:
        Interpolated string.

    Example:
        interpolate("{count}件", {"count": 100})
        # "100件"

        interpolate("{min}〜{max}", {"min": 1, "max": 10.0})
        # "1〜10"
    """
    params = params or {}

    def _replace(match: "re.Match[str]") -> str:
        key = match.group(1)
        if key in params:
            return _format_value(params[key])
        return match.group(0)

    return PLACEHOLDER_PATTERN.sub(_replace, template)
