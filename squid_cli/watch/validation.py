"""Validation logic for the watch and logs commands."""

from typing import Optional, Tuple

from ..exceptions import ValidationError
from ..utils import parse_name_and_version


def validate(target: str, interval: Optional[float] = None) -> Tuple[str, str]:
    """Validate arguments and return ``(squid_name, version_name)``."""
    if interval is not None and interval <= 0:
        raise ValidationError("--interval must be a positive number of seconds")
    return parse_name_and_version(target)
