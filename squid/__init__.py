"""Squid deployment SDK."""

from .sdk import *  # noqa: F401,F403
from .sdk import __all__  # noqa: F401
