"""Config command group."""

from .command import config_command

__all__ = ["config_command"]
