"""SDK configuration loading."""

import configparser
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

DEFAULT_BASE_URL = "https://cloud.subsquid.io/api"
DEFAULT_TIMEOUT = 30


def config_file_path() -> Path:
    """Location of the shared CLI/SDK config file."""
    return Path.home() / ".squid" / "config.ini"


@dataclass
class Config:
    """Connection settings for the deployment API."""

    api_key: Optional[str] = None
    base_url: str = DEFAULT_BASE_URL
    timeout: int = DEFAULT_TIMEOUT

    @classmethod
    def load(cls) -> "Config":
        """Load settings from the environment, then ``~/.squid/config.ini``.

        Environment variables ``SQUID_API_KEY`` and ``SQUID_API_URL`` take
        precedence over the ``[api]`` section of the config file.
        """
        parser = configparser.ConfigParser(interpolation=None)
        path = config_file_path()
        if path.exists():
            parser.read(path)

        api_key = os.getenv("SQUID_API_KEY") or parser.get("api", "key", fallback=None)
        base_url = os.getenv("SQUID_API_URL") or parser.get("api", "url", fallback=DEFAULT_BASE_URL)
        return cls(api_key=api_key, base_url=base_url)
