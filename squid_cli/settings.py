"""Configuration manager backed by ``~/.squid/config.ini``."""

import configparser
import os
from pathlib import Path
from typing import Dict, Optional, Tuple

from squid.sdk.config import DEFAULT_BASE_URL

DEFAULT_POLL_INTERVAL = 3.0
DEFAULT_DEPLOYMENT_URL_TEMPLATE = "https://{org}.squids.live/{name}/v/{version}/graphql"


class ConfigManager:
    """Read and write dotted ``section.key`` settings."""

    def __init__(self):
        self.config_dir = Path.home() / ".squid"
        self.config_dir.mkdir(parents=True, exist_ok=True)
        self.config_file = self.config_dir / "config.ini"
        self._parser = configparser.ConfigParser(interpolation=None)
        if self.config_file.exists():
            self._parser.read(self.config_file)

    @staticmethod
    def _split(key: str) -> Tuple[str, str]:
        section, _, option = key.partition(".")
        if not section or not option:
            raise ValueError(f"Config keys look like 'section.key', got '{key}'")
        return section, option

    def _save(self) -> None:
        with open(self.config_file, "w") as f:
            self._parser.write(f)

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        section, option = self._split(key)
        return self._parser.get(section, option, fallback=default)

    def set(self, key: str, value: str) -> None:
        section, option = self._split(key)
        if not self._parser.has_section(section):
            self._parser.add_section(section)
        self._parser.set(section, option, str(value))
        self._save()

    def unset(self, key: str) -> bool:
        """Remove a key. Returns False when it was not set."""
        section, option = self._split(key)
        if not self._parser.has_option(section, option):
            return False
        self._parser.remove_option(section, option)
        if not self._parser.options(section):
            self._parser.remove_section(section)
        self._save()
        return True

    def all(self) -> Dict[str, Dict[str, str]]:
        return {section: dict(self._parser.items(section)) for section in self._parser.sections()}

    def get_config_path(self) -> Path:
        return self.config_file

    @property
    def api_url(self) -> str:
        return os.getenv("SQUID_API_URL") or self.get("api.url", DEFAULT_BASE_URL)

    @property
    def api_key(self) -> Optional[str]:
        return os.getenv("SQUID_API_KEY") or self.get("api.key")

    @property
    def poll_interval(self) -> float:
        """Seconds between status checks; non-positive values fall back to the default."""
        raw = os.getenv("SQUID_POLL_INTERVAL") or self.get("deploy.poll_interval")
        if not raw:
            return DEFAULT_POLL_INTERVAL
        try:
            value = float(raw)
        except ValueError:
            return DEFAULT_POLL_INTERVAL
        return value if value > 0 else DEFAULT_POLL_INTERVAL

    @property
    def deployment_url_template(self) -> str:
        return self.get("deploy.url_template", DEFAULT_DEPLOYMENT_URL_TEMPLATE)

    def deployment_url(self, org_code: str, squid_name: str, version_name: str) -> str:
        """Public URL a deployed squid version is served at."""
        return self.deployment_url_template.format(org=org_code, name=squid_name, version=version_name)
