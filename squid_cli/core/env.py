"""Environment variables passed to a deployment: ``--env`` flags and env files."""

import os
from io import StringIO
from typing import Dict, Iterable, Optional

from dotenv import dotenv_values

from ..exceptions import EnvParseError


def _clean(values) -> Dict[str, str]:
    # dotenv reports bare "KEY" lines as None
    return {key: value for key, value in values.items() if value is not None}


def get_env(text: str) -> Dict[str, str]:
    """Parse a single ``KEY=VALUE`` flag.

    Raises:
        EnvParseError: When the flag yields no variables.
    """
    variables = _clean(dotenv_values(stream=StringIO(text), interpolate=False))
    if not variables:
        raise EnvParseError(f'❌ An error occurred during parsing variable "{text}"')
    return variables


def parse_env_file(path: str) -> Dict[str, str]:
    """Read an env file. A missing file is treated as empty."""
    if not os.path.exists(path):
        return {}
    return _clean(dotenv_values(path, interpolate=False))


def parse_envs(env_flags: Optional[Iterable[str]], env_file_path: Optional[str]) -> Dict[str, str]:
    """Merge env flags (in order) and then the env file; later sources win."""
    envs: Dict[str, str] = {}
    for flag in env_flags or ():
        envs.update(get_env(flag))

    if env_file_path is not None:
        envs.update(parse_env_file(env_file_path))
    return envs
