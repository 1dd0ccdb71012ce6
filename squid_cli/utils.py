"""CLI utilities and decorators."""
import os
import re
import sys
import traceback
from contextlib import contextmanager
from functools import wraps
from typing import Tuple

import click
from rich.status import Status

from squid.sdk import SquidError
from .exceptions import SquidCliError, ValidationError
from .themed_console import ThemedConsole

console = ThemedConsole()

NAME_VERSION_FORMAT_ERROR = "Required format: <name>@<version>. Symbol @ not allowed in names"


def is_debug() -> bool:
    """True when SQUID_DEBUG asks for diagnostic output."""
    return os.getenv("SQUID_DEBUG", "").lower() in ("1", "true", "yes")


@contextmanager
def loading_status(message: str, success_message: str = ""):
    """Universal context manager to show loading status."""
    status = Status(f"[cyan]{message}...[/cyan]", console=console)
    status.start()
    try:
        yield
        if success_message:
            console.print(f"[green]✓[/green] {success_message}")
    except Exception as e:
        console.print(f"[red]✗ Failed: {e}[/red]")
        raise
    finally:
        status.stop()


def handle_errors(func):
    """Decorator to report CLI errors and turn them into exit codes."""
    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except click.ClickException:
            raise
        except SquidCliError as e:
            console.error(e.message)
            _print_traceback()
            sys.exit(e.code)
        except SquidError as e:
            console.error(f"Error: {e}")
            _print_traceback()
            sys.exit(1)
        except KeyboardInterrupt:
            console.warning("Interrupted")
            sys.exit(130)
        except Exception as e:
            console.error(f"Unexpected error: {e}")
            _print_traceback()
            sys.exit(1)
    return wrapper


def _print_traceback() -> None:
    if is_debug():
        console.dim(traceback.format_exc())


def parse_name_and_version(name_and_version: str) -> Tuple[str, str]:
    """Split ``<name>@<version>``.

    Exactly one ``@`` with text on both sides is accepted.

    Raises:
        ValidationError: On any other shape.
    """
    if not re.fullmatch(r".+@.+", name_and_version or "") or name_and_version.count("@") != 1:
        raise ValidationError(NAME_VERSION_FORMAT_ERROR)
    squid_name, version_name = name_and_version.split("@")
    return squid_name, version_name
