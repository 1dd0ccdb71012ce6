"""Reporter classes for controlling command output."""

from contextlib import contextmanager
from typing import Generator, List, Optional, Tuple

from rich.status import Status

from ..utils import console, loading_status


class Reporter:
    """Default reporter: rich spinners for actions, themed console for text."""

    def __init__(self):
        self._status: Optional[Status] = None
        self._label: Optional[str] = None

    def action_start(self, text: str) -> None:
        """Show a spinner labelled ``text``, replacing any running one."""
        if self._status is not None:
            self._status.stop()
        self._label = text
        self._status = Status(text, console=console)
        self._status.start()

    def action_stop(self, symbol: str = "✔️") -> None:
        """Stop the running spinner and leave its label with ``symbol``."""
        if self._status is None:
            return
        self._status.stop()
        console.print(f"{self._label}... {symbol}", markup=False, highlight=False)
        self._status = None
        self._label = None

    @contextmanager
    def step(self, title: str, done: Optional[str] = None) -> Generator[None, None, None]:
        """Execute a step behind a loading indicator.

        Args:
            title: Step description (e.g., "Checking git remote")
            done: Optional completion message
        """
        with loading_status(title, done or ""):
            yield

    def preflight_block(self, items: List[Tuple[str, str]]) -> None:
        """Display a pre-flight information block.

        Args:
            items: List of (label, value) tuples
                  - If label starts with "→", format as section header
                  - If label is empty, format as continuation line
                  - Otherwise, format as "   label: value"
        """
        for label, value in items:
            if label.startswith("→"):
                console.print(f"{label} {value}")
            elif label == "":
                console.print(f"   {value}")
            else:
                console.print(f"   {label}: {value}")
        console.print()

    def summary_block(self, title: str, items: List[Tuple[str, str]], separator: str = "─" * 50) -> None:
        """Display a summary block with separators."""
        console.print(f"\n{separator}")
        console.success(title)
        for label, value in items:
            console.print(f"   {label}: {value}")
        console.print(f"{separator}\n")

    def log(self, message: str) -> None:
        """Print a line verbatim (remote log output, plain notices)."""
        console.print(message, markup=False, highlight=False, soft_wrap=True)

    def dim(self, message: str) -> None:
        """Display a dimmed/secondary message."""
        console.dim(message)


class NullReporter:
    """No-op reporter for testing or dry-run mode."""

    def action_start(self, text: str) -> None:
        pass

    def action_stop(self, symbol: str = "✔️") -> None:
        pass

    @contextmanager
    def step(self, title: str, done: Optional[str] = None) -> Generator[None, None, None]:
        yield

    def preflight_block(self, items: List[Tuple[str, str]]) -> None:
        pass

    def summary_block(self, title: str, items: List[Tuple[str, str]], separator: str = "─" * 50) -> None:
        pass

    def log(self, message: str) -> None:
        pass

    def dim(self, message: str) -> None:
        pass
