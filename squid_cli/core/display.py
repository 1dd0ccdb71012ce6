"""Spinner state owned by a poll session."""

from dataclasses import dataclass, replace
from typing import Optional


@dataclass(frozen=True)
class DisplayState:
    """Which progress spinner, if any, is currently shown.

    Transitions are pure; the reporter applies the matching side effects.
    """

    current_label: Optional[str] = None

    @property
    def active(self) -> bool:
        return self.current_label is not None

    def start(self, label: str) -> "DisplayState":
        return replace(self, current_label=label)

    def stop(self) -> "DisplayState":
        return replace(self, current_label=None)
