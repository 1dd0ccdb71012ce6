"""Thin output helpers shared by command implementations."""

from typing import Any

from .utils import console


def success(message: str) -> None:
    console.success(message)


def warning(message: str) -> None:
    console.warning(message)


def dim(message: str) -> None:
    console.dim(message)


def print(renderable: Any = "", **kwargs) -> None:  # noqa: A001
    console.print(renderable, **kwargs)
