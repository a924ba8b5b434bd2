"""Shared result type for actions."""

from dataclasses import dataclass


@dataclass
class ActionResult:
    """Result of running an action."""

    success: bool
    error: str | None = None
