"""Perform actions - hypercognitive operations on upgraded memory."""

from ..executor import MemoryTaskExecutor
from .base import ActionResult


def perform_tasks(executor: MemoryTaskExecutor | None = None) -> ActionResult:
    """
    Perform tasks using upgraded memory.

    Args:
        executor: Executor to engage (a fresh MemoryTaskExecutor if None)

    Returns:
        ActionResult once hypercognition has been engaged
    """
    executor = executor or MemoryTaskExecutor()
    executor.engage_hypercognition()
    return ActionResult(success=True)
