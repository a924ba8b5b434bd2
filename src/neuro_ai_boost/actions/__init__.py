"""
Actions layer - Pure Python functions for each step of the boost sequence.

All functions are CLI-agnostic and return typed results.
These can be called directly from Python code without going through CLI.
"""

from .base import ActionResult
from .memory import cleanup, connect_to_human_memory, upgrade_human_memory
from .perform import perform_tasks

__all__ = [
    "ActionResult",
    "connect_to_human_memory",
    "upgrade_human_memory",
    "perform_tasks",
    "cleanup",
]
