"""
Runners layer - Execution engines for workflows.

A runner walks the tasks of a workflow, announces each one through
callbacks and calls the matching action.
"""

from .base import RunnerCallbacks, RunnerResult
from .sequential import SequentialRunner, run_boost_sequence

__all__ = [
    "RunnerCallbacks",
    "RunnerResult",
    "SequentialRunner",
    "run_boost_sequence",
]
