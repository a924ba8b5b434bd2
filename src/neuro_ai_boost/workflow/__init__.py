"""
Workflow layer - Task and workflow definitions.

Workflows are DATA STRUCTURES that define what to do.
They do NOT execute anything - that's the runner's job.
"""

from .boost import BoostWorkflow, create_boost_workflow
from .tasks import Task, TaskStatus, TaskType, Workflow

__all__ = [
    "Task",
    "TaskStatus",
    "TaskType",
    "Workflow",
    "BoostWorkflow",
    "create_boost_workflow",
]
