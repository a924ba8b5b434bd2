"""Task definitions for workflows."""

from dataclasses import dataclass, field
from enum import Enum


class TaskStatus(Enum):
    """Where a task is in its run."""

    PENDING = "pending"
    RUNNING = "running"
    COMPLETED = "completed"
    FAILED = "failed"


class TaskType(Enum):
    """Which action a task maps to."""

    CONNECT = "connect"
    UPGRADE = "upgrade"
    PERFORM = "perform"
    CLEANUP = "cleanup"


@dataclass
class Task:
    """
    One announce-then-act step.

    Tasks are data - they describe what to do, not how to do it.
    The runner announces the description, then runs the matching action.
    """

    id: str
    task_type: TaskType
    description: str
    # Runtime state (set by runner)
    status: TaskStatus = TaskStatus.PENDING
    error: str | None = None


@dataclass
class Workflow:
    """Named list of steps, run front to back."""

    name: str
    description: str
    tasks: list[Task] = field(default_factory=list)

    def add_task(self, task: Task) -> None:
        """Append a step to the end of the sequence."""
        self.tasks.append(task)
