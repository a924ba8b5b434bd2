"""Result and callback types shared by runners and the CLI."""

from collections.abc import Callable
from dataclasses import dataclass, field


@dataclass
class RunnerResult:
    """Summary of one pass through a workflow."""

    success: bool
    workflow_name: str
    tasks_completed: int = 0
    tasks_failed: int = 0
    errors: list[str] = field(default_factory=list)

    @property
    def tasks_total(self) -> int:
        return self.tasks_completed + self.tasks_failed


@dataclass
class RunnerCallbacks:
    """
    Callbacks for runner progress reporting.

    Allows CLI to print the announcements without coupling runner to Rich/UI.
    All callbacks are optional - if None, no callback is made.
    """

    # Workflow lifecycle
    on_workflow_start: Callable[[str, str], None] | None = None  # name, opening banner
    on_workflow_complete: Callable[[RunnerResult, str], None] | None = None  # result, closing banner

    # Task lifecycle
    on_task_start: Callable[[str, str], None] | None = None  # task_id, description
    on_task_complete: Callable[[str, bool], None] | None = None  # task_id, success
