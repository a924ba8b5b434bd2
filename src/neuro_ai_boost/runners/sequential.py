"""Sequential runner - Executes workflow tasks one at a time."""

import logging

from ..actions import ActionResult, cleanup, connect_to_human_memory, perform_tasks, upgrade_human_memory
from ..executor import MemoryTaskExecutor
from ..workflow import BoostWorkflow, Task, TaskStatus, TaskType, create_boost_workflow
from .base import RunnerCallbacks, RunnerResult

logger = logging.getLogger(__name__)


class SequentialRunner:
    """
    Sequential workflow runner.

    Executes tasks one at a time in declared order.
    Every task is announced and attempted, whatever happened to the ones before it.
    Uses callbacks for progress reporting without coupling to UI.
    """

    def __init__(self, executor: MemoryTaskExecutor | None = None):
        """
        Initialize the runner.

        Args:
            executor: Task executor engaged by the perform step
        """
        self.executor = executor or MemoryTaskExecutor()

    def run(self, workflow: BoostWorkflow, callbacks: RunnerCallbacks | None = None) -> RunnerResult:
        """
        Execute a boost workflow.

        Args:
            workflow: The BoostWorkflow to execute
            callbacks: Optional callbacks for progress reporting

        Returns:
            RunnerResult with execution summary
        """
        cb = callbacks or RunnerCallbacks()

        logger.debug(f"Starting workflow {workflow.name} with {len(workflow.tasks)} tasks")
        if cb.on_workflow_start:
            cb.on_workflow_start(workflow.name, workflow.opening)

        result = RunnerResult(
            success=True,
            workflow_name=workflow.name,
        )

        for task in workflow.tasks:
            # Announcements stay outside the guard below so output errors propagate
            if cb.on_task_start:
                cb.on_task_start(task.id, task.description)

            task.status = TaskStatus.RUNNING

            try:
                action_result = self._execute_task(task)
            except Exception as e:
                action_result = ActionResult(success=False, error=str(e))

            if action_result.success:
                task.status = TaskStatus.COMPLETED
                result.tasks_completed += 1
                logger.debug(f"Task {task.id} completed")
            else:
                task.status = TaskStatus.FAILED
                task.error = action_result.error or "Unknown error"
                result.tasks_failed += 1
                result.errors.append(f"Task {task.id}: {task.error}")
                result.success = False
                logger.error(f"Task {task.id} failed: {task.error}")

            if cb.on_task_complete:
                cb.on_task_complete(task.id, action_result.success)

        logger.debug(f"Finished workflow {workflow.name}: {result.tasks_completed}/{result.tasks_total} completed")
        if cb.on_workflow_complete:
            cb.on_workflow_complete(result, workflow.closing)

        return result

    def _execute_task(self, task: Task) -> ActionResult:
        """Execute a single task based on its type."""
        if task.task_type == TaskType.CONNECT:
            return connect_to_human_memory()

        elif task.task_type == TaskType.UPGRADE:
            return upgrade_human_memory()

        elif task.task_type == TaskType.PERFORM:
            return perform_tasks(self.executor)

        elif task.task_type == TaskType.CLEANUP:
            return cleanup()

        return ActionResult(success=False, error=f"Unsupported task type: {task.task_type}")


def run_boost_sequence(callbacks: RunnerCallbacks | None = None) -> RunnerResult:
    """Build a fresh boost workflow and run it sequentially."""
    return SequentialRunner().run(create_boost_workflow(), callbacks)
