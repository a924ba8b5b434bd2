"""
Boost workflow factory - Creates the cerebrospinal synchronization sequence.

Steps, in order:
1. Connect to human memory (neural lattice synchronization)
2. Upgrade human memory (pulsar induction)
3. Perform tasks (hypercognitive operations)
4. Cleanup (neural detox)
"""

from dataclasses import dataclass

from ..constants import (
    CLEANUP_ANNOUNCEMENT,
    CLOSING_BANNER,
    CONNECT_ANNOUNCEMENT,
    OPENING_BANNER,
    PERFORM_ANNOUNCEMENT,
    UPGRADE_ANNOUNCEMENT,
)
from .tasks import Task, TaskType, Workflow


@dataclass
class BoostWorkflow(Workflow):
    """
    The boost workflow with its banners.

    Extends base Workflow with the lines printed before the first
    and after the last task.
    """

    opening: str = OPENING_BANNER
    closing: str = CLOSING_BANNER


def create_boost_workflow() -> BoostWorkflow:
    """
    Create the boost workflow.

    This is a FACTORY function that creates the workflow data structure.
    Every call returns fresh tasks, so a workflow is consumed by one run.

    Returns:
        BoostWorkflow ready for execution by a runner
    """
    workflow = BoostWorkflow(
        name="boost",
        description="Cerebrospinal synchronization sequence",
    )

    workflow.add_task(Task(id="connect", task_type=TaskType.CONNECT, description=CONNECT_ANNOUNCEMENT))
    workflow.add_task(Task(id="upgrade", task_type=TaskType.UPGRADE, description=UPGRADE_ANNOUNCEMENT))
    workflow.add_task(Task(id="perform", task_type=TaskType.PERFORM, description=PERFORM_ANNOUNCEMENT))
    workflow.add_task(Task(id="cleanup", task_type=TaskType.CLEANUP, description=CLEANUP_ANNOUNCEMENT))

    return workflow
