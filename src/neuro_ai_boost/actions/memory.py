"""Memory actions - connect, upgrade and detox.

None of these touch a real device; they hold the place of each step
in the sequence and always succeed.
"""

from .base import ActionResult


def connect_to_human_memory() -> ActionResult:
    """Connect to the human memory connector using neural lattice synchronization."""
    return ActionResult(success=True)


def upgrade_human_memory() -> ActionResult:
    """Upgrade human memory using pulsar induction."""
    return ActionResult(success=True)


def cleanup() -> ActionResult:
    """Perform the neural detox."""
    return ActionResult(success=True)
