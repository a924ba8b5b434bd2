"""Memory task executor used during hypercognitive operations."""


class MemoryTaskExecutor:
    """
    Executes tasks using upgraded human memory.

    Hypercognition has no defined behaviour yet, so engaging it is a no-op
    that produces no output.
    """

    def __init__(self):
        self.engagements = 0

    def engage_hypercognition(self) -> None:
        """Engage hypercognition."""
        self.engagements += 1
