"""Base action class for the pipeline."""

from abc import ABC, abstractmethod
from typing import Optional

from ..context import DeployContext


class BaseAction(ABC):
    """Base class for all pipeline actions.

    Actions are the building blocks of the command pipeline.
    Each action:
    1. Checks if it should run (should_run)
    2. Executes its logic (execute)
    3. Updates the context with results
    """

    def should_run(self, ctx: DeployContext) -> bool:
        """Determine if this action should execute.

        Override this to conditionally skip actions based on context state.
        """
        return True

    @abstractmethod
    def execute(self, ctx: DeployContext) -> Optional[bool]:
        """Execute the action's main logic.

        Args:
            ctx: The pipeline context (read and modify as needed)

        Returns:
            - None or True: Continue pipeline
            - False: Stop pipeline execution
        """
