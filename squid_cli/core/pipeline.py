"""Pipeline orchestrator for executing actions in sequence."""

from typing import List

from .context import DeployContext
from .actions.base import BaseAction


def run_preflight_phase(ctx: DeployContext, actions: List[BaseAction]) -> bool:
    """Execute pre-flight actions to gather information.

    Args:
        ctx: The context object (will be populated with gathered info)
        actions: List of pre-flight actions to execute

    Returns:
        True if all actions succeeded, False if any action failed
    """
    for action in actions:
        if not action.should_run(ctx):
            continue

        result = action.execute(ctx)
        if result is False:
            return False

    return True


def run_pipeline(ctx: DeployContext, actions: List[BaseAction]) -> None:
    """Execute a sequence of actions with the given context.

    Stops early if an action returns False. Exceptions propagate to the
    command, which reports them.
    """
    for action in actions:
        if not action.should_run(ctx):
            continue

        if action.execute(ctx) is False:
            return
