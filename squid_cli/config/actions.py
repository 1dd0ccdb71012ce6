"""Actions for the config commands."""

from dataclasses import dataclass, field

from ..settings import ConfigManager


@dataclass
class ActionResult:
    """Result of an action execution."""

    ok: bool
    data: dict = field(default_factory=dict)
    error: str = ""


class GetConfigAction:
    """Get config value."""

    def execute(self, ctx: dict) -> ActionResult:
        config: ConfigManager = ctx["config"]
        key: str = ctx["key"]

        value = config.get(key)
        if value is None:
            return ActionResult(ok=False, error=f"Key '{key}' not found")
        return ActionResult(ok=True, data={"value": value})


class SetConfigAction:
    """Set config value."""

    def execute(self, ctx: dict) -> ActionResult:
        config: ConfigManager = ctx["config"]
        key: str = ctx["key"]

        config.set(key, ctx["value"])
        new_value = config.get(key)
        if new_value is None:
            return ActionResult(ok=False, error=f"Failed to set {key}")
        return ActionResult(ok=True, data={"value": new_value})


class UnsetConfigAction:
    """Unset config value."""

    def execute(self, ctx: dict) -> ActionResult:
        config: ConfigManager = ctx["config"]
        key: str = ctx["key"]

        if not config.unset(key):
            return ActionResult(ok=False, error=f"Key '{key}' not found")
        return ActionResult(ok=True)


class ShowConfigAction:
    """Show all config."""

    def execute(self, ctx: dict) -> ActionResult:
        config: ConfigManager = ctx["config"]
        return ActionResult(
            ok=True,
            data={"config_path": config.get_config_path(), "config_data": config.all()},
        )
