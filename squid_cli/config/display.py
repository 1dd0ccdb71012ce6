"""Display formatting for config show command."""

SECRET_KEYS = {"key", "api_key"}


def _mask(value: str) -> str:
    return value[:4] + "..." + value[-4:] if len(value) > 12 else "***"


def format_config(config_data: dict) -> str:
    """Render config sections as ``section.key = value`` lines."""
    if not config_data:
        return "Configuration is empty"

    lines = []
    for section, values in config_data.items():
        for key, value in values.items():
            display_value = _mask(value) if key in SECRET_KEYS and value else value
            lines.append(f"{section}.{key} = {display_value}")
    return "\n".join(lines)
