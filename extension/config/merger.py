"""Layered merge of configuration sources."""


def deep_merge(base: dict, *layers: dict) -> dict:
    """
    Merge configuration layers onto a base. Later layers win on conflicts.

    Nested mappings are merged key by key; any other value replaces the
    one below it. None of the inputs is modified.

    Args:
        base: Lowest-priority layer (built-in defaults)
        *layers: Layers in increasing priority (file, environment)

    Returns:
        New merged dictionary

    Example:
        defaults = {"logging": {"level": "INFO", "format": "standard"}}
        file_layer = {"logging": {"format": "json"}}
        env_layer = {"logging": {"level": "DEBUG"}}
        deep_merge(defaults, file_layer, env_layer)
        # {"logging": {"level": "DEBUG", "format": "json"}}
    """
    result = dict(base)

    for layer in layers:
        for key, value in layer.items():
            current = result.get(key)
            if isinstance(current, dict) and isinstance(value, dict):
                result[key] = deep_merge(current, value)
            elif isinstance(value, dict):
                result[key] = deep_merge({}, value)
            else:
                result[key] = value

    return result
