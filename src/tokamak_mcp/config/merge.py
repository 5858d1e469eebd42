"""Deep merge for layered configuration files.

Later layers override earlier ones. Nested sections merge key by key, so a
project file can change ``dashboard.port`` without restating the rest of the
``dashboard`` section.
"""

from __future__ import annotations

from typing import Any


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Return a new dict with ``override`` layered over ``base``.

    Rules:
    - dict values merge recursively
    - lists and scalars replace the base value
    - None in ``override`` leaves the base value in place
    """
    result = dict(base)

    for key, value in override.items():
        if value is None:
            continue
        current = result.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            result[key] = deep_merge(current, value)
        else:
            result[key] = value

    return result


def merge_configs(*layers: dict[str, Any]) -> dict[str, Any]:
    """Merge config layers in order (system, user, project, env)."""
    result: dict[str, Any] = {}
    for layer in layers:
        if layer:
            result = deep_merge(result, layer)
    return result
