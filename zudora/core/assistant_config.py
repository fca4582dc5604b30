from __future__ import annotations

from pathlib import Path
from typing import Any

_ASSISTANT_CONFIG_CACHE: dict[str, Any] | None = None
_ASSISTANT_CONFIG_PATH = Path(__file__).with_name("assistant.yaml")


def get_assistant_config() -> dict[str, Any]:
    """Load assistant tunables from zudora/core/assistant.yaml and cache them."""
    global _ASSISTANT_CONFIG_CACHE

    if _ASSISTANT_CONFIG_CACHE is not None:
        return _ASSISTANT_CONFIG_CACHE

    if not _ASSISTANT_CONFIG_PATH.exists():
        raise RuntimeError(
            f"Assistant config not found at '{_ASSISTANT_CONFIG_PATH}'. "
            "Expected file: zudora/core/assistant.yaml"
        )

    import yaml

    try:
        raw = _ASSISTANT_CONFIG_PATH.read_text(encoding="utf-8")
    except OSError as exc:
        raise RuntimeError(
            f"Failed to read assistant config '{_ASSISTANT_CONFIG_PATH}': {exc}"
        ) from exc

    try:
        parsed = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise RuntimeError(
            f"Invalid YAML in assistant config '{_ASSISTANT_CONFIG_PATH}': {exc}"
        ) from exc

    if not isinstance(parsed, dict):
        raise RuntimeError(
            f"Invalid assistant config '{_ASSISTANT_CONFIG_PATH}': expected a top-level mapping."
        )

    _ASSISTANT_CONFIG_CACHE = parsed
    return _ASSISTANT_CONFIG_CACHE


def get_assistant_value(path: str, default: Any = None) -> Any:
    """Get nested config value using dot path notation, e.g. 'matching.max_suggestions'."""
    if not path:
        return default

    current: Any = get_assistant_config()
    for key in path.split("."):
        if not isinstance(current, dict):
            return default
        if key not in current:
            return default
        current = current[key]
    return current
