"""Persistent JSON config and the immutable navigation settings.

Stores the persistent-view options and the listing hidden-file preference.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, replace
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "singledir"
CONFIG_FILENAME = "config.json"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
CONFIG_PATH = DEFAULT_CONFIG_PATH

DEFAULT_MAGIC_BUFFER_NAME = "*dired*"


@dataclass(frozen=True)
class ReuseConfig:
    """Navigation settings injected into the controller and the home manager."""

    use_magic_buffer: bool = True
    magic_buffer_name: str = DEFAULT_MAGIC_BUFFER_NAME

    def with_overrides(
        self,
        *,
        use_magic_buffer: bool | None = None,
        magic_buffer_name: str | None = None,
    ) -> ReuseConfig:
        """Return a copy with any non-``None`` override applied."""
        changes: dict[str, object] = {}
        if use_magic_buffer is not None:
            changes["use_magic_buffer"] = bool(use_magic_buffer)
        if magic_buffer_name is not None:
            name = _clean_name(magic_buffer_name)
            if name is None:
                raise ValueError("magic buffer name must not be empty")
            changes["magic_buffer_name"] = name
        return replace(self, **changes)


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Filesystem errors are ignored so an unwritable config never aborts a
    navigation session.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except OSError:
        pass


def _clean_name(value: object) -> str | None:
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def load_reuse_config() -> ReuseConfig:
    """Build a ``ReuseConfig`` from persisted values.

    ``use_magic_buffer`` only accepts real booleans and ``magic_buffer_name``
    only non-blank strings; anything else keeps the default.
    """
    data = load_config()
    defaults = ReuseConfig()
    use_magic = data.get("use_magic_buffer")
    name = _clean_name(data.get("magic_buffer_name"))
    return ReuseConfig(
        use_magic_buffer=use_magic if isinstance(use_magic, bool) else defaults.use_magic_buffer,
        magic_buffer_name=name if name is not None else defaults.magic_buffer_name,
    )


def save_reuse_config(reuse_config: ReuseConfig) -> None:
    """Persist both navigation settings, keeping unrelated keys."""
    config = load_config()
    config["use_magic_buffer"] = bool(reuse_config.use_magic_buffer)
    config["magic_buffer_name"] = reuse_config.magic_buffer_name
    save_config(config)


def load_show_hidden() -> bool:
    """Return persisted hidden-file visibility preference.

    Only explicit boolean values are accepted; any other type falls back to
    ``False``.
    """
    value = load_config().get("show_hidden")
    return bool(value) if isinstance(value, bool) else False


def save_show_hidden(show_hidden: bool) -> None:
    """Persist hidden-file visibility preference as a boolean."""
    config = load_config()
    config["show_hidden"] = bool(show_hidden)
    save_config(config)


__all__ = [
    "APP_NAME",
    "CONFIG_PATH",
    "DEFAULT_MAGIC_BUFFER_NAME",
    "ReuseConfig",
    "load_config",
    "save_config",
    "load_reuse_config",
    "save_reuse_config",
    "load_show_hidden",
    "save_show_hidden",
]
