"""Layered commitx settings.

Layers, later wins: bundled defaults < ~/.config/commitx/config.yaml <
.commitx/config.yaml (relative to the working directory). Mappings merge
key by key; lists and scalars replace.

Known keys are checked after merging. A value of the wrong type falls back
to the bundled default and leaves a warning in `get_config_warnings()`, as
does an override file that is not valid YAML. A bad config file never stops
a commit.
"""

import copy
import importlib.resources
from pathlib import Path
from typing import Any, Callable, Optional

import yaml

GLOBAL_CONFIG = Path.home() / ".config" / "commitx" / "config.yaml"
PROJECT_CONFIG = Path(".commitx") / "config.yaml"

_config: Optional[dict] = None
_loaded_sources: list[str] = []
_warnings: list[str] = []


def _positive_int(value: Any) -> Optional[int]:
    if isinstance(value, int) and not isinstance(value, bool) and value >= 1:
        return value
    return None


def _flag(value: Any) -> Optional[bool]:
    return value if isinstance(value, bool) else None


def _branch_names(value: Any) -> Optional[list[str]]:
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, list):
        return None
    names = [v.strip() for v in value if isinstance(v, str) and v.strip()]
    return names or None


# Dotted key -> (converter returning None when invalid, expectation for warnings)
SETTINGS: dict[str, tuple[Callable[[Any], Any], str]] = {
    "files.columns": (_positive_int, "a positive integer"),
    "terminal.clear": (_flag, "true or false"),
    "repository.branches": (_branch_names, "a list of branch names"),
    "debug": (_flag, "true or false"),
}


def deep_merge(base: dict, override: dict) -> dict:
    """Merge override into a copy of base. Dicts merge, lists/scalars replace."""
    merged = base.copy()
    for key, val in override.items():
        if isinstance(merged.get(key), dict) and isinstance(val, dict):
            merged[key] = deep_merge(merged[key], val)
        else:
            merged[key] = val
    return merged


def lookup(config: dict, key: str) -> Any:
    """Dotted lookup, None when any part is missing."""
    node: Any = config
    for part in key.split("."):
        if not isinstance(node, dict) or part not in node:
            return None
        node = node[part]
    return node


def _assign(config: dict, key: str, value: Any) -> None:
    *parents, leaf = key.split(".")
    node = config
    for part in parents:
        if not isinstance(node.get(part), dict):
            node[part] = {}
        node = node[part]
    node[leaf] = value


def read_layer(path: Path) -> Optional[dict]:
    """One override file as a mapping; None when absent, empty or unusable."""
    if not path.exists():
        return None
    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        _warnings.append(f"Skipping {path}: {e}")
        return None
    if data is None:
        return None
    if not isinstance(data, dict):
        _warnings.append(f"Skipping {path}: expected a mapping at the top level")
        return None
    return data


def _load_defaults() -> dict:
    """Bundled defaults shipped as package data."""
    content = (importlib.resources.files("commitx") / "defaults" / "config.yaml").read_text()
    return yaml.safe_load(content)


def normalize_config(config: dict, defaults: dict) -> dict:
    """Return config with every known key converted to its type.

    Invalid values are replaced by the bundled default and reported in the
    warnings list.
    """
    result = copy.deepcopy(config)
    for key, (convert, expected) in SETTINGS.items():
        raw = lookup(config, key)
        value = convert(raw)
        if value is None:
            if raw is not None:
                _warnings.append(f"Ignoring {key}={raw!r}: expected {expected}")
            value = convert(lookup(defaults, key))
        _assign(result, key, value)
    return result


def load_config() -> dict:
    """Read every layer, merge, then normalize known keys."""
    global _loaded_sources, _warnings
    _loaded_sources = ["defaults"]
    _warnings = []

    defaults = _load_defaults()
    result = defaults
    for path in (GLOBAL_CONFIG, PROJECT_CONFIG):
        overrides = read_layer(path)
        if overrides:
            result = deep_merge(result, overrides)
            _loaded_sources.append(str(path))

    return normalize_config(result, defaults)


def get_config() -> dict:
    """Get cached config (loads on first access)."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def get_config_loaded_sources() -> list[str]:
    """Config sources that contributed to the merged config (for logging)."""
    return _loaded_sources


def get_config_warnings() -> list[str]:
    """Problems found while loading: unreadable layers and rejected values."""
    return _warnings


def get_setting(key: str, default: Any = None) -> Any:
    """Dotted lookup into the merged config, e.g. get_setting("files.columns")."""
    value = lookup(get_config(), key)
    return default if value is None else value
