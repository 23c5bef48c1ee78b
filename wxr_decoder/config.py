"""
Configuration for the WXR decoder.

Configuration is a plain dictionary, supplied directly or read from a JSON
file.  Missing keys are filled with defaults so callers can pass a partial
dictionary (or nothing at all)::

    {
        "namespaces": {
            "wp": "http://wordpress.org/export/1.1/",
            "excerpt": "http://wordpress.org/export/1.1/excerpt/"
        },
        "parser": {"huge_tree": false}
    }

The namespace URIs are only used when an export does not declare the
prefix itself.  ``parser.huge_tree`` lifts lxml's size limits for very large
exports.  It is only ever switched on by the caller.
"""

from __future__ import annotations

import json
import os
from typing import Any, Dict, Optional

from .utils.errors import ConfigError

DEFAULT_WP_NAMESPACE = "http://wordpress.org/export/1.1/"
DEFAULT_EXCERPT_NAMESPACE = "http://wordpress.org/export/1.1/excerpt/"

_SECTIONS = ("namespaces", "parser")


def _check_values(config: Dict[str, Any]) -> None:
    for prefix, uri in config["namespaces"].items():
        if not isinstance(uri, str):
            raise ConfigError(f"'namespaces.{prefix}' must be a string, got {type(uri).__name__}")
    if not isinstance(config["parser"]["huge_tree"], bool):
        raise ConfigError("'parser.huge_tree' must be true or false")


def load_config(config: Optional[Dict[str, Any]] = None, *, config_file: Optional[str] = None) -> Dict[str, Any]:
    """Return a configuration dictionary with every key the decoder reads.

    ``config_file`` wins over ``config`` when the file exists.  The returned
    dictionary is a new object; the caller's dictionary is not modified.

    Raises:
        ConfigError: If the configuration or one of its sections has the
            wrong type.
    """
    if config_file and os.path.exists(config_file):
        with open(config_file, "r", encoding="utf-8") as f:
            config = json.load(f)
    elif config is None:
        config = {}

    if not isinstance(config, dict):
        raise ConfigError(f"configuration must be an object, got {type(config).__name__}")
    for section in _SECTIONS:
        if section in config and not isinstance(config[section], dict):
            raise ConfigError(f"'{section}' must be an object, got {type(config[section]).__name__}")

    config = {key: dict(value) if isinstance(value, dict) else value for key, value in config.items()}

    config.setdefault("namespaces", {})
    config["namespaces"].setdefault("wp", DEFAULT_WP_NAMESPACE)
    config["namespaces"].setdefault("excerpt", DEFAULT_EXCERPT_NAMESPACE)

    config.setdefault("parser", {})
    config["parser"].setdefault("huge_tree", False)

    _check_values(config)
    return config
