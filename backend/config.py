# backend/config.py

import copy
import logging
import os
from typing import Any, Dict

import yaml

DEFAULT_CONFIG_PATH = os.path.join(os.path.dirname(__file__), "config.yaml")


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_config(path: str = None) -> Dict[str, Any]:
    """
    Load the packaged defaults, then deep-merge the YAML file at `path` over them.
    """
    with open(DEFAULT_CONFIG_PATH, "r") as f:
        config = yaml.safe_load(f) or {}

    if path is not None:
        with open(path, "r") as f:
            config = _merge(config, yaml.safe_load(f) or {})

    return config


def get_preset(config: Dict[str, Any], name: str) -> Dict[str, int]:
    presets = config.get("presets", {})
    if name not in presets:
        raise KeyError(f"Unknown preset {name!r}. Available presets: {sorted(presets)}")
    return dict(presets[name])


def configure_logging(config: Dict[str, Any]) -> None:
    settings = config.get("logging", {})
    logging.basicConfig(
        level=getattr(logging, str(settings.get("level", "INFO")).upper(), logging.INFO),
        format=settings.get("format", "%(asctime)s %(levelname)s %(name)s: %(message)s"),
    )
