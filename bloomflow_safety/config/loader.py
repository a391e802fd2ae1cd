"""BloomFlow Safety — Configuration loading"""
import yaml
from enum import Enum
from pathlib import Path
from dataclasses import asdict
from typing import Any, Union

from ..exceptions import ConfigError
from .settings import SafetyConfig


def _plain(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, dict):
        return {k: _plain(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_plain(v) for v in value]
    return value


def save_yaml(data: Any, path: Union[str, Path]) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        yaml.safe_dump(_plain(data), f, default_flow_style=False, sort_keys=False)


def load_yaml(path: Union[str, Path]) -> dict:
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def save_config(config: SafetyConfig, path: Union[str, Path]) -> None:
    save_yaml(asdict(config), path)


def load_config(path: Union[str, Path]) -> SafetyConfig:
    try:
        data = load_yaml(path)
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"can't read config {path}: {e}") from e
    return SafetyConfig.from_dict(data)
