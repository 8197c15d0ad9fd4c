"""
chains.serialization

Convert SubgraphConfig records to and from plain dicts and YAML text.
"""
from typing import Any, Dict

import yaml
from pydantic import ValidationError

from chains.models import SubgraphConfig


def config_to_dict(cfg: SubgraphConfig) -> Dict[str, Any]:
    # json mode renders Decimal as str and tuples as lists
    return cfg.model_dump(mode="json")


def config_from_dict(data: Dict[str, Any]) -> SubgraphConfig:
    return SubgraphConfig.model_validate(data)


def dump_config(cfg: SubgraphConfig) -> str:
    return yaml.safe_dump(config_to_dict(cfg), sort_keys=False)


def load_config(text: str) -> SubgraphConfig:
    try:
        data = yaml.safe_load(text) or {}
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid configuration document: {e}") from e
    if not isinstance(data, dict):
        raise ValueError("configuration document must be a mapping")
    try:
        return config_from_dict(data)
    except ValidationError as e:
        raise ValueError(f"Invalid configuration document: {e}") from e
