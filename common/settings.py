import logging
import os
from typing import Optional

from pydantic import BaseModel, field_validator, ValidationError


class LoggingCfg(BaseModel):
    level: str = "INFO"

    @field_validator("level")
    @classmethod
    def known_level(cls, v: str) -> str:
        v = v.upper()
        if not isinstance(logging.getLevelName(v), int):
            raise ValueError(f"unknown log level {v!r}")
        return v


class PoolMappingsCfg(BaseModel):
    # None means the Optimism mappings bundled with the chains package
    file: Optional[str] = None


class Settings(BaseModel):
    # name reported by the indexing runtime, checked by chains.registry.resolve;
    # there is no default network
    network: Optional[str] = None
    logging: LoggingCfg = LoggingCfg()
    pool_mappings: PoolMappingsCfg = PoolMappingsCfg()


def load_settings(path: str = "config.yaml") -> Settings:
    import yaml
    try:
        with open(path, "r") as f:
            cfg = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise RuntimeError(f"Cannot read configuration file {path}: {e}") from e
    if not isinstance(cfg, dict):
        raise RuntimeError(f"Configuration error in {path}: expected a mapping")

    # the deploy environment may pick the network without editing the file
    env_network = os.environ.get("NETWORK_OVERRIDE")
    if env_network:
        cfg["network"] = env_network

    try:
        return Settings.model_validate(cfg)
    except ValidationError as e:
        raise RuntimeError(f"Configuration error in {path}: {e}") from e
