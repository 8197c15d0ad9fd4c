"""
chains.pool_mappings

Seed pool mappings maintained outside the registry and shipped as YAML.
"""
import logging
from pathlib import Path
from typing import Optional, Tuple

import yaml

logger = logging.getLogger(__name__)

OPTIMISM_POOL_MAPPINGS_FILE = Path(__file__).with_name("data") / "optimism_pool_mappings.yaml"

PoolMappings = Tuple[Tuple[str, ...], ...]


class PoolMappingError(Exception):
    pass


def load_pool_mappings(path: Optional[str] = None) -> PoolMappings:
    """
    Read a YAML list of address lists and return it as a tuple of tuples of
    lowercase strings. Addresses are checked by the record that receives them.
    """
    p = Path(path) if path else OPTIMISM_POOL_MAPPINGS_FILE
    try:
        with open(p, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise PoolMappingError(f"Failed to read pool mappings from {p}: {e}") from e

    if raw is None:
        raw = []
    if not isinstance(raw, list):
        raise PoolMappingError(f"Pool mappings in {p} must be a list")

    out = []
    for i, entry in enumerate(raw):
        if not isinstance(entry, list) or not all(isinstance(a, str) for a in entry):
            raise PoolMappingError(f"Pool mapping #{i} in {p} must be a list of addresses")
        out.append(tuple(a.lower() for a in entry))
    logger.debug("loaded %d pool mappings from %s", len(out), p)
    return tuple(out)
