"""
chains.models

Immutable per-network configuration records consumed by the indexing handlers.
All addresses are stored as lowercase 0x-prefixed hex.
"""
from __future__ import annotations

import re
from decimal import Decimal
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

_ADDRESS_RE = re.compile(r"^0x[0-9a-fA-F]{40}$")


def normalize_address(value) -> str:
    """Return a lowercase 20-byte hex address or raise ValueError."""
    if not isinstance(value, str) or not _ADDRESS_RE.match(value):
        raise ValueError(f"invalid address: {value!r}")
    return value.lower()


def _duplicates(addresses) -> list[str]:
    seen, dups = set(), []
    for a in addresses:
        key = a.lower()
        if key in seen and key not in dups:
            dups.append(key)
        seen.add(key)
    return dups


def _require_sequence(value, what: str) -> None:
    if not isinstance(value, (list, tuple)):
        raise ValueError(f"{what} must be a list, got {type(value).__name__}")


class TokenOverride(BaseModel):
    """Metadata used instead of the token's own symbol/name/decimals calls."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    address: str
    symbol: str
    name: str
    decimals: int

    @field_validator("address", mode="before")
    @classmethod
    def canonical_address(cls, v) -> str:
        return normalize_address(v)

    @field_validator("decimals")
    @classmethod
    def non_negative(cls, v: int) -> int:
        if v < 0:
            raise ValueError("decimals must be non negative")
        return v


class SubgraphConfig(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    # pool factory deployment for this network
    factory_address: str
    # stablecoin / wrapped native pool used to price the native asset
    stablecoin_wrapped_native_pool_address: str
    stablecoin_is_token0: bool
    # usually the wrapped asset, the native token itself on some chains
    wrapped_native_address: str
    # pools holding less native asset than this are ignored for pricing
    minimum_native_locked: Decimal
    stablecoin_addresses: Tuple[str, ...] = ()
    # a token needs a pool with one of these to get a derived price
    whitelist_tokens: Tuple[str, ...] = ()
    token_overrides: Tuple[TokenOverride, ...] = ()
    pools_to_skip: Tuple[str, ...] = ()
    # [pool, token0, token1, ...] registered when the factory is created
    pool_mappings: Tuple[Tuple[str, ...], ...] = ()

    @field_validator(
        "factory_address",
        "stablecoin_wrapped_native_pool_address",
        "wrapped_native_address",
        mode="before",
    )
    @classmethod
    def canonical_address(cls, v) -> str:
        return normalize_address(v)

    @field_validator("stablecoin_addresses", "whitelist_tokens", "pools_to_skip", mode="before")
    @classmethod
    def canonical_address_list(cls, v):
        _require_sequence(v, "address list")
        return tuple(normalize_address(a) for a in v)

    @field_validator("pool_mappings", mode="before")
    @classmethod
    def canonical_pool_mappings(cls, v):
        _require_sequence(v, "pool mappings")
        out = []
        for entry in v:
            _require_sequence(entry, "pool mapping")
            entry = tuple(normalize_address(a) for a in entry)
            if len(entry) < 2:
                raise ValueError(f"pool mapping needs at least two addresses: {entry!r}")
            out.append(entry)
        return tuple(out)

    @field_validator("minimum_native_locked")
    @classmethod
    def strictly_positive(cls, v: Decimal) -> Decimal:
        if not v > 0:
            raise ValueError("minimum_native_locked must be greater than zero")
        return v

    @model_validator(mode="after")
    def check_lists(self) -> "SubgraphConfig":
        for field in ("stablecoin_addresses", "whitelist_tokens"):
            dups = _duplicates(getattr(self, field))
            if dups:
                raise ValueError(f"duplicate addresses in {field}: {', '.join(dups)}")
        if self.wrapped_native_address not in self.whitelist_tokens:
            raise ValueError("wrapped_native_address must be in whitelist_tokens")
        dups = _duplicates(t.address for t in self.token_overrides)
        if dups:
            raise ValueError(f"duplicate token overrides: {', '.join(dups)}")
        return self

    def is_whitelisted(self, address: str) -> bool:
        return address.lower() in self.whitelist_tokens

    def is_stablecoin(self, address: str) -> bool:
        return address.lower() in self.stablecoin_addresses

    def should_skip_pool(self, address: str) -> bool:
        return address.lower() in self.pools_to_skip

    def token_override_for(self, address: str) -> Optional[TokenOverride]:
        key = address.lower()
        for override in self.token_overrides:
            if override.address == key:
                return override
        return None
