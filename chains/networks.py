"""
chains.networks

Supported networks and the names the indexing runtime reports for them.
"""
from enum import Enum
from typing import Dict, Tuple

from chains.errors import UnsupportedNetworkError


class Network(Enum):
    # values are EIP-155 chain ids
    ARBITRUM_ONE = 42161
    AVALANCHE = 43114
    BASE = 8453
    BLAST_MAINNET = 81457
    BSC = 56
    CELO = 42220
    MAINNET = 1
    MATIC = 137
    OPTIMISM = 10
    SMARTBCH = 10000

    @property
    def chain_id(self) -> int:
        return self.value

    @property
    def network_name(self) -> str:
        return _NETWORK_NAMES[self]

    @classmethod
    def from_name(cls, name: str) -> "Network":
        """
        Exact, case-sensitive lookup of a runtime network name.
        Raises UnsupportedNetworkError instead of falling back to a default.
        """
        try:
            return _BY_NAME[name]
        except (KeyError, TypeError):
            raise UnsupportedNetworkError(name) from None

    @classmethod
    def from_chain_id(cls, chain_id: int) -> "Network":
        # True == 1 would otherwise match MAINNET
        if isinstance(chain_id, bool):
            raise UnsupportedNetworkError(chain_id, f"Unsupported chain id: {chain_id!r}")
        try:
            return cls(chain_id)
        except ValueError:
            raise UnsupportedNetworkError(
                chain_id, f"Unsupported chain id: {chain_id!r}"
            ) from None


_NETWORK_NAMES: Dict[Network, str] = {
    Network.ARBITRUM_ONE: "arbitrum-one",
    Network.AVALANCHE: "avalanche",
    Network.BASE: "base",
    Network.BLAST_MAINNET: "blast-mainnet",
    Network.BSC: "bsc",
    Network.CELO: "celo",
    Network.MAINNET: "mainnet",
    Network.MATIC: "matic",
    Network.OPTIMISM: "optimism",
    Network.SMARTBCH: "smartbch-mainnet",
}

_BY_NAME: Dict[str, Network] = {name: net for net, name in _NETWORK_NAMES.items()}

if set(_NETWORK_NAMES) != set(Network):
    raise RuntimeError("every Network member needs a network name")
if len(_BY_NAME) != len(_NETWORK_NAMES):
    raise RuntimeError("network names must be unique")


def supported_network_names() -> Tuple[str, ...]:
    return tuple(net.network_name for net in Network)
