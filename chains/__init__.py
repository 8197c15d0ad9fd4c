from chains.errors import InvalidConfigurationRecordError, UnsupportedNetworkError
from chains.models import SubgraphConfig, TokenOverride
from chains.networks import Network
from chains.registry import get_config, resolve

__all__ = [
    "Network",
    "SubgraphConfig",
    "TokenOverride",
    "UnsupportedNetworkError",
    "InvalidConfigurationRecordError",
    "get_config",
    "resolve",
]
