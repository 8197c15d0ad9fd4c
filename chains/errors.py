"""
chains.errors

Errors raised while selecting or building a network configuration.
"""
from typing import Optional


class UnsupportedNetworkError(ValueError):
    """The runtime network name matches no supported network."""

    def __init__(self, name, message: Optional[str] = None):
        self.name = name
        super().__init__(message or f"Unsupported network: {name!r}")


class InvalidConfigurationRecordError(RuntimeError):
    """A configuration record in the registry breaks one of its invariants."""

    def __init__(self, network: str, reason: str):
        self.network = network
        self.reason = reason
        super().__init__(f"Invalid configuration for {network}: {reason}")
