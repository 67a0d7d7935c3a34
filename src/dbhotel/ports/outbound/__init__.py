"""
Outbound ports - Abstract interfaces for external dependencies.
"""

from dbhotel.ports.outbound.config_builder import ConfigBuilder
from dbhotel.ports.outbound.pool_builder import PoolBuilder
from dbhotel.ports.outbound.connection_verifier import ConnectionVerifier

__all__ = [
    "ConfigBuilder",
    "PoolBuilder",
    "ConnectionVerifier",
]
