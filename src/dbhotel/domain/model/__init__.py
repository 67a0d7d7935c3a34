"""
Model module - Value objects shared by factories, ports and adapters.
"""

from dbhotel.domain.model.connection_descriptor import ConnectionDescriptor
from dbhotel.domain.model.connection_verification import ConnectionVerification
from dbhotel.domain.model.pool_config import PoolConfig, PoolSettings
from dbhotel.domain.model.vendor import (
    DatabaseVendor,
    detect_vendor,
    to_oracle_dsn,
    to_postgres_conninfo,
)

__all__ = [
    "ConnectionDescriptor",
    "ConnectionVerification",
    "PoolConfig",
    "PoolSettings",
    "DatabaseVendor",
    "detect_vendor",
    "to_oracle_dsn",
    "to_postgres_conninfo",
]
