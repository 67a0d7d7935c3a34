"""
Data source factories - compose a ConfigBuilder and a PoolBuilder into pools.
"""

from dbhotel.domain.datasource.config_builder import DefaultConfigBuilder
from dbhotel.domain.datasource.oracle_factory import (
    MINIMUM_IDLE,
    ORACLE_SCRIPT_INIT_SQL,
    OracleDataSourceFactory,
    create_data_source,
    create_data_source_from_config,
    create_data_source_from_descriptor,
)
from dbhotel.domain.datasource.postgres_factory import (
    PostgresDataSourceFactory,
    create_postgres_data_source,
)
from dbhotel.domain.datasource.verification import validate_connection

__all__ = [
    "DefaultConfigBuilder",
    "MINIMUM_IDLE",
    "ORACLE_SCRIPT_INIT_SQL",
    "OracleDataSourceFactory",
    "create_data_source",
    "create_data_source_from_config",
    "create_data_source_from_descriptor",
    "PostgresDataSourceFactory",
    "create_postgres_data_source",
    "validate_connection",
]
