"""
dbhotel - Pooled data sources for Oracle and PostgreSQL.
"""

from dbhotel.domain.datasource import (
    OracleDataSourceFactory,
    PostgresDataSourceFactory,
    create_data_source,
    create_data_source_from_config,
    create_postgres_data_source,
    validate_connection,
)

__all__ = [
    "OracleDataSourceFactory",
    "PostgresDataSourceFactory",
    "create_data_source",
    "create_data_source_from_config",
    "create_postgres_data_source",
    "validate_connection",
]

__version__ = "0.1.0"
