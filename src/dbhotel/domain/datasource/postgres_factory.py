# src/dbhotel/domain/datasource/postgres_factory.py
from typing import Any, Optional

from dbhotel.domain.datasource.config_builder import DefaultConfigBuilder
from dbhotel.domain.datasource.oracle_factory import MINIMUM_IDLE
from dbhotel.domain.model.vendor import DatabaseVendor
from dbhotel.infrastructure.logging import get_logger
from dbhotel.ports.outbound.config_builder import ConfigBuilder
from dbhotel.ports.outbound.pool_builder import PoolBuilder

logger = get_logger(__name__)


class PostgresDataSourceFactory:
    """Stateless factory for PostgreSQL connection pools. No session init statement."""

    def __init__(
        self,
        config_builder: Optional[ConfigBuilder] = None,
        pool_builder: Optional[PoolBuilder] = None
    ):
        self._config_builder = config_builder or DefaultConfigBuilder()
        self._pool_builder = pool_builder or DatabaseVendor.POSTGRES.create_pool_builder()

    def create_data_source(self, jdbc_url: str, username: str, password: str) -> Any:
        config = self._config_builder.build_config(jdbc_url, username, password, MINIMUM_IDLE)
        logger.info(f"Creating PostgreSQL data source url={jdbc_url} user={username} pool={config.pool_name}")
        return self._pool_builder.build_pool(config)


def create_postgres_data_source(
    jdbc_url: str,
    username: str,
    password: str,
    config_builder: Optional[ConfigBuilder] = None,
    pool_builder: Optional[PoolBuilder] = None
) -> Any:
    """Same pool naming as `create_data_source`: a fresh builder per call names the pool `<prefix>-1`."""
    factory = PostgresDataSourceFactory(config_builder, pool_builder)
    return factory.create_data_source(jdbc_url, username, password)
