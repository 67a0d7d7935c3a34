"""
PostgreSQL pool builder
=======================

Creates psycopg_pool connection pools from a PoolConfig.

Requirements:
    pip install psycopg[binary,pool]
"""
from typing import Callable

import psycopg
from psycopg_pool import ConnectionPool

from dbhotel.domain.model.pool_config import PoolConfig
from dbhotel.domain.model.vendor import DatabaseVendor, to_postgres_conninfo
from dbhotel.infrastructure.logging import get_logger
from dbhotel.ports.outbound.pool_builder import PoolBuilder

logger = get_logger(__name__)


def make_configure_callback(init_sql: str) -> Callable[[psycopg.Connection], None]:
    """Build a `configure` callback that runs `init_sql` on each new connection."""

    def configure(conn: psycopg.Connection) -> None:
        conn.execute(init_sql)
        # the pool requires connections to be returned idle
        conn.commit()

    return configure


class PostgresPoolBuilder(PoolBuilder):
    """Pool builder backed by `psycopg_pool.ConnectionPool`."""

    @property
    def vendor(self) -> DatabaseVendor:
        return DatabaseVendor.POSTGRES

    def build_pool(self, config: PoolConfig) -> ConnectionPool:
        configure = None
        if config.connection_init_sql is not None:
            configure = make_configure_callback(config.connection_init_sql)

        conninfo = to_postgres_conninfo(config.jdbc_url)
        logger.debug(
            f"Creating PostgreSQL pool name={config.pool_name} conninfo={conninfo} "
            f"min={config.minimum_idle} max={config.maximum_pool_size}"
        )

        return ConnectionPool(
            conninfo=conninfo,
            kwargs={"user": config.username, "password": config.password},
            min_size=config.minimum_idle,
            max_size=config.maximum_pool_size,
            timeout=config.connection_timeout,
            max_idle=config.idle_timeout,
            max_lifetime=config.max_lifetime,
            name=config.pool_name,
            configure=configure,
            open=True,
        )
