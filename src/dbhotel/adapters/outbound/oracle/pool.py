"""
Oracle pool builder
===================

Creates python-oracledb session pools from a PoolConfig.

Requirements:
    pip install oracledb

The pool runs in thin mode unless the application has called
`oracledb.init_oracle_client()` before the first pool is created.
"""
from typing import Callable, Optional

import oracledb

from dbhotel.domain.model.pool_config import PoolConfig
from dbhotel.domain.model.vendor import DatabaseVendor, to_oracle_dsn
from dbhotel.infrastructure.logging import get_logger
from dbhotel.ports.outbound.pool_builder import PoolBuilder

logger = get_logger(__name__)


def make_session_callback(init_sql: str) -> Callable[[oracledb.Connection, Optional[str]], None]:
    """
    Build a session callback that runs `init_sql` on a new connection.

    oracledb invokes the callback for every newly created physical connection
    before it is returned from `pool.acquire()`.
    """

    def init_session(connection: oracledb.Connection, requested_tag: Optional[str]) -> None:
        with connection.cursor() as cursor:
            cursor.execute(init_sql)

    return init_session


class OraclePoolBuilder(PoolBuilder):
    """
    Pool builder backed by `oracledb.create_pool`.

    Example usage:
        builder = OraclePoolBuilder()
        pool = builder.build_pool(config)
        with pool.acquire() as connection:
            ...
    """

    @property
    def vendor(self) -> DatabaseVendor:
        return DatabaseVendor.ORACLE

    def build_pool(self, config: PoolConfig) -> oracledb.ConnectionPool:
        session_callback = None
        if config.connection_init_sql is not None:
            session_callback = make_session_callback(config.connection_init_sql)

        dsn = to_oracle_dsn(config.jdbc_url)
        logger.debug(
            f"Creating Oracle pool name={config.pool_name} dsn={dsn} "
            f"min={config.minimum_idle} max={config.maximum_pool_size} "
            f"init_sql={config.connection_init_sql!r}"
        )

        return oracledb.create_pool(
            user=config.username,
            password=config.password,
            dsn=dsn,
            min=config.minimum_idle,
            max=config.maximum_pool_size,
            increment=1,
            getmode=oracledb.POOL_GETMODE_TIMEDWAIT,
            wait_timeout=int(config.connection_timeout * 1000),
            timeout=config.idle_timeout,
            max_lifetime_session=config.max_lifetime,
            session_callback=session_callback,
        )
