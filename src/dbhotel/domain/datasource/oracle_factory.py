# src/dbhotel/domain/datasource/oracle_factory.py
"""
Oracle data source factory.

Builds pooled Oracle data sources from a JDBC URL and credentials. Some Oracle
installations (for example the default Docker images) only accept schema
names prefixed with C## unless the session runs with _ORACLE_SCRIPT=true;
pass `oracle_script_required=True` for those.
"""

from typing import Any, Optional

from dbhotel.domain.datasource.config_builder import DefaultConfigBuilder
from dbhotel.domain.model.connection_descriptor import ConnectionDescriptor
from dbhotel.domain.model.pool_config import PoolSettings
from dbhotel.domain.model.vendor import DatabaseVendor
from dbhotel.infrastructure.logging import get_logger
from dbhotel.ports.outbound.config_builder import ConfigBuilder
from dbhotel.ports.outbound.pool_builder import PoolBuilder

logger = get_logger(__name__)

ORACLE_SCRIPT_INIT_SQL = 'alter session set "_ORACLE_SCRIPT"=true'

# idle connections every Oracle pool keeps open
MINIMUM_IDLE = 2


class OracleDataSourceFactory:
    """
    Stateless factory for Oracle connection pools.

    Both collaborators are injected; defaults are DefaultConfigBuilder and
    the oracledb pool builder. Errors raised by either propagate unchanged.
    """

    def __init__(
        self,
        config_builder: Optional[ConfigBuilder] = None,
        pool_builder: Optional[PoolBuilder] = None
    ):
        self._config_builder = config_builder or DefaultConfigBuilder()
        self._pool_builder = pool_builder or DatabaseVendor.ORACLE.create_pool_builder()

    def create_data_source(
        self,
        jdbc_url: str,
        username: str,
        password: str,
        oracle_script_required: bool
    ) -> Any:
        """
        Create a new pooled data source.

        Args:
            jdbc_url: e.g. jdbc:oracle:thin:@host:1521/service
            username: Database user
            password: Database password
            oracle_script_required: Set `_ORACLE_SCRIPT=true` on every new session

        Returns:
            The pool returned by the pool builder. Never cached.
        """
        config = self._config_builder.build_config(jdbc_url, username, password, MINIMUM_IDLE)
        if oracle_script_required:
            config.connection_init_sql = ORACLE_SCRIPT_INIT_SQL

        if config.connection_init_sql is not None:
            logger.debug(f"Pool {config.pool_name} session init statement: {config.connection_init_sql}")
        logger.info(
            f"Creating Oracle data source url={jdbc_url} user={username} "
            f"pool={config.pool_name} oracle_script={oracle_script_required}"
        )
        return self._pool_builder.build_pool(config)

    def create_data_source_from_descriptor(self, descriptor: ConnectionDescriptor) -> Any:
        return self.create_data_source(
            descriptor.jdbc_url,
            descriptor.username,
            descriptor.password,
            descriptor.oracle_script_required,
        )


def create_data_source(
    jdbc_url: str,
    username: str,
    password: str,
    oracle_script_required: bool,
    config_builder: Optional[ConfigBuilder] = None,
    pool_builder: Optional[PoolBuilder] = None
) -> Any:
    """
    Create an Oracle data source with a freshly built factory.

    Without an explicit `config_builder` every call gets a new
    DefaultConfigBuilder, whose pool numbering starts at 1, so pools created
    this way are all named `<prefix>-1`. Share one builder to number them.
    """
    factory = OracleDataSourceFactory(config_builder, pool_builder)
    return factory.create_data_source(jdbc_url, username, password, oracle_script_required)


def create_data_source_from_descriptor(
    descriptor: ConnectionDescriptor,
    config_builder: Optional[ConfigBuilder] = None,
    pool_builder: Optional[PoolBuilder] = None
) -> Any:
    factory = OracleDataSourceFactory(config_builder, pool_builder)
    return factory.create_data_source_from_descriptor(descriptor)


def create_data_source_from_config(
    yaml_path: Optional[str] = None,
    pool_builder: Optional[PoolBuilder] = None
) -> Any:
    """
    Create an Oracle data source from the infrastructure YAML.

    Reads `databases.oracle` for the connection and `databases.pool` for the
    pool defaults (optional).
    """
    descriptor = ConnectionDescriptor.from_k8s_config(yaml_path=yaml_path)
    settings = PoolSettings.from_k8s_config(yaml_path=yaml_path)
    return create_data_source_from_descriptor(
        descriptor,
        config_builder=DefaultConfigBuilder(settings),
        pool_builder=pool_builder,
    )
