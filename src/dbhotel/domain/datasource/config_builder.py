# src/dbhotel/domain/datasource/config_builder.py
import itertools
import threading
from typing import Optional

from dbhotel.domain.model.pool_config import PoolConfig, PoolSettings
from dbhotel.ports.outbound.config_builder import ConfigBuilder


class DefaultConfigBuilder(ConfigBuilder):
    """
    Vendor-agnostic configuration builder shared by all data source factories.

    Copies URL and credentials as given, uses the caller's minimum idle and
    fills every other field from PoolSettings. Each configuration gets a
    pool name `<prefix>-<n>`; n counts calls on this builder instance only,
    separate builders reuse the same names.

    Example usage:
        builder = DefaultConfigBuilder(PoolSettings(maximum_pool_size=5))
        config = builder.build_config("jdbc:oracle:thin:@db:1521/svc", "u", "p", 2)
    """

    def __init__(self, settings: Optional[PoolSettings] = None):
        self._settings = settings or PoolSettings()
        self._counter = itertools.count(1)
        self._lock = threading.Lock()

    @property
    def settings(self) -> PoolSettings:
        return self._settings

    def _next_pool_name(self) -> str:
        with self._lock:
            n = next(self._counter)
        return f"{self._settings.pool_name_prefix}-{n}"

    def build_config(
        self,
        jdbc_url: str,
        username: str,
        password: str,
        minimum_idle: int,
    ) -> PoolConfig:
        return PoolConfig(
            jdbc_url=jdbc_url,
            username=username,
            password=password,
            minimum_idle=minimum_idle,
            maximum_pool_size=self._settings.maximum_pool_size,
            connection_timeout=self._settings.connection_timeout,
            idle_timeout=self._settings.idle_timeout,
            max_lifetime=self._settings.max_lifetime,
            pool_name=self._next_pool_name(),
        )
