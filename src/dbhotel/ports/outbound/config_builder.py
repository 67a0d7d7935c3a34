# src/dbhotel/ports/outbound/config_builder.py
"""
Abstract configuration builder interface.

Vendor-agnostic: vendor factories ask it for a base PoolConfig and compose
their own tweaks on top instead of inheriting from each other.
"""

from abc import ABC, abstractmethod

from dbhotel.domain.model.pool_config import PoolConfig


class ConfigBuilder(ABC):
    """
    Abstract base class for pool configuration builders.

    Contract:
    - build_config(): URL, credentials and minimum idle in, fresh PoolConfig out
    - never validates the URL or credentials
    """

    @abstractmethod
    def build_config(
        self,
        jdbc_url: str,
        username: str,
        password: str,
        minimum_idle: int,
    ) -> PoolConfig:
        """
        Build a base pool configuration.

        Args:
            jdbc_url: JDBC URL of the target database
            username: Database user
            password: Database password
            minimum_idle: Connections the pool keeps open

        Returns:
            A new PoolConfig owned by the caller
        """
        pass
