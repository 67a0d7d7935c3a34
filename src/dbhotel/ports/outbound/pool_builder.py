# src/dbhotel/ports/outbound/pool_builder.py
"""
Abstract pool builder interface.

Turns a PoolConfig into a ready-to-use data source (the pooling library's
pool object). Errors raised by the pooling library propagate unchanged.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

from dbhotel.domain.model.pool_config import PoolConfig

if TYPE_CHECKING:
    from dbhotel.domain.model.vendor import DatabaseVendor


class PoolBuilder(ABC):
    """Abstract base class for vendor pool builders."""

    @property
    @abstractmethod
    def vendor(self) -> "DatabaseVendor":
        """Returns the DatabaseVendor enum for this builder."""
        pass

    @abstractmethod
    def build_pool(self, config: PoolConfig) -> Any:
        """
        Create a connection pool from a configuration.

        Args:
            config: Fully prepared pool configuration

        Returns:
            The pool object; its lifecycle belongs to the caller
        """
        pass
