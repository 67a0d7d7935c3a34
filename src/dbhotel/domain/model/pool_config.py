# src/dbhotel/domain/model/pool_config.py
from typing import Optional

from pydantic import BaseModel, Field


class PoolConfig(BaseModel):
    """
    Configuration handed to a pool builder.

    Produced by a ConfigBuilder. Vendor factories may set
    `connection_init_sql` before the configuration is consumed; it stays
    None when no initialization statement is wanted.
    """
    jdbc_url: str = Field(..., description="JDBC URL, translated to a driver DSN by the pool builder")
    username: str = Field(..., description="Database user")
    password: str = Field(..., repr=False, description="Database password")
    minimum_idle: int = Field(..., ge=0, description="Connections the pool keeps open")
    maximum_pool_size: int = Field(default=10, ge=1, description="Upper bound on open connections")
    connection_timeout: float = Field(default=30, gt=0, description="Seconds to wait for a free connection")
    idle_timeout: int = Field(default=300, ge=0, description="Seconds before an idle connection is closed")
    max_lifetime: int = Field(default=3600, ge=0, description="Seconds before a connection is retired")
    pool_name: Optional[str] = Field(default=None, description="Name used in logs and pool stats")
    connection_init_sql: Optional[str] = Field(
        default=None,
        description="Statement executed once on every new physical connection"
    )

    class Config:
        validate_assignment = True


class PoolSettings(BaseModel):
    """Defaults the configuration builder applies to every PoolConfig"""
    maximum_pool_size: int = Field(default=10, ge=1)
    connection_timeout: float = Field(default=30, gt=0)
    idle_timeout: int = Field(default=300, ge=0)
    max_lifetime: int = Field(default=3600, ge=0)
    pool_name_prefix: str = Field(default="dbhotel")

    class Config:
        frozen = True

    @classmethod
    def from_k8s_config(
        cls,
        section: str = "databases.pool",
        yaml_path: Optional[str] = None
    ) -> "PoolSettings":
        """
        Read pool defaults from the infrastructure YAML.

        A missing section is not an error: the built-in defaults are used.
        """
        from dbhotel.infrastructure.k8s import load_infrastructure_config
        from dbhotel.infrastructure.logging import get_logger

        config = load_infrastructure_config(yaml_path)
        if not config.has(section):
            get_logger(__name__).warning(f"Config section '{section}' not found, using pool defaults")
            return cls()
        return cls.model_validate(config.get(section))
