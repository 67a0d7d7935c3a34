# src/dbhotel/domain/model/connection_descriptor.py
from typing import Optional

from pydantic import BaseModel, Field


class ConnectionDescriptor(BaseModel):
    """Connection parameters for one pooled data source, built per call"""
    jdbc_url: str = Field(..., description="JDBC URL of the target database")
    username: str = Field(..., description="Database user")
    password: str = Field(..., repr=False, description="Database password")
    oracle_script_required: bool = Field(
        default=False,
        description="Run the session with _ORACLE_SCRIPT=true (schema names without C## prefix)"
    )

    class Config:
        frozen = True

    @classmethod
    def from_k8s_config(
        cls,
        section: str = "databases.oracle",
        yaml_path: Optional[str] = None
    ) -> "ConnectionDescriptor":
        """
        Create a descriptor from the infrastructure YAML.

        Expected keys under `section`: jdbc_url, username, password and
        optionally oracle_script_required.

        Raises:
            KeyError: If the section is missing
            ValidationError: If a required key is missing or has the wrong type
        """
        from dbhotel.infrastructure.k8s import load_infrastructure_config

        db_config = load_infrastructure_config(yaml_path).get(section)
        return cls.model_validate(db_config)
