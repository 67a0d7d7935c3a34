# src/dbhotel/domain/model/vendor.py
import re
from enum import Enum
from typing import Optional

import oracledb


ORACLE_JDBC_PREFIXES = ("jdbc:oracle:thin:@", "jdbc:oracle:oci:@")
POSTGRES_JDBC_PREFIX = "jdbc:postgresql://"

# host:port:SID, the legacy JDBC thin form
_ORACLE_SID_FORM = re.compile(r"^(?P<host>[^:/()@]+):(?P<port>\d+):(?P<sid>[^:/()]+)$")


class DatabaseVendor(Enum):
    ORACLE = "oracle"
    POSTGRES = "postgres"

    def create_pool_builder(self):
        """Factory method to create the pool builder adapter for this vendor"""
        if self == DatabaseVendor.ORACLE:
            from dbhotel.adapters.outbound.oracle.pool import OraclePoolBuilder

            return OraclePoolBuilder()
        elif self == DatabaseVendor.POSTGRES:
            from dbhotel.adapters.outbound.postgres.pool import PostgresPoolBuilder

            return PostgresPoolBuilder()
        raise ValueError(f"Vendor {self} not supported")

    def create_connection_verifier(self):
        """Factory method to create the connection verifier adapter for this vendor"""
        if self == DatabaseVendor.ORACLE:
            from dbhotel.adapters.outbound.oracle.verifier import OracleConnectionVerifier

            return OracleConnectionVerifier()
        elif self == DatabaseVendor.POSTGRES:
            from dbhotel.adapters.outbound.postgres.verifier import PostgresConnectionVerifier

            return PostgresConnectionVerifier()
        raise ValueError(f"Vendor {self} not supported")


def detect_vendor(jdbc_url: str) -> Optional[DatabaseVendor]:
    """Return the vendor named by a JDBC URL, or None if it is not recognised."""
    if jdbc_url.startswith(ORACLE_JDBC_PREFIXES):
        return DatabaseVendor.ORACLE
    if jdbc_url.startswith(POSTGRES_JDBC_PREFIX):
        return DatabaseVendor.POSTGRES
    return None


def to_oracle_dsn(jdbc_url: str) -> str:
    """
    Strip the JDBC prefix from an Oracle URL.

    `jdbc:oracle:thin:@host:1521/svc` becomes `host:1521/svc`. The SID form
    `jdbc:oracle:thin:@host:1521:ORCL` becomes a connect descriptor with
    SID=ORCL. Any other remainder (Easy Connect string, `(DESCRIPTION=...)`,
    TNS alias) is not validated. Strings without a known prefix are returned
    unchanged.
    """
    for prefix in ORACLE_JDBC_PREFIXES:
        if jdbc_url.startswith(prefix):
            rest = jdbc_url[len(prefix):]
            match = _ORACLE_SID_FORM.match(rest)
            if match:
                return oracledb.makedsn(match["host"], int(match["port"]), sid=match["sid"])
            return rest
    return jdbc_url


def to_postgres_conninfo(jdbc_url: str) -> str:
    """`jdbc:postgresql://host:5432/db` becomes `postgresql://host:5432/db`."""
    if jdbc_url.startswith(POSTGRES_JDBC_PREFIX):
        return "postgresql://" + jdbc_url[len(POSTGRES_JDBC_PREFIX):]
    return jdbc_url
