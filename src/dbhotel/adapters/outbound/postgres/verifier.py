import psycopg

from dbhotel.domain.model.connection_verification import ConnectionVerification
from dbhotel.domain.model.vendor import to_postgres_conninfo
from dbhotel.infrastructure.logging import get_logger
from dbhotel.ports.outbound.connection_verifier import ConnectionVerifier

logger = get_logger(__name__)


class PostgresConnectionVerifier(ConnectionVerifier):
    """Opens and closes one PostgreSQL connection outside of any pool."""

    def verify(self, jdbc_url: str, username: str, password: str) -> ConnectionVerification:
        try:
            with psycopg.connect(to_postgres_conninfo(jdbc_url), user=username, password=password):
                return ConnectionVerification.success()
        except psycopg.Error as e:
            logger.warning(f"PostgreSQL connection to {jdbc_url} as {username} failed: {e}")
            return ConnectionVerification.failure(str(e))
