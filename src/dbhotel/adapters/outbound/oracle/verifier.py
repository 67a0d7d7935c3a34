import oracledb

from dbhotel.domain.model.connection_verification import ConnectionVerification
from dbhotel.domain.model.vendor import to_oracle_dsn
from dbhotel.infrastructure.logging import get_logger
from dbhotel.ports.outbound.connection_verifier import ConnectionVerifier

logger = get_logger(__name__)


class OracleConnectionVerifier(ConnectionVerifier):
    """Opens and closes one Oracle connection outside of any pool."""

    def verify(self, jdbc_url: str, username: str, password: str) -> ConnectionVerification:
        try:
            with oracledb.connect(user=username, password=password, dsn=to_oracle_dsn(jdbc_url)):
                return ConnectionVerification.success()
        except oracledb.Error as e:
            logger.warning(f"Oracle connection to {jdbc_url} as {username} failed: {e}")
            return ConnectionVerification.failure(str(e))
