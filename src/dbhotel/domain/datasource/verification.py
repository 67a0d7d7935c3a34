# src/dbhotel/domain/datasource/verification.py
from typing import Optional

from dbhotel.domain.model.connection_verification import ConnectionVerification
from dbhotel.domain.model.vendor import detect_vendor
from dbhotel.infrastructure.logging import get_logger
from dbhotel.ports.outbound.connection_verifier import ConnectionVerifier

logger = get_logger(__name__)


def validate_connection(
    jdbc_url: str,
    username: str,
    password: str,
    verifier: Optional[ConnectionVerifier] = None
) -> ConnectionVerification:
    """
    Check that a database accepts the given credentials.

    Driver errors, and URLs no driver understands, are reported in the
    returned ConnectionVerification.
    """
    if verifier is None:
        vendor = detect_vendor(jdbc_url)
        if vendor is None:
            message = f"No suitable driver found for {jdbc_url}"
            logger.warning(message)
            return ConnectionVerification.failure(message)
        verifier = vendor.create_connection_verifier()
    return verifier.verify(jdbc_url, username, password)
