from dbhotel.adapters.outbound.oracle.pool import OraclePoolBuilder, make_session_callback
from dbhotel.adapters.outbound.oracle.verifier import OracleConnectionVerifier

__all__ = [
    "OraclePoolBuilder",
    "OracleConnectionVerifier",
    "make_session_callback",
]
