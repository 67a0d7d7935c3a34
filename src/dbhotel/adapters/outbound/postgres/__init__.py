from dbhotel.adapters.outbound.postgres.pool import PostgresPoolBuilder, make_configure_callback
from dbhotel.adapters.outbound.postgres.verifier import PostgresConnectionVerifier

__all__ = [
    "PostgresPoolBuilder",
    "PostgresConnectionVerifier",
    "make_configure_callback",
]
