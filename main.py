import sys

from dotenv import load_dotenv

from dbhotel.domain.datasource import create_data_source_from_config, validate_connection
from dbhotel.domain.model import ConnectionDescriptor
from dbhotel.infrastructure.logging import get_logger, setup_logging

load_dotenv()

logger = get_logger(__name__)


def main() -> int:
    """Check the configured Oracle database and open a pool against it"""
    setup_logging()

    descriptor = ConnectionDescriptor.from_k8s_config()
    verification = validate_connection(descriptor.jdbc_url, descriptor.username, descriptor.password)
    if not verification.has_succeeded:
        logger.error(f"Connection check failed: {verification.message}")
        return 1

    pool = create_data_source_from_config()
    try:
        with pool.acquire() as connection:
            with connection.cursor() as cursor:
                cursor.execute("SELECT USER FROM dual")
                logger.info(f"Connected as {cursor.fetchone()[0]}, pool open={pool.opened}")
    finally:
        pool.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
