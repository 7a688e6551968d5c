"""Store bootstrap.

``connect_db`` is called once by the WSGI/ASGI entry points.  A store that
cannot be reached at start-up is reported to the operator but never stops
the process: requests hitting the store afterwards fail on their own.
"""

from __future__ import annotations

import structlog
from django.db import DEFAULT_DB_ALIAS, DatabaseError, connections

logger = structlog.get_logger(__name__)


def connect_db(alias: str = DEFAULT_DB_ALIAS) -> bool:
    """Open the connection for ``alias`` and report the outcome.

    Returns ``True`` when the store answered, ``False`` otherwise.
    """
    connection = connections[alias]
    try:
        connection.ensure_connection()
    except DatabaseError as exc:
        logger.error(
            "database.connection_failed",
            database=alias,
            error=str(exc),
        )
        return False
    logger.info("database.connected", database=alias, vendor=connection.vendor)
    return True
