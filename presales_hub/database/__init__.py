"""
Database module initialization.
Exports database components for use throughout the application.
"""

from presales_hub.database.connection import (
    check_db_connection,
    close_db,
    get_client,
    get_collection,
    get_database,
    get_db_info,
)
from presales_hub.database.exceptions import DatabaseConfigError, DatabaseError

__all__ = [
    # Connection management
    "get_client",
    "get_database",
    "get_collection",
    "close_db",
    # Utilities
    "check_db_connection",
    "get_db_info",
    # Errors
    "DatabaseError",
    "DatabaseConfigError",
]
