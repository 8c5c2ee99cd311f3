"""Custom exceptions for database access."""


class DatabaseError(Exception):
    """Base exception for database errors."""

    pass


class DatabaseConfigError(DatabaseError):
    """Connection settings are missing or invalid."""

    pass
