"""
Auth database configuration.
Stores platform users, including the well-known administrator account.
"""

DB_NAME = "auth_db"


class Collections:
    """Collection names in auth_db."""
    USERS = "users"
