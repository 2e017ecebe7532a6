from roommates.db.connection import ConnectionProvider
from roommates.db.schema import ensure_schema

__all__ = ["ConnectionProvider", "ensure_schema"]
