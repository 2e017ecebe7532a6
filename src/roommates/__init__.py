"""Room and Roommate data access over SQLite or PostgreSQL."""

__version__ = "0.1.0"
