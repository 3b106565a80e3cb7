"""Database Infrastructure — SQLAlchemy declarative Base for the SQL storage backend."""
