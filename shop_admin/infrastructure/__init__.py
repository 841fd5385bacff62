"""Infrastructure: persistence (SQLAlchemy) and outbound services."""
