"""Input sanitization helpers for query parameters."""

LIKE_ESCAPE_CHAR = "\\"


def escape_like(value: str) -> str:
    """Escape LIKE/ILIKE wildcards so value matches literally.

    Use with ``ESCAPE '\\'`` (SQLAlchemy: ``escape=LIKE_ESCAPE_CHAR``).
    """
    return (
        value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    )
