"""Small shared helpers (request-value parsing, LIKE escaping)."""
