"""Persistence: async engine, ORM models, repositories, and migrations."""
