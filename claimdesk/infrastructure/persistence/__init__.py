"""Persistence infrastructure (SQLAlchemy async)."""
