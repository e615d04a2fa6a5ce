"""Presentation layer (FastAPI routers, dependencies, error mapping)."""
