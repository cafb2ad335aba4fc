"""Adapters for the application ports: SQLAlchemy storage, FastAPI routes, structlog."""
