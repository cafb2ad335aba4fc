"""
Domain layer: the User entity, its typed id and the rule violations.

Nothing here imports FastAPI, SQLAlchemy or structlog.
"""
