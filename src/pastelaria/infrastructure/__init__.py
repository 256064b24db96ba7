"""Infrastructure layer — database, image files, repositories.

This layer depends on stdlib, third-party libs (SQLAlchemy, Alembic),
and the domain layer. It must never import from services, commands,
or output.
"""
