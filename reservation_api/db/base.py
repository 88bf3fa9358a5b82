"""
Declarative base shared by the table models.
Alembic and metadata.create_all both read Base.metadata.
"""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    pass
