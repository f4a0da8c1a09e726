"""Common utilities shared across db_access modules."""

from typing import TypeVar

from database import db

# Type variable for entity operations
T = TypeVar('T')


def save_entity(entity: T) -> T:
    """Save an entity to the database and commit the transaction."""
    db.session.add(entity)
    db.session.commit()
    return entity


def rollback_session() -> None:
    """Roll back the current database session."""
    db.session.rollback()
