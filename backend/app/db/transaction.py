"""
Unit of work - commit everything done inside the block, or roll all of it back
"""
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from backend.app.core.errors import DUPLICATE_MESSAGE, ConflictError, is_unique_violation


@contextmanager
def unit_of_work(db: Session) -> Iterator[Session]:
    """
    Usage:
        with unit_of_work(db):
            db.add(project)
            db.flush()
            db.add(ProjectSkill(project_id=project.id, ...))

    Unique-constraint failures surface as ConflictError; anything else is re-raised
    after rollback.
    """
    try:
        yield db
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        if is_unique_violation(exc):
            raise ConflictError(DUPLICATE_MESSAGE, [str(exc.orig)]) from exc
        raise
    except Exception:
        db.rollback()
        raise
