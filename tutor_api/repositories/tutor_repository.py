"""Repository for the Tutor entity."""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from tutor_api.database import get_db_session
from tutor_api.models.tutor import Tutor
from tutor_api.repositories.sqlalchemy_repository import SQLAlchemyRepository


class TutorRepository(SQLAlchemyRepository[Tutor]):
    model = Tutor


def get_tutor_repository(
    db: AsyncSession = Depends(get_db_session),
) -> TutorRepository:
    """FastAPI dependency: a TutorRepository bound to the request's session."""
    return TutorRepository(db)
