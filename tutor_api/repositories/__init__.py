# Repositories package init
"""
Tutor API — Persistence Gateway
================================

What:  Data-access objects exposing save / find / delete for one entity type.
Why:   Routes depend on the repository contract, never on SQL, so the storage
       backend can be swapped or mocked without touching HTTP code.

Repository Inventory:
    - Repository (abstract):  generic contract, keyed by model and id type
    - SQLAlchemyRepository:   implementation over an AsyncSession
    - TutorRepository:        SQLAlchemyRepository bound to Tutor
"""

from tutor_api.repositories.base import Repository
from tutor_api.repositories.sqlalchemy_repository import SQLAlchemyRepository
from tutor_api.repositories.tutor_repository import TutorRepository, get_tutor_repository

__all__ = [
    "Repository",
    "SQLAlchemyRepository",
    "TutorRepository",
    "get_tutor_repository",
]
