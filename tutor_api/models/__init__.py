# Models package init
"""
Tutor API — ORM Models
=======================

What:  SQLAlchemy models registered on `Base.metadata`.
Why:   Importing this package registers every table, which Alembic's
       --autogenerate and the test schema setup rely on.
"""

from tutor_api.models.tutor import Tutor

__all__ = ["Tutor"]
