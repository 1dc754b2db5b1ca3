"""
Tutor API — Unit of Work Tests
===============================

What:  get_db_session commits when the handler finishes and rolls back when
       it raises, so a failed request leaves nothing behind.
"""

import pytest

from tutor_api.database import async_session_factory, get_db_session
from tutor_api.models.tutor import Tutor
from tutor_api.repositories.tutor_repository import TutorRepository


async def _stored_count() -> int:
    async with async_session_factory() as session:
        return await TutorRepository(session).count()


class TestSessionDependency:

    @pytest.mark.asyncio
    async def test_commits_on_success(self, db_schema):
        """A handler that returns should have its writes committed."""
        dependency = get_db_session()
        session = await dependency.__anext__()
        await TutorRepository(session).save(Tutor(name="Alice"))

        with pytest.raises(StopAsyncIteration):
            await dependency.__anext__()

        assert await _stored_count() == 1

    @pytest.mark.asyncio
    async def test_rolls_back_on_error(self, db_schema):
        """A handler that raises should have its writes rolled back."""
        dependency = get_db_session()
        session = await dependency.__anext__()
        await TutorRepository(session).save(Tutor(name="Alice"))

        with pytest.raises(RuntimeError, match="handler failed"):
            await dependency.athrow(RuntimeError("handler failed"))

        assert await _stored_count() == 0
