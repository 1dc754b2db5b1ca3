"""
Tutor API — Tutor Repository Tests
===================================

What:  Tests for the Persistence Gateway (save, find, delete, exists, count).
How:   Unit tests against a mock session, then the same contract against a
       real SQLite database.
"""

import pytest
from unittest.mock import MagicMock

from sqlalchemy.exc import OperationalError

from tutor_api.exceptions import DatabaseError
from tutor_api.models.tutor import Tutor
from tutor_api.repositories.tutor_repository import TutorRepository


class TestTutorRepositoryUnit:
    """Session interactions, with the session mocked out."""

    @pytest.mark.asyncio
    async def test_save_new_entity_adds_and_flushes(self, mock_db_session):
        """A new entity should be added and flushed, never merged."""
        tutor = Tutor(name="Alice")
        repository = TutorRepository(mock_db_session)

        result = await repository.save(tutor)

        assert result is tutor
        mock_db_session.add.assert_called_once_with(tutor)
        mock_db_session.merge.assert_not_awaited()
        mock_db_session.flush.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_save_entity_with_id_merges(self, mock_db_session, sample_tutor_data):
        """An entity with an ID should be merged and the persistent copy returned."""
        detached = Tutor(**sample_tutor_data)
        persistent = Tutor(**sample_tutor_data)
        mock_db_session.merge.return_value = persistent

        result = await TutorRepository(mock_db_session).save(detached)

        assert result is persistent
        mock_db_session.merge.assert_awaited_once_with(detached)
        mock_db_session.add.assert_not_called()

    @pytest.mark.asyncio
    async def test_find_by_id_uses_identity_lookup(self, mock_db_session, sample_tutor_data):
        """find_by_id should go through the session identity map."""
        tutor = Tutor(**sample_tutor_data)
        mock_db_session.get.return_value = tutor

        result = await TutorRepository(mock_db_session).find_by_id(1)

        assert result is tutor
        mock_db_session.get.assert_awaited_once_with(Tutor, 1)

    @pytest.mark.asyncio
    async def test_find_by_id_missing_returns_none(self, mock_db_session):
        """An unknown ID should come back as None."""
        mock_db_session.get.return_value = None

        assert await TutorRepository(mock_db_session).find_by_id(99) is None

    @pytest.mark.asyncio
    async def test_exists_by_id(self, mock_db_session):
        """exists_by_id should follow the row count."""
        found = MagicMock()
        found.scalar.return_value = 1
        mock_db_session.execute.return_value = found

        assert await TutorRepository(mock_db_session).exists_by_id(1) is True

        found.scalar.return_value = 0
        assert await TutorRepository(mock_db_session).exists_by_id(2) is False

    @pytest.mark.asyncio
    @pytest.mark.parametrize("tutor_id", [2 ** 63, -(2 ** 63) - 1, 99999999999999999999])
    async def test_identifier_beyond_key_space_is_absent(self, mock_db_session, tutor_id):
        """IDs no BIGINT column can hold should read as absent without a query."""
        repository = TutorRepository(mock_db_session)

        assert await repository.find_by_id(tutor_id) is None
        assert await repository.exists_by_id(tutor_id) is False
        await repository.delete_by_id(tutor_id)

        mock_db_session.get.assert_not_awaited()
        mock_db_session.execute.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_key_space_bounds_are_queried(self, mock_db_session):
        """The largest and smallest BIGINT keys should still reach the session."""
        mock_db_session.get.return_value = None
        repository = TutorRepository(mock_db_session)

        await repository.find_by_id(2 ** 63 - 1)
        await repository.find_by_id(-(2 ** 63))

        assert mock_db_session.get.await_count == 2

    @pytest.mark.asyncio
    async def test_driver_error_becomes_database_error(self, mock_db_session):
        """Driver errors should surface as DatabaseError without SQL in the message."""
        mock_db_session.execute.side_effect = OperationalError(
            "SELECT tutor.id FROM tutor", {}, Exception("database is locked")
        )

        with pytest.raises(DatabaseError) as exc_info:
            await TutorRepository(mock_db_session).find_all()

        assert exc_info.value.context["operation"] == "find_all"
        assert exc_info.value.context["entity"] == "tutor"
        # Statement text never reaches the client-facing message
        assert "SELECT" not in exc_info.value.message

    @pytest.mark.asyncio
    async def test_flush_error_on_save_becomes_database_error(self, mock_db_session):
        """A failed flush should surface as DatabaseError."""
        mock_db_session.flush.side_effect = OperationalError("INSERT", {}, Exception("disk full"))

        with pytest.raises(DatabaseError):
            await TutorRepository(mock_db_session).save(Tutor(name="Alice"))


class TestTutorRepositorySQLite:
    """The same contract against a real database."""

    @pytest.mark.asyncio
    async def test_save_assigns_identifier(self, db_session):
        """Saving a new tutor should assign a database ID."""
        repository = TutorRepository(db_session)
        tutor = Tutor(name="Alice")
        assert tutor.id is None

        saved = await repository.save(tutor)

        assert saved.id is not None
        assert await repository.find_by_id(saved.id) is saved

    @pytest.mark.asyncio
    async def test_save_with_identifier_replaces_all_fields(self, db_session):
        """Saving with an existing ID should overwrite every column."""
        repository = TutorRepository(db_session)
        original = await repository.save(
            Tutor(name="Alice", email="alice@example.com", subject="Physics")
        )
        await db_session.commit()

        replaced = await repository.save(
            Tutor(id=original.id, name="Alicja", email=None, phone=None, subject=None)
        )
        await db_session.commit()

        assert replaced.id == original.id
        assert replaced.name == "Alicja"
        assert replaced.email is None
        assert replaced.subject is None
        assert await repository.count() == 1

    @pytest.mark.asyncio
    async def test_loaded_row_modified_in_place_is_updated(self, db_session):
        """Saving a row after editing it in place should update that same row."""
        repository = TutorRepository(db_session)
        original = await repository.save(Tutor(name="Alice", email="alice@example.com"))
        await db_session.commit()

        loaded = await repository.find_by_id(original.id)
        loaded.name = "Alicja"
        loaded.email = None
        saved = await repository.save(loaded)
        await db_session.commit()
        db_session.expunge_all()

        assert saved is loaded
        stored = await repository.find_by_id(original.id)
        assert stored.name == "Alicja"
        assert stored.email is None
        assert await repository.count() == 1

    @pytest.mark.asyncio
    async def test_find_all_returns_every_row_ordered_by_id(self, db_session):
        """find_all should return every row in ID order."""
        repository = TutorRepository(db_session)
        for name in ("Carol", "Alice", "Bob"):
            await repository.save(Tutor(name=name))

        tutors = await repository.find_all()

        assert [t.name for t in tutors] == ["Carol", "Alice", "Bob"]
        assert [t.id for t in tutors] == sorted(t.id for t in tutors)

    @pytest.mark.asyncio
    async def test_find_all_empty(self, db_session):
        """An empty table should give an empty list."""
        assert await TutorRepository(db_session).find_all() == []

    @pytest.mark.asyncio
    async def test_delete_by_id(self, db_session):
        """delete_by_id should remove only the named row."""
        repository = TutorRepository(db_session)
        kept = await repository.save(Tutor(name="Kept"))
        removed = await repository.save(Tutor(name="Removed"))
        await db_session.commit()

        await repository.delete_by_id(removed.id)
        await db_session.commit()
        db_session.expunge_all()

        assert await repository.exists_by_id(removed.id) is False
        assert await repository.exists_by_id(kept.id) is True
        assert await repository.count() == 1

    @pytest.mark.asyncio
    async def test_delete_missing_identifier_is_not_an_error(self, db_session):
        """Deleting an unknown ID should be a silent no-op."""
        repository = TutorRepository(db_session)

        await repository.delete_by_id(12345)

        assert await repository.count() == 0
