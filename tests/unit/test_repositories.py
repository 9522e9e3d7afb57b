"""
Unit tests for the repositories against a SQLite database
"""

from datetime import datetime, timedelta

import pytest
from sqlalchemy import func, select
from core.exceptions import ConflictError, NotFoundError
from core.security import verify_password
from models import Notebook, Organization, User
from repositories.notebooks import NotebookRepository
from repositories.organizations import OrganizationRepository
from repositories.users import UserRepository


def _user_fields(**overrides):
    fields = {
        "full_name": "Ada Lovelace",
        "username": "ada",
        "email": "ada@example.com",
        "password": "analytical",
        "company": "Engines Ltd",
        "phone": "111",
    }
    fields.update(overrides)
    return fields


class TestUserRepository:

    @pytest.mark.asyncio
    async def test_create_hashes_password(self, db_session):
        user = await UserRepository(db_session).create(_user_fields())

        assert user.id is not None
        assert user.password != "analytical"
        assert verify_password("analytical", user.password)

    @pytest.mark.asyncio
    async def test_full_name_defaults_to_username(self, db_session):
        user = await UserRepository(db_session).create(_user_fields(full_name=None))

        assert user.full_name == "ada"

    @pytest.mark.asyncio
    async def test_duplicate_email_conflicts(self, db_session):
        users = UserRepository(db_session)
        await users.create(_user_fields())

        with pytest.raises(ConflictError):
            await users.create(_user_fields(username="someone-else"))

        count = await db_session.execute(select(func.count()).select_from(User))
        assert count.scalar() == 1

    @pytest.mark.asyncio
    async def test_partial_update_only_touches_given_fields(self, db_session):
        users = UserRepository(db_session)
        user = await users.create(_user_fields())
        stored_hash = user.password

        updated = await users.update(user.id, {"phone": "555"})

        assert updated.phone == "555"
        assert updated.full_name == "Ada Lovelace"
        assert updated.email == "ada@example.com"
        assert updated.company == "Engines Ltd"
        assert updated.password == stored_hash

    @pytest.mark.asyncio
    async def test_update_to_taken_email_conflicts(self, db_session):
        users = UserRepository(db_session)
        await users.create(_user_fields())
        other = await users.create(_user_fields(username="grace", email="grace@example.com"))

        with pytest.raises(ConflictError):
            await users.update(other.id, {"email": "ada@example.com"})

    @pytest.mark.asyncio
    async def test_set_password_rehashes(self, db_session):
        users = UserRepository(db_session)
        user = await users.create(_user_fields())

        updated = await users.set_password(user.id, "difference-engine")

        assert verify_password("difference-engine", updated.password)
        assert not verify_password("analytical", updated.password)

    @pytest.mark.asyncio
    async def test_missing_user_not_found(self, db_session):
        with pytest.raises(NotFoundError):
            await UserRepository(db_session).get(999)


class TestOrganizationRepository:

    @pytest.mark.asyncio
    async def test_crud_cycle(self, db_session):
        orgs = OrganizationRepository(db_session)

        org = await orgs.create({"name": "Acme", "email": "ops@acme.com"})
        await orgs.update(org.id, {"address": "1 Road"})

        stored = await orgs.get(org.id)
        assert stored.name == "Acme"
        assert stored.address == "1 Road"
        assert [o.id for o in await orgs.list()] == [org.id]

        await orgs.delete(org.id)
        with pytest.raises(NotFoundError):
            await orgs.get(org.id)

    @pytest.mark.asyncio
    async def test_delete_missing_not_found(self, db_session):
        with pytest.raises(NotFoundError):
            await OrganizationRepository(db_session).delete(12345)


class TestNotebookRepository:

    @pytest.mark.asyncio
    async def test_metrics_empty(self, db_session):
        metrics = await NotebookRepository(db_session).dashboard_metrics()

        assert metrics.total_uploads == 0
        assert metrics.successful_uploads == 0
        assert metrics.failed_uploads == 0
        assert metrics.data_processed == 0
        assert metrics.recent_uploads == []

    @pytest.mark.asyncio
    async def test_metrics_counts_and_recent(self, db_session):
        now = datetime(2024, 6, 1, 12, 0, 0)
        rows = [
            Notebook(
                file_name=f"upload_{i}.csv",
                status=1 if i % 3 == 0 else 0,
                total_rows=100 * i if i != 2 else None,
                created_at=now - timedelta(hours=i),
            )
            for i in range(7)
        ]
        db_session.add_all(rows)
        await db_session.commit()

        metrics = await NotebookRepository(db_session).dashboard_metrics(now=now)

        assert metrics.total_uploads == 7
        assert metrics.successful_uploads == 3  # i = 0, 3, 6
        assert metrics.failed_uploads == 4
        assert metrics.data_processed == 100 * (0 + 1 + 3 + 4 + 5 + 6)
        assert [u.file_name for u in metrics.recent_uploads] == [
            "upload_0.csv", "upload_1.csv", "upload_2.csv", "upload_3.csv", "upload_4.csv"
        ]
        assert metrics.recent_uploads[0].time_ago == "a few seconds ago"
        assert metrics.recent_uploads[1].time_ago == "an hour ago"
        assert metrics.recent_uploads[3].time_ago == "3 hours ago"

    @pytest.mark.asyncio
    async def test_record_run_then_mark_success(self, db_session):
        notebooks = NotebookRepository(db_session)
        row = await notebooks.record_run("orders.csv", "881")

        assert row.status == 0
        assert row.task_id == "881"

        assert await notebooks.mark_task_status("881", 1) == 1
        assert await notebooks.mark_task_status("881", 1) == 0

        await db_session.refresh(row)
        assert row.status == 1

    @pytest.mark.asyncio
    async def test_mark_unknown_task_changes_nothing(self, db_session):
        assert await NotebookRepository(db_session).mark_task_status("nope", 1) == 0
