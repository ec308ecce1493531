"""Integration tests for the profile and role repositories."""

import pytest

from capstone.domain.user import RoleAssignment, SystemRole
from capstone.infrastructure.persistence.sqlalchemy.repositories import (
    UserProfileRepositorySQLAlchemy,
    UserRoleRepositorySQLAlchemy,
)
from tests.shared.fixtures.factories import make_profile

pytestmark = pytest.mark.integration


class TestUserProfileRepository:
    @pytest.mark.asyncio
    async def test_missing_profile(self, db_session):
        repo = UserProfileRepositorySQLAlchemy(db_session)
        assert await repo.find_by_id("nobody") is None

    @pytest.mark.asyncio
    async def test_upsert_inserts_then_overwrites(self, db_session, session_maker):
        repo = UserProfileRepositorySQLAlchemy(db_session)

        await repo.upsert(make_profile(full_name="John Doe"))
        await repo.upsert(
            make_profile(full_name="Jane Doe", avatar_url="https://a.test/p.png"),
        )
        await db_session.commit()

        async with session_maker() as other:
            stored = await UserProfileRepositorySQLAlchemy(other).find_by_id("u1")
        assert stored is not None
        assert stored.full_name == "Jane Doe"
        assert stored.email == "a@b.com"
        assert stored.avatar_url == "https://a.test/p.png"
        assert stored.updated_at.tzinfo is not None

    @pytest.mark.asyncio
    async def test_rollback_discards_profile(self, db_session, session_maker):
        await UserProfileRepositorySQLAlchemy(db_session).upsert(make_profile())
        await db_session.rollback()

        async with session_maker() as other:
            assert await UserProfileRepositorySQLAlchemy(other).find_by_id("u1") is None


class TestUserRoleRepository:
    @pytest.mark.asyncio
    async def test_assign_and_find(self, db_session):
        repo = UserRoleRepositorySQLAlchemy(db_session)

        await repo.assign(RoleAssignment("u1", SystemRole.STUDENT))

        found = await repo.find_by_user_id("u1")
        assert found is not None
        assert found.role is SystemRole.STUDENT

    @pytest.mark.asyncio
    async def test_second_assignment_replaces_role(self, db_session):
        repo = UserRoleRepositorySQLAlchemy(db_session)

        await repo.assign(RoleAssignment("u1", SystemRole.STUDENT))
        await repo.assign(RoleAssignment("u1", SystemRole.ADVISER))
        await db_session.commit()

        found = await repo.find_by_user_id("u1")
        assert found.role is SystemRole.ADVISER

    @pytest.mark.asyncio
    async def test_unassigned(self, db_session):
        assert await UserRoleRepositorySQLAlchemy(db_session).find_by_user_id("x") is None
