"""
Tests for the team profile persistence functions.
"""
import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from app.errors import ValidationError
from app.models.team_profile import TeamProfile
from app.models.user_profile import UserProfile
from app.schemas.team_profile import TeamProfileDTO, TeamProfilePatch
from app.services.team_profiles import (
    delete_team_profile,
    find_all_team_profiles,
    find_team_profile,
    partial_update_team_profile,
    save_team_profile,
    update_team_profile,
)


class TestSaveTeamProfile:

    async def test_save_assigns_id(self, db: AsyncSession, member_profile: UserProfile):
        team_profile = await save_team_profile(
            db,
            TeamProfileDTO(name="Falcons", team_members=[{"id": member_profile.id}]),
            created_by="admin",
        )
        assert team_profile.id is not None
        assert team_profile.created_by == "admin"
        assert team_profile.created_at is not None
        assert team_profile.member_logins == {"member"}

    async def test_save_rejects_unknown_members(self, db: AsyncSession):
        with pytest.raises(ValidationError) as exc_info:
            await save_team_profile(
                db, TeamProfileDTO(name="Nobody", team_members=[{"id": 77}])
            )
        assert exc_info.value.error_key == "userprofilenotfound"
        assert await find_all_team_profiles(db) == []


class TestUpdateTeamProfile:

    async def test_update_replaces_all_fields(
        self, db: AsyncSession, sample_team_profile: TeamProfile
    ):
        updated = await update_team_profile(
            db,
            TeamProfileDTO(id=sample_team_profile.id, name="Replaced"),
            modified_by="admin",
        )
        assert updated is sample_team_profile
        assert updated.name == "Replaced"
        assert updated.description is None
        assert updated.image_url is None
        assert updated.team_members == []
        assert updated.modified_by == "admin"

    async def test_update_unknown_returns_none(self, db: AsyncSession):
        assert await update_team_profile(db, TeamProfileDTO(id=404, name="Ghost")) is None

    async def test_update_with_unknown_member_leaves_entity_untouched(
        self, db: AsyncSession, sample_team_profile: TeamProfile
    ):
        with pytest.raises(ValidationError):
            await update_team_profile(
                db,
                TeamProfileDTO(
                    id=sample_team_profile.id,
                    name="Changed",
                    team_members=[{"id": 123}],
                ),
            )
        assert sample_team_profile.name == "Birmingham Bears"


class TestPartialUpdateTeamProfile:

    async def test_merges_only_sent_fields(
        self, db: AsyncSession, sample_team_profile: TeamProfile
    ):
        patched = await partial_update_team_profile(
            db,
            TeamProfilePatch(id=sample_team_profile.id, name="Merged"),
            modified_by="member",
        )
        assert patched.name == "Merged"
        assert patched.description == "Weekend five-a-side"
        assert patched.image_url == "https://example.com/bears.png"
        assert patched.member_logins == {"member"}
        assert patched.modified_by == "member"

    async def test_null_values_do_not_overwrite(
        self, db: AsyncSession, sample_team_profile: TeamProfile
    ):
        patched = await partial_update_team_profile(
            db,
            TeamProfilePatch.model_validate(
                {"id": sample_team_profile.id, "description": None, "team_members": None}
            ),
        )
        assert patched.description == "Weekend five-a-side"
        assert patched.member_logins == {"member"}

    async def test_empty_member_list_clears_members(
        self, db: AsyncSession, sample_team_profile: TeamProfile
    ):
        patched = await partial_update_team_profile(
            db,
            TeamProfilePatch(id=sample_team_profile.id, team_members=[]),
        )
        assert patched.team_members == []

    async def test_unknown_returns_none(self, db: AsyncSession):
        assert await partial_update_team_profile(db, TeamProfilePatch(id=404, name="X")) is None


class TestFindAndDelete:

    async def test_find_all_orders_by_id(self, db: AsyncSession):
        from tests.crud import create_team_profile

        first = await create_team_profile(db, name="Zebras")
        second = await create_team_profile(db, name="Aardvarks")
        await db.commit()

        assert [t.id for t in await find_all_team_profiles(db)] == [first.id, second.id]

    async def test_delete_removes_profile(
        self, db: AsyncSession, sample_team_profile: TeamProfile
    ):
        team_profile_id = sample_team_profile.id
        await delete_team_profile(db, team_profile_id)
        assert await find_team_profile(db, team_profile_id) is None

    async def test_delete_unknown_is_noop(self, db: AsyncSession, sample_team_profile: TeamProfile):
        await delete_team_profile(db, 9999)
        assert len(await find_all_team_profiles(db)) == 1
