from typing import Optional, Sequence

import structlog
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.errors import ValidationError
from app.models.team_profile import TeamProfile
from app.models.user_profile import UserProfile
from app.schemas.team_profile import TeamProfileDTO, TeamProfilePatch, UserProfileRef


ENTITY_NAME = "teamProfile"

logger = structlog.get_logger(__name__)


async def _resolve_members(
    db: AsyncSession,
    refs: Sequence[UserProfileRef],
) -> list[UserProfile]:
    """Load the referenced user profiles, failing on unknown ids."""
    ids = {ref.id for ref in refs}
    if not ids:
        return []

    stmt = select(UserProfile).where(UserProfile.id.in_(ids)).order_by(UserProfile.id)
    result = await db.execute(stmt)
    members = list(result.scalars().all())

    missing = ids - {member.id for member in members}
    if missing:
        raise ValidationError(
            f"User profile not found: {', '.join(str(i) for i in sorted(missing))}",
            ENTITY_NAME,
            "userprofilenotfound",
        )
    return members


async def find_all_team_profiles(db: AsyncSession) -> list[TeamProfile]:
    result = await db.execute(select(TeamProfile).order_by(TeamProfile.id))
    team_profiles = list(result.scalars().all())
    logger.debug("team_profile.list", count=len(team_profiles))
    return team_profiles


async def find_team_profile(db: AsyncSession, team_profile_id: int) -> Optional[TeamProfile]:
    """Fetch a team profile by id; served from the session when already loaded."""
    return await db.get(TeamProfile, team_profile_id)


async def save_team_profile(
    db: AsyncSession,
    data: TeamProfileDTO,
    *,
    created_by: Optional[str] = None,
) -> TeamProfile:
    """Persist a new team profile; the database assigns its id."""
    team_profile = TeamProfile(
        name=data.name,
        description=data.description,
        image_url=data.image_url,
        team_members=await _resolve_members(db, data.team_members),
        created_by=created_by,
    )
    db.add(team_profile)
    await db.commit()

    logger.info("team_profile.created", team_profile_id=team_profile.id, created_by=created_by)
    return team_profile


async def update_team_profile(
    db: AsyncSession,
    data: TeamProfileDTO,
    *,
    modified_by: Optional[str] = None,
) -> Optional[TeamProfile]:
    """
    Replace every writable field of a stored team profile.
    Returns None when no profile has the given id.
    """
    team_profile = await find_team_profile(db, data.id)
    if team_profile is None:
        return None

    members = await _resolve_members(db, data.team_members)

    team_profile.name = data.name
    team_profile.description = data.description
    team_profile.image_url = data.image_url
    team_profile.team_members = members
    team_profile.modified_by = modified_by
    await db.commit()

    logger.info("team_profile.updated", team_profile_id=team_profile.id, modified_by=modified_by)
    return team_profile


async def partial_update_team_profile(
    db: AsyncSession,
    data: TeamProfilePatch,
    *,
    modified_by: Optional[str] = None,
) -> Optional[TeamProfile]:
    """
    Merge the fields present in ``data`` into a stored team profile.
    Fields that were not sent, or sent as null, keep their stored value.
    Returns None when no profile has the given id.
    """
    team_profile = await find_team_profile(db, data.id)
    if team_profile is None:
        return None

    members = None
    if data.team_members is not None:
        members = await _resolve_members(db, data.team_members)

    update_data = data.model_dump(exclude_unset=True, exclude_none=True, exclude={"id", "team_members"})
    for field, value in update_data.items():
        setattr(team_profile, field, value)

    if members is not None:
        team_profile.team_members = members

    team_profile.modified_by = modified_by
    await db.commit()

    logger.info(
        "team_profile.patched",
        team_profile_id=team_profile.id,
        fields=sorted(update_data),
        modified_by=modified_by,
    )
    return team_profile


async def delete_team_profile(db: AsyncSession, team_profile_id: int) -> None:
    """Delete a team profile. Deleting an unknown id is a no-op."""
    team_profile = await find_team_profile(db, team_profile_id)
    if team_profile is None:
        logger.debug("team_profile.delete_missing", team_profile_id=team_profile_id)
        return

    await db.delete(team_profile)
    await db.commit()
    logger.info("team_profile.deleted", team_profile_id=team_profile_id)
