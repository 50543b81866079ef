from typing import List, Optional

import structlog
from fastapi import APIRouter, Depends, HTTPException, Request, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.dependencies.auth import get_current_user, get_current_user_optional
from app.errors import AuthorizationError, NotFoundError, ValidationError
from app.models.team_profile import TeamProfile
from app.models.user import User
from app.schemas.team_profile import TeamProfileDTO, TeamProfilePatch, TeamProfileResponse
from app.services.permissions import can_edit_team_profile
from app.services.team_profiles import (
    ENTITY_NAME,
    delete_team_profile as delete_team_profile_by_id,
    find_all_team_profiles,
    find_team_profile,
    partial_update_team_profile as merge_team_profile,
    save_team_profile,
    update_team_profile as replace_team_profile,
)
from app.utils.headers import (
    entity_creation_alert,
    entity_deletion_alert,
    entity_update_alert,
)


logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/team-profiles", tags=["team-profiles"])

PATCH_MEDIA_TYPES = ("application/json", "application/merge-patch+json")


def require_media_type(*media_types: str):
    """Dependency factory that rejects request bodies of other media types."""

    async def _require_media_type(request: Request) -> None:
        content_type = request.headers.get("content-type", "")
        media_type = content_type.split(";", 1)[0].strip().lower()
        if media_type not in media_types:
            raise HTTPException(
                status_code=status.HTTP_415_UNSUPPORTED_MEDIA_TYPE,
                detail=f"Content type '{content_type}' not supported",
            )

    return _require_media_type


def _authorize_edit(
    user: User,
    message: str,
    team_profile: Optional[TeamProfile] = None,
) -> None:
    if not can_edit_team_profile(user, team_profile):
        raise AuthorizationError(message, ENTITY_NAME, "idinvalid")


@router.post("", response_model=TeamProfileResponse, status_code=status.HTTP_201_CREATED)
async def create_team_profile(
    data: TeamProfileDTO,
    request: Request,
    response: Response,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """
    Create a new team profile.
    Requires admin. The body must not carry an id.
    """
    logger.debug("REST request to save TeamProfile", data=data.model_dump(), user=current_user.login)
    if data.id is not None:
        raise ValidationError("A new teamProfile cannot already have an ID", ENTITY_NAME, "idexists")

    _authorize_edit(current_user, f"Only admins can create {ENTITY_NAME}")

    team_profile = await save_team_profile(db, data, created_by=current_user.login)

    response.headers["Location"] = request.app.url_path_for(
        "get_team_profile", team_profile_id=str(team_profile.id)
    )
    response.headers.update(entity_creation_alert(ENTITY_NAME, str(team_profile.id)))
    return TeamProfileResponse.model_validate(team_profile)


@router.put("/{team_profile_id}", response_model=TeamProfileResponse)
async def update_team_profile(
    team_profile_id: int,
    data: TeamProfileDTO,
    response: Response,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """
    Replace an existing team profile.
    Requires admin or membership of the stored team.
    """
    logger.debug("REST request to update TeamProfile", team_profile_id=team_profile_id, data=data.model_dump())
    if data.id is None:
        raise ValidationError("Invalid id", ENTITY_NAME, "idnull")
    if data.id != team_profile_id:
        raise ValidationError("Invalid ID", ENTITY_NAME, "idinvalid")

    stored = await find_team_profile(db, team_profile_id)
    if stored is None:
        raise NotFoundError("Entity not found", ENTITY_NAME, "idnotfound")

    _authorize_edit(
        current_user,
        "Only admins or team members can edit the team profile",
        stored,
    )

    team_profile = await replace_team_profile(db, data, modified_by=current_user.login)
    if team_profile is None:
        raise NotFoundError("Entity not found", ENTITY_NAME, "idnotfound")

    response.headers.update(entity_update_alert(ENTITY_NAME, str(team_profile.id)))
    return TeamProfileResponse.model_validate(team_profile)


@router.patch(
    "/{team_profile_id}",
    response_model=TeamProfileResponse,
    dependencies=[Depends(require_media_type(*PATCH_MEDIA_TYPES))],
)
async def partial_update_team_profile(
    team_profile_id: int,
    data: TeamProfilePatch,
    response: Response,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """
    Merge-patch an existing team profile; only fields present in the body change.
    Requires admin or membership of the stored team.
    """
    logger.debug(
        "REST request to partial update TeamProfile",
        team_profile_id=team_profile_id,
        data=data.model_dump(exclude_unset=True),
    )
    if data.id is None or data.id != team_profile_id:
        raise ValidationError("Invalid ID", ENTITY_NAME, "idinvalid")

    stored = await find_team_profile(db, team_profile_id)
    if stored is None:
        raise NotFoundError("Entity not found", ENTITY_NAME, "idnotfound")

    _authorize_edit(
        current_user,
        "Only admins or team members can edit the team profile",
        stored,
    )

    team_profile = await merge_team_profile(db, data, modified_by=current_user.login)
    if team_profile is None:
        raise NotFoundError("Entity not found", ENTITY_NAME, "idnotfound")

    response.headers.update(entity_update_alert(ENTITY_NAME, str(team_profile.id)))
    return TeamProfileResponse.model_validate(team_profile)


@router.get("", response_model=List[TeamProfileResponse])
async def list_team_profiles(
    db: AsyncSession = Depends(get_db),
    current_user: Optional[User] = Depends(get_current_user_optional),
):
    """
    List all team profiles.
    Open to any caller; results do not depend on who asks.
    """
    logger.debug("REST request to get all TeamProfiles", user=current_user.login if current_user else None)
    team_profiles = await find_all_team_profiles(db)
    return [TeamProfileResponse.model_validate(t) for t in team_profiles]


@router.get("/{team_profile_id}", response_model=TeamProfileResponse)
async def get_team_profile(
    team_profile_id: int,
    db: AsyncSession = Depends(get_db),
    current_user: Optional[User] = Depends(get_current_user_optional),
):
    """
    Get a team profile by ID.
    """
    logger.debug(
        "REST request to get TeamProfile",
        team_profile_id=team_profile_id,
        user=current_user.login if current_user else None,
    )
    team_profile = await find_team_profile(db, team_profile_id)

    if team_profile is None:
        raise NotFoundError("Entity not found", ENTITY_NAME, "idnotfound")

    return TeamProfileResponse.model_validate(team_profile)


@router.delete("/{team_profile_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_team_profile(
    team_profile_id: int,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """
    Delete a team profile.
    Requires admin. Deleting an unknown id still answers 204.
    """
    logger.debug("REST request to delete TeamProfile", team_profile_id=team_profile_id)
    _authorize_edit(current_user, "Only admins can delete team profiles")

    await delete_team_profile_by_id(db, team_profile_id)

    return Response(
        status_code=status.HTTP_204_NO_CONTENT,
        headers=entity_deletion_alert(ENTITY_NAME, str(team_profile_id)),
    )
