from typing import Optional, List

from pydantic import BaseModel, Field

from app.schemas.base import BaseSchema, AuditMixin


class UserProfileRef(BaseModel):
    """Reference to an existing user profile, by id."""

    id: int


class TeamProfileBase(BaseModel):
    """Base schema for TeamProfile."""

    name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    image_url: Optional[str] = Field(None, max_length=512)


class TeamProfileDTO(TeamProfileBase):
    """
    Schema for creating or fully replacing a team profile.
    The id is checked by the endpoint, not here.
    """

    id: Optional[int] = None
    team_members: List[UserProfileRef] = Field(default_factory=list)


class TeamProfilePatch(BaseModel):
    """Schema for merge-patching a team profile; only sent fields are applied."""

    id: Optional[int] = None
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    image_url: Optional[str] = Field(None, max_length=512)
    team_members: Optional[List[UserProfileRef]] = None


class TeamMemberResponse(BaseSchema):
    """A user profile as listed in a team profile."""

    id: int
    display_name: Optional[str] = None
    login: str


class TeamProfileResponse(BaseSchema, TeamProfileBase, AuditMixin):
    """Response schema for a team profile."""

    id: int
    team_members: List[TeamMemberResponse] = []
