from app.models.base import Base, CreatedModifiedMixin
from app.models.user import User
from app.models.auth import Role, UserRole
from app.models.user_profile import UserProfile
from app.models.team_profile import TeamProfile, team_profile_members

__all__ = [
    "Base",
    "CreatedModifiedMixin",
    "User",
    "Role",
    "UserRole",
    "UserProfile",
    "TeamProfile",
    "team_profile_members",
]
