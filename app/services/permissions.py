from typing import Optional

from app.models.team_profile import TeamProfile
from app.models.user import User


ADMIN = "ROLE_ADMIN"
USER = "ROLE_USER"


def has_role(user: User, role_name: str) -> bool:
    """Check if user holds a specific global role."""
    return role_name in user.role_names


def is_admin(user: User) -> bool:
    """Check if user is a global admin."""
    return has_role(user, ADMIN)


def is_team_member(user: User, team_profile: TeamProfile) -> bool:
    """Check if the user's login is among the team profile's members."""
    return user.login in team_profile.member_logins


def can_edit_team_profile(user: User, team_profile: Optional[TeamProfile] = None) -> bool:
    """
    Check if user may modify a team profile.
    User can modify if:
    - User is a global admin, OR
    - A stored team profile is given and the user is one of its members
    Without a stored team profile (create, delete) only admins pass.
    """
    if is_admin(user):
        return True

    if team_profile is None:
        return False

    return is_team_member(user, team_profile)
