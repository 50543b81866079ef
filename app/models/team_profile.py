from typing import Optional, TYPE_CHECKING

from sqlalchemy import Column, ForeignKey, String, Table, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.models.base import Base, CreatedModifiedMixin

if TYPE_CHECKING:
    from app.models.user_profile import UserProfile


team_profile_members = Table(
    "team_profile_members",
    Base.metadata,
    Column(
        "team_profile_id",
        ForeignKey("team_profiles.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "user_profile_id",
        ForeignKey("user_profiles.id", ondelete="CASCADE"),
        primary_key=True,
    ),
)


class TeamProfile(Base, CreatedModifiedMixin):
    """
    Team profile entity.
    Members are user profiles; a member may edit the profile of their own team.
    """

    __tablename__ = "team_profiles"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    image_url: Mapped[Optional[str]] = mapped_column(String(512), nullable=True)

    team_members: Mapped[list["UserProfile"]] = relationship(
        "UserProfile",
        secondary=team_profile_members,
        lazy="selectin",
        order_by="UserProfile.id",
    )

    @property
    def member_logins(self) -> set[str]:
        return {member.login for member in self.team_members}

    def __repr__(self) -> str:
        return f"<TeamProfile {self.name} ({self.id})>"
