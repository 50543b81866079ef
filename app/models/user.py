from typing import Optional, TYPE_CHECKING

from sqlalchemy import String, Boolean
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.models.base import Base

if TYPE_CHECKING:
    from app.models.auth import UserRole


class User(Base):
    """
    Account entity.
    The login is the identity carried in access tokens and used for
    team membership checks.
    """

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)

    login: Mapped[str] = mapped_column(
        String(50),
        unique=True,
        nullable=False,
        index=True,
    )

    email: Mapped[Optional[str]] = mapped_column(String(254), nullable=True)
    first_name: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    last_name: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)

    activated: Mapped[bool] = mapped_column(Boolean, default=True)

    # Relationship to roles
    user_roles: Mapped[list["UserRole"]] = relationship(
        "UserRole",
        back_populates="user",
        lazy="selectin",
        cascade="all, delete-orphan",
    )

    @property
    def role_names(self) -> set[str]:
        """Names of all global roles granted to this user."""
        return {user_role.role.name for user_role in self.user_roles}

    def __repr__(self) -> str:
        return f"<User {self.login} ({self.id})>"
