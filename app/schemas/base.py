from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict


class BaseSchema(BaseModel):
    """Base schema with common configuration."""

    model_config = ConfigDict(from_attributes=True)


class TimestampMixin(BaseModel):
    """Mixin for created_at/modified_at fields."""

    created_at: Optional[datetime] = None
    modified_at: Optional[datetime] = None


class AuditMixin(TimestampMixin):
    """Mixin for full audit fields including created_by/modified_by logins."""

    created_by: Optional[str] = None
    modified_by: Optional[str] = None
