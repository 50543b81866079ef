from typing import Any, Optional, List

from pydantic import BaseModel, ConfigDict, Field


class FieldError(BaseModel):
    """A single request body validation failure."""

    field: str
    message: str


class ProblemDetail(BaseModel):
    """Problem-detail body returned for every handled error."""

    model_config = ConfigDict(populate_by_name=True)

    type: str = "about:blank"
    title: str
    status: int
    detail: Optional[str] = None
    message: str
    entity_name: Optional[str] = Field(None, alias="entityName")
    error_key: Optional[str] = Field(None, alias="errorKey")
    field_errors: Optional[List[FieldError]] = Field(None, alias="fieldErrors")

    def to_content(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)
