"""
Pydantic schemas for user endpoints.

User endpoints return the bare record, unlike orgs which wrap it.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


class UserPayload(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str = ""
    email: str = ""
    hrms_user_id: str = ""
    propeak_user_id: str = ""
    skillzengine_user_id: str = ""

    @field_validator("*", mode="before")
    @classmethod
    def _null_as_empty(cls, value: object) -> object:
        return "" if value is None else value


class User(BaseModel):
    id: str
    name: str | None = None
    email: str | None = None
    hrms_user_id: str | None = None
    propeak_user_id: str | None = None
    skillzengine_user_id: str | None = None


class UserPage(BaseModel):
    data: list[User] = Field(default_factory=list)
    total: int
    pages: int
    page: int
