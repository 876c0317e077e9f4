"""
Pydantic schemas for organization endpoints.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


class OrgPayload(BaseModel):
    # Client-supplied `id` and unknown keys are ignored.
    model_config = ConfigDict(extra="ignore")

    name: str = ""
    hrms_org_id: str = ""
    propeak_org_id: str = ""
    skillzengine_org_id: str = ""

    @field_validator("*", mode="before")
    @classmethod
    def _null_as_empty(cls, value: object) -> object:
        return "" if value is None else value


class Org(BaseModel):
    id: str
    name: str | None = None
    hrms_org_id: str | None = None
    propeak_org_id: str | None = None
    skillzengine_org_id: str | None = None


class OrgResponse(BaseModel):
    success: bool = True
    org: Org
    message: str


class OrgDeleteResponse(BaseModel):
    success: bool = True
    message: str


class OrgPage(BaseModel):
    data: list[Org] = Field(default_factory=list)
    total: int
    pages: int
    page: int
