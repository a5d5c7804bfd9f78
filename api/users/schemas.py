"""
User API schemas (request/response models).

JSON uses camelCase (`isActive`, `createdBy`); Python uses snake_case.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class CreateUserRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)

    username: str
    password: str
    email: str
    created_by: str | None = Field(default=None, alias="createdBy")


class UpdateUserRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)

    username: str
    password: str
    email: str
    is_active: bool = Field(..., alias="isActive")
    updated_by: str | None = Field(default=None, alias="updatedBy")


class UserResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    username: str
    email: str
    is_active: bool = Field(..., alias="isActive")
    created_by: str | None = Field(default=None, alias="createdBy")
    updated_by: str | None = Field(default=None, alias="updatedBy")
