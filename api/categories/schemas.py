"""
Category API schemas (request/response models).
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class CreateCategoryRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)

    category_name: str = Field(..., alias="categoryName")
    created_by: str | None = Field(default=None, alias="createdBy")


class UpdateCategoryRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)

    category_name: str = Field(..., alias="categoryName")
    is_active: bool = Field(..., alias="isActive")
    updated_by: str | None = Field(default=None, alias="updatedBy")


class CategoryResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    category_name: str = Field(..., alias="categoryName")
    is_active: bool = Field(..., alias="isActive")
    created_by: str | None = Field(default=None, alias="createdBy")
    updated_by: str | None = Field(default=None, alias="updatedBy")
