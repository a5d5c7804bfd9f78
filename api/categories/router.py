"""
Category API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from core.db import Database, get_database
from core.responses import ApiResponse, success_response

from . import schemas, service

router = APIRouter()

_ROWS = {"model": ApiResponse[list[schemas.CategoryResponse]]}
_ERROR = {"model": ApiResponse[None]}


@router.get("/", include_in_schema=False)
@router.get("", summary="Returns the list of all active categories", responses={200: _ROWS, 500: _ERROR})
async def get_categories(db: Database = Depends(get_database)) -> dict:
    rows = await service.list_categories(db)
    return success_response(rows, "Categories retrieved successfully")


@router.get("/{category_id}", summary="Get the category by id", responses={200: _ROWS, 404: _ERROR, 500: _ERROR})
async def get_category_by_id(category_id: str, db: Database = Depends(get_database)) -> dict:
    row = await service.get_category(db, category_id)
    return success_response([row], "Category retrieved successfully")


@router.post(
    "/create",
    status_code=status.HTTP_201_CREATED,
    summary="Create a new category",
    responses={201: _ROWS, 422: _ERROR, 500: _ERROR},
)
async def create_category(
    payload: schemas.CreateCategoryRequest,
    db: Database = Depends(get_database),
) -> dict:
    row = await service.create_category(db, payload)
    return success_response([row], "Category created successfully")


@router.put(
    "/{category_id}",
    summary="Update the category by id",
    responses={200: _ROWS, 404: _ERROR, 422: _ERROR, 500: _ERROR},
)
async def update_category(
    category_id: str,
    payload: schemas.UpdateCategoryRequest,
    db: Database = Depends(get_database),
) -> dict:
    row = await service.update_category(db, category_id, payload)
    return success_response([row], "Category updated successfully")


@router.delete(
    "/{category_id}",
    summary="Soft-delete the category by id",
    responses={200: _ROWS, 404: _ERROR, 500: _ERROR},
)
async def delete_category(category_id: str, db: Database = Depends(get_database)) -> dict:
    row = await service.delete_category(db, category_id)
    return success_response([row], "Category deleted successfully")
