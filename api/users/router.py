"""
User API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from core.db import Database, get_database
from core.responses import ApiResponse, success_response

from . import schemas, service

router = APIRouter()

_ROWS = {"model": ApiResponse[list[schemas.UserResponse]]}
_ERROR = {"model": ApiResponse[None]}


@router.get("/", include_in_schema=False)
@router.get(
    "",
    summary="Returns the list of all active users",
    responses={200: _ROWS, 500: _ERROR},
)
async def get_users(db: Database = Depends(get_database)) -> dict:
    rows = await service.list_users(db)
    return success_response(rows, "Users retrieved successfully")


@router.get(
    "/{user_id}",
    summary="Get the user by id",
    responses={200: _ROWS, 404: _ERROR, 500: _ERROR},
)
async def get_user_by_id(user_id: str, db: Database = Depends(get_database)) -> dict:
    row = await service.get_user(db, user_id)
    return success_response([row], "User retrieved successfully")


@router.post(
    "/create",
    status_code=status.HTTP_201_CREATED,
    summary="Create a new user",
    responses={201: _ROWS, 422: _ERROR, 500: _ERROR},
)
async def create_user(
    payload: schemas.CreateUserRequest,
    db: Database = Depends(get_database),
) -> dict:
    row = await service.create_user(db, payload)
    return success_response([row], "User created successfully")


@router.put(
    "/{user_id}",
    summary="Update the user by id",
    responses={200: _ROWS, 404: _ERROR, 422: _ERROR, 500: _ERROR},
)
async def update_user(
    user_id: str,
    payload: schemas.UpdateUserRequest,
    db: Database = Depends(get_database),
) -> dict:
    row = await service.update_user(db, user_id, payload)
    return success_response([row], "User updated successfully")


@router.delete(
    "/{user_id}",
    summary="Soft-delete the user by id",
    responses={200: _ROWS, 404: _ERROR, 500: _ERROR},
)
async def delete_user(user_id: str, db: Database = Depends(get_database)) -> dict:
    """
    Marks the user inactive; the row is kept.
    """
    row = await service.delete_user(db, user_id)
    return success_response([row], "User deleted successfully")
