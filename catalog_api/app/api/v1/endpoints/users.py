"""
User endpoints for API v1.

Listing, creation, partial update and deletion all live on the
collection path; update and delete take the user ``id`` in the JSON
body.  A single user can also be fetched by id, which is where the
``Location`` header of a newly created user points.
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Body, Depends, Request, Response, status

from catalog_api.app.api.v1.dependencies import get_user_service
from catalog_api.app.schemas.user import UserDeleted, UserRead
from catalog_api.app.services.user_service import UserService

router = APIRouter()


@router.get("", response_model=List[UserRead])
async def list_users(service: UserService = Depends(get_user_service)) -> List[UserRead]:
    """Return every user."""
    return await service.list_users()


@router.get("/{user_id}", response_model=UserRead)
async def get_user(user_id: str, service: UserService = Depends(get_user_service)) -> UserRead:
    return await service.get_user(user_id)


@router.post("", response_model=UserRead, status_code=status.HTTP_201_CREATED)
async def create_user(
    request: Request,
    response: Response,
    body: Dict[str, Any] = Body(...),
    service: UserService = Depends(get_user_service),
) -> UserRead:
    """Register a user from ``{"name", "email", "age"}``.

    The email is stored trimmed and lowercased and must not belong to
    another user.
    """
    user = await service.create_user(body)
    response.headers["Location"] = str(request.app.url_path_for("get_user", user_id=str(user.id)))
    return user


@router.put("", response_model=UserRead)
async def update_user(
    body: Dict[str, Any] = Body(...),
    service: UserService = Depends(get_user_service),
) -> UserRead:
    """Partially update the user identified by ``body["id"]``.

    Only ``name``, ``email`` and ``age`` may be supplied; fields left
    out keep their current values.
    """
    return await service.update_user(body)


@router.delete("", response_model=UserDeleted)
async def delete_user(
    body: Dict[str, Any] = Body(...),
    service: UserService = Depends(get_user_service),
) -> UserDeleted:
    """Delete the user identified by ``body["id"]``."""
    return await service.delete_user(body)
