"""User endpoints: public projections only (no email, no password)."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from cotitra.application.services.user_service import UserService
from cotitra.infrastructure.api.dependencies import get_user_service
from cotitra.infrastructure.api.schemas import UserPublicResponse

router = APIRouter(prefix="/users", tags=["users"])


@router.get("", response_model=list[UserPublicResponse])
async def list_users(service: UserService = Depends(get_user_service)):
    return await service.get_users()


@router.get("/{user_id}", response_model=UserPublicResponse)
async def get_user(user_id: str, service: UserService = Depends(get_user_service)):
    user = await service.get_user_by_id(user_id)
    if user is None:
        raise HTTPException(status_code=404, detail="Utilisateur non trouvé")
    return user
