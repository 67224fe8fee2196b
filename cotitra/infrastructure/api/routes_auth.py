"""Credential check endpoint used by the session layer in front of the API."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from cotitra.application.services.auth_service import AuthService
from cotitra.infrastructure.api.dependencies import get_auth_service
from cotitra.infrastructure.api.schemas import LoginRequest, UserPublicResponse

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/login", response_model=UserPublicResponse)
async def login(body: LoginRequest, service: AuthService = Depends(get_auth_service)):
    user = await service.validate_credentials(body.email, body.password)
    if user is None:
        raise HTTPException(status_code=401, detail="Identifiants invalides")
    return user
