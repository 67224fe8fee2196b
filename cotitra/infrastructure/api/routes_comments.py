"""Comment endpoints: nested under a ticket."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from cotitra.application.services.comment_service import CommentService
from cotitra.domain.entities.comment import AddCommentData
from cotitra.infrastructure.api.dependencies import get_comment_service, get_current_user_id
from cotitra.infrastructure.api.schemas import CommentCreateRequest, CommentResponse

router = APIRouter(prefix="/tickets/{ticket_id}/comments", tags=["comments"])


@router.get("", response_model=list[CommentResponse])
async def list_comments(
    ticket_id: str, service: CommentService = Depends(get_comment_service)
):
    return await service.get_comments_by_ticket_id(ticket_id)


@router.post("", response_model=CommentResponse, status_code=201)
async def add_comment(
    ticket_id: str,
    body: CommentCreateRequest,
    user_id: str | None = Depends(get_current_user_id),
    service: CommentService = Depends(get_comment_service),
):
    return await service.add_comment(
        AddCommentData(ticket_id=ticket_id, content=body.content, author_id=user_id)
    )
