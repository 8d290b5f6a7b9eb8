"""Comment routes (guest wishes and attendance)."""

from uuid import UUID

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header, HTTPException, status
from pydantic import BaseModel, ValidationError

from wedding.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
)
from wedding.domain.error import (
    CommentsClosedError,
    InvitationNotPublishedError,
    NotFoundError,
    RsvpClosedError,
)
from wedding.domain.service import JWTService
from wedding.domain.value import Attendance
from wedding.interface.api.security import optional_user_id, unprocessable

router = APIRouter(prefix="/invitations", tags=["comments"], route_class=DishkaRoute)


class CreateCommentAPIRequest(BaseModel):
    """API request for leaving a comment."""

    name: str
    message: str
    attendance: Attendance


@router.post(
    "/{invitation_id}/comments",
    response_model=CreateCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    invitation_id: UUID,
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
) -> CreateCommentResponse:
    """Leave a wish and attendance answer on a published invitation.

    Guests are anonymous; no authentication is required.
    Returns 409 when comments are closed or no more guests can confirm.
    """
    try:
        return await create_comment_use_case.execute(
            CreateCommentRequest(
                invitation_id=str(invitation_id),
                name=request.name,
                message=request.message,
                attendance=request.attendance,
            )
        )
    except (NotFoundError, InvitationNotPublishedError) as e:
        logfire.warn("Comment rejected", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Invitation not found"
        )
    except (CommentsClosedError, RsvpClosedError) as e:
        logfire.warn("Comment rejected", error=str(e))
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except ValidationError as e:
        raise unprocessable(e)


@router.get("/{invitation_id}/comments", response_model=GetCommentsResponse)
async def get_comments(
    invitation_id: UUID,
    get_comments_use_case: FromDishka[GetCommentsUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> GetCommentsResponse:
    """List wishes (oldest first) with attendance counts.

    Drafts are only visible to an authenticated owner.
    """
    user_id = optional_user_id(jwt_service, authorization, auth_token)
    try:
        return await get_comments_use_case.execute(
            GetCommentsRequest(invitation_id=str(invitation_id), user_id=user_id)
        )
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Invitation not found"
        )
