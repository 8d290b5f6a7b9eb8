"""Gift routes."""

from decimal import Decimal
from uuid import UUID

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header, HTTPException, status
from pydantic import BaseModel, ValidationError

from wedding.application.usecase.gift import (
    ConfirmGiftRequest,
    ConfirmGiftResponse,
    ConfirmGiftUseCase,
    GetGiftsRequest,
    GetGiftsResponse,
    GetGiftsUseCase,
    RecordGiftRequest,
    RecordGiftResponse,
    RecordGiftUseCase,
)
from wedding.domain.error import (
    InvitationNotPublishedError,
    NotAuthorizedError,
    NotFoundError,
)
from wedding.domain.service import JWTService
from wedding.interface.api.security import require_user_id, unprocessable

router = APIRouter(prefix="/invitations", tags=["gifts"], route_class=DishkaRoute)


class RecordGiftAPIRequest(BaseModel):
    """API request for reporting a gift."""

    sender_name: str
    amount: Decimal
    bank_account: str
    message: str | None = None


@router.post(
    "/{invitation_id}/gifts",
    response_model=RecordGiftResponse,
    status_code=status.HTTP_201_CREATED,
)
async def record_gift(
    invitation_id: UUID,
    request: RecordGiftAPIRequest,
    record_gift_use_case: FromDishka[RecordGiftUseCase],
) -> RecordGiftResponse:
    """Report a gift sent to one of the couple's accounts.

    Guests are anonymous; the gift stays unconfirmed until the owner
    confirms it.
    """
    try:
        return await record_gift_use_case.execute(
            RecordGiftRequest(invitation_id=str(invitation_id), **request.model_dump())
        )
    except (NotFoundError, InvitationNotPublishedError) as e:
        logfire.warn("Gift rejected", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Invitation not found"
        )
    except ValidationError as e:
        raise unprocessable(e)


@router.get("/{invitation_id}/gifts", response_model=GetGiftsResponse)
async def get_gifts(
    invitation_id: UUID,
    get_gifts_use_case: FromDishka[GetGiftsUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> GetGiftsResponse:
    """List reported gifts for the owner, newest first."""
    user_id = require_user_id(jwt_service, authorization, auth_token, "view gifts")

    try:
        return await get_gifts_use_case.execute(
            GetGiftsRequest(invitation_id=str(invitation_id), user_id=user_id)
        )
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except NotAuthorizedError:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Not authorized to view these gifts",
        )


@router.post(
    "/{invitation_id}/gifts/{gift_id}/confirm", response_model=ConfirmGiftResponse
)
async def confirm_gift(
    invitation_id: UUID,
    gift_id: UUID,
    confirm_gift_use_case: FromDishka[ConfirmGiftUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> ConfirmGiftResponse:
    """Confirm a gift was received. Confirming twice is harmless."""
    user_id = require_user_id(
        jwt_service, authorization, auth_token, "confirm gifts"
    )

    try:
        return await confirm_gift_use_case.execute(
            ConfirmGiftRequest(
                invitation_id=str(invitation_id),
                gift_id=str(gift_id),
                user_id=user_id,
            )
        )
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except NotAuthorizedError as e:
        logfire.warn("Unauthorized gift confirmation attempt", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Not authorized to confirm this gift",
        )
