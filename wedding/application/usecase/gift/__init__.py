"""Gift use cases."""

from .common import GiftItem
from .confirm_gift import ConfirmGiftRequest, ConfirmGiftResponse, ConfirmGiftUseCase
from .get_gifts import GetGiftsRequest, GetGiftsResponse, GetGiftsUseCase
from .record_gift import RecordGiftRequest, RecordGiftResponse, RecordGiftUseCase

__all__ = [
    "GiftItem",
    "ConfirmGiftRequest",
    "ConfirmGiftResponse",
    "ConfirmGiftUseCase",
    "GetGiftsRequest",
    "GetGiftsResponse",
    "GetGiftsUseCase",
    "RecordGiftRequest",
    "RecordGiftResponse",
    "RecordGiftUseCase",
]
