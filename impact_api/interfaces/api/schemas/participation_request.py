"""Pydantic models for the participation request endpoints."""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import Field

from impact_api.domain.entities import MAX_REQUEST_TEXT_LENGTH

from .base import CamelModel


class ParticipationRequestCreate(CamelModel):
    message: str | None = Field(default=None, max_length=MAX_REQUEST_TEXT_LENGTH)


class ParticipationStatusUpdate(CamelModel):
    status: Literal["accepted", "rejected"]
    rejection_reason: str | None = Field(default=None, max_length=MAX_REQUEST_TEXT_LENGTH)


class ParticipationRequestRead(CamelModel):
    id: int
    event_id: int
    user_id: int
    event_creator_id: int
    status: str
    message: str | None = None
    rejection_reason: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class ParticipationRequestResponse(CamelModel):
    success: bool = True
    data: ParticipationRequestRead
    message: str


class ParticipationRequestListResponse(CamelModel):
    success: bool = True
    data: list[ParticipationRequestRead]
    message: str


class ParticipationRequestStats(CamelModel):
    pending: int
    accepted: int
    rejected: int
    total: int


class ParticipationRequestStatsResponse(CamelModel):
    success: bool = True
    data: ParticipationRequestStats
    message: str


__all__ = [
    "ParticipationRequestCreate",
    "ParticipationRequestListResponse",
    "ParticipationRequestRead",
    "ParticipationRequestResponse",
    "ParticipationRequestStats",
    "ParticipationRequestStatsResponse",
    "ParticipationStatusUpdate",
]
