"""Endpoints for requesting, deciding and reviewing event participation."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Literal

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from impact_api.application.use_cases.participation_requests import (
    cancel_participation_request,
    create_participation_request,
    get_participation_request_stats,
    list_requests_by_user,
    list_requests_for_creator,
    list_requests_for_event,
    update_participation_request_status,
)
from impact_api.domain.entities import ParticipationRequest, User
from impact_api.infrastructure.database import get_db
from impact_api.interfaces.api.dependencies import get_current_active_user
from impact_api.interfaces.api.routes_helpers import http_error_for
from impact_api.interfaces.api.schemas import (
    MessageResponse,
    ParticipationRequestCreate,
    ParticipationRequestListResponse,
    ParticipationRequestRead,
    ParticipationRequestResponse,
    ParticipationRequestStats,
    ParticipationRequestStatsResponse,
    ParticipationStatusUpdate,
)

router = APIRouter(prefix="/v1/participation-requests", tags=["participation-requests"])
logger = logging.getLogger(__name__)

StatusFilter = Literal["pending", "accepted", "rejected"]


def _to_schema(request: ParticipationRequest) -> ParticipationRequestRead:
    return ParticipationRequestRead.model_validate(request)


def _to_list(requests: Iterable[ParticipationRequest]) -> list[ParticipationRequestRead]:
    return [_to_schema(request) for request in requests]


@router.post(
    "/event/{event_id}",
    response_model=ParticipationRequestResponse,
    status_code=status.HTTP_201_CREATED,
)
def request_participation(
    event_id: int,
    payload: ParticipationRequestCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> ParticipationRequestResponse:
    try:
        request = create_participation_request(
            db, event_id=event_id, user_id=current_user.id, message=payload.message
        )
    except (ValueError, PermissionError) as exc:
        raise http_error_for(exc) from exc
    return ParticipationRequestResponse(
        data=_to_schema(request),
        message="Participation request sent successfully",
    )


@router.get("/my-requests", response_model=ParticipationRequestListResponse)
def list_my_requests(
    status_filter: StatusFilter | None = Query(None, alias="status"),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> ParticipationRequestListResponse:
    """Requests received for the events created by the current user."""

    requests = list_requests_for_creator(
        db, event_creator_id=current_user.id, status=status_filter or "pending"
    )
    return ParticipationRequestListResponse(
        data=_to_list(requests),
        message="Participation requests retrieved successfully",
    )


@router.get("/user-requests", response_model=ParticipationRequestListResponse)
def list_user_requests(
    status_filter: StatusFilter | None = Query(None, alias="status"),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> ParticipationRequestListResponse:
    """Requests sent by the current user."""

    requests = list_requests_by_user(db, user_id=current_user.id, status=status_filter)
    return ParticipationRequestListResponse(
        data=_to_list(requests),
        message="User participation requests retrieved successfully",
    )


@router.get("/event/{event_id}/requests", response_model=ParticipationRequestListResponse)
def list_event_requests(
    event_id: int,
    status_filter: StatusFilter | None = Query(None, alias="status"),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> ParticipationRequestListResponse:
    try:
        requests = list_requests_for_event(
            db, event_id=event_id, requested_by=current_user.id, status=status_filter
        )
    except (ValueError, PermissionError) as exc:
        raise http_error_for(exc) from exc
    return ParticipationRequestListResponse(
        data=_to_list(requests),
        message="Event participation requests retrieved successfully",
    )


@router.get("/stats", response_model=ParticipationRequestStatsResponse)
def read_stats(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> ParticipationRequestStatsResponse:
    stats = get_participation_request_stats(db, event_creator_id=current_user.id)
    return ParticipationRequestStatsResponse(
        data=ParticipationRequestStats(**stats),
        message="Participation request statistics retrieved successfully",
    )


@router.put("/{request_id}/status", response_model=ParticipationRequestResponse)
def decide_request(
    request_id: int,
    payload: ParticipationStatusUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> ParticipationRequestResponse:
    """Accept or reject a pending request for one of the caller's events."""

    try:
        request = update_participation_request_status(
            db,
            request_id=request_id,
            status=payload.status,
            event_creator_id=current_user.id,
            rejection_reason=payload.rejection_reason,
        )
    except (ValueError, PermissionError) as exc:
        raise http_error_for(exc) from exc
    return ParticipationRequestResponse(
        data=_to_schema(request),
        message=f"Participation request {payload.status} successfully",
    )


@router.delete("/{request_id}", response_model=MessageResponse)
def cancel_request(
    request_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> MessageResponse:
    try:
        cancel_participation_request(db, request_id=request_id, user_id=current_user.id)
    except (ValueError, PermissionError) as exc:
        raise http_error_for(exc) from exc
    return MessageResponse(message="Participation request cancelled successfully")
