"""Async HTTP client for the notification inbox endpoints."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

import httpx
from pydantic import ValidationError

from impact_api.interfaces.api.schemas import (
    NotificationListResponse,
    UnreadCountResponse,
)

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 10.0


class NotificationApiError(Exception):
    """A notification request failed or returned an unexpected payload."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class NotificationsApiClient:
    """Thin wrapper around ``httpx.AsyncClient`` bound to one bearer token."""

    def __init__(
        self,
        base_url: str,
        token: str,
        *,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._client = httpx.AsyncClient(
            base_url=base_url,
            timeout=timeout,
            transport=transport,
            headers={
                "Authorization": f"Bearer {token}",
                "Accept": "application/json",
            },
        )

    async def __aenter__(self) -> "NotificationsApiClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def list_notifications(
        self, *, limit: int, skip: int = 0, unread_only: bool = False
    ) -> NotificationListResponse:
        params: dict[str, Any] = {"limit": limit, "skip": skip}
        if unread_only:
            params["unreadOnly"] = "true"
        payload = await self._request("GET", "/v1/notifications", params=params)
        return self._parse(NotificationListResponse, payload)

    async def unread_count(self) -> int:
        payload = await self._request("GET", "/v1/notifications/unread-count")
        return self._parse(UnreadCountResponse, payload).count

    async def mark_read(self, notification_ids: Iterable[int]) -> None:
        await self._request(
            "PUT",
            "/v1/notifications/mark-read",
            json={"notificationIds": list(notification_ids)},
        )

    async def mark_all_read(self) -> None:
        await self._request("PUT", "/v1/notifications/mark-all-read")

    async def delete(self, notification_id: int) -> None:
        await self._request("DELETE", f"/v1/notifications/{notification_id}")

    async def _request(self, method: str, path: str, **kwargs: Any) -> dict[str, Any]:
        try:
            response = await self._client.request(method, path, **kwargs)
            response.raise_for_status()
            payload = response.json()
        except httpx.HTTPStatusError as exc:
            status_code = exc.response.status_code
            raise NotificationApiError(
                f"{method} {path} failed with status {status_code}", status_code=status_code
            ) from exc
        except httpx.HTTPError as exc:
            raise NotificationApiError(f"{method} {path} failed: {exc}") from exc
        except ValueError as exc:
            raise NotificationApiError(f"{method} {path} returned invalid JSON") from exc

        if not isinstance(payload, dict) or payload.get("success") is not True:
            message = payload.get("message") if isinstance(payload, dict) else None
            raise NotificationApiError(
                message or f"{method} {path} was not successful",
                status_code=response.status_code,
            )
        return payload

    @staticmethod
    def _parse(model, payload: dict[str, Any]):
        try:
            return model.model_validate(payload)
        except ValidationError as exc:
            raise NotificationApiError(f"Unexpected response payload: {exc}") from exc


__all__ = ["NotificationApiError", "NotificationsApiClient"]
