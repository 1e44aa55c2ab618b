"""HTTP client for the speedrun.com notifications API."""

from __future__ import annotations

import logging

import httpx
from pydantic import ValidationError

from srnotify.cli.models import NotificationResponse
from srnotify.constants import (
    BASE_URL,
    BROWSER_HEADERS,
    NOTIFICATIONS_ENDPOINT,
    REQUEST_BODY,
    REQUEST_TIMEOUT_S,
    SESSION_COOKIE_NAME,
)
from srnotify.errors import APIError, DecodeError, NetworkError

logger = logging.getLogger(__name__)

__all__ = ["SpeedrunClient"]


class SpeedrunClient:
    """Blocking client for the authenticated notifications endpoint.

    One request per call, no retries and no pagination: only page 1 is ever
    requested.
    """

    def __init__(
        self,
        session_id: str,
        *,
        base_url: str = BASE_URL,
        timeout: float = REQUEST_TIMEOUT_S,
        transport: httpx.BaseTransport | None = None,
    ):
        """Initialize client.

        Args:
            session_id: Value of the site's session cookie
            base_url: API base URL
            timeout: Request timeout in seconds
            transport: Optional httpx transport (tests inject a mock)
        """
        self.session_id = session_id
        self.base_url = base_url
        self._client = httpx.Client(
            base_url=base_url,
            headers=BROWSER_HEADERS,
            cookies={SESSION_COOKIE_NAME: session_id},
            timeout=timeout,
            transport=transport,
        )

    def __enter__(self) -> "SpeedrunClient":
        return self

    def __exit__(self, *_exc: object) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying connection pool."""
        self._client.close()

    def fetch_notifications(self) -> NotificationResponse:
        """Fetch the first page of notifications.

        Returns:
            Decoded notification response

        Raises:
            NetworkError: On timeout or transport failure
            APIError: If the API answers with a non-success status
            DecodeError: If the body is not a valid notification response
        """
        logger.debug("POST %s%s", self.base_url, NOTIFICATIONS_ENDPOINT)
        try:
            resp = self._client.post(NOTIFICATIONS_ENDPOINT, json=REQUEST_BODY)
        except httpx.TransportError as e:
            # TimeoutException is a TransportError subclass
            logger.debug("Notifications request failed: %s", e)
            raise NetworkError(e) from e

        if not resp.is_success:
            logger.debug("Notifications request returned %d", resp.status_code)
            raise APIError(resp.status_code, resp.text)

        try:
            result = NotificationResponse.model_validate_json(resp.content)
        except ValidationError as e:
            raise DecodeError(e) from e

        logger.debug(
            "Fetched %d notifications (%d unread)",
            len(result.notifications),
            result.unread_count,
        )
        return result
