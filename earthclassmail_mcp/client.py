"""Async HTTP client for the Earth Class Mail REST API."""

import base64
import logging
from typing import Any, Dict, Optional

import httpx

from earthclassmail_mcp.config import BASE_URL, REQUEST_TIMEOUT
from earthclassmail_mcp.shaping import resolve_action

logger = logging.getLogger(__name__)


class EarthClassMailError(Exception):
    """Base class for errors raised by :class:`EarthClassMailClient`."""


class ApiError(EarthClassMailError):
    """Non-success response from the Earth Class Mail API."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class MediaFetchError(EarthClassMailError):
    """Non-success response while downloading a signed media URL."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


def _error_message(response: httpx.Response) -> str:
    """Prefer the server's ``error.message``; fall back to the status code."""
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict):
        error = body.get("error")
        if isinstance(error, dict) and error.get("message"):
            return str(error["message"])
    return f"API error: {response.status_code}"


class EarthClassMailClient:
    """Thin wrapper over the Earth Class Mail v1 API.

    Every call is a single round trip: no retries, no caching, no timeout.
    ``transport`` is handed to :class:`httpx.AsyncClient` and exists so tests
    can substitute :class:`httpx.MockTransport`.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = BASE_URL,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._transport = transport

    # ─── HTTP plumbing ──────────────────────────────────────────────────────

    def _headers(self, overrides: Optional[Dict[str, str]] = None) -> httpx.Headers:
        headers = httpx.Headers({
            "x-api-key": self._api_key,
            "Accept": "application/json",
            "Content-Type": "application/json",
        })
        # Case-insensitive merge; caller values win.
        headers.update(overrides or {})
        return headers

    def _http(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=REQUEST_TIMEOUT, transport=self._transport)

    async def _request(
        self,
        method: str,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Any:
        """Make an authenticated request and decode the JSON body.

        Raises:
            ApiError: on any non-2xx status.
            httpx.HTTPError: on transport failures, unchanged.
        """
        logger.debug("%s %s params=%s", method, path, params)
        async with self._http() as client:
            response = await client.request(
                method,
                f"{self._base_url}{path}",
                headers=self._headers(headers),
                params=params or None,
            )
        if not response.is_success:
            raise ApiError(_error_message(response), response.status_code)
        if not response.content:
            return None
        return response.json()

    # ─── Resources ──────────────────────────────────────────────────────────

    async def get_user(self) -> Dict[str, Any]:
        return await self._request("GET", "/user")

    async def list_inboxes(self) -> Dict[str, Any]:
        return await self._request("GET", "/inboxes")

    async def get_inbox(self, inbox_id: int) -> Dict[str, Any]:
        return await self._request("GET", f"/inboxes/{inbox_id}")

    async def list_pieces(
        self,
        inbox_id: int,
        page: Optional[int] = None,
        per_page: Optional[int] = None,
        sort: Optional[str] = None,
        unread_only: bool = False,
    ) -> Dict[str, Any]:
        """List pieces in an inbox.

        Only the options actually supplied are sent. ``unread_only`` becomes
        the API's attribute filter (``attributes[]=unread``), not a flag.
        """
        params: Dict[str, Any] = {}
        if page:
            params["page"] = page
        if per_page:
            params["per_page"] = per_page
        if sort:
            params["sort"] = sort
        if unread_only:
            params["attributes[]"] = "unread"
        return await self._request("GET", f"/inboxes/{inbox_id}/pieces", params=params)

    async def get_piece(self, piece_id: int) -> Dict[str, Any]:
        return await self._request("GET", f"/pieces/{piece_id}")

    async def list_recipients(self, inbox_id: int) -> Dict[str, Any]:
        return await self._request("GET", f"/inboxes/{inbox_id}/recipients")

    async def perform_action(self, piece_id: int, action: str) -> Any:
        """Request an action on a piece and return the raw response body.

        The action name goes through the alias table first. Whether the
        action is allowed for this piece is left to the API to decide.
        """
        segment = resolve_action(action)
        return await self._request("POST", f"/pieces/{piece_id}/actions/{segment}")

    async def fetch_media_content(self, url: str) -> Dict[str, str]:
        """Download a signed media URL and return it base64-encoded.

        The URL carries its own signature, so no API headers are attached.

        Returns:
            dict: ``{"data": <base64 str>, "content_type": <mime type>}``

        Raises:
            MediaFetchError: on any non-2xx status.
        """
        async with self._http() as client:
            response = await client.get(url)
        if not response.is_success:
            raise MediaFetchError(
                f"Failed to fetch media: {response.status_code}", response.status_code
            )
        content_type = response.headers.get("content-type", "application/octet-stream")
        return {
            "data": base64.b64encode(response.content).decode("ascii"),
            "content_type": content_type.split(";")[0].strip(),
        }
