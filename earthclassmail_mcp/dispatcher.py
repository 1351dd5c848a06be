"""Maps MCP tool calls onto :class:`EarthClassMailClient` methods."""

import json
import logging
from typing import Any, Awaitable, Callable, Dict, List, Optional, Tuple, Type, Union

import httpx
from mcp import types
from pydantic import BaseModel, ValidationError

from earthclassmail_mcp.client import EarthClassMailClient, EarthClassMailError
from earthclassmail_mcp.config import DEFAULT_PER_PAGE, MAX_PER_PAGE
from earthclassmail_mcp.models import (
    GetPieceContentInput,
    GetPieceInput,
    InboxInput,
    ListPiecesInput,
    NoInput,
    PerformActionInput,
)
from earthclassmail_mcp.shaping import redact_media_urls, summarize_piece

logger = logging.getLogger(__name__)

Content = Union[types.TextContent, types.ImageContent]
Handler = Callable[[Any], Awaitable[List[Content]]]

CONTENT_LIMITATION_NOTE = (
    "The Earth Class Mail API only exposes envelope images and optional OCR "
    "text; full scanned page images are not available."
)


# ─── Formatting Helpers ──────────────────────────────────────────────────────


def _json(data: Any) -> str:
    return json.dumps(data, indent=2)


def _text(text: str) -> types.TextContent:
    return types.TextContent(type="text", text=text)


def _error_result(message: str) -> types.CallToolResult:
    return types.CallToolResult(content=[_text(message)], isError=True)


class ToolDispatcher:
    """Resolves a tool name to its handler and runs it.

    :meth:`dispatch` never raises: unknown tools, bad arguments, API errors
    and unexpected exceptions all come back as an error-flagged result.
    """

    def __init__(self, client: EarthClassMailClient) -> None:
        self._client = client
        self._handlers: Dict[str, Tuple[Type[BaseModel], Handler]] = {
            "ecm_get_user": (NoInput, self._get_user),
            "ecm_list_inboxes": (NoInput, self._list_inboxes),
            "ecm_get_inbox": (InboxInput, self._get_inbox),
            "ecm_list_pieces": (ListPiecesInput, self._list_pieces),
            "ecm_get_piece": (GetPieceInput, self._get_piece),
            "ecm_list_recipients": (InboxInput, self._list_recipients),
            "ecm_perform_action": (PerformActionInput, self._perform_action),
            "ecm_get_piece_content": (GetPieceContentInput, self._get_piece_content),
        }

    @property
    def tool_names(self) -> List[str]:
        return list(self._handlers)

    async def dispatch(
        self, name: str, arguments: Optional[Dict[str, Any]] = None
    ) -> types.CallToolResult:
        entry = self._handlers.get(name)
        if entry is None:
            logger.warning("Unknown tool requested: %s", name)
            return _error_result(f"Unknown tool: {name}")

        input_model, handler = entry
        logger.info("Tool call: %s", name)
        try:
            params = input_model.model_validate(arguments or {})
            content = await handler(params)
        except (EarthClassMailError, ValidationError) as e:
            logger.warning("Tool %s failed: %s", name, e)
            return _error_result(f"Error: {e}")
        except Exception as e:
            logger.exception("Unexpected error in tool %s", name)
            return _error_result(f"Error: {e}")
        return types.CallToolResult(content=content, isError=False)

    # ─── Handlers ───────────────────────────────────────────────────────────

    async def _get_user(self, params: NoInput) -> List[Content]:
        user = await self._client.get_user()
        return [_text(_json(user))]

    async def _list_inboxes(self, params: NoInput) -> List[Content]:
        inboxes = await self._client.list_inboxes()
        return [_text(_json(inboxes))]

    async def _get_inbox(self, params: InboxInput) -> List[Content]:
        inbox = await self._client.get_inbox(params.inbox_id)
        return [_text(_json(inbox))]

    async def _list_pieces(self, params: ListPiecesInput) -> List[Content]:
        # Zero or negative counts as not supplied.
        per_page = params.per_page if params.per_page and params.per_page > 0 else DEFAULT_PER_PAGE
        per_page = min(per_page, MAX_PER_PAGE)
        pieces = await self._client.list_pieces(
            params.inbox_id,
            page=params.page,
            per_page=per_page,
            unread_only=params.unread_only,
        )
        pieces = pieces or {}
        summarized = {
            "current_page": pieces.get("current_page"),
            "last_page": pieces.get("last_page"),
            "total": pieces.get("total"),
            "data": [summarize_piece(p) for p in pieces.get("data") or []],
        }
        return [_text(_json(summarized))]

    async def _get_piece(self, params: GetPieceInput) -> List[Content]:
        piece = await self._client.get_piece(params.piece_id)
        if not params.include_media:
            piece = redact_media_urls(piece)
        return [_text(_json(piece))]

    async def _list_recipients(self, params: InboxInput) -> List[Content]:
        recipients = await self._client.list_recipients(params.inbox_id)
        return [_text(_json(recipients))]

    async def _perform_action(self, params: PerformActionInput) -> List[Content]:
        result = await self._client.perform_action(params.piece_id, params.action)
        return [_text(_json(result))]

    async def _get_piece_content(self, params: GetPieceContentInput) -> List[Content]:
        """Header block, then a caption and an image block per media item.

        Media items are fetched one after another. A failed fetch is reported
        as a text block in place of its image and the loop carries on.
        """
        piece = await self._client.get_piece(params.piece_id)
        media = piece.get("media") or []

        header: Dict[str, Any] = {
            "piece": summarize_piece(piece),
            "media_count": len(media),
            "note": CONTENT_LIMITATION_NOTE,
        }
        if params.include_ocr and piece.get("ocr_data"):
            header["ocr_text"] = piece["ocr_data"]
        content: List[Content] = [_text(_json(header))]

        for index, item in enumerate(media, start=1):
            content_type = item.get("content_type") or "application/octet-stream"
            tags = ", ".join(item.get("tags") or []) or "none"
            url = item.get("url")
            if not url:
                content.append(_text(f"Media {index} ({content_type}) has no URL; skipped."))
                continue
            try:
                fetched = await self._client.fetch_media_content(url)
            except (EarthClassMailError, httpx.HTTPError) as e:
                logger.warning("Media %d of piece %s failed: %s", index, params.piece_id, e)
                content.append(_text(f"Failed to fetch media {index} ({content_type}): {e}"))
                continue
            content.append(_text(f"Media {index}: {content_type} (tags: {tags})"))
            content.append(
                types.ImageContent(
                    type="image",
                    data=fetched["data"],
                    mimeType=item.get("content_type") or fetched["content_type"],
                )
            )
        return content
