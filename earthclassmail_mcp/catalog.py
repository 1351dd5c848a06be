"""Static tool catalog returned for ``tools/list``."""

from typing import List

from mcp import types

from earthclassmail_mcp.config import DEFAULT_PER_PAGE, MAX_PER_PAGE

PIECE_ACTIONS = ["scan", "shred", "ship", "archive"]

_READ_ONLY = types.ToolAnnotations(
    readOnlyHint=True,
    destructiveHint=False,
    idempotentHint=True,
    openWorldHint=True,
)


def _schema(properties=None, required=None) -> dict:
    return {
        "type": "object",
        "properties": properties or {},
        "required": required or [],
    }


TOOLS: List[types.Tool] = [
    types.Tool(
        name="ecm_get_user",
        description="Get the current Earth Class Mail user profile information",
        inputSchema=_schema(),
        annotations=_READ_ONLY,
    ),
    types.Tool(
        name="ecm_list_inboxes",
        description="List all mailbox inboxes in your Earth Class Mail account with piece counts",
        inputSchema=_schema(),
        annotations=_READ_ONLY,
    ),
    types.Tool(
        name="ecm_get_inbox",
        description="Get details for a specific inbox including account info and piece counts",
        inputSchema=_schema(
            {
                "inbox_id": {"type": "number", "description": "The inbox ID to retrieve"},
            },
            ["inbox_id"],
        ),
        annotations=_READ_ONLY,
    ),
    types.Tool(
        name="ecm_list_pieces",
        description=(
            "List mail pieces in an inbox. Returns a summary of each piece "
            "(use ecm_get_piece for full details including media URLs)."
        ),
        inputSchema=_schema(
            {
                "inbox_id": {"type": "number", "description": "The inbox ID to list pieces from"},
                "page": {"type": "number", "description": "Page number (default: 1)"},
                "per_page": {
                    "type": "number",
                    "description": (
                        f"Items per page (default: {DEFAULT_PER_PAGE}, "
                        f"max: {MAX_PER_PAGE} to avoid token limits)"
                    ),
                },
                "unread_only": {"type": "boolean", "description": "Only return unread pieces"},
            },
            ["inbox_id"],
        ),
        annotations=_READ_ONLY,
    ),
    types.Tool(
        name="ecm_get_piece",
        description=(
            "Get detailed information about a specific mail piece including "
            "scanned content URLs"
        ),
        inputSchema=_schema(
            {
                "piece_id": {"type": "number", "description": "The piece ID to retrieve"},
                "include_media": {
                    "type": "boolean",
                    "description": (
                        "Include full media URLs (default: false, they are very long). "
                        "Set to true only if you need to access the scanned images."
                    ),
                },
            },
            ["piece_id"],
        ),
        annotations=_READ_ONLY,
    ),
    types.Tool(
        name="ecm_list_recipients",
        description="List all recipients (names on your mailbox) for an inbox",
        inputSchema=_schema(
            {
                "inbox_id": {
                    "type": "number",
                    "description": "The inbox ID to list recipients for",
                },
            },
            ["inbox_id"],
        ),
        annotations=_READ_ONLY,
    ),
    types.Tool(
        name="ecm_perform_action",
        description=(
            "Perform an action on a mail piece. Available actions vary by piece "
            "(check available_actions from ecm_get_piece) but include: "
            + ", ".join(PIECE_ACTIONS)
        ),
        inputSchema=_schema(
            {
                "piece_id": {
                    "type": "number",
                    "description": "The piece ID to perform action on",
                },
                "action": {
                    "type": "string",
                    "description": "The action to perform (check available_actions on the piece)",
                    "enum": PIECE_ACTIONS,
                },
            },
            ["piece_id", "action"],
        ),
        annotations=types.ToolAnnotations(
            readOnlyHint=False,
            destructiveHint=True,
            idempotentHint=False,
            openWorldHint=True,
        ),
    ),
    types.Tool(
        name="ecm_get_piece_content",
        description=(
            "Get the viewable content of a mail piece: envelope images and OCR "
            "text when available. Note: the Earth Class Mail API does not expose "
            "full scanned page images, only envelope images and optional OCR text."
        ),
        inputSchema=_schema(
            {
                "piece_id": {
                    "type": "number",
                    "description": "The piece ID to retrieve content for",
                },
                "include_ocr": {
                    "type": "boolean",
                    "description": "Include OCR text if available (default: true)",
                },
            },
            ["piece_id"],
        ),
        annotations=_READ_ONLY,
    ),
]
