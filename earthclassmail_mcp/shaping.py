"""Pure transforms that keep tool payloads small."""

from typing import Any, Dict

MEDIA_URL_PLACEHOLDER = "[URL available - set include_media=true to see]"

# Semantic action names → remote path segment. Unlisted names pass through.
ACTION_ALIASES: Dict[str, str] = {
    "scan": "scan",
    "shred": "shred",
    "ship": "ship",
    "archive": "archive",
    "move-to-archive": "archive",
    "move-to-trash": "trash",
    "move-to-inbox": "inbox",
}


def _name_or_unknown(party: Any) -> str:
    if isinstance(party, dict) and party.get("name"):
        return party["name"]
    return "Unknown"


def summarize_piece(piece: Dict[str, Any]) -> Dict[str, Any]:
    """Reduce a mail piece to the fields needed for listing.

    Signed media URLs, carrier detail, weight and OCR text are dropped; the
    media list collapses to a ``has_media`` flag.
    """
    return {
        "id": piece.get("id"),
        "received_at": piece.get("received_at"),
        "piece_type": piece.get("piece_type"),
        "piece_sub_type": piece.get("piece_sub_type"),
        "sender": _name_or_unknown(piece.get("sender")),
        "recipient": _name_or_unknown(piece.get("recipient")),
        "attributes": piece.get("attributes"),
        "available_actions": piece.get("available_actions"),
        "page_count": piece.get("page_count_actual"),
        "has_media": len(piece.get("media") or []) > 0,
        "operation_status": piece.get("operation_status"),
    }


def redact_media_urls(piece: Dict[str, Any]) -> Dict[str, Any]:
    """Return a copy of ``piece`` with every media URL replaced by a placeholder."""
    media = piece.get("media")
    if not media:
        return dict(piece)
    return {
        **piece,
        "media": [
            {
                "content_type": item.get("content_type"),
                "tags": item.get("tags"),
                "url": MEDIA_URL_PLACEHOLDER,
            }
            for item in media
        ],
    }


def resolve_action(action: str) -> str:
    """Map a semantic action name to the path segment the API expects."""
    return ACTION_ALIASES.get(action, action)
