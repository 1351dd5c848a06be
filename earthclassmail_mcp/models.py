"""Per-tool input models.

Arguments arrive as an untyped JSON object; each tool parses them into one of
these models before touching the API. Types are strict, so a string where a
number is expected is rejected rather than coerced. Whole-number floats
(``3.0``) are valid JSON numbers and are accepted for integer fields.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class _ToolInput(BaseModel):
    model_config = ConfigDict(strict=True, str_strip_whitespace=True, extra="forbid")

    @field_validator("inbox_id", "piece_id", "page", "per_page", mode="before", check_fields=False)
    @classmethod
    def _whole_number(cls, v: Any) -> Any:
        if isinstance(v, float) and v.is_integer():
            return int(v)
        return v


class NoInput(_ToolInput):
    """Input for tools that take no arguments."""


class InboxInput(_ToolInput):
    """Input for tools scoped to a single inbox."""

    inbox_id: int = Field(..., description="The inbox ID")


class ListPiecesInput(_ToolInput):
    """Input for listing mail pieces in an inbox."""

    inbox_id: int = Field(..., description="The inbox ID to list pieces from")
    page: Optional[int] = Field(default=None, description="Page number", ge=1)
    per_page: Optional[int] = Field(
        default=None,
        description="Items per page; clamped by the tool, not rejected",
    )
    unread_only: bool = Field(default=False, description="Only return unread pieces")


class GetPieceInput(_ToolInput):
    """Input for retrieving a single mail piece."""

    piece_id: int = Field(..., description="The piece ID to retrieve")
    include_media: bool = Field(default=False, description="Keep signed media URLs")


class PerformActionInput(_ToolInput):
    """Input for requesting an action on a piece."""

    piece_id: int = Field(..., description="The piece ID to perform action on")
    action: str = Field(..., description="Action name", min_length=1)


class GetPieceContentInput(_ToolInput):
    """Input for fetching a piece's envelope images and OCR text."""

    piece_id: int = Field(..., description="The piece ID to retrieve content for")
    include_ocr: bool = Field(default=True, description="Include OCR text if available")
