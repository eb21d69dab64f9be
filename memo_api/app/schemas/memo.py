"""
Pydantic schemas for memos.

A memo request carries only its text; the response adds the
identifier assigned by the server.  Content is accepted as‑is, so an
empty string is a valid memo.
"""

from pydantic import BaseModel, Field


class MemoRequest(BaseModel):
    """Schema for creating or updating a memo."""

    content: str = Field(..., description="Text of the memo")


class MemoResponse(BaseModel):
    """Schema for reading a memo.

    Built from a ``Memo`` record with ``MemoResponse.model_validate``.
    """

    id: int
    content: str

    model_config = {
        "from_attributes": True,
    }
