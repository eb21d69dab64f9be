"""
Service layer for memos.

``MemoService`` sits between the HTTP handlers and the repository.  It
turns raw content strings into stored records and makes sure updates
and deletions only touch memos that exist.  A missing memo is not an
error at this level: ``update_memo`` and ``get_memo`` return ``None``
and ``delete_memo`` returns ``False``, leaving it to the caller to
decide how to report the absence (the API answers with HTTP 404).
"""

from __future__ import annotations

import logging
from typing import List, Optional

from memo_api.app.models import Memo
from memo_api.app.repositories.memo_repository import MemoRepository


logger = logging.getLogger(__name__)


class MemoService:
    """Service class for managing memos."""

    def __init__(self, repository: MemoRepository) -> None:
        self.repository = repository

    def add_memo(self, content: str) -> Memo:
        """Store a new memo and return it with its assigned id."""
        memo = self.repository.add(content)
        logger.info("Created memo %s", memo.id)
        return memo

    def list_memos(self) -> List[Memo]:
        """Return every memo in the order it was created."""
        return self.repository.list()

    def get_memo(self, memo_id: int) -> Optional[Memo]:
        """Retrieve a single memo by its ID."""
        return self.repository.find_by_id(memo_id)

    def update_memo(self, memo_id: int, content: str) -> Optional[Memo]:
        """Replace the content of an existing memo.

        The memo keeps its id and its position in the list.  Returns the
        updated memo or ``None`` if the record does not exist.
        """
        memo = self.repository.update_content(memo_id, content)
        if memo is None:
            logger.debug("Memo %s not found for update", memo_id)
            return None
        logger.info("Updated memo %s", memo_id)
        return memo

    def delete_memo(self, memo_id: int) -> bool:
        """Delete a memo by ID.

        Returns ``True`` if a record was deleted, ``False`` otherwise.
        """
        deleted = self.repository.delete_by_id(memo_id)
        if deleted:
            logger.info("Deleted memo %s", memo_id)
        else:
            logger.debug("Memo %s not found for deletion", memo_id)
        return deleted
