"""
Memo endpoints for API v1.

These routes expose create, list, read, update and delete operations
for memos.  The repository behind the service takes its lock only for
the duration of each synchronous call, so handlers never hold it
across an ``await``.

The service instance is owned by the application (``app.state``) and
injected with ``Depends`` so each app built by ``create_app`` has its
own independent set of memos.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status

from memo_api.app.schemas.memo import MemoRequest, MemoResponse
from memo_api.app.services.memo_service import MemoService

router = APIRouter()


def get_memo_service(request: Request) -> MemoService:
    """Return the memo service attached to the running application."""
    return request.app.state.memo_service


@router.post("", response_model=MemoResponse)
async def create_memo(
    memo_in: MemoRequest,
    service: MemoService = Depends(get_memo_service),
) -> MemoResponse:
    """Create a new memo and return it with its identifier."""
    memo = service.add_memo(memo_in.content)
    return MemoResponse.model_validate(memo)


@router.get("", response_model=List[MemoResponse])
async def list_memos(service: MemoService = Depends(get_memo_service)) -> List[MemoResponse]:
    """Return all memos in creation order."""
    return [MemoResponse.model_validate(memo) for memo in service.list_memos()]


@router.get("/{memo_id}", response_model=MemoResponse)
async def get_memo(memo_id: int, service: MemoService = Depends(get_memo_service)) -> MemoResponse:
    """Retrieve a single memo by ID.

    Returns HTTP 404 if the memo is not found.
    """
    memo = service.get_memo(memo_id)
    if memo is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Memo not found")
    return MemoResponse.model_validate(memo)


@router.put("/{memo_id}", response_model=MemoResponse)
async def update_memo(
    memo_id: int,
    memo_in: MemoRequest,
    service: MemoService = Depends(get_memo_service),
) -> MemoResponse:
    """Replace the content of an existing memo."""
    memo = service.update_memo(memo_id, memo_in.content)
    if memo is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Memo not found")
    return MemoResponse.model_validate(memo)


@router.delete("/{memo_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_memo(memo_id: int, service: MemoService = Depends(get_memo_service)) -> Response:
    """Delete a memo; responds with an empty 204 body."""
    deleted = service.delete_memo(memo_id)
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Memo not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
