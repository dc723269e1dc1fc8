"""
Review routes

The public listing asks for ``approved=true``; the admin listing sees everything.
"""

from typing import Dict, List

from fastapi import APIRouter, Depends, Query, status

from qanyare.domain.entities import ReviewCreate, ReviewRecord, ReviewUpdate
from qanyare.domain.storage import Storage
from qanyare.infrastructure.utilities.exceptions import NotFoundError
from qanyare.presentation.api.dependencies import get_storage

router = APIRouter(prefix="/reviews", tags=["reviews"])


@router.get("", response_model=List[ReviewRecord])
async def list_reviews(
    approved: bool = Query(False), storage: Storage = Depends(get_storage)
):
    if approved:
        return await storage.reviews.list_approved()
    return await storage.reviews.list()


@router.get("/{review_id}", response_model=ReviewRecord)
async def get_review(review_id: int, storage: Storage = Depends(get_storage)):
    review = await storage.reviews.get(review_id)
    if review is None:
        raise NotFoundError("Review", review_id)
    return review


@router.post("", response_model=ReviewRecord, status_code=status.HTTP_201_CREATED)
async def create_review(payload: ReviewCreate, storage: Storage = Depends(get_storage)):
    return await storage.reviews.create(payload)


@router.patch("/{review_id}", response_model=ReviewRecord)
async def update_review(
    review_id: int, payload: ReviewUpdate, storage: Storage = Depends(get_storage)
):
    review = await storage.reviews.update(review_id, payload.changes())
    if review is None:
        raise NotFoundError("Review", review_id)
    return review


@router.delete("/{review_id}")
async def delete_review(
    review_id: int, storage: Storage = Depends(get_storage)
) -> Dict[str, str]:
    if not await storage.reviews.delete(review_id):
        raise NotFoundError("Review", review_id)
    return {"message": "Review deleted successfully"}
