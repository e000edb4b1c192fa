from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...logging import get_logger
from ..context import get_loaders, get_store

if TYPE_CHECKING:
    from ..mutations.root import AddReviewInput, UpdateReviewInput
    from ..types.review import Review

logger = get_logger(__name__)


def _review_fields(input: AddReviewInput | UpdateReviewInput) -> dict:
    return {
        "date": input.date,
        "title": input.title,
        "comment": input.comment,
        "rating": input.rating,
        "product_id": str(input.product_id),
    }


async def add_review(info: strawberry.Info, input: AddReviewInput) -> Review:
    store = get_store(info)
    if store.get_product_by_id(str(input.product_id)) is None:
        # Accepted; the review is simply unreachable until such a product exists
        logger.warning("Review added for unknown product", product_id=str(input.product_id))
    record = store.insert_review(_review_fields(input))
    get_loaders(info).clear()

    from ..types.review import Review as ReviewType

    return ReviewType.from_record(record)


async def update_review(
    info: strawberry.Info, id: str, input: UpdateReviewInput
) -> Review | None:
    record = get_store(info).update_review(id, _review_fields(input))
    if record is None:
        logger.info("Review not found for update", review_id=id)
        return None
    get_loaders(info).clear()

    from ..types.review import Review as ReviewType

    return ReviewType.from_record(record)


async def delete_review(info: strawberry.Info, id: str) -> bool:
    removed = get_store(info).remove_review(id)
    if not removed:
        logger.info("Review not found for delete", review_id=id)
        return False
    get_loaders(info).clear()
    return True
