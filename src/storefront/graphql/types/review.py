"""
Review GraphQL type definitions
"""

import strawberry

from ...store.models import Review as ReviewRecord


@strawberry.type
class Review:
    """Review type for GraphQL API."""

    id: strawberry.ID
    date: str
    title: str
    comment: str
    rating: int
    product_id: strawberry.Private[str]

    @classmethod
    def from_record(cls, record: ReviewRecord) -> "Review":
        return cls(
            id=strawberry.ID(record.id),
            date=record.date,
            title=record.title,
            comment=record.comment,
            rating=record.rating,
            product_id=record.product_id,
        )
