from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from storefront.models.item_review import ItemReview
from storefront.models.menu_item import MenuItem


@dataclass(frozen=True)
class RatingSummary:
    menu_item_id: int
    average_rating: float
    review_count: int


@dataclass(frozen=True)
class RatedMenuItem:
    menu_item: MenuItem
    average_rating: float
    review_count: int


def summarize_reviews(reviews: Iterable[ItemReview]) -> dict[int, RatingSummary]:
    """Groups reviews by menu item and computes the mean rating and review count."""
    totals: dict[int, list[int]] = {}
    for review in reviews:
        bucket = totals.setdefault(int(review.menu_item_id), [0, 0])
        bucket[0] += int(review.rating)
        bucket[1] += 1

    return {
        menu_item_id: RatingSummary(
            menu_item_id=menu_item_id,
            average_rating=rating_sum / count,
            review_count=count,
        )
        for menu_item_id, (rating_sum, count) in totals.items()
    }


def rank_top_rated(
    menu_items: Iterable[MenuItem],
    reviews: Iterable[ItemReview],
    limit: int = 10,
) -> list[RatedMenuItem]:
    """
    Ranks menu items by mean review rating, best first.

    Items without reviews never appear. Ties keep the order in which the
    menu items were given. Always computed from the reviews passed in.
    """
    summaries = summarize_reviews(reviews)
    rated = [
        RatedMenuItem(
            menu_item=item,
            average_rating=summaries[item.id].average_rating,
            review_count=summaries[item.id].review_count,
        )
        for item in menu_items
        if item.id in summaries
    ]
    rated.sort(key=lambda entry: entry.average_rating, reverse=True)
    return rated[: max(limit, 0)]
