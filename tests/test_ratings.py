from types import SimpleNamespace

from storefront.services.ratings import rank_top_rated, summarize_reviews


def _item(item_id: int):
    return SimpleNamespace(id=item_id, name=f"Item {item_id}")


def _review(menu_item_id: int, rating: int):
    return SimpleNamespace(menu_item_id=menu_item_id, rating=rating)


def test_two_reviews_average_four():
    summaries = summarize_reviews([_review(1, 5), _review(1, 3)])

    assert summaries[1].average_rating == 4.0
    assert summaries[1].review_count == 2


def test_unreviewed_items_never_ranked():
    items = [_item(1), _item(2), _item(3)]
    reviews = [_review(1, 4), _review(3, 2)]

    ranked = rank_top_rated(items, reviews)

    assert [entry.menu_item.id for entry in ranked] == [1, 3]


def test_ranking_is_non_increasing_and_stable_on_ties():
    items = [_item(1), _item(2), _item(3), _item(4)]
    reviews = [_review(1, 3), _review(2, 5), _review(3, 3), _review(4, 4), _review(4, 5)]

    ranked = rank_top_rated(items, reviews)
    averages = [entry.average_rating for entry in ranked]

    assert averages == sorted(averages, reverse=True)
    assert [entry.menu_item.id for entry in ranked] == [2, 4, 1, 3]


def test_reviews_for_removed_items_are_ignored():
    ranked = rank_top_rated([_item(1)], [_review(1, 4), _review(42, 5)])

    assert [entry.menu_item.id for entry in ranked] == [1]


def test_ranking_truncates_to_limit():
    items = [_item(index) for index in range(1, 16)]
    reviews = [_review(index, 1 + index % 5) for index in range(1, 16)]

    assert len(rank_top_rated(items, reviews)) == 10
    assert len(rank_top_rated(items, reviews, limit=3)) == 3
