"""Tests for the grocery list service."""

from recovery_diet.seed import DEFAULT_USER_ID


def test_active_list_for_user(container) -> None:
    active = container.grocery_list_service.get_active(DEFAULT_USER_ID)

    assert active is not None
    assert active.id == "grocery-1"
    assert active.created_at is not None
    assert container.grocery_list_service.get_active("nobody") is None


def test_toggle_one_item_leaves_the_rest_unchanged(container) -> None:
    service = container.grocery_list_service
    before = service.get_list("grocery-1")

    after = service.set_item_checked("grocery-1", 2, True)

    assert after is not None
    assert after.items[2].checked is True
    assert after.items[2].food_id == before.items[2].food_id
    for index, item in enumerate(after.items):
        if index != 2:
            assert item == before.items[index]


def test_toggle_out_of_range_or_unknown_list(container) -> None:
    service = container.grocery_list_service

    assert service.set_item_checked("grocery-1", 99, True) is None
    assert service.set_item_checked("grocery-1", -1, True) is None
    assert service.set_item_checked("missing", 0, True) is None


def test_categorize_groups_foods_in_display_order(container) -> None:
    categories = container.grocery_list_service.categorize("grocery-1")

    assert list(categories) == ["Proteins", "Vegetables", "Dairy"]
    assert [food.id for food in categories["Proteins"]] == ["food-1", "food-2"]
    assert container.grocery_list_service.categorize("missing") is None


def test_update_list_deactivates(container) -> None:
    updated = container.grocery_list_service.update_list(
        "grocery-1", {"is_active": False}
    )

    assert updated is not None
    assert updated.is_active is False
    assert container.grocery_list_service.get_active(DEFAULT_USER_ID) is None
