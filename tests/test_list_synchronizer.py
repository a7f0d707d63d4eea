"""Tests for the List Synchronizer against the in-process mock service."""

import httpx
import pytest

from models.entities import ALL_CATEGORIES, Category, Item, ItemDraft, ItemUpdate
from services.list_synchronizer import ListSynchronizer
from tests.helpers import make_api


def ids(sync):
    return [item.id for item in sync.items]


def assert_unique_ids(sync):
    assert len(ids(sync)) == len(set(ids(sync)))


class TestLoad:
    def test_load_replaces_mirror(self, synchronizer):
        assert [i.name for i in synchronizer.items] == ["Yogurt", "Pomegranate", "Lettuce"]
        assert len(synchronizer) == 3

    def test_mirror_empty_before_load(self, api):
        assert len(ListSynchronizer(api=api)) == 0

    def test_keeps_given_api(self, api):
        assert ListSynchronizer(api=api).api is api

    def test_load_still_works_after_rejected_category(self, synchronizer, client):
        client.post("/items", json={"name": "Bread", "category": "Bakery", "isInCart": False})
        assert synchronizer.load().success
        assert len(synchronizer) == 3

    def test_reload_picks_up_server_changes(self, synchronizer, client):
        client.post("/items", json={"name": "Milk", "category": "Dairy", "isInCart": False})
        assert synchronizer.load().success
        assert ids(synchronizer) == [1, 2, 3, 4]

    def test_failed_load_keeps_existing_mirror(self, synchronizer, offline_api):
        before = synchronizer.items
        synchronizer.api = offline_api

        result = synchronizer.load()

        assert not result.success
        assert not result.not_found
        assert result.error
        assert synchronizer.items == before

    def test_duplicate_ids_from_server_collapse(self):
        payload = [
            {"id": 1, "name": "Yogurt", "category": "Dairy", "isInCart": False},
            {"id": 1, "name": "Greek Yogurt", "category": "Dairy", "isInCart": False},
        ]
        sync = ListSynchronizer(api=make_api(lambda request: httpx.Response(200, json=payload)))
        assert sync.load().success
        assert [i.name for i in sync.items] == ["Greek Yogurt"]


class TestAddItem:
    def test_appends_server_item(self, synchronizer):
        draft = ItemDraft(name="Ice Cream", category=Category.DESSERT)

        result = synchronizer.add_item(draft)

        assert result.success
        assert len(synchronizer) == 4
        new = synchronizer.items[-1]
        assert new == result.item
        assert new.id == 4
        assert (new.name, new.category, new.is_in_cart) == (draft.name, draft.category, draft.is_in_cart)

    def test_failure_leaves_mirror_unchanged(self, synchronizer, offline_api):
        before = synchronizer.items
        synchronizer.api = offline_api

        result = synchronizer.add_item(ItemDraft(name="Milk", category=Category.DAIRY))

        assert not result.success
        assert synchronizer.items == before

    def test_duplicate_submissions_are_independent(self, synchronizer):
        draft = ItemDraft(name="Milk", category=Category.DAIRY)
        synchronizer.add_item(draft)
        synchronizer.add_item(draft)
        assert ids(synchronizer) == [1, 2, 3, 4, 5]
        assert_unique_ids(synchronizer)


class TestUpdateItem:
    def test_only_target_changes(self, synchronizer):
        before = synchronizer.items

        result = synchronizer.update_item(2, ItemUpdate(is_in_cart=True))

        assert result.success
        after = synchronizer.items
        changed = [(b, a) for b, a in zip(before, after) if b != a]
        assert len(changed) == 1
        assert changed[0][1] == Item(id=2, name="Pomegranate", category=Category.PRODUCE, is_in_cart=True)

    def test_keeps_position(self, synchronizer):
        synchronizer.update_item(1, ItemUpdate(name="Greek Yogurt"))
        assert ids(synchronizer) == [1, 2, 3]
        assert synchronizer.get(1).name == "Greek Yogurt"

    def test_not_found_leaves_mirror_unchanged(self, synchronizer):
        before = synchronizer.items

        result = synchronizer.update_item(99, ItemUpdate(is_in_cart=True))

        assert not result.success
        assert result.not_found
        assert synchronizer.items == before

    def test_deleted_elsewhere_is_not_found(self, synchronizer, client):
        client.delete("/items/1")
        before = synchronizer.items

        result = synchronizer.update_item(1, ItemUpdate(is_in_cart=True))

        assert result.not_found
        assert synchronizer.items == before

    def test_response_for_another_id_is_not_applied(self):
        seed = [
            {"id": 1, "name": "Yogurt", "category": "Dairy", "isInCart": False},
            {"id": 2, "name": "Pomegranate", "category": "Produce", "isInCart": False},
        ]

        def handler(request):
            if request.method == "GET":
                return httpx.Response(200, json=seed)
            return httpx.Response(200, json={"id": 2, "name": "Yogurt", "category": "Dairy", "isInCart": True})

        sync = ListSynchronizer(api=make_api(handler))
        sync.load()

        before = sync.items

        result = sync.update_item(1, ItemUpdate(is_in_cart=True))

        assert not result.success
        assert not result.not_found
        assert sync.items == before
        assert [i.id for i in sync.items] == [1, 2]

    def test_transport_failure_leaves_mirror_unchanged(self, synchronizer, offline_api):
        before = synchronizer.items
        synchronizer.api = offline_api

        result = synchronizer.update_item(1, ItemUpdate(is_in_cart=True))

        assert not result.success
        assert not result.not_found
        assert synchronizer.items == before


class TestToggleInCart:
    def test_toggle_round_trip(self, synchronizer):
        assert synchronizer.toggle_in_cart(3).item.is_in_cart is True
        assert synchronizer.get(3).is_in_cart is True
        assert synchronizer.toggle_in_cart(3).item.is_in_cart is False
        assert synchronizer.get(3).is_in_cart is False

    def test_unknown_local_id(self, synchronizer):
        result = synchronizer.toggle_in_cart(42)
        assert result.not_found
        assert len(synchronizer) == 3


class TestDeleteItem:
    def test_removes_entry(self, synchronizer):
        result = synchronizer.delete_item(2)

        assert result.success
        assert result.item.name == "Pomegranate"
        assert len(synchronizer) == 2
        assert 2 not in synchronizer

    def test_not_found_leaves_mirror_unchanged(self, synchronizer):
        before = synchronizer.items

        result = synchronizer.delete_item(99)

        assert result.not_found
        assert synchronizer.items == before

    def test_failure_leaves_mirror_unchanged(self, synchronizer, offline_api):
        before = synchronizer.items
        synchronizer.api = offline_api

        assert not synchronizer.delete_item(1).success
        assert synchronizer.items == before


class TestFilteredView:
    def test_all_returns_everything_in_order(self, synchronizer):
        assert list(synchronizer.filtered_view(ALL_CATEGORIES)) == list(synchronizer.items)

    def test_default_is_all(self, synchronizer):
        assert list(synchronizer.filtered_view()) == list(synchronizer.items)

    @pytest.mark.parametrize("category,expected", [
        ("Produce", ["Pomegranate", "Lettuce"]),
        ("Dairy", ["Yogurt"]),
        ("Dessert", []),
    ])
    def test_by_category(self, synchronizer, category, expected):
        assert [i.name for i in synchronizer.filtered_view(category)] == expected

    def test_is_lazy_and_recomputed(self, synchronizer):
        view = synchronizer.filtered_view("Dessert")
        synchronizer.add_item(ItemDraft(name="Ice Cream", category=Category.DESSERT))

        assert [i.name for i in synchronizer.filtered_view("Dessert")] == ["Ice Cream"]
        assert iter(view) is view

    def test_each_call_restarts(self, synchronizer):
        first = list(synchronizer.filtered_view("Produce"))
        second = list(synchronizer.filtered_view("Produce"))
        assert first == second


def test_ids_stay_unique_after_mixed_operations(synchronizer):
    synchronizer.add_item(ItemDraft(name="Milk", category=Category.DAIRY))
    synchronizer.update_item(4, ItemUpdate(is_in_cart=True))
    synchronizer.delete_item(2)
    synchronizer.add_item(ItemDraft(name="Cake", category=Category.DESSERT))
    synchronizer.update_item(2, ItemUpdate(is_in_cart=True))
    synchronizer.delete_item(99)

    assert ids(synchronizer) == [1, 3, 4, 5]
    assert_unique_ids(synchronizer)


def test_shopping_scenario(synchronizer):
    assert all(not item.is_in_cart for item in synchronizer.items)

    synchronizer.add_item(ItemDraft(name="Ice Cream", category=Category.DESSERT, is_in_cart=False))
    assert len(synchronizer) == 4
    assert synchronizer.get(4).name == "Ice Cream"
    assert synchronizer.get(4).category is Category.DESSERT

    before = {item.id: item for item in synchronizer.items}
    synchronizer.update_item(1, ItemUpdate(is_in_cart=True))
    assert synchronizer.get(1).is_in_cart is True
    for item_id in (2, 3, 4):
        assert synchronizer.get(item_id) == before[item_id]

    synchronizer.delete_item(1)
    assert len(synchronizer) == 3
    assert "Yogurt" not in [item.name for item in synchronizer.items]
