"""
Tests for the client package: durable storage, cart, auth state and the API client
"""

import json
from datetime import datetime, timezone
from unittest.mock import Mock, patch

import httpx
import pytest
from fastapi.testclient import TestClient

from qanyare.client import (
    AuthStore,
    CartItem,
    CartStore,
    ClientStorage,
    Notification,
    RestaurantApiClient,
)
from qanyare.domain.entities import CategoryCreate, MenuItemCreate, MenuItemRecord, UserPublic
from qanyare.infrastructure.utilities.constants import StorageKeys
from qanyare.infrastructure.utilities.exceptions import ApiError, ValidationError
from qanyare.presentation.api.app import create_app
from tests.conftest import make_settings


@pytest.fixture
def client_storage(tmp_path):
    return ClientStorage(tmp_path / "client_storage.json")


@pytest.fixture
def notifier():
    return Mock()


def make_cart_item(item_id=1, name="Somali Tea", price=150):
    return CartItem(id=item_id, name=name, name_en=name, name_so=name, price=price)


def make_user(is_admin=False):
    return UserPublic(
        id=1,
        username="admin" if is_admin else "amina",
        name="Admin User" if is_admin else "Amina Yusuf",
        is_admin=is_admin,
        created_at=datetime(2025, 1, 1, tzinfo=timezone.utc),
    )


class TestClientStorage:
    """Test the JSON-file storage"""

    def test_missing_file_reads_defaults(self, client_storage):
        assert client_storage.get_cart() == []
        assert client_storage.get_user() is None
        assert client_storage.get("anything", "fallback") == "fallback"

    def test_values_survive_reopen(self, client_storage):
        client_storage.set_user({"username": "amina"})
        client_storage.set_cart([{"id": 1}])

        reopened = ClientStorage(client_storage.path)

        assert reopened.get_user() == {"username": "amina"}
        assert reopened.get_cart() == [{"id": 1}]
        stored = json.loads(client_storage.path.read_text(encoding="utf-8"))
        assert set(stored) == {StorageKeys.USER, StorageKeys.CART}

    def test_clear_slot(self, client_storage):
        client_storage.set_admin({"username": "admin"})
        client_storage.clear_admin()

        assert client_storage.get_admin() is None

    @pytest.mark.parametrize("content", ["{not json", "[1, 2, 3]", '"text"'])
    def test_unreadable_file_reads_as_empty(self, client_storage, content):
        client_storage.path.write_text(content, encoding="utf-8")

        assert client_storage.get_cart() == []
        assert client_storage.get_user() is None

    def test_non_list_cart_ignored(self, client_storage):
        client_storage.set(StorageKeys.CART, {"id": 1})

        assert client_storage.get_cart() == []

    def test_failed_write_keeps_other_slots(self, client_storage):
        client_storage.set_user({"username": "amina"})
        client_storage.set_admin({"username": "amina"})

        def disk_full(data, fp, **kwargs):
            fp.write('{"qanyare-cart": [{"id": 1, "na')
            raise OSError(28, "No space left on device")

        with patch("qanyare.client.client_storage.json.dump", side_effect=disk_full):
            client_storage.set_cart([{"id": 1, "name": "Somali Tea"}])

        assert client_storage.get_user() == {"username": "amina"}
        assert client_storage.get_admin() == {"username": "amina"}
        assert client_storage.get_cart() == []
        assert list(client_storage.path.parent.iterdir()) == [client_storage.path]

    def test_failed_replace_leaves_file_untouched(self, client_storage):
        client_storage.set_user({"username": "amina"})
        before = client_storage.path.read_text(encoding="utf-8")

        with patch(
            "qanyare.client.client_storage.os.replace",
            side_effect=OSError(13, "Permission denied"),
        ):
            client_storage.set_cart([{"id": 1}])

        assert client_storage.path.read_text(encoding="utf-8") == before
        assert list(client_storage.path.parent.iterdir()) == [client_storage.path]


class TestCartStore:
    """Test cart behaviour and persistence"""

    def test_add_same_item_increments_quantity(self, client_storage, notifier):
        cart = CartStore(client_storage, notifier)

        cart.add(make_cart_item())
        cart.add(make_cart_item())

        assert len(cart.items) == 1
        assert cart.items[0].quantity == 2
        assert cart.total_items() == 2
        assert cart.total_price() == 300
        notifier.notify.assert_called_with(
            Notification("Added to cart", "Somali Tea has been added to your cart.")
        )

    def test_add_menu_item_record(self, client_storage, notifier):
        cart = CartStore(client_storage, notifier)
        record = MenuItemRecord(
            id=7, name="Bariis", name_en="Spiced Rice", name_so="Bariis", price=800
        )

        cart.add(record)

        assert cart.items[0].id == 7
        assert cart.items[0].name_en == "Spiced Rice"
        assert cart.items[0].quantity == 1

    def test_add_ignores_incoming_quantity(self, client_storage, notifier):
        cart = CartStore(client_storage, notifier)

        cart.add(make_cart_item().model_copy(update={"quantity": 5}))

        assert cart.total_items() == 1

    def test_stored_cart_matches_memory(self, client_storage, notifier):
        cart = CartStore(client_storage, notifier)
        cart.add(make_cart_item(1))
        cart.add(make_cart_item(2, "Samosas", 300))
        cart.set_quantity(2, 3)

        stored = client_storage.get_cart()

        assert stored == [item.model_dump(mode="json", by_alias=True) for item in cart.items]
        assert stored[1]["quantity"] == 3
        assert "nameEn" in stored[0]

    def test_cart_restored_from_storage(self, client_storage, notifier):
        cart = CartStore(client_storage, notifier)
        cart.add(make_cart_item(1))
        cart.add(make_cart_item(2, "Samosas", 300))

        restored = CartStore(client_storage, notifier)

        assert [item.id for item in restored.items] == [1, 2]
        assert restored.total_price() == 450

    def test_unreadable_lines_dropped_on_load(self, client_storage, notifier):
        good = make_cart_item().model_dump(mode="json", by_alias=True)
        client_storage.set_cart([good, {"id": "x"}])

        cart = CartStore(client_storage, notifier)

        assert [item.id for item in cart.items] == [1]

    def test_zero_quantity_removes_line(self, client_storage, notifier):
        cart = CartStore(client_storage, notifier)
        cart.add(make_cart_item())

        cart.set_quantity(1, 0)

        assert cart.items == []
        assert client_storage.get_cart() == []

    def test_set_quantity_of_unknown_item_changes_nothing(self, client_storage, notifier):
        cart = CartStore(client_storage, notifier)
        cart.add(make_cart_item())

        cart.set_quantity(99, 4)

        assert cart.total_items() == 1

    def test_remove(self, client_storage, notifier):
        cart = CartStore(client_storage, notifier)
        cart.add(make_cart_item(1))
        cart.add(make_cart_item(2, "Samosas", 300))

        cart.remove(1)

        assert [item.id for item in cart.items] == [2]

    def test_clear_empties_storage_slot(self, client_storage, notifier):
        cart = CartStore(client_storage, notifier)
        cart.add(make_cart_item())

        cart.clear()

        assert cart.items == []
        assert cart.total_price() == 0
        assert client_storage.get(StorageKeys.CART) is None
        assert notifier.notify.call_args.args[0].title == "Cart cleared"

    def test_items_are_copies(self, client_storage, notifier):
        cart = CartStore(client_storage, notifier)
        cart.add(make_cart_item())

        cart.items[0].quantity = 10

        assert cart.total_items() == 1

    def test_to_order(self, client_storage, notifier):
        cart = CartStore(client_storage, notifier)
        cart.add(make_cart_item())
        cart.add(make_cart_item())

        order = cart.to_order("Amina Yusuf", customer_phone="+254 700 000 001")

        assert order.total == 300
        assert order.status == "pending"
        assert order.items[0].name == "Somali Tea"
        assert order.items[0].quantity == 2

    def test_empty_cart_cannot_become_order(self, client_storage, notifier):
        cart = CartStore(client_storage, notifier)

        with pytest.raises(ValidationError, match="Cart is empty"):
            cart.to_order("Amina Yusuf")


class TestAuthStore:
    """Test auth state with a stubbed API client"""

    def test_admin_login_fills_both_slots(self, client_storage, notifier):
        api = Mock()
        api.login.return_value = make_user(is_admin=True)
        store = AuthStore(api, client_storage, notifier)

        store.login("admin", "password123")

        assert store.is_authenticated
        assert store.is_admin
        assert client_storage.get_user()["username"] == "admin"
        assert client_storage.get_admin()["isAdmin"] is True
        assert notifier.notify.call_args.args[0].description == "Welcome back, Admin User!"

    def test_customer_login_clears_admin_slot(self, client_storage, notifier):
        client_storage.set_admin({"username": "admin"})
        api = Mock()
        api.login.return_value = make_user()
        store = AuthStore(api, client_storage, notifier)

        store.login("amina", "secret")

        assert not store.is_admin
        assert client_storage.get_admin() is None

    def test_failed_login(self, client_storage, notifier):
        api = Mock()
        api.login.side_effect = ApiError(401, "Invalid credentials")
        store = AuthStore(api, client_storage, notifier)

        with pytest.raises(ApiError):
            store.login("admin", "wrong")

        assert not store.is_authenticated
        assert client_storage.get_user() is None
        assert notifier.notify.call_args.args[0].variant == "destructive"

    def test_logout(self, client_storage, notifier):
        api = Mock()
        api.login.return_value = make_user(is_admin=True)
        store = AuthStore(api, client_storage, notifier)
        store.login("admin", "password123")

        store.logout()

        assert store.user is None
        assert not store.is_admin
        assert client_storage.get_user() is None
        assert client_storage.get_admin() is None

    def test_session_restored_from_storage(self, client_storage, notifier):
        api = Mock()
        api.login.return_value = make_user(is_admin=True)
        AuthStore(api, client_storage, notifier).login("admin", "password123")

        restored = AuthStore(Mock(), client_storage, notifier)

        assert restored.user.username == "admin"
        assert restored.is_admin

    def test_unreadable_stored_user_ignored(self, client_storage, notifier):
        client_storage.set_user({"username": "no id"})

        store = AuthStore(Mock(), client_storage, notifier)

        assert store.user is None


@pytest.fixture
def api_client(tmp_path):
    config = make_settings(tmp_path, seed_on_startup=True)
    with TestClient(create_app(config)) as test_client:
        yield RestaurantApiClient(client=test_client)


class TestRestaurantApiClient:
    """Test the API client against the running app"""

    def test_login_and_register(self, api_client, client_storage, notifier):
        store = AuthStore(api_client, client_storage, notifier)

        admin = store.login("admin", "password123")
        assert admin.is_admin

        store.logout()
        user = store.register("amina", "secret", "Amina Yusuf")
        assert not user.is_admin
        assert store.user.username == "amina"

    def test_failed_login_raises_api_error(self, api_client):
        with pytest.raises(ApiError) as exc_info:
            api_client.login("admin", "wrong")

        assert exc_info.value.status_code == 401
        assert exc_info.value.user_message == "Invalid credentials"

    def test_not_found(self, api_client):
        with pytest.raises(ApiError) as exc_info:
            api_client.get_order(999)

        assert exc_info.value.status_code == 404
        assert exc_info.value.user_message == "Order not found"

    def test_validation_errors_carried(self, api_client):
        with pytest.raises(ApiError) as exc_info:
            api_client._request("POST", "/api/reviews", json={"rating": 9})

        assert exc_info.value.status_code == 400
        assert exc_info.value.errors

    def test_listings(self, api_client):
        assert len(api_client.list_categories()) == 3
        assert len(api_client.list_reviews(approved_only=True)) == 6
        assert api_client.health()["status"] == "healthy"

    def test_unreachable_server(self):
        transport = Mock()
        transport.request.side_effect = httpx.ConnectError("refused")
        client = RestaurantApiClient(client=transport)

        with pytest.raises(ApiError) as exc_info:
            client.list_orders()

        assert exc_info.value.status_code == 0


class TestCheckoutFlow:
    """Menu to cart to order to analytics"""

    def test_tea_order(self, tmp_path, client_storage, notifier):
        config = make_settings(tmp_path)
        with TestClient(create_app(config)) as test_client:
            api = RestaurantApiClient(client=test_client)
            drinks = api.create_category(CategoryCreate(name_en="Drinks"))
            tea = api.create_menu_item(
                MenuItemCreate(name_en="Tea", price=150, category_id=drinks.id)
            )

            cart = CartStore(client_storage, notifier)
            cart.add(tea)
            cart.add(tea)
            assert cart.total_price() == 300

            order = api.create_order(cart.to_order("Amina Yusuf"))
            cart.clear()

            assert order.status == "pending"
            assert order.total == 300
            assert order.items[0].name == "Tea"
            assert api.get_stats().total_revenue == 300
            assert client_storage.get_cart() == []
