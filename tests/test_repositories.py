"""
Tests for the storage backends

Every test runs against both the SQLAlchemy (SQLite in memory) and the
in-memory implementation.
"""

from unittest.mock import MagicMock

import pytest
from sqlalchemy.exc import SQLAlchemyError

from qanyare.domain.entities import (
    CategoryCreate,
    MenuItemCreate,
    OrderCreate,
    OrderLine,
    ReservationCreate,
    ReviewCreate,
    StaffCreate,
    TableCreate,
    UserCreate,
)
from qanyare.infrastructure.repositories.session_handler import managed_session
from qanyare.infrastructure.utilities.exceptions import UsernameTakenError


def make_order(customer_name: str = "Amina", total: int = 300) -> OrderCreate:
    return OrderCreate(
        customer_name=customer_name,
        items=[OrderLine(id=1, name="Somali Tea", price=150, quantity=2)],
        total=total,
    )


class TestCrudOperations:
    """Behavior shared by every collection"""

    @pytest.mark.asyncio
    async def test_create_assigns_id_and_echoes_input(self, storage):
        """Test created record carries the input plus its id"""
        category = await storage.categories.create(
            CategoryCreate(name_en="Drinks", name_so="Cabitaan", description="Beverages")
        )

        assert category.id is not None
        assert category.name_en == "Drinks"
        assert category.name_so == "Cabitaan"
        assert category.description == "Beverages"
        assert await storage.categories.get(category.id) == category

    @pytest.mark.asyncio
    async def test_ids_are_unique(self, storage):
        first = await storage.tables.create(TableCreate(name="Table 1", capacity=4))
        second = await storage.tables.create(TableCreate(name="Table 2", capacity=6))

        assert first.id != second.id

    @pytest.mark.asyncio
    async def test_get_missing_returns_none(self, storage):
        assert await storage.orders.get(999) is None

    @pytest.mark.asyncio
    async def test_update_changes_only_given_fields(self, storage):
        """Test partial update leaves other fields untouched"""
        item = await storage.menu_items.create(
            MenuItemCreate(name_en="Tea", description="Spiced", price=150)
        )

        updated = await storage.menu_items.update(item.id, {"price": 175})

        assert updated.price == 175
        assert updated.model_dump(exclude={"price"}) == item.model_dump(exclude={"price"})
        assert (await storage.menu_items.get(item.id)).price == 175

    @pytest.mark.asyncio
    async def test_update_can_clear_optional_field(self, storage):
        member = await storage.staff.create(
            StaffCreate(name="Hodan", role="Waiter", email="hodan@qanyare.com")
        )

        updated = await storage.staff.update(member.id, {"email": None})

        assert updated.email is None

    @pytest.mark.asyncio
    async def test_update_missing_returns_none(self, storage):
        assert await storage.tables.update(999, {"capacity": 2}) is None
        assert await storage.tables.count() == 0

    @pytest.mark.asyncio
    async def test_delete(self, storage):
        review = await storage.reviews.create(
            ReviewCreate(customer_name="Omar", rating=4, comment="Good")
        )

        assert await storage.reviews.delete(review.id) is True
        assert await storage.reviews.get(review.id) is None
        assert await storage.reviews.delete(review.id) is False

    @pytest.mark.asyncio
    async def test_count(self, storage):
        await storage.staff.create(StaffCreate(name="Hodan", role="Waiter"))
        await storage.staff.create(StaffCreate(name="Ali", role="Chef", is_active=False))

        assert await storage.staff.count() == 2

    @pytest.mark.asyncio
    async def test_returned_records_are_snapshots(self, storage):
        """Test mutating a returned record does not change the store"""
        table = await storage.tables.create(TableCreate(name="Table 1", capacity=4))

        table.capacity = 40
        (await storage.tables.list())[0].name = "Changed"

        stored = await storage.tables.get(table.id)
        assert stored.capacity == 4
        assert stored.name == "Table 1"


class TestTimestampsAndOrdering:
    @pytest.mark.asyncio
    async def test_created_at_assigned_in_utc(self, storage):
        order = await storage.orders.create(make_order())

        assert order.created_at is not None
        assert order.created_at.utcoffset().total_seconds() == 0
        assert order.status == "pending"

    @pytest.mark.asyncio
    async def test_orders_listed_newest_first(self, storage):
        first = await storage.orders.create(make_order("First"))
        second = await storage.orders.create(make_order("Second"))

        listed = await storage.orders.list()

        assert [order.id for order in listed] == [second.id, first.id]

    @pytest.mark.asyncio
    async def test_reservations_listed_newest_first(self, storage):
        ids = []
        for name in ("A", "B", "C"):
            reservation = await storage.reservations.create(
                ReservationCreate(
                    customer_name=name,
                    customer_phone="1",
                    date="2025-06-01",
                    time="19:00",
                    guests=2,
                    event_type="dinner",
                    table_id="1",
                )
            )
            ids.append(reservation.id)

        assert [r.id for r in await storage.reservations.list()] == list(reversed(ids))

    @pytest.mark.asyncio
    async def test_order_items_round_trip(self, storage):
        """Test order lines survive storage unchanged"""
        order = await storage.orders.create(
            OrderCreate(
                customer_name="Amina",
                items=[
                    OrderLine(id=1, name="Somali Tea", price=150, quantity=2),
                    OrderLine(id=5, name="Spiced Rice", price=800, quantity=1),
                ],
                total=1100,
                notes="No sugar",
            )
        )

        stored = await storage.orders.get(order.id)

        assert [line.model_dump() for line in stored.items] == [
            {"id": 1, "name": "Somali Tea", "price": 150, "quantity": 2},
            {"id": 5, "name": "Spiced Rice", "price": 800, "quantity": 1},
        ]

    @pytest.mark.asyncio
    async def test_order_items_can_be_replaced(self, storage):
        order = await storage.orders.create(make_order())

        updated = await storage.orders.update(
            order.id, {"items": [{"id": 2, "name": "Mango Juice", "price": 200, "quantity": 1}]}
        )

        assert updated.items[0].name == "Mango Juice"
        assert updated.total == 300


class TestFilteredListings:
    @pytest.mark.asyncio
    async def test_inactive_categories_hidden_by_default(self, storage):
        active = await storage.categories.create(CategoryCreate(name_en="Drinks"))
        hidden = await storage.categories.create(
            CategoryCreate(name_en="Seasonal", is_active=False)
        )

        assert [c.id for c in await storage.categories.list()] == [active.id]
        assert [c.id for c in await storage.categories.list(include_inactive=True)] == [
            active.id,
            hidden.id,
        ]

    @pytest.mark.asyncio
    async def test_menu_items_by_category(self, storage):
        drinks = await storage.categories.create(CategoryCreate(name_en="Drinks"))
        tea = await storage.menu_items.create(
            MenuItemCreate(name_en="Tea", price=150, category_id=drinks.id)
        )
        await storage.menu_items.create(MenuItemCreate(name_en="Rice", price=800))
        await storage.menu_items.create(
            MenuItemCreate(name_en="Old Tea", price=100, category_id=drinks.id, is_active=False)
        )

        listed = await storage.menu_items.list_by_category(drinks.id)

        assert [item.id for item in listed] == [tea.id]
        assert len(await storage.menu_items.list_by_category(drinks.id, include_inactive=True)) == 2

    @pytest.mark.asyncio
    async def test_deleting_category_leaves_menu_items(self, storage):
        drinks = await storage.categories.create(CategoryCreate(name_en="Drinks"))
        tea = await storage.menu_items.create(
            MenuItemCreate(name_en="Tea", price=150, category_id=drinks.id)
        )

        await storage.categories.delete(drinks.id)

        assert (await storage.menu_items.get(tea.id)).category_id == drinks.id

    @pytest.mark.asyncio
    async def test_approved_reviews(self, storage):
        approved = await storage.reviews.create(
            ReviewCreate(customer_name="Omar", rating=5, comment="Great", is_approved=True)
        )
        await storage.reviews.create(ReviewCreate(customer_name="Ali", rating=2, comment="Slow"))

        assert [r.id for r in await storage.reviews.list_approved()] == [approved.id]
        assert len(await storage.reviews.list()) == 2

    @pytest.mark.asyncio
    async def test_inactive_staff_hidden_by_default(self, storage):
        await storage.staff.create(StaffCreate(name="Hodan", role="Waiter"))
        await storage.staff.create(StaffCreate(name="Ali", role="Chef", is_active=False))

        assert [m.name for m in await storage.staff.list()] == ["Hodan"]
        assert len(await storage.staff.list(include_inactive=True)) == 2


class TestUserRepository:
    @pytest.mark.asyncio
    async def test_find_by_username(self, storage):
        user = await storage.users.create(
            UserCreate(username="amina", password_hash="salt:hash", name="Amina")
        )

        found = await storage.users.find_by_username("amina")

        assert found.id == user.id
        assert found.password_hash == "salt:hash"
        assert found.is_admin is False
        assert await storage.users.find_by_username("AMINA") is None

    @pytest.mark.asyncio
    async def test_duplicate_username_rejected(self, storage):
        """Test the username uniqueness rule holds in the storage layer itself"""
        await storage.users.create(
            UserCreate(username="amina", password_hash="salt:hash", name="Amina")
        )

        with pytest.raises(UsernameTakenError):
            await storage.users.create(
                UserCreate(username="amina", password_hash="salt:other", name="Impostor")
            )

        assert await storage.users.count() == 1
        assert (await storage.users.find_by_username("amina")).name == "Amina"


class TestFieldLengths:
    """Longest values the schemas accept are stored unchanged by both backends"""

    @pytest.mark.asyncio
    async def test_long_category_names(self, storage):
        name = "C" * 150

        category = await storage.categories.create(
            CategoryCreate(name=name, name_en=name, name_so=name)
        )

        assert (await storage.categories.get(category.id)).name_en == name

    @pytest.mark.asyncio
    async def test_reservation_at_column_limits(self, storage):
        reservation = await storage.reservations.create(
            ReservationCreate(
                customer_name="N" * 200,
                customer_phone="1" * 50,
                customer_email="e" * 255,
                date="D" * 20,
                time="T" * 20,
                guests=2,
                event_type="E" * 100,
                table_id="9" * 50,
            )
        )

        stored = await storage.reservations.get(reservation.id)
        assert stored.event_type == "E" * 100
        assert stored.table_id == "9" * 50

    @pytest.mark.asyncio
    async def test_long_image_url(self, storage):
        image = "https://images.example.com/" + "a" * 1000

        item = await storage.menu_items.create(
            MenuItemCreate(name_en="Tea", price=150, image=image)
        )

        assert (await storage.menu_items.get(item.id)).image == image


class TestManagedSession:
    """Test session commit/rollback handling"""

    def test_commits_and_closes(self):
        session = MagicMock()

        with managed_session(lambda: session):
            pass

        session.commit.assert_called_once()
        session.close.assert_called_once()
        session.rollback.assert_not_called()

    def test_rolls_back_on_database_error(self):
        session = MagicMock()

        with pytest.raises(SQLAlchemyError):
            with managed_session(lambda: session):
                raise SQLAlchemyError("constraint failed")

        session.rollback.assert_called_once()
        session.commit.assert_not_called()
        session.close.assert_called_once()

    def test_rolls_back_on_unexpected_error(self):
        session = MagicMock()

        with pytest.raises(ValueError):
            with managed_session(lambda: session):
                raise ValueError("bad value")

        session.rollback.assert_called_once()
        session.close.assert_called_once()
