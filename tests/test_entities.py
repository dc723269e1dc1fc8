"""
Tests for the entity schemas
"""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from qanyare.domain.entities import (
    CategoryCreate,
    CategoryRecord,
    CategoryUpdate,
    MenuItemCreate,
    MenuItemUpdate,
    OrderCreate,
    OrderRecord,
    OrderUpdate,
    ReservationCreate,
    ReviewCreate,
    ReviewUpdate,
    StaffUpdate,
    TableCreate,
    UserRecord,
)


class TestBilingualNames:
    """Category and menu item name defaults"""

    def test_names_default_to_english(self):
        category = CategoryCreate.model_validate({"nameEn": "Drinks"})

        assert category.name == "Drinks"
        assert category.name_so == "Drinks"
        assert category.is_active is True

    def test_explicit_names_are_kept(self):
        category = CategoryCreate.model_validate(
            {"name": "Cabitaan", "nameEn": "Drinks", "nameSo": "Cabitaan"}
        )

        assert category.name == "Cabitaan"
        assert category.name_so == "Cabitaan"

    def test_menu_item_defaults(self):
        item = MenuItemCreate.model_validate({"nameEn": "Tea", "price": 150})

        assert item.name == "Tea"
        assert item.description == ""
        assert item.category_id is None
        assert item.is_available is True
        assert item.is_active is True

    def test_negative_price_rejected(self):
        with pytest.raises(ValidationError):
            MenuItemCreate.model_validate({"nameEn": "Tea", "price": -1})

    def test_english_name_required(self):
        with pytest.raises(ValidationError):
            CategoryCreate.model_validate({"nameSo": "Cabitaan"})


class TestPatchModels:
    """Partial update payloads"""

    def test_changes_only_contain_sent_fields(self):
        update = MenuItemUpdate.model_validate({"price": 175})

        assert update.changes() == {"price": 175}

    def test_null_accepted_for_optional_field(self):
        update = CategoryUpdate.model_validate({"description": None})

        assert update.changes() == {"description": None}

    def test_null_rejected_for_required_field(self):
        with pytest.raises(ValidationError):
            CategoryUpdate.model_validate({"nameEn": None})

    def test_null_rejected_for_flag(self):
        with pytest.raises(ValidationError):
            StaffUpdate.model_validate({"isActive": None})

    def test_review_approval_toggle(self):
        assert ReviewUpdate.model_validate({"isApproved": True}).changes() == {
            "is_approved": True
        }


class TestOrderSchema:
    """Order validation"""

    def test_default_status_is_pending(self):
        order = OrderCreate.model_validate(
            {
                "customerName": "Amina",
                "items": [{"id": 1, "name": "Tea", "price": 150, "quantity": 2}],
                "total": 300,
            }
        )

        assert order.status == "pending"
        assert order.items[0].quantity == 2

    def test_items_accept_serialized_list(self):
        order = OrderCreate.model_validate(
            {
                "customerName": "Amina",
                "items": '[{"id": 1, "name": "Tea", "price": 150, "quantity": 2}]',
                "total": 300,
            }
        )

        assert order.items[0].name == "Tea"

    def test_unknown_status_rejected(self):
        with pytest.raises(ValidationError):
            OrderUpdate.model_validate({"status": "delivered"})

    def test_empty_items_rejected(self):
        with pytest.raises(ValidationError):
            OrderCreate.model_validate({"customerName": "Amina", "items": [], "total": 0})

    def test_zero_quantity_rejected(self):
        with pytest.raises(ValidationError):
            OrderCreate.model_validate(
                {
                    "customerName": "Amina",
                    "items": [{"id": 1, "name": "Tea", "price": 150, "quantity": 0}],
                    "total": 0,
                }
            )

    def test_malformed_serialized_items_rejected(self):
        with pytest.raises(ValidationError):
            OrderCreate.model_validate({"customerName": "Amina", "items": "[{", "total": 0})

    def test_record_dumps_camel_case(self):
        record = OrderRecord(
            id=1,
            customer_name="Amina",
            items=[{"id": 1, "name": "Tea", "price": 150, "quantity": 1}],
            total=150,
            status="pending",
            created_at=datetime(2025, 1, 1, 12, 0),
        )

        data = record.model_dump(mode="json", by_alias=True)

        assert data["customerName"] == "Amina"
        assert "createdAt" in data
        # Naive timestamps are read as UTC
        assert record.created_at.tzinfo == timezone.utc


class TestReservationAndReviewSchemas:
    def test_numeric_table_id_becomes_text(self):
        reservation = ReservationCreate.model_validate(
            {
                "customerName": "Omar",
                "customerPhone": "+254 700 000 002",
                "date": "2025-06-01",
                "time": "19:30",
                "guests": 4,
                "eventType": "dinner",
                "tableId": 3,
            }
        )

        assert reservation.table_id == "3"
        assert reservation.status == "pending"

    def test_guests_must_be_positive(self):
        with pytest.raises(ValidationError):
            ReservationCreate.model_validate(
                {
                    "customerName": "Omar",
                    "customerPhone": "1",
                    "date": "2025-06-01",
                    "time": "19:30",
                    "guests": 0,
                    "eventType": "dinner",
                    "tableId": "1",
                }
            )

    @pytest.mark.parametrize("rating", [0, 6])
    def test_rating_out_of_range_rejected(self, rating):
        with pytest.raises(ValidationError):
            ReviewCreate(customer_name="Omar", rating=rating, comment="Good")

    def test_new_review_is_not_approved(self):
        assert ReviewCreate(customer_name="Omar", rating=5, comment="Good").is_approved is False


class TestUserAndTableSchemas:
    def test_public_view_drops_password_hash(self):
        user = UserRecord(
            id=1,
            username="admin",
            password_hash="salt:hash",
            name="Admin User",
            is_admin=True,
            created_at=datetime.now(timezone.utc),
        )

        public = user.to_public().model_dump(by_alias=True)

        assert "passwordHash" not in public
        assert "password_hash" not in public
        assert public["isAdmin"] is True

    def test_table_defaults(self):
        table = TableCreate(name="Table 9", capacity=2)

        assert table.type == "table"
        assert table.is_available is True

    def test_record_reads_orm_attributes(self):
        class Row:
            id = 7
            name = "Drinks"
            name_en = "Drinks"
            name_so = "Cabitaan"
            description = None
            is_active = True

        assert CategoryRecord.model_validate(Row()).id == 7
