"""
HTTP client for the restaurant API

Wraps an ``httpx.Client``; any client with the same interface works, including
FastAPI's ``TestClient``. Non-2xx responses raise ``ApiError``.
"""

import logging
from typing import Any, Dict, List, Optional, Type, TypeVar

import httpx
from pydantic import BaseModel

from qanyare.application.dtos.analytics_dtos import StatsResponse
from qanyare.application.dtos.auth_dtos import AuthResponse, LoginRequest, RegisterRequest
from qanyare.domain.entities import (
    CategoryCreate,
    CategoryRecord,
    CategoryUpdate,
    MenuItemCreate,
    MenuItemRecord,
    MenuItemUpdate,
    OrderCreate,
    OrderRecord,
    OrderUpdate,
    ReservationCreate,
    ReservationRecord,
    ReservationUpdate,
    ReviewCreate,
    ReviewRecord,
    ReviewUpdate,
    StaffCreate,
    StaffRecord,
    StaffUpdate,
    TableCreate,
    TableRecord,
    TableUpdate,
    UserPublic,
)
from qanyare.infrastructure.configuration.config import get_config
from qanyare.infrastructure.utilities.exceptions import ApiError

RecordT = TypeVar("RecordT", bound=BaseModel)

DEFAULT_TIMEOUT_SECONDS = 10.0


class RestaurantApiClient:
    """Typed access to every API route"""

    def __init__(
        self,
        base_url: Optional[str] = None,
        client: Optional[httpx.Client] = None,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ):
        self._owns_client = client is None
        self._client = client or httpx.Client(
            base_url=base_url or get_config().api_base_url, timeout=timeout
        )
        self._logger = logging.getLogger(self.__class__.__name__)

    def __enter__(self) -> "RestaurantApiClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    # Auth
    def login(self, username: str, password: str) -> UserPublic:
        body = LoginRequest(username=username, password=password)
        data = self._request("POST", "/api/auth/login", json=self._dump(body))
        return AuthResponse.model_validate(data).user

    def register(self, request: RegisterRequest) -> UserPublic:
        data = self._request("POST", "/api/auth/register", json=self._dump(request))
        return AuthResponse.model_validate(data).user

    # Categories
    def list_categories(self, include_inactive: bool = False) -> List[CategoryRecord]:
        params = self._flags(includeInactive=include_inactive)
        return self._list("/api/categories", CategoryRecord, params)

    def get_category(self, category_id: int) -> CategoryRecord:
        return self._get(f"/api/categories/{category_id}", CategoryRecord)

    def create_category(self, category: CategoryCreate) -> CategoryRecord:
        return self._create("/api/categories", category, CategoryRecord)

    def update_category(self, category_id: int, update: CategoryUpdate) -> CategoryRecord:
        return self._update(f"/api/categories/{category_id}", update, CategoryRecord)

    def delete_category(self, category_id: int) -> str:
        return self._delete(f"/api/categories/{category_id}")

    # Menu items
    def list_menu_items(
        self, category_id: Optional[int] = None, include_inactive: bool = False
    ) -> List[MenuItemRecord]:
        params = self._flags(includeInactive=include_inactive)
        if category_id is not None:
            params["categoryId"] = str(category_id)
        return self._list("/api/menu-items", MenuItemRecord, params)

    def get_menu_item(self, item_id: int) -> MenuItemRecord:
        return self._get(f"/api/menu-items/{item_id}", MenuItemRecord)

    def create_menu_item(self, item: MenuItemCreate) -> MenuItemRecord:
        return self._create("/api/menu-items", item, MenuItemRecord)

    def update_menu_item(self, item_id: int, update: MenuItemUpdate) -> MenuItemRecord:
        return self._update(f"/api/menu-items/{item_id}", update, MenuItemRecord)

    def delete_menu_item(self, item_id: int) -> str:
        return self._delete(f"/api/menu-items/{item_id}")

    # Orders
    def list_orders(self) -> List[OrderRecord]:
        return self._list("/api/orders", OrderRecord)

    def get_order(self, order_id: int) -> OrderRecord:
        return self._get(f"/api/orders/{order_id}", OrderRecord)

    def create_order(self, order: OrderCreate) -> OrderRecord:
        return self._create("/api/orders", order, OrderRecord)

    def update_order(self, order_id: int, update: OrderUpdate) -> OrderRecord:
        return self._update(f"/api/orders/{order_id}", update, OrderRecord)

    # Reservations
    def list_reservations(self) -> List[ReservationRecord]:
        return self._list("/api/reservations", ReservationRecord)

    def get_reservation(self, reservation_id: int) -> ReservationRecord:
        return self._get(f"/api/reservations/{reservation_id}", ReservationRecord)

    def create_reservation(self, reservation: ReservationCreate) -> ReservationRecord:
        return self._create("/api/reservations", reservation, ReservationRecord)

    def update_reservation(
        self, reservation_id: int, update: ReservationUpdate
    ) -> ReservationRecord:
        return self._update(f"/api/reservations/{reservation_id}", update, ReservationRecord)

    # Reviews
    def list_reviews(self, approved_only: bool = False) -> List[ReviewRecord]:
        return self._list("/api/reviews", ReviewRecord, self._flags(approved=approved_only))

    def get_review(self, review_id: int) -> ReviewRecord:
        return self._get(f"/api/reviews/{review_id}", ReviewRecord)

    def create_review(self, review: ReviewCreate) -> ReviewRecord:
        return self._create("/api/reviews", review, ReviewRecord)

    def update_review(self, review_id: int, update: ReviewUpdate) -> ReviewRecord:
        return self._update(f"/api/reviews/{review_id}", update, ReviewRecord)

    def delete_review(self, review_id: int) -> str:
        return self._delete(f"/api/reviews/{review_id}")

    # Staff
    def list_staff(self, include_inactive: bool = False) -> List[StaffRecord]:
        params = self._flags(includeInactive=include_inactive)
        return self._list("/api/staff", StaffRecord, params)

    def get_staff_member(self, staff_id: int) -> StaffRecord:
        return self._get(f"/api/staff/{staff_id}", StaffRecord)

    def create_staff_member(self, member: StaffCreate) -> StaffRecord:
        return self._create("/api/staff", member, StaffRecord)

    def update_staff_member(self, staff_id: int, update: StaffUpdate) -> StaffRecord:
        return self._update(f"/api/staff/{staff_id}", update, StaffRecord)

    def delete_staff_member(self, staff_id: int) -> str:
        return self._delete(f"/api/staff/{staff_id}")

    # Tables
    def list_tables(self) -> List[TableRecord]:
        return self._list("/api/tables", TableRecord)

    def get_table(self, table_id: int) -> TableRecord:
        return self._get(f"/api/tables/{table_id}", TableRecord)

    def create_table(self, table: TableCreate) -> TableRecord:
        return self._create("/api/tables", table, TableRecord)

    def update_table(self, table_id: int, update: TableUpdate) -> TableRecord:
        return self._update(f"/api/tables/{table_id}", update, TableRecord)

    def delete_table(self, table_id: int) -> str:
        return self._delete(f"/api/tables/{table_id}")

    # Analytics and health
    def get_stats(self) -> StatsResponse:
        return StatsResponse.model_validate(self._request("GET", "/api/analytics/stats"))

    def health(self) -> Dict[str, Any]:
        return self._request("GET", "/health")

    # Helpers
    def _list(
        self, path: str, record_type: Type[RecordT], params: Optional[Dict[str, str]] = None
    ) -> List[RecordT]:
        data = self._request("GET", path, params=params or None)
        return [record_type.model_validate(item) for item in data]

    def _get(self, path: str, record_type: Type[RecordT]) -> RecordT:
        return record_type.model_validate(self._request("GET", path))

    def _create(self, path: str, body: BaseModel, record_type: Type[RecordT]) -> RecordT:
        return record_type.model_validate(self._request("POST", path, json=self._dump(body)))

    def _update(self, path: str, body: BaseModel, record_type: Type[RecordT]) -> RecordT:
        data = self._request(
            "PATCH", path, json=body.model_dump(mode="json", by_alias=True, exclude_unset=True)
        )
        return record_type.model_validate(data)

    def _delete(self, path: str) -> str:
        return self._request("DELETE", path).get("message", "")

    @staticmethod
    def _dump(body: BaseModel) -> Dict[str, Any]:
        return body.model_dump(mode="json", by_alias=True)

    @staticmethod
    def _flags(**flags: bool) -> Dict[str, str]:
        return {name: "true" for name, enabled in flags.items() if enabled}

    def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        try:
            response = self._client.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            self._logger.error("%s %s failed: %s", method, path, e)
            raise ApiError(0, f"Could not reach the server: {e}") from e

        try:
            data = response.json()
        except ValueError:
            data = None

        if response.is_success:
            return data

        body = data if isinstance(data, dict) else {}
        message = body.get("message") or response.reason_phrase or "Request failed"
        self._logger.info("%s %s returned %s: %s", method, path, response.status_code, message)
        raise ApiError(response.status_code, message, body.get("errors"))
