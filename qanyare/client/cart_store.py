"""
Shopping cart state

The cart is an ordered list of lines loaded once from ``ClientStorage`` and
written back in full after every mutation, so the stored list always equals
the in-memory one.
"""

import logging
from typing import List, Optional, Union

from pydantic import Field

from qanyare.client.client_storage import ClientStorage
from qanyare.client.notifications import LoggingNotifier, Notification, Notifier
from qanyare.domain.entities.base import CamelModel
from qanyare.domain.entities.menu_entities import MenuItemRecord
from qanyare.domain.entities.order_entity import OrderCreate, OrderLine
from qanyare.infrastructure.utilities.exceptions import ValidationError

logger = logging.getLogger(__name__)


class CartItem(CamelModel):
    """One cart line"""

    id: int
    name: str
    name_en: str
    name_so: str
    price: int = Field(..., ge=0)
    quantity: int = Field(default=1, ge=1)
    image: Optional[str] = None

    @classmethod
    def from_menu_item(cls, item: MenuItemRecord) -> "CartItem":
        return cls(
            id=item.id,
            name=item.name,
            name_en=item.name_en,
            name_so=item.name_so,
            price=item.price,
            image=item.image,
        )


class CartStore:
    """Cart container mirrored to the ``qanyare-cart`` storage slot"""

    def __init__(self, storage: ClientStorage, notifier: Optional[Notifier] = None):
        self._storage = storage
        self._notifier = notifier or LoggingNotifier()
        self._items: List[CartItem] = self._load()

    @property
    def items(self) -> List[CartItem]:
        return [item.model_copy() for item in self._items]

    def add(self, item: Union[CartItem, MenuItemRecord]) -> None:
        """Add one unit; an existing line with the same id is incremented"""
        if isinstance(item, MenuItemRecord):
            item = CartItem.from_menu_item(item)

        for line in self._items:
            if line.id == item.id:
                line.quantity += 1
                break
        else:
            self._items.append(item.model_copy(update={"quantity": 1}))

        self._persist()
        self._notifier.notify(
            Notification("Added to cart", f"{item.name_en} has been added to your cart.")
        )

    def remove(self, item_id: int) -> None:
        self._items = [line for line in self._items if line.id != item_id]
        self._persist()
        self._notifier.notify(
            Notification("Removed from cart", "Item has been removed from your cart.")
        )

    def set_quantity(self, item_id: int, quantity: int) -> None:
        """Replace a line's quantity; zero or less removes the line"""
        if quantity <= 0:
            self.remove(item_id)
            return

        for line in self._items:
            if line.id == item_id:
                line.quantity = quantity
        self._persist()

    def clear(self) -> None:
        self._items = []
        self._storage.clear_cart()
        self._notifier.notify(
            Notification("Cart cleared", "All items have been removed from your cart.")
        )

    def total_items(self) -> int:
        return sum(line.quantity for line in self._items)

    def total_price(self) -> int:
        return sum(line.price * line.quantity for line in self._items)

    def to_order(
        self,
        customer_name: str,
        customer_phone: Optional[str] = None,
        customer_email: Optional[str] = None,
        notes: Optional[str] = None,
    ) -> OrderCreate:
        """Build the order payload for the current cart"""
        if not self._items:
            raise ValidationError("Cart is empty", "items")

        return OrderCreate(
            customer_name=customer_name,
            customer_phone=customer_phone,
            customer_email=customer_email,
            items=[
                OrderLine(id=line.id, name=line.name_en, price=line.price, quantity=line.quantity)
                for line in self._items
            ],
            total=self.total_price(),
            notes=notes,
        )

    def _load(self) -> List[CartItem]:
        items = []
        for raw in self._storage.get_cart():
            try:
                items.append(CartItem.model_validate(raw))
            except ValueError as e:
                logger.warning("Dropping unreadable cart line %r: %s", raw, e)
        return items

    def _persist(self) -> None:
        self._storage.set_cart(
            [line.model_dump(mode="json", by_alias=True) for line in self._items]
        )
