"""
Client package

State containers used by the front end: durable local storage, the API
client, the shopping cart and the signed-in user.
"""

from .api_client import RestaurantApiClient
from .auth_store import AuthStore
from .cart_store import CartItem, CartStore
from .client_storage import ClientStorage
from .notifications import LoggingNotifier, Notification, Notifier

__all__ = [
    "AuthStore",
    "CartItem",
    "CartStore",
    "ClientStorage",
    "LoggingNotifier",
    "Notification",
    "Notifier",
    "RestaurantApiClient",
]
