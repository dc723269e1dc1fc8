"""
Durable client-side key/value storage

One JSON file holds every slot, the way a browser keeps local storage for the
web front end. Reads never fail: a missing or unreadable file yields the
default value.
"""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from qanyare.infrastructure.configuration.config import get_config
from qanyare.infrastructure.utilities.constants import StorageKeys

logger = logging.getLogger(__name__)


class ClientStorage:
    """JSON-file backed storage with the cart, user and admin slots"""

    def __init__(self, path: Optional[Union[str, Path]] = None):
        self.path = Path(path or get_config().client_storage_path)

    # Generic slots
    def get(self, key: str, default: Any = None) -> Any:
        return self._read().get(key, default)

    def set(self, key: str, value: Any) -> None:
        data = self._read()
        data[key] = value
        self._write(data)

    def remove(self, key: str) -> None:
        data = self._read()
        if data.pop(key, None) is not None:
            self._write(data)

    # Cart slot
    def get_cart(self) -> List[Dict[str, Any]]:
        cart = self.get(StorageKeys.CART, [])
        return cart if isinstance(cart, list) else []

    def set_cart(self, cart: List[Dict[str, Any]]) -> None:
        self.set(StorageKeys.CART, cart)

    def clear_cart(self) -> None:
        self.remove(StorageKeys.CART)

    # User slot
    def get_user(self) -> Optional[Dict[str, Any]]:
        return self.get(StorageKeys.USER)

    def set_user(self, user: Dict[str, Any]) -> None:
        self.set(StorageKeys.USER, user)

    def clear_user(self) -> None:
        self.remove(StorageKeys.USER)

    # Admin slot
    def get_admin(self) -> Optional[Dict[str, Any]]:
        return self.get(StorageKeys.ADMIN)

    def set_admin(self, admin: Dict[str, Any]) -> None:
        self.set(StorageKeys.ADMIN, admin)

    def clear_admin(self) -> None:
        self.remove(StorageKeys.ADMIN)

    def _read(self) -> Dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning("Ignoring unreadable client storage %s: %s", self.path, e)
            return {}
        if not isinstance(data, dict):
            logger.warning("Ignoring malformed client storage %s", self.path)
            return {}
        return data

    def _write(self, data: Dict[str, Any]) -> None:
        """Replace the file atomically; a failed write leaves the previous contents intact"""
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as tmp_file:
                    json.dump(data, tmp_file, indent=2)
                os.replace(tmp_name, self.path)
            except Exception:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as e:
            logger.error("Failed to write client storage %s: %s", self.path, e)
