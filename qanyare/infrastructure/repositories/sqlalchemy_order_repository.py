"""
SQLAlchemy implementation of OrderRepository
"""

import json
from typing import Any, Dict

from qanyare.domain.entities.order_entity import OrderRecord
from qanyare.domain.repositories.order_repository import OrderRepository
from qanyare.infrastructure.database.models import Order as SQLOrder
from qanyare.infrastructure.repositories.sqlalchemy_crud_repository import (
    SQLAlchemyCrudRepository,
)


class SQLAlchemyOrderRepository(SQLAlchemyCrudRepository, OrderRepository):
    """SQLAlchemy implementation of order repository"""

    model = SQLOrder
    record_type = OrderRecord
    timestamped = True
    newest_first = True

    def _to_row_values(self, values: Dict[str, Any]) -> Dict[str, Any]:
        row_values = dict(values)
        # Order lines live in a text column; the record schema parses them back
        if "items" in row_values:
            row_values["items"] = json.dumps(row_values["items"])
        return row_values
