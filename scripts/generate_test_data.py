#!/usr/bin/env python3
"""
Fake orders, reservations and reviews for local testing and demos.

Writes through the configured storage backend, so with STORAGE_BACKEND=database
the data lands in DATABASE_URL. Orders are priced from the current menu.
"""

import argparse
import asyncio
import logging
import random
import sys
from pathlib import Path
from typing import List

# Allow running from a source checkout without installing the package
sys.path.insert(0, str(Path(__file__).parent.parent))

from dotenv import load_dotenv
from faker import Faker

from qanyare.domain.entities import (
    MenuItemRecord,
    OrderCreate,
    OrderLine,
    OrderStatus,
    ReservationCreate,
    ReservationStatus,
    ReviewCreate,
    TableRecord,
)
from qanyare.domain.storage import Storage
from qanyare.infrastructure.configuration.config import get_config
from qanyare.infrastructure.container.dependency_injection import DependencyContainer
from qanyare.infrastructure.logging.logging_config import setup_logging

logger = logging.getLogger(__name__)

fake = Faker(["en_US", "en_GB"])

EVENT_TYPES = ["dinner", "lunch", "birthday", "wedding", "family gathering", "business meeting"]

# Weighted so most generated orders are already finished
ORDER_STATUS_WEIGHTS = {
    OrderStatus.PENDING.value: 0.15,
    OrderStatus.PREPARING.value: 0.15,
    OrderStatus.READY.value: 0.1,
    OrderStatus.COMPLETED.value: 0.5,
    OrderStatus.CANCELLED.value: 0.1,
}

RESERVATION_STATUS_WEIGHTS = {
    ReservationStatus.PENDING.value: 0.3,
    ReservationStatus.CONFIRMED.value: 0.4,
    ReservationStatus.COMPLETED.value: 0.2,
    ReservationStatus.CANCELLED.value: 0.1,
}


def _weighted_choice(weights: dict) -> str:
    return random.choices(list(weights.keys()), weights=list(weights.values()))[0]


def generate_order(menu: List[MenuItemRecord]) -> OrderCreate:
    """Order of one to four distinct menu items"""
    picks = random.sample(menu, k=min(len(menu), random.randint(1, 4)))
    lines = [
        OrderLine(
            id=item.id,
            name=item.name_en,
            price=item.price,
            quantity=random.choices([1, 2, 3], weights=[0.6, 0.3, 0.1])[0],
        )
        for item in picks
    ]
    return OrderCreate(
        customer_name=fake.name(),
        customer_phone=fake.phone_number(),
        customer_email=fake.email() if random.random() < 0.5 else None,
        items=lines,
        total=sum(line.price * line.quantity for line in lines),
        status=_weighted_choice(ORDER_STATUS_WEIGHTS),
        notes=fake.sentence() if random.random() < 0.2 else None,
    )


def generate_reservation(tables: List[TableRecord]) -> ReservationCreate:
    table = random.choice(tables)
    return ReservationCreate(
        customer_name=fake.name(),
        customer_phone=fake.phone_number(),
        customer_email=fake.email() if random.random() < 0.5 else None,
        date=fake.date_between(start_date="-30d", end_date="+30d").isoformat(),
        time=f"{random.randint(11, 21):02d}:{random.choice(['00', '30'])}",
        guests=random.randint(1, table.capacity),
        event_type=random.choice(EVENT_TYPES),
        table_id=str(table.id),
        status=_weighted_choice(RESERVATION_STATUS_WEIGHTS),
        notes=fake.sentence() if random.random() < 0.2 else None,
    )


def generate_review() -> ReviewCreate:
    return ReviewCreate(
        customer_name=fake.name(),
        rating=random.choices([1, 2, 3, 4, 5], weights=[0.03, 0.05, 0.12, 0.3, 0.5])[0],
        comment=fake.paragraph(nb_sentences=2),
        is_approved=random.random() < 0.7,
    )


async def generate(storage: Storage, orders: int, reservations: int, reviews: int) -> None:
    menu = await storage.menu_items.list()
    tables = await storage.tables.list()
    if not menu or not tables:
        raise RuntimeError("Menu and tables must be seeded before generating test data")

    for _ in range(orders):
        await storage.orders.create(generate_order(menu))
    logger.info("Generated %d orders", orders)

    for _ in range(reservations):
        await storage.reservations.create(generate_reservation(tables))
    logger.info("Generated %d reservations", reservations)

    for _ in range(reviews):
        await storage.reviews.create(generate_review())
    logger.info("Generated %d reviews", reviews)


async def main(args: argparse.Namespace) -> None:
    container = DependencyContainer(get_config())
    try:
        await container.initialize()
        await generate(container.get_storage(), args.orders, args.reservations, args.reviews)
    finally:
        container.close()


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--orders", type=int, default=50)
    parser.add_argument("--reservations", type=int, default=20)
    parser.add_argument("--reviews", type=int, default=15)
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducible data")
    return parser.parse_args()


if __name__ == "__main__":
    load_dotenv()
    setup_logging()
    arguments = parse_args()
    if arguments.seed is not None:
        random.seed(arguments.seed)
        Faker.seed(arguments.seed)
    asyncio.run(main(arguments))
