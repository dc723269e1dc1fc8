"""
Fixture data for a fresh restaurant

``seed_storage`` fills every empty collection; collections that already hold
records are left alone, so seeding is safe to run on every startup.
"""

import logging
from typing import Any, Dict, List, Optional

from qanyare.domain.entities import (
    CategoryCreate,
    MenuItemCreate,
    ReviewCreate,
    StaffCreate,
    TableCreate,
    UserCreate,
)
from qanyare.domain.storage import Storage
from qanyare.infrastructure.configuration.config import Settings, get_config
from qanyare.infrastructure.logging.logging_config import PerformanceLogger
from qanyare.infrastructure.security.password_hasher import hash_password

logger = logging.getLogger(__name__)

CATEGORIES: List[Dict[str, Any]] = [
    {
        "name": "Drinks",
        "name_en": "Drinks",
        "name_so": "Cabitaan",
        "description": "Traditional Somali beverages",
    },
    {
        "name": "Starters",
        "name_en": "Starters",
        "name_so": "Bilowga",
        "description": "Appetizers and light bites",
    },
    {
        "name": "Main Course",
        "name_en": "Main Course",
        "name_so": "Cunto Weyn",
        "description": "Traditional main dishes",
    },
]

# Keyed by the English name of the category each item belongs to
MENU_ITEMS: Dict[str, List[Dict[str, Any]]] = {
    "Drinks": [
        {
            "name": "Shaah Somali",
            "name_en": "Somali Tea",
            "name_so": "Shaah Somali",
            "description": "Aromatic tea with milk, cardamom, and cinnamon",
            "price": 150,
            "image": "https://images.pexels.com/photos/1638280/pexels-photo-1638280.jpeg?auto=compress&cs=tinysrgb&w=800&h=600",
        },
        {
            "name": "Casiir Canbe",
            "name_en": "Mango Juice",
            "name_so": "Casiir Canbe",
            "description": "Freshly squeezed mango juice from local fruits",
            "price": 200,
            "image": "https://images.unsplash.com/photo-1546173159-315724a31696?auto=format&fit=crop&w=800&h=600",
        },
    ],
    "Starters": [
        {
            "name": "Sambuus",
            "name_en": "Samosas",
            "name_so": "Sambuus",
            "description": "Crispy pastries filled with spiced meat and vegetables",
            "price": 300,
            "image": "https://images.unsplash.com/photo-1601050690597-df0568f70950?auto=format&fit=crop&w=800&h=600",
        },
        {
            "name": "Canjeero",
            "name_en": "Flatbread",
            "name_so": "Canjeero",
            "description": "Traditional fermented pancake, perfect for sharing",
            "price": 250,
            "image": "https://images.pexels.com/photos/376464/pexels-photo-376464.jpeg?auto=compress&cs=tinysrgb&w=800&h=600",
        },
    ],
    "Main Course": [
        {
            "name": "Bariis Iskukaris",
            "name_en": "Spiced Rice",
            "name_so": "Bariis Iskukaris",
            "description": "Fragrant rice cooked with aromatic spices and tender meat",
            "price": 800,
            "image": "https://images.unsplash.com/photo-1596560548464-f010549b84d7?auto=format&fit=crop&w=800&h=600",
        },
        {
            "name": "Hilib Shiilan",
            "name_en": "Grilled Meat",
            "name_so": "Hilib Shiilan",
            "description": "Tender grilled meat seasoned with traditional Somali spices",
            "price": 1200,
            "image": "https://images.unsplash.com/photo-1529193591184-b1d58069ecdd?auto=format&fit=crop&w=800&h=600",
        },
        {
            "name": "Baasto",
            "name_en": "Somali Pasta",
            "name_so": "Baasto",
            "description": "Pasta with traditional Somali sauce and vegetables",
            "price": 650,
            "image": "https://images.pexels.com/photos/1279330/pexels-photo-1279330.jpeg?auto=compress&cs=tinysrgb&w=800&h=600",
        },
    ],
}

TABLES: List[Dict[str, Any]] = [
    {"name": "Table 1", "capacity": 4, "type": "table", "description": "Perfect for small families"},
    {"name": "Table 2", "capacity": 6, "type": "table", "description": "Ideal for medium groups"},
    {"name": "Table 3", "capacity": 8, "type": "table", "description": "Great for larger parties"},
    {"name": "Main Hall", "capacity": 50, "type": "hall", "description": "Perfect for weddings and large celebrations"},
    {"name": "Private Hall", "capacity": 20, "type": "hall", "description": "Intimate setting for special occasions"},
]

STAFF: List[Dict[str, Any]] = [
    {"name": "Ahmed Hassan Mohamed", "role": "Manager", "phone": "+254 712 345 678", "email": "ahmed@qanyare.com"},
    {"name": "Fatima Omar Ali", "role": "Head Chef", "phone": "+254 733 456 789", "email": "fatima@qanyare.com"},
    {"name": "Ibrahim Mohamed Aden", "role": "Waiter", "phone": "+254 722 567 890", "email": "ibrahim@qanyare.com"},
    {"name": "Halima Abdi Hassan", "role": "Cashier", "phone": "+254 711 678 901", "email": "halima@qanyare.com"},
]

REVIEWS: List[Dict[str, Any]] = [
    {
        "customer_name": "Ahmed Hassan",
        "rating": 5,
        "comment": "The best Somali restaurant in Mandera! The Bariis Iskukaris reminded me of my grandmother's cooking. Authentic flavors and warm hospitality.",
    },
    {
        "customer_name": "Fatima Mohamed",
        "rating": 5,
        "comment": "Perfect venue for our family celebration! The staff was incredibly welcoming and the traditional dishes were absolutely delicious.",
    },
    {
        "customer_name": "Ibrahim Ali",
        "rating": 5,
        "comment": "Outstanding service and truly authentic Somali cuisine. The Hilib Shiilan was perfectly seasoned and the atmosphere is very cultural.",
    },
    {
        "customer_name": "Zeinab Omar",
        "rating": 5,
        "comment": "The best place in Mandera for authentic Somali food! Every dish tells a story of our rich culture. Highly recommended!",
    },
    {
        "customer_name": "Mohamed Abdi",
        "rating": 5,
        "comment": "Excellent venue for our wedding celebration! The team helped us create a memorable experience with traditional Somali hospitality.",
    },
    {
        "customer_name": "Halima Isse",
        "rating": 5,
        "comment": "The Canjeero here is just like my mother used to make! Clean environment, friendly staff, and prices that won't break the bank.",
    },
]

ADMIN_EMAIL = "admin@qanyare.com"
ADMIN_PHONE = "+254 712 345 678"


async def seed_storage(storage: Storage, config: Optional[Settings] = None) -> Dict[str, int]:
    """
    Load fixture data into every empty collection.

    Returns:
        Number of records inserted per collection
    """
    config = config or get_config()
    inserted: Dict[str, int] = {}

    with PerformanceLogger("seed_storage", logger):
        if await storage.categories.count() == 0:
            for category in CATEGORIES:
                await storage.categories.create(CategoryCreate(**category))
            inserted["categories"] = len(CATEGORIES)

        if await storage.menu_items.count() == 0:
            categories = await storage.categories.list(include_inactive=True)
            category_ids = {category.name_en: category.id for category in categories}
            count = 0
            for category_name, items in MENU_ITEMS.items():
                for item in items:
                    await storage.menu_items.create(
                        MenuItemCreate(**item, category_id=category_ids.get(category_name))
                    )
                    count += 1
            inserted["menu_items"] = count

        if await storage.tables.count() == 0:
            for table in TABLES:
                await storage.tables.create(TableCreate(**table))
            inserted["tables"] = len(TABLES)

        if await storage.staff.count() == 0:
            for member in STAFF:
                await storage.staff.create(StaffCreate(**member))
            inserted["staff"] = len(STAFF)

        if await storage.reviews.count() == 0:
            for review in REVIEWS:
                await storage.reviews.create(ReviewCreate(**review, is_approved=True))
            inserted["reviews"] = len(REVIEWS)

        if await storage.users.find_by_username(config.admin_username) is None:
            await storage.users.create(
                UserCreate(
                    username=config.admin_username,
                    password_hash=hash_password(config.admin_password),
                    name=config.admin_name,
                    email=ADMIN_EMAIL,
                    phone=ADMIN_PHONE,
                    is_admin=True,
                )
            )
            inserted["users"] = 1

    if inserted:
        logger.info("Seeded fixture data", extra={"inserted": inserted})
    return inserted
