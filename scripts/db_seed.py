"""Seed the database with 50 random demo orders.

Creates the `orders` table if it does not exist, clears existing rows, then
inserts the demo orders and prints a per-status summary.

Usage:
    python scripts/db_seed.py

The script reads DATABASE_URL from the environment (see orders_api/config.py).
"""
import asyncio
import random
import sys
from datetime import date, timedelta
from decimal import Decimal
from pathlib import Path

# Ensure project root is on sys.path so the package imports without installing
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from sqlalchemy import delete, func, select

from orders_api import config
from orders_api.database import init_models, make_engine, make_session_maker
from orders_api.models import Order

NUM_ORDERS = 50

CUSTOMERS = [
    "John Smith", "Emma Johnson", "Michael Brown", "Sarah Davis", "David Wilson",
    "Lisa Anderson", "James Taylor", "Jennifer Martinez", "Robert Garcia", "Mary Rodriguez",
    "William Lee", "Patricia White", "Richard Harris", "Linda Clark", "Joseph Lewis",
    "Barbara Walker", "Thomas Hall", "Elizabeth Allen", "Charles Young", "Susan King",
]

PRODUCTS = [
    'Laptop Pro 15"', "Wireless Mouse", "Mechanical Keyboard", "USB-C Hub", "4K Monitor",
    "Ergonomic Chair", "Standing Desk", "Noise Cancelling Headphones", "Webcam HD",
    "External SSD 1TB", "Graphics Tablet", "Desk Lamp LED", "Cable Organizer",
    "Monitor Arm", "Laptop Stand", "Wireless Charger", "Smartphone", 'Tablet 10"',
    "Smart Watch", "Bluetooth Speaker", "Power Bank", "Phone Case", "Screen Protector",
    "Memory Card 128GB", "HDMI Cable",
]


def random_order_date(today: date | None = None) -> str:
    """A YYYY-MM-DD date within the last ~6 months."""
    today = today or date.today()
    return (today - timedelta(days=random.randint(0, 182))).isoformat()


def generate_order() -> dict:
    quantity = random.randint(1, 10)
    base_price = random.randint(50, 1049)
    return {
        "customer_name": random.choice(CUSTOMERS),
        "product": random.choice(PRODUCTS),
        "quantity": quantity,
        "amount": Decimal(base_price * quantity).quantize(Decimal("0.01")),
        "status": random.choice(config.ORDER_STATUSES),
        "order_date": random_order_date(),
    }


async def seed(num_orders: int = NUM_ORDERS) -> None:
    engine = make_engine()
    session_maker = make_session_maker(engine)
    try:
        await init_models(engine)
        async with session_maker() as session:
            await session.execute(delete(Order))
            print("Cleared existing orders")

            session.add_all(Order(**generate_order()) for _ in range(num_orders))
            await session.commit()
            print(f"Seeded {num_orders} orders")

            total = (await session.execute(select(func.count()).select_from(Order))).scalar_one()
            print(f"Total orders in database: {total}")

            res = await session.execute(
                select(Order.status, func.count()).group_by(Order.status).order_by(Order.status)
            )
            print("Orders by status:")
            for status, count in res.all():
                print(f"   {status}: {count}")
    finally:
        await engine.dispose()


def main():
    print("DB seed starting, DATABASE_URL=", config.DATABASE_URL)
    asyncio.run(seed())
    print("DB seed complete")


if __name__ == "__main__":
    main()
