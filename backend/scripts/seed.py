# scripts/seed.py
import asyncio
import logging
from decimal import Decimal

from sqlalchemy.ext.asyncio import AsyncSession

from app.db.base import Base
from app.db.session import AsyncSessionLocal, engine
from app.db.crud_users import create_user, get_user_by_email
from app.db.crud_listings import create_listing, find_listing_for_owner
from app.schemas.booking import BookingRequest
from app.services.bookings import create_booking, list_bookings_from_user

logger = logging.getLogger("seed")

USERS = [
    {"username": "lebron", "email": "lebron@james.io", "first_name": "LeBron", "last_name": "James"},
    {"username": "jlo", "email": "jennifer@lopez.io", "first_name": "Jennifer", "last_name": "Lopez"},
    {"username": "serena", "email": "serena@williams.io", "first_name": "Serena", "last_name": "Williams"},
]

LISTINGS = [
    ("lebron", "Beachfront villa", "Malibu, CA", Decimal("400.00")),
    ("lebron", "Downtown loft", "Los Angeles, CA", Decimal("180.00")),
    ("serena", "Garden cottage", "Palm Beach, FL", Decimal("250.00")),
]

BOOKINGS = [("03-05-2021", "03-07-2021"), ("04-10-2021", "04-14-2021")]


async def seed_data(db: AsyncSession):
    """
    Safe to re-run: existing users, listings and jlo's bookings are reused.
    """
    users = {}
    for data in USERS:
        user = await get_user_by_email(db, data["email"])
        if not user:
            user = await create_user(db, password="password", **data)
        users[user.username] = user

    listings = []
    for owner, title, location, price in LISTINGS:
        listing = await find_listing_for_owner(db, users[owner].id, title)
        if not listing:
            listing = await create_listing(
                db,
                user_id=users[owner].id,
                title=title,
                location=location,
                price=price,
                description=f"{title} in {location}",
            )
        listings.append(listing)

    if not await list_bookings_from_user(db, users["jlo"]):
        for start, end in BOOKINGS:
            await create_booking(
                db,
                new_booking=BookingRequest(start_date=start, end_date=end, guests=1),
                listing=listings[0],
                user=users["jlo"],
            )

    return users, listings


async def seed():
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with AsyncSessionLocal() as db:
        await seed_data(db)

    logger.info("Seed complete")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    asyncio.run(seed())
