# app/db/crud_listings.py
from decimal import Decimal
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.db.models import Listing
from app.exceptions.custom import NotFoundError


async def fetch_listing_by_id(db: AsyncSession, listing_id: int) -> Listing:
    """
    Listing lookup used by the booking flow.
    Owner is loaded eagerly so `host_username` is available without lazy IO.
    """
    stmt = (
        select(Listing)
        .options(selectinload(Listing.owner))
        .where(Listing.id == listing_id)
        .execution_options(populate_existing=True)
    )
    res = await db.execute(stmt)
    listing = res.scalars().first()
    if listing is None:
        raise NotFoundError(f"No listing found with id: {listing_id}")
    return listing


async def create_listing(
    db: AsyncSession,
    *,
    user_id: int,
    title: str,
    location: str,
    price: Decimal,
    description: Optional[str] = None,
    image_url: Optional[str] = None,
) -> Listing:
    """
    Used by the seed script and tests; no HTTP route creates listings.
    """
    listing = Listing(
        user_id=user_id,
        title=title,
        location=location,
        price=price,
        description=description,
        image_url=image_url,
    )
    db.add(listing)
    await db.commit()
    return await fetch_listing_by_id(db, listing.id)


async def find_listing_for_owner(db: AsyncSession, user_id: int, title: str) -> Optional[Listing]:
    stmt = (
        select(Listing)
        .options(selectinload(Listing.owner))
        .where(Listing.user_id == user_id, Listing.title == title)
    )
    res = await db.execute(stmt)
    return res.scalars().first()
