# app/db/crud_bookings.py

import logging
from datetime import date
from typing import List

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.db.models import Booking, User
from app.exceptions.custom import PersistenceError

logger = logging.getLogger(__name__)

# newest first; id breaks ties between rows created in the same instant
_NEWEST_FIRST = (Booking.created_at.desc(), Booking.id.desc())


async def get_booking(db: AsyncSession, booking_id: int) -> Booking | None:
    stmt = (
        select(Booking)
        .options(selectinload(Booking.user))
        .where(Booking.id == booking_id)
        .execution_options(populate_existing=True)
    )
    res = await db.execute(stmt)
    return res.scalars().first()


async def create_booking(
    db: AsyncSession,
    *,
    user_id: int,
    listing_id: int,
    host_username: str,
    start_date: date,
    end_date: date,
    guests: int,
    total_cost: int,
    payment_method: str = "card",
) -> Booking:
    """
    Single-row insert. Either the booking is committed in full or the
    session is rolled back and PersistenceError is raised.
    """
    booking = Booking(
        user_id=user_id,
        listing_id=listing_id,
        host_username=host_username,
        start_date=start_date,
        end_date=end_date,
        guests=guests,
        total_cost=total_cost,
        payment_method=payment_method,
    )
    try:
        db.add(booking)
        await db.commit()
    except SQLAlchemyError as exc:
        await db.rollback()
        logger.exception("failed to insert booking for listing %s", listing_id)
        raise PersistenceError("Could not save booking") from exc

    saved = await get_booking(db, booking.id)
    if saved is None:
        raise PersistenceError("Booking vanished after insert")
    return saved


async def list_bookings_for_user(db: AsyncSession, username: str) -> List[Booking]:
    """
    Bookings made by `username` as a guest.
    """
    stmt = (
        select(Booking)
        .join(User, Booking.user_id == User.id)
        .options(selectinload(Booking.user))
        .where(User.username == username)
        .order_by(*_NEWEST_FIRST)
    )
    res = await db.execute(stmt)
    return list(res.scalars().all())


async def list_bookings_for_host(db: AsyncSession, username: str) -> List[Booking]:
    """
    All bookings against listings owned by `username`.
    Filters on the host snapshot stored with each booking, no listing join.
    """
    stmt = (
        select(Booking)
        .options(selectinload(Booking.user))
        .where(Booking.host_username == username)
        .order_by(*_NEWEST_FIRST)
    )
    res = await db.execute(stmt)
    return list(res.scalars().all())
