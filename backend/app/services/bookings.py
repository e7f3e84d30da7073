# app/services/bookings.py
"""
Booking orchestration: validate, price, persist, and the two booking views
("bookings I made" and "bookings made on my listings").
"""
import logging
from typing import List, Union

from sqlalchemy.ext.asyncio import AsyncSession

from app.db import crud_bookings
from app.db.models import Booking, Listing, User
from app.exceptions.custom import BadRequestError
from app.schemas.booking import BookingRequest
from app.services.pricing import calculate_total_cost
from app.services.validation import validate_booking_request

logger = logging.getLogger(__name__)

DEFAULT_PAYMENT_METHOD = "card"


async def create_booking(
    db: AsyncSession,
    *,
    new_booking: Union[BookingRequest, dict, None],
    listing: Listing,
    user: User,
) -> Booking:
    try:
        validated = validate_booking_request(new_booking, listing, user)
    except BadRequestError as exc:
        logger.info(
            "rejected booking by %s on listing %s: %s", user.username, listing.id, exc.message
        )
        raise

    total_cost = calculate_total_cost(validated.nights, listing.price)

    booking = await crud_bookings.create_booking(
        db,
        user_id=user.id,
        listing_id=listing.id,
        host_username=listing.host_username,
        start_date=validated.start_date,
        end_date=validated.end_date,
        guests=validated.guests,
        total_cost=total_cost,
        payment_method=DEFAULT_PAYMENT_METHOD,
    )
    logger.info(
        "booking %s created: %s on listing %s, %s night(s), total %s",
        booking.id,
        user.username,
        listing.id,
        validated.nights,
        total_cost,
    )
    return booking


async def list_bookings_from_user(db: AsyncSession, user) -> List[Booking]:
    return await crud_bookings.list_bookings_for_user(db, user.username)


async def list_bookings_for_user_listings(db: AsyncSession, user) -> List[Booking]:
    return await crud_bookings.list_bookings_for_host(db, user.username)
