from typing import Optional

from fastapi import APIRouter, status

from app.api.dependencies import CurrentUser, DbSession
from app.db import crud_listings
from app.schemas.booking import (
    BookingOut,
    BookingResponse,
    BookingsResponse,
    NewBookingBody,
)
from app.services import bookings as booking_service

router = APIRouter()


@router.get("", response_model=BookingsResponse)
async def list_bookings(db: DbSession, current_user: CurrentUser):
    """
    Bookings the authenticated user has made.
    """
    bookings = await booking_service.list_bookings_from_user(db, current_user)
    return BookingsResponse(bookings=[BookingOut.model_validate(b) for b in bookings])


@router.get("/listings", response_model=BookingsResponse)
async def list_bookings_for_my_listings(db: DbSession, current_user: CurrentUser):
    """
    Bookings other users made on listings the authenticated user owns.
    """
    bookings = await booking_service.list_bookings_for_user_listings(db, current_user)
    return BookingsResponse(bookings=[BookingOut.model_validate(b) for b in bookings])


@router.post(
    "/listings/{listing_id}",
    response_model=BookingResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_booking_for_listing(
    listing_id: int,
    db: DbSession,
    current_user: CurrentUser,
    body: Optional[NewBookingBody] = None,
):
    listing = await crud_listings.fetch_listing_by_id(db, listing_id)
    booking = await booking_service.create_booking(
        db,
        new_booking=body.new_booking if body else None,
        listing=listing,
        user=current_user,
    )
    return BookingResponse(booking=BookingOut.model_validate(booking))
