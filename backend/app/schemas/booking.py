# backend/app/schemas/booking.py
from datetime import date, datetime
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class BookingRequest(BaseModel):
    """
    Raw booking request as sent by the client.

    Dates are untyped here; missing or unparseable dates are reported
    by the booking validator as BadRequestError.
    """

    start_date: Optional[Any] = None
    end_date: Optional[Any] = None
    guests: Optional[int] = None

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class NewBookingBody(BaseModel):
    # { "newBooking": { "startDate": ..., "endDate": ..., "guests": ... } }
    # left untyped; the booking validator rejects anything that is not an object
    new_booking: Optional[Any] = None

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ValidatedBooking(BaseModel):
    start_date: date
    end_date: date
    guests: int = Field(default=1)

    model_config = ConfigDict(frozen=True)

    @property
    def nights(self) -> int:
        return (self.end_date - self.start_date).days


class BookingOut(BaseModel):
    id: int
    start_date: date
    end_date: date
    payment_method: str
    guests: int
    username: str
    host_username: str
    total_cost: int
    listing_id: int
    user_id: int
    created_at: datetime

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class BookingResponse(BaseModel):
    booking: BookingOut


class BookingsResponse(BaseModel):
    bookings: List[BookingOut]
