# app/services/validation.py
"""
Booking request validation.

Pure checks run before any pricing or persistence: required dates,
chronological order, and hosts trying to book their own listing.
"""
from datetime import date, datetime
from typing import Any, Optional, Union

from pydantic import ValidationError

from app.exceptions.custom import BadRequestError
from app.schemas.booking import BookingRequest, ValidatedBooking

# ISO first, then the US-style forms the frontend sends ("03-05-2021")
DATE_FORMATS = ("%Y-%m-%d", "%m-%d-%Y", "%m/%d/%Y")

DEFAULT_GUESTS = 1


def parse_booking_date(value: Any) -> Optional[date]:
    """
    Coerce a request value to a calendar date, or None if it can't be read.
    Datetimes (and ISO datetime strings) are truncated to their date.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value.strip():
        return None

    text = value.strip()
    for fmt in DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue
    try:
        return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
    except ValueError:
        return None


def coerce_booking_request(new_booking: Any) -> BookingRequest:
    """
    Accepts a BookingRequest or its camelCase dict form from a request body.
    """
    if new_booking is None:
        raise BadRequestError("Missing newBooking in request body")
    if isinstance(new_booking, BookingRequest):
        return new_booking
    if not isinstance(new_booking, dict):
        raise BadRequestError("newBooking must be an object")
    try:
        return BookingRequest.model_validate(new_booking)
    except ValidationError as exc:
        raise BadRequestError(f"Invalid newBooking: {exc.errors()[0]['msg']}") from exc


def validate_booking_request(
    new_booking: Union[BookingRequest, dict, None],
    listing,
    user,
) -> ValidatedBooking:
    new_booking = coerce_booking_request(new_booking)

    missing = [
        field
        for field, value in (("startDate", new_booking.start_date), ("endDate", new_booking.end_date))
        if value is None
    ]
    if missing:
        raise BadRequestError(f"Missing required fields: {', '.join(missing)}")

    start_date = parse_booking_date(new_booking.start_date)
    end_date = parse_booking_date(new_booking.end_date)
    if start_date is None or end_date is None:
        raise BadRequestError("startDate and endDate must be valid dates")

    if start_date >= end_date:
        raise BadRequestError("endDate must be after startDate")

    if user.username == listing.host_username:
        raise BadRequestError("Users are not allowed to book their own listings")

    guests = new_booking.guests if new_booking.guests is not None else DEFAULT_GUESTS

    return ValidatedBooking(start_date=start_date, end_date=end_date, guests=guests)
