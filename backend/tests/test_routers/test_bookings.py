from decimal import Decimal
from types import SimpleNamespace

from app.db import crud_listings

BOOKING_BODY = {"newBooking": {"startDate": "03-05-2021", "endDate": "03-07-2021", "guests": 1}}


# --- POST /bookings/listings/{listing_id} ---


async def test_authed_user_can_book_listing_they_dont_own(client, users, listings, auth_headers):
    listing_id = listings[0].id
    res = await client.post(
        f"/bookings/listings/{listing_id}",
        json=BOOKING_BODY,
        headers=auth_headers("jlo"),
    )

    assert res.status_code == 201
    booking = res.json()["booking"]
    assert isinstance(booking.pop("id"), int)
    assert isinstance(booking.pop("userId"), int)
    assert isinstance(booking.pop("createdAt"), str)
    assert booking == {
        "startDate": "2021-03-05",
        "endDate": "2021-03-07",
        "paymentMethod": "card",
        "guests": 1,
        "username": "jlo",
        "hostUsername": "lebron",
        "totalCost": 880,
        "listingId": listing_id,
    }


async def test_bad_request_when_booking_own_listing(client, users, listings, auth_headers):
    res = await client.post(
        f"/bookings/listings/{listings[0].id}",
        json=BOOKING_BODY,
        headers=auth_headers("lebron"),
    )
    assert res.status_code == 400

    made = await client.get("/bookings", headers=auth_headers("lebron"))
    assert made.json()["bookings"] == []


async def test_bad_request_when_dates_missing(client, users, listings, auth_headers):
    res = await client.post(
        f"/bookings/listings/{listings[0].id}",
        json={"newBooking": {"endDate": "03-07-2021"}},
        headers=auth_headers("jlo"),
    )
    assert res.status_code == 400
    assert "startDate" in res.json()["detail"]


async def test_bad_request_when_body_has_no_booking(client, users, listings, auth_headers):
    res = await client.post(
        f"/bookings/listings/{listings[0].id}",
        json={},
        headers=auth_headers("jlo"),
    )
    assert res.status_code == 400


async def test_not_found_for_unknown_listing(client, users, auth_headers):
    res = await client.post("/bookings/listings/9999", json=BOOKING_BODY, headers=auth_headers("jlo"))
    assert res.status_code == 404


async def test_booking_requires_auth(client, listings):
    res = await client.post(f"/bookings/listings/{listings[0].id}", json=BOOKING_BODY)
    assert res.status_code == 401


async def test_invalid_token_rejected(client, listings):
    res = await client.post(
        f"/bookings/listings/{listings[0].id}",
        json=BOOKING_BODY,
        headers={"Authorization": "Bearer not-a-token"},
    )
    assert res.status_code == 401


# --- GET /bookings ---


async def test_list_my_bookings(client, users, listings, bookings, auth_headers):
    res = await client.get("/bookings", headers=auth_headers("jlo"))

    assert res.status_code == 200
    items = res.json()["bookings"]
    assert len(items) == 2
    assert items[-1]["startDate"] == "2021-03-05"
    assert items[-1]["hostUsername"] == "lebron"


async def test_list_my_bookings_empty(client, users, listings, bookings, auth_headers):
    res = await client.get("/bookings", headers=auth_headers("lebron"))
    assert res.status_code == 200
    assert res.json() == {"bookings": []}


# --- GET /bookings/listings ---


async def test_list_bookings_for_my_listings(client, users, listings, bookings, auth_headers):
    res = await client.get("/bookings/listings", headers=auth_headers("lebron"))

    assert res.status_code == 200
    items = res.json()["bookings"]
    assert len(items) == 2
    assert {b["username"] for b in items} == {"jlo"}


async def test_list_bookings_for_my_listings_empty(client, users, listings, bookings, auth_headers):
    res = await client.get("/bookings/listings", headers=auth_headers("serena"))
    assert res.status_code == 200
    assert res.json() == {"bookings": []}


async def test_bad_request_when_body_missing(client, users, listings, auth_headers):
    res = await client.post(f"/bookings/listings/{listings[0].id}", headers=auth_headers("jlo"))
    assert res.status_code == 400
    assert res.json()["detail"] == "Missing newBooking in request body"


async def test_bad_request_when_new_booking_not_an_object(client, users, listings, auth_headers):
    res = await client.post(
        f"/bookings/listings/{listings[0].id}",
        json={"newBooking": "x"},
        headers=auth_headers("jlo"),
    )
    assert res.status_code == 400
    assert res.json()["detail"] == "newBooking must be an object"


async def test_bad_request_when_guests_not_a_number(client, users, listings, auth_headers):
    body = {"newBooking": {"startDate": "03-05-2021", "endDate": "03-07-2021", "guests": "many"}}
    res = await client.post(
        f"/bookings/listings/{listings[0].id}",
        json=body,
        headers=auth_headers("jlo"),
    )
    assert res.status_code == 400


async def test_storage_failure_maps_to_503(client, users, listings, auth_headers, monkeypatch):
    # lookup succeeds for a listing row that does not exist, so the insert
    # trips the foreign key
    async def _vanished_listing(_db, listing_id):
        return SimpleNamespace(id=9999, price=Decimal("100.00"), host_username="lebron")

    monkeypatch.setattr(crud_listings, "fetch_listing_by_id", _vanished_listing)

    res = await client.post("/bookings/listings/9999", json=BOOKING_BODY, headers=auth_headers("jlo"))
    assert res.status_code == 503
    assert res.json() == {"detail": "Could not save booking"}

    made = await client.get("/bookings", headers=auth_headers("jlo"))
    assert made.json()["bookings"] == []
