# app/api/routers/listings.py
from fastapi import APIRouter

from app.api.dependencies import DbSession
from app.db import crud_listings
from app.schemas.listing import ListingOut, ListingResponse

router = APIRouter()


@router.get("/{listing_id}", response_model=ListingResponse)
async def get_listing(listing_id: int, db: DbSession):
    # NotFoundError -> 404 via the app exception handler
    listing = await crud_listings.fetch_listing_by_id(db, listing_id)
    return ListingResponse(listing=ListingOut.model_validate(listing))
