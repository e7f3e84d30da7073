# backend/app/schemas/listing.py
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ListingOut(BaseModel):
    id: int
    title: str
    description: Optional[str] = None
    location: str
    image_url: Optional[str] = None
    price: float
    user_id: int
    host_username: str
    created_at: datetime

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class ListingResponse(BaseModel):
    listing: ListingOut
