# app/db/models.py

from datetime import datetime

from sqlalchemy import (
    CheckConstraint,
    Column,
    Integer,
    String,
    DateTime,
    Date,
    Text,
    ForeignKey,
    Numeric,
)
from sqlalchemy.orm import relationship

from app.db.base import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(100), unique=True, index=True, nullable=False)
    email = Column(String(255), unique=True, index=True, nullable=False)
    first_name = Column(String(100), nullable=True)
    last_name = Column(String(100), nullable=True)

    # DB column name: password_hash
    # Python attribute: hashed_password
    hashed_password = Column("password_hash", String(255), nullable=False)

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    listings = relationship(
        "Listing",
        back_populates="owner",
        cascade="all,delete-orphan",
        passive_deletes=True,
    )

    bookings = relationship(
        "Booking",
        back_populates="user",
        cascade="all,delete-orphan",
        passive_deletes=True,
    )


class Listing(Base):
    __tablename__ = "listings"
    __table_args__ = (CheckConstraint("price > 0", name="ck_listings_price_positive"),)

    id = Column(Integer, primary_key=True, index=True)

    user_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    location = Column(String(255), nullable=False)
    image_url = Column(Text, nullable=True)

    # nightly rate
    price = Column(Numeric(10, 2), nullable=False)

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    owner = relationship("User", back_populates="listings", lazy="selectin")

    bookings = relationship(
        "Booking",
        back_populates="listing",
        cascade="all,delete-orphan",
        passive_deletes=True,
    )

    @property
    def host_username(self) -> str:
        return self.owner.username


class Booking(Base):
    __tablename__ = "bookings"
    __table_args__ = (
        CheckConstraint("start_date < end_date", name="ck_bookings_date_order"),
    )

    id = Column(Integer, primary_key=True, index=True)

    user_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    listing_id = Column(
        Integer,
        ForeignKey("listings.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    start_date = Column(Date, nullable=False)
    end_date = Column(Date, nullable=False)
    guests = Column(Integer, nullable=False, default=1)
    payment_method = Column(String(30), nullable=False, default="card")
    total_cost = Column(Integer, nullable=False)

    # Owner of the listing at booking time. Frozen snapshot, never
    # re-synced if the listing later changes hands.
    host_username = Column(String(100), nullable=False, index=True)

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    user = relationship("User", back_populates="bookings", lazy="selectin")
    listing = relationship("Listing", back_populates="bookings")

    @property
    def username(self) -> str:
        return self.user.username
