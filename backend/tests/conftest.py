from datetime import date
from decimal import Decimal

import httpx
import pytest
from httpx import ASGITransport
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.security import create_user_token
from app.db import crud_bookings, crud_listings, crud_users
from app.db.base import Base
from app.db.session import enable_sqlite_foreign_keys, get_db


@pytest.fixture
async def engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(engine)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def db(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
async def users(db):
    created = {}
    for username in ("lebron", "jlo", "serena"):
        created[username] = await crud_users.create_user(
            db,
            username=username,
            email=f"{username}@example.com",
            password="password",
            first_name=username.title(),
        )
    return created


@pytest.fixture
async def listings(db, users):
    """
    lebron owns the first two listings, serena the third.
    """
    specs = [
        ("lebron", "Beachfront villa", Decimal("400.00")),
        ("lebron", "Downtown loft", Decimal("180.00")),
        ("serena", "Garden cottage", Decimal("250.00")),
    ]
    return [
        await crud_listings.create_listing(
            db,
            user_id=users[owner].id,
            title=title,
            location="Los Angeles, CA",
            price=price,
        )
        for owner, title, price in specs
    ]


@pytest.fixture
async def bookings(db, users, listings):
    """
    Two bookings by jlo on lebron's first listing, inserted oldest first.
    """
    listing = listings[0]
    made = []
    for start, end, nights in (("2021-03-05", "2021-03-07", 2), ("2021-04-10", "2021-04-14", 4)):
        made.append(
            await crud_bookings.create_booking(
                db,
                user_id=users["jlo"].id,
                listing_id=listing.id,
                host_username=listing.host_username,
                start_date=date.fromisoformat(start),
                end_date=date.fromisoformat(end),
                guests=1,
                total_cost=nights * 440,
            )
        )
    return made


@pytest.fixture
def auth_headers(users):
    def _headers(username: str) -> dict:
        return {"Authorization": f"Bearer {create_user_token(users[username])}"}

    return _headers


@pytest.fixture
async def client(session_factory):
    from app.main import app

    async def _get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = _get_db
    async with httpx.AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as c:
        yield c
    app.dependency_overrides.clear()
