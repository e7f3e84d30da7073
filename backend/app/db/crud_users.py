# app/db/crud_users.py

from typing import Optional

from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.models import User
from app.core.security import get_password_hash


async def get_user(db: AsyncSession, user_id: int) -> Optional[User]:
    res = await db.execute(select(User).where(User.id == user_id))
    return res.scalar_one_or_none()


async def get_user_by_email(db: AsyncSession, email: str) -> Optional[User]:
    res = await db.execute(select(User).where(User.email == email.lower()))
    return res.scalar_one_or_none()


async def get_user_by_username_or_email(
    db: AsyncSession, username: str, email: str
) -> Optional[User]:
    res = await db.execute(
        select(User).where(or_(User.username == username, User.email == email.lower()))
    )
    return res.scalars().first()


async def create_user(
    db: AsyncSession,
    *,
    username: str,
    email: str,
    password: str,
    first_name: Optional[str] = None,
    last_name: Optional[str] = None,
) -> User:
    """
    Create a user with hashed password. Emails are stored lowercased.
    """
    user = User(
        username=username,
        email=email.lower(),
        first_name=first_name,
        last_name=last_name,
        hashed_password=get_password_hash(password),
    )
    db.add(user)
    await db.commit()
    await db.refresh(user)
    return user
