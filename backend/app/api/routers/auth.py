# app/api/routers/auth.py
from fastapi import APIRouter, HTTPException, status

from app.api.dependencies import CurrentUser, DbSession
from app.db import crud_users
from app.schemas.auth import Token
from app.schemas.user import UserCreate, UserLogin, UserOut, UserResponse
from app.core.security import create_user_token, verify_password

router = APIRouter()


def _token_response(user) -> Token:
    return Token(user=UserOut.model_validate(user), token=create_user_token(user))


@router.post("/register", response_model=Token, status_code=status.HTTP_201_CREATED)
async def register(payload: UserCreate, db: DbSession):
    existing = await crud_users.get_user_by_username_or_email(db, payload.username, payload.email)
    if existing:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Username or email already taken",
        )

    user = await crud_users.create_user(
        db,
        username=payload.username,
        email=payload.email,
        password=payload.password,
        first_name=payload.first_name,
        last_name=payload.last_name,
    )
    return _token_response(user)


@router.post("/login", response_model=Token)
async def login(payload: UserLogin, db: DbSession):
    user = await crud_users.get_user_by_email(db, payload.email)
    if not user or not verify_password(payload.password, user.hashed_password):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
        )
    return _token_response(user)


@router.get("/me", response_model=UserResponse)
async def me(current_user: CurrentUser):
    return UserResponse(user=UserOut.model_validate(current_user))
