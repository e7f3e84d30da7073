# app/schemas/auth.py
from pydantic import BaseModel

from app.schemas.user import UserOut


class Token(BaseModel):
    user: UserOut
    token: str
    token_type: str = "bearer"
