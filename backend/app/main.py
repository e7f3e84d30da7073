import logging
import sys
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.core.config import get_settings
from app.db.base import Base
from app.db.session import engine
from app.exceptions.custom import BadRequestError, NotFoundError, PersistenceError
from app.exceptions.handlers import (
    bad_request_error_handler,
    not_found_error_handler,
    persistence_error_handler,
)
from app.api.routers import (
    auth as auth_router,
    bookings as bookings_router,
    listings as listings_router,
)

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stdout,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield

    await engine.dispose()


app = FastAPI(title=settings.PROJECT_NAME, lifespan=lifespan)

# ---------------------------
# CORS
# ---------------------------
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.BACKEND_CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ---------------------------
# Errors
# ---------------------------
app.add_exception_handler(BadRequestError, bad_request_error_handler)
app.add_exception_handler(NotFoundError, not_found_error_handler)
app.add_exception_handler(PersistenceError, persistence_error_handler)

# ---------------------------
# Routers
# ---------------------------
app.include_router(auth_router.router, prefix="/auth", tags=["auth"])
app.include_router(listings_router.router, prefix="/listings", tags=["listings"])
app.include_router(bookings_router.router, prefix="/bookings", tags=["bookings"])


# ---------------------------
# Health check
# ---------------------------
@app.get("/ping")
async def ping():
    return {"status": "ok"}


if __name__ == "__main__":
    uvicorn.run("app.main:app", host="0.0.0.0", port=8000, reload=True)
