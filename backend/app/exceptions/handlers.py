import logging

from fastapi import Request
from fastapi.responses import JSONResponse

from .custom import BadRequestError, NotFoundError, PersistenceError

logger = logging.getLogger(__name__)


async def bad_request_error_handler(_request: Request, exc: BadRequestError) -> JSONResponse:
    logger.warning("Bad request: %s", exc.message)
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.message},
    )


async def not_found_error_handler(_request: Request, exc: NotFoundError) -> JSONResponse:
    logger.warning("Not found: %s", exc.message)
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.message},
    )


async def persistence_error_handler(_request: Request, exc: PersistenceError) -> JSONResponse:
    logger.error("Persistence error: %s (status=%s)", exc.message, exc.status_code)
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.message},
    )
