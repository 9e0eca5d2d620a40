"""Maps the service error taxonomy onto HTTP responses."""
import logging
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from ..core.errors import Conflict, Internal, InvalidArgument, NotFound, RecordsError

logger = logging.getLogger(__name__)

STATUS_BY_ERROR = {
    InvalidArgument: 400,
    NotFound: 404,
    Conflict: 409,
    Internal: 500,
}


def status_for(exc: RecordsError) -> int:
    for error_type, status_code in STATUS_BY_ERROR.items():
        if isinstance(exc, error_type):
            return status_code
    return 500


async def records_error_handler(request: Request, exc: RecordsError) -> JSONResponse:
    status_code = status_for(exc)
    if status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=status_code, content=exc.to_dict())


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RecordsError, records_error_handler)
