import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from config import get_error_message
from services import ServiceError

logger = logging.getLogger(__name__)

def error_body(code: str, field: Optional[str], message: Optional[str] = None) -> dict:
    return {"errorCode": code, "field": field, "message": message or get_error_message(code)}

async def service_error_handler(request: Request, exc: ServiceError):
    logger.info(f"{request.method} {request.url.path} : {exc}")
    return JSONResponse(status_code=400, content={"errors": [error_body(exc.kind.value, exc.field)]})

async def validation_error_handler(request: Request, exc: RequestValidationError):
    errors = [
        error_body("ValidationError", str(err["loc"][-1]) if err.get("loc") else None, err.get("msg"))
        for err in exc.errors()
    ]
    return JSONResponse(status_code=400, content={"errors": errors})

def register_error_handlers(app: FastAPI):
    app.add_exception_handler(ServiceError, service_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
