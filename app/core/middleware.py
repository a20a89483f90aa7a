"""
Middlewares de aplicación: request id, log de acceso y CORS.

Orden efectivo (de fuera hacia dentro): RequestId -> Logging -> CORS -> rutas.
"""
import logging
import re
import time
import uuid
from typing import Any, Dict

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware

from app.core.config import settings

REQUEST_ID_HEADER = "X-Request-Id"
# Cabeceras que el front necesita leer (toasts de error y espera tras 429)
EXPOSED_HEADERS = [REQUEST_ID_HEADER, "Retry-After"]

_VALID_RID = re.compile(r"^[A-Za-z0-9._-]{1,64}$")


def _request_id(request: Request) -> str:
    incoming = request.headers.get(REQUEST_ID_HEADER, "")
    return incoming if _VALID_RID.match(incoming) else uuid.uuid4().hex


class RequestIdMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        rid = _request_id(request)
        request.state.request_id = rid
        response = await call_next(request)
        response.headers[REQUEST_ID_HEADER] = rid
        return response


class AccessLogMiddleware(BaseHTTPMiddleware):
    """Una línea por petición; los 5xx (o excepciones) suben a WARNING."""

    def __init__(self, app: FastAPI) -> None:
        super().__init__(app)
        self.log = logging.getLogger("cognitia.request")

    async def dispatch(self, request: Request, call_next):
        start = time.perf_counter()
        status = 500
        try:
            response = await call_next(request)
            status = response.status_code
            return response
        finally:
            level = logging.WARNING if status >= 500 else logging.INFO
            self.log.log(
                level,
                "%s %s -> %s (%sms) rid=%s",
                request.method,
                request.url.path,
                status,
                int((time.perf_counter() - start) * 1000),
                getattr(request.state, "request_id", "-"),
            )


def cors_options() -> Dict[str, Any]:
    if settings.cors_allow_any:
        # origen comodín: sin credentials
        return {
            "allow_origin_regex": ".*",
            "allow_credentials": False,
            "allow_methods": ["*"],
            "allow_headers": ["*"],
            "expose_headers": EXPOSED_HEADERS,
        }
    return {
        "allow_origins": settings.cors_origins,
        "allow_credentials": True,
        "allow_methods": ["*"],
        "allow_headers": ["*"],
        "expose_headers": EXPOSED_HEADERS,
    }


def add_middlewares(app: FastAPI) -> None:
    app.add_middleware(CORSMiddleware, **cors_options())
    app.add_middleware(AccessLogMiddleware)
    app.add_middleware(RequestIdMiddleware)
