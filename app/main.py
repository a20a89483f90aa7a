"""Entrada principal de la app FastAPI (configura middlewares, excepciones y routers)."""
from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI
from app.core.config import settings
from app.infrastructure.db.bootstrap import seed_collections
from app.api.router import api_router
from app.core.logging import setup_logging
from app.core.middleware import add_middlewares
from app.core.exceptions import register_exception_handlers

_log = logging.getLogger("cognitia.startup")

setup_logging()


@asynccontextmanager
async def lifespan(_: FastAPI):
    if settings.seed_on_startup:
        seed_collections()
    else:
        _log.info("seed_on_startup desactivado; almacén vacío")
    yield


app = FastAPI(title=settings.app_name, lifespan=lifespan)

add_middlewares(app)
register_exception_handlers(app)

# Monta routers bajo el prefijo configurado
app.include_router(api_router, prefix=settings.api_prefix_normalized)
