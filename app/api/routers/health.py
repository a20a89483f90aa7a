"""Health (sin auth), salidas tipadas y estables."""
from fastapi import APIRouter, status

from app.api.schemas.health import HealthOut, PingOut
from app.core.config import settings
from app.repositories import notes_repo


router = APIRouter(tags=["Health"])  # no prefix to keep paths stable


@router.get("/ping", response_model=PingOut, summary="Ping básico")
def ping() -> PingOut:
    return PingOut(message="pong")


@router.get("/health", status_code=status.HTTP_200_OK, response_model=HealthOut, summary="Salud básica")
def health() -> HealthOut:
    return HealthOut(
        ok=True,
        app_name=settings.app_name,
        notes=len(notes_repo.list_notes()),
        global_notes=len(notes_repo.list_global_notes()),
    )
