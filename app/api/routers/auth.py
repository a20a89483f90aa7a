"""Rutas de autenticación: login por código (email -> OTP), perfil y logout global."""
from fastapi import APIRouter, Depends, HTTPException, Request

from app.api.deps import get_current_user
from app.api.schemas.auth import MeOut, OtpRequestOut, OtpRequestPayload, OtpVerifyPayload, TokenOut
from app.core import rate_limit
from app.core.config import settings
from app.domain.users.schemas import User
from app.services import auth_service as service

router = APIRouter(prefix="/auth", tags=["Auth"])


def _check_rate(request: Request, path: str, limit: int) -> None:
    # Rate limit por IP
    key = (request.client.host if request.client else "", path)
    if not rate_limit.allow(key, limit=limit):
        raise HTTPException(
            status_code=429,
            detail="Demasiados intentos, espera un momento",
            headers={"Retry-After": str(rate_limit.retry_after(key))},
        )


@router.post(
    "/otp/request",
    response_model=OtpRequestOut,
    summary="Enviar código de acceso",
    description="Envía un código OTP al email y devuelve un token corto para verificarlo.",
)
def request_code(payload: OtpRequestPayload, request: Request) -> OtpRequestOut:
    _check_rate(request, "/auth/otp/request", settings.otp_request_rate_per_min)
    return OtpRequestOut(**service.request_login_code(payload.email))


@router.post(
    "/otp/verify",
    response_model=TokenOut,
    summary="Verificar código y obtener token",
)
def verify_code(payload: OtpVerifyPayload, request: Request) -> TokenOut:
    _check_rate(request, "/auth/otp/verify", settings.otp_verify_rate_per_min)
    try:
        return TokenOut(**service.verify_login_code(verification_token=payload.verification_token, code=payload.code))
    except ValueError as e:
        raise HTTPException(status_code=401, detail=f"Login inválido: {e}")


@router.get("/me", response_model=MeOut, summary="Perfil básico del usuario")
def me(user: User = Depends(get_current_user)) -> MeOut:
    return MeOut(
        id=user.id,
        email=str(user.email),
        name=user.name,
        email_verified=user.email_verified,
        is_active=user.is_active,
    )


@router.post("/logout-all", response_model=dict, summary="Cerrar todas las sesiones")
def logout_all(user: User = Depends(get_current_user)):
    service.logout_all(user_id=user.id)
    return {"message": "ok"}
