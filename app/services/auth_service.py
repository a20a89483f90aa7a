"""
Lógica de autenticación: login en dos pasos (email -> código OTP) y logout global.
"""
import hashlib
import logging
from datetime import timedelta
from typing import Any, Dict

from app.core.config import settings
from app.core.time import as_utc, now_utc
from app.infrastructure.email import email_client
from app.infrastructure.security import token_service
from app.repositories import auth_repo as repo

_log = logging.getLogger("cognitia.auth")


def _hash(code: str) -> str:
    return hashlib.sha256(code.strip().encode("utf-8")).hexdigest()


def request_login_code(email: str) -> Dict[str, Any]:
    """
    Paso 1: genera un código OTP y lo envía por correo.

    - Si el email no existe se da de alta (inactivo hasta validar el código).
    - Un fallo de SMTP no aborta el flujo: se devuelve `email_notice`.
    """
    email = email.strip().lower()
    u = repo.find_user_by_email(email)
    if u is None:
        u = repo.insert_user(email)
        _log.info("Usuario provisionado id=%s", u.id)

    code = email_client.generate_numeric_code(settings.email_code_length)
    minutes = settings.email_code_expire_minutes
    repo.set_email_code(u.id, _hash(code), now_utc() + timedelta(minutes=minutes))
    out: Dict[str, Any] = {
        "message": "ok",
        "verification_token": token_service.create_email_code_token(user_id=u.id, expires_in_minutes=minutes),
        "expires_in_minutes": minutes,
    }
    try:
        email_client.send_login_code_email(u.email, code, minutes)
    except (RuntimeError, OSError) as ex:
        _log.warning("No se pudo enviar el código a user=%s: %s", u.id, ex)
        out["email_notice"] = f"No se pudo enviar el código: {ex}"
    return out


def verify_login_code(*, verification_token: str, code: str) -> Dict[str, Any]:
    """
    Paso 2: valida el código OTP y emite el access token.
    Errores de entrada se reportan como ValueError.
    """
    try:
        t = token_service.verify_email_code_token(verification_token)
    except token_service.InvalidTokenError as e:
        raise ValueError(f"Token de verificación inválido: {e}") from e
    user_id = t.get("sub") or ""
    u = repo.get_user_by_id(user_id)
    if u is None:
        raise ValueError("Usuario no encontrado")

    if not u.email_code_hash or not u.email_code_expires_at:
        raise ValueError("No hay código activo")
    if now_utc() > as_utc(u.email_code_expires_at):
        raise ValueError("Código expirado")
    if _hash(code) != u.email_code_hash:
        left = repo.register_failed_code_attempt(u.id, settings.email_code_max_attempts)
        if left == 0:
            _log.warning("Código invalidado por intentos fallidos user=%s", u.id)
            raise ValueError("Demasiados intentos, solicita un nuevo código")
        raise ValueError("Código inválido")

    repo.set_email_verified(u.id)
    repo.clear_email_code(u.id)
    u = repo.get_user_by_id(u.id)
    _log.info("Login por código ok user=%s", u.id)
    return {"access_token": token_service.create_access_token(user=u), "token_type": "bearer"}


def logout_all(*, user_id: str) -> None:
    """Revoca todos los access tokens emitidos (incrementa token_version)."""
    repo.increment_token_version(user_id)
