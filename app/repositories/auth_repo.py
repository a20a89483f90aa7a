"""Persistencia de usuarios y códigos de acceso (OTP)."""
from datetime import datetime
from typing import Any, Dict, Optional
from uuid import uuid4

from app.core.time import as_utc, now_utc
from app.domain.users.schemas import User
from app.infrastructure.db.memory import get_db

USER_COLL = "user"


def _update(user_id: str, changes: Dict[str, Any]) -> None:
    db = get_db()
    with db.lock:
        doc = db.find_one(USER_COLL, id=user_id)
        if doc is not None:
            doc.update(changes)


def find_user_by_email(email: str) -> Optional[User]:
    """Busca usuario por email (email en minúsculas)."""
    d = get_db().find_one(USER_COLL, email=email.lower())
    return User(**d) if d else None


def get_user_by_id(user_id: str) -> Optional[User]:
    d = get_db().find_one(USER_COLL, id=user_id)
    return User(**d) if d else None


def insert_user(email: str, name: str = "") -> User:
    """Alta mínima: usuario inactivo y sin verificar hasta validar el primer código."""
    db = get_db()
    user = User(
        id=f"user_{uuid4().hex[:12]}",
        email=email.lower(),
        name=name or email.split("@", 1)[0],
        created_at=now_utc(),
    )
    with db.lock:
        db[USER_COLL].append(user.model_dump())
    return user


def set_email_code(user_id: str, code_hash: str, expires_at: datetime) -> None:
    """Guarda hash de código OTP y expiración (aware UTC); reinicia los intentos fallidos."""
    _update(
        user_id,
        {"email_code_hash": code_hash, "email_code_expires_at": as_utc(expires_at), "email_code_attempts": 0},
    )


def clear_email_code(user_id: str) -> None:
    _update(user_id, {"email_code_hash": None, "email_code_expires_at": None, "email_code_attempts": 0})


def register_failed_code_attempt(user_id: str, max_attempts: int) -> int:
    """Suma un intento fallido y devuelve los que quedan; al agotarse invalida el código."""
    db = get_db()
    with db.lock:
        doc = db.find_one(USER_COLL, id=user_id)
        if doc is None:
            return 0
        attempts = int(doc.get("email_code_attempts", 0)) + 1
        doc["email_code_attempts"] = attempts
        if attempts >= max_attempts:
            doc.update({"email_code_hash": None, "email_code_expires_at": None, "email_code_attempts": 0})
            return 0
        return max_attempts - attempts


def set_email_verified(user_id: str) -> None:
    """Marca email verificado y activa usuario."""
    _update(user_id, {"email_verified": True, "is_active": True})


def increment_token_version(user_id: str) -> int:
    """Invalida los access tokens emitidos; devuelve la nueva versión."""
    db = get_db()
    with db.lock:
        doc = db.find_one(USER_COLL, id=user_id)
        if doc is None:
            return 0
        doc["token_version"] = int(doc.get("token_version", 0)) + 1
        return doc["token_version"]
