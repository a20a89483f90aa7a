"""
Dependencias reutilizables para routers (FastAPI Depends).

- Autenticación: extrae y valida el Access Token, devuelve el usuario actual.
- Mantener esta capa delgada: sin lógica de negocio.
"""
from typing import Optional
from fastapi import HTTPException, Header
from starlette.status import HTTP_401_UNAUTHORIZED, HTTP_403_FORBIDDEN

from app.domain.users.schemas import User
from app.infrastructure.security.token_service import InvalidTokenError, verify_access_token
from app.repositories import auth_repo as repo


def get_current_user(authorization: Optional[str] = Header(default=None)) -> User:
    if not authorization or not authorization.startswith("Bearer "):
        raise HTTPException(status_code=HTTP_401_UNAUTHORIZED, detail="Falta token")
    token = authorization.split(" ", 1)[1]
    try:
        payload = verify_access_token(token)
    except InvalidTokenError:
        raise HTTPException(status_code=HTTP_401_UNAUTHORIZED, detail="Token inválido")

    user_id = payload.get("sub")
    if not user_id:
        raise HTTPException(status_code=HTTP_401_UNAUTHORIZED, detail="Token inválido")

    u = repo.get_user_by_id(user_id)
    if not u:
        raise HTTPException(status_code=HTTP_401_UNAUTHORIZED, detail="Usuario no encontrado")
    if u.token_version != payload.get("token_version"):
        raise HTTPException(status_code=HTTP_401_UNAUTHORIZED, detail="Token expirado")
    if not u.is_active:
        raise HTTPException(status_code=HTTP_403_FORBIDDEN, detail="Usuario inactivo")
    return u
