"""
Esquemas Pydantic para el login por código (email -> OTP).

- Normaliza el email a minúsculas.
- Modelos pensados para separar la capa API de la lógica de negocio.
"""
from typing import Optional
from pydantic import BaseModel, EmailStr, field_validator


class OtpRequestPayload(BaseModel):
    email: EmailStr

    @field_validator("email")
    @classmethod
    def _lower_email(cls, v: EmailStr) -> str:
        return str(v).lower()


class OtpVerifyPayload(BaseModel):
    verification_token: str
    code: str

    @field_validator("code")
    @classmethod
    def _strip_code(cls, v: str) -> str:
        return v.strip()


# === Response models ===

class OtpRequestOut(BaseModel):
    message: str
    verification_token: str
    expires_in_minutes: int
    email_notice: Optional[str] = None


class TokenOut(BaseModel):
    access_token: str
    token_type: str = "bearer"


class MeOut(BaseModel):
    id: str
    email: str
    name: str
    email_verified: bool
    is_active: bool
