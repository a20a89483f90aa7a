from datetime import datetime
from typing import Optional

from pydantic import BaseModel, EmailStr


class User(BaseModel):
    id: str
    email: EmailStr
    name: str = ""
    email_verified: bool = False
    is_active: bool = False
    token_version: int = 0
    email_code_hash: Optional[str] = None
    email_code_expires_at: Optional[datetime] = None
    email_code_attempts: int = 0
    created_at: datetime
