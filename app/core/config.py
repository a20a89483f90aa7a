"""Configuración central de la aplicación (Pydantic Settings).

- Carga variables desde .env en la raíz del proyecto.
- Agrupa ajustes por área: App, CORS, Auth/JWT, Email/OTP, Notas.
"""
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import AliasChoices, Field
from pathlib import Path

# Resuelve el .env ubicado en la raíz del proyecto (independiente del CWD)
ENV_FILE = Path(__file__).resolve().parents[2] / ".env"


class Settings(BaseSettings):
    """Variables de configuración con valores por defecto razonables.

    Nota: los valores pueden sobreescribirse vía variables de entorno (.env).
    """
    # App
    app_name: str = "Cognitia API"
    api_prefix: str = "/api"
    log_level: str = Field(
        "INFO",
        validation_alias=AliasChoices("COGNITIA_LOG_LEVEL", "LOG_LEVEL"),
    )
    # Carga los datos de demostración al arrancar
    seed_on_startup: bool = True

    # CORS (front Next.js en localhost)
    cors_origins: list[str] = ["http://localhost:3000", "http://127.0.0.1:3000"]
    cors_allow_any: bool = False

    # Auth / JWT
    jwt_secret: str = "change-me-in-env-with-32-bytes-or-more"
    jwt_algorithm: str = "HS256"
    access_token_expire_minutes: int = 60

    # Email / SMTP (envío de códigos OTP)
    smtp_host: str | None = None
    smtp_port: int = 587
    smtp_user: str | None = None
    smtp_pass: str | None = None
    smtp_from_email: str | None = None
    smtp_from_name: str = "Cognitia"
    smtp_use_tls: bool = True

    # Login por código (OTP)
    email_code_length: int = 6
    email_code_expire_minutes: int = 10
    otp_request_rate_per_min: int = 5
    otp_verify_rate_per_min: int = 10
    email_code_max_attempts: int = 5

    # Notas
    recent_notes_limit: int = Field(
        12,
        validation_alias=AliasChoices("COGNITIA_RECENT_NOTES", "RECENT_NOTES_LIMIT"),
    )
    dashboard_recent_notes: int = 5
    # Palabras del título con más de N caracteres se ofrecen como tags
    tag_min_word_length: int = 4

    # --- Utilidades derivadas / helpers ---
    @property
    def api_prefix_normalized(self) -> str:
        """Devuelve `api_prefix` con formato consistente.

        - Siempre inicia con '/'
        - Sin '/' final (excepto cuando es solo '/')
        - Si está vacío, devuelve ""
        """
        pref = (self.api_prefix or "").strip()
        if not pref:
            return ""
        if not pref.startswith('/'):
            pref = '/' + pref
        if len(pref) > 1 and pref.endswith('/'):
            pref = pref[:-1]
        return pref

    @property
    def smtp_configured(self) -> bool:
        return bool(self.smtp_host and self.smtp_user and self.smtp_pass)

    model_config = SettingsConfigDict(
        env_file=str(ENV_FILE),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # no fallar si hay variables no usadas
    )


settings = Settings()
