"""
Envío de correos (SMTP) y generación de códigos numéricos de acceso.
"""
import logging
import secrets
import smtplib
import string
from email.message import EmailMessage

from app.core.config import settings

_log = logging.getLogger("cognitia.email")


def generate_numeric_code(length: int = 6) -> str:
    # Garantiza que el primer dígito no sea 0 para mejor UX
    first = secrets.choice("123456789")
    rest = "".join(secrets.choice(string.digits) for _ in range(max(0, length - 1)))
    return first + rest


def send_email(to_email: str, subject: str, html_body: str, text_body: str | None = None) -> None:
    if not settings.smtp_configured:
        raise RuntimeError("SMTP no configurado. Define SMTP_HOST/SMTP_USER/SMTP_PASS en .env")

    msg = EmailMessage()
    msg["From"] = f"{settings.smtp_from_name} <{settings.smtp_from_email or settings.smtp_user}>"
    msg["To"] = to_email
    msg["Subject"] = subject
    if text_body:
        msg.set_content(text_body)
    msg.add_alternative(html_body, subtype="html")

    # Conexión TLS por defecto (587)
    if settings.smtp_use_tls:
        with smtplib.SMTP(settings.smtp_host, settings.smtp_port) as server:
            server.starttls()
            server.login(settings.smtp_user, settings.smtp_pass)
            server.send_message(msg)
    else:
        with smtplib.SMTP_SSL(settings.smtp_host, settings.smtp_port) as server:
            server.login(settings.smtp_user, settings.smtp_pass)
            server.send_message(msg)
    _log.info("Correo enviado to=%s subject=%r", to_email, subject)


def send_login_code_email(to_email: str, code: str, expires_in_minutes: int) -> None:
    subject = "Your Cognitia login code"
    html = f"""
    <div style="font-family:system-ui,-apple-system,Segoe UI,Roboto,sans-serif;color:#111">
      <h2 style="margin:0 0 8px;font-size:20px">Login to Cognitia</h2>
      <p style="margin:0 0 16px;color:#444">Use this one-time password to sign in:</p>
      <div style="display:inline-block;font-size:28px;letter-spacing:4px;font-weight:700;background:#059669;color:#fff;padding:12px 16px;border-radius:8px">{code}</div>
      <p style="margin:16px 0 0;color:#555">This code expires in <b>{expires_in_minutes} minutes</b>. If you did not try to sign in, you can ignore this message.</p>
    </div>
    """
    text = f"Your Cognitia login code is {code}. It expires in {expires_in_minutes} minutes."
    send_email(to_email, subject, html, text)
