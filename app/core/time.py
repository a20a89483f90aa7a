"""
Utilidades de fecha/hora: reloj UTC y textos relativos ("hace 5 minutos") para tarjetas.
"""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional


def now_utc() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(dt: datetime) -> datetime:
    # Fechas naive se interpretan como UTC
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def format_relative_time(dt: datetime, now: Optional[datetime] = None) -> str:
    """
    Devuelve un texto corto relativo a `now` en inglés, como lo muestra el front.

    - < 1 minuto: "just now"
    - minutos/horas/días: "5 minutes ago", "1 hour ago", "3 days ago"
    - > 30 días: fecha ISO (YYYY-MM-DD)
    - fechas futuras se tratan como "just now"
    """
    ref = as_utc(now or now_utc())
    seconds = int((ref - as_utc(dt)).total_seconds())
    if seconds < 60:
        return "just now"
    minutes = seconds // 60
    if minutes < 60:
        return f"{minutes} minute{'s' if minutes != 1 else ''} ago"
    hours = minutes // 60
    if hours < 24:
        return f"{hours} hour{'s' if hours != 1 else ''} ago"
    days = hours // 24
    if days <= 30:
        return f"{days} day{'s' if days != 1 else ''} ago"
    return as_utc(dt).date().isoformat()
