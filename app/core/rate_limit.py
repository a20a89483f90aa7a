"""
Rate limit en memoria por ventana deslizante (identificador + ruta).

Uso típico:
- Solicitud de código OTP por IP: allow((ip, "/auth/otp/request"), limit=5)
- Si se rechaza, `retry_after(key)` da los segundos para el header Retry-After.
"""
import math
import threading
from time import time
from typing import Dict, List, Tuple

Key = Tuple[str, str]

BUCKET: Dict[Key, List[float]] = {}
_lock = threading.Lock()


def _prune(key: Key, now: float, window_seconds: int) -> List[float]:
    q = BUCKET.setdefault(key, [])
    q[:] = [t for t in q if now - t < window_seconds]
    return q


def allow(key: Key, limit: int = 5, window_seconds: int = 60) -> bool:
    """Devuelve True si se permite la acción y registra el intento.

    key: (identificador, ruta)
    limit: máximo de intentos dentro de la ventana
    window_seconds: ventana de tiempo en segundos
    """
    now = time()
    with _lock:
        q = _prune(key, now, window_seconds)
        if len(q) >= limit:
            return False
        q.append(now)
        return True


def retry_after(key: Key, window_seconds: int = 60) -> int:
    """Segundos hasta que el intento más antiguo salga de la ventana (0 si no hay intentos)."""
    now = time()
    with _lock:
        q = _prune(key, now, window_seconds)
        if not q:
            return 0
        return max(1, math.ceil(window_seconds - (now - q[0])))


def reset() -> None:
    """Limpia el bucket (útil en tests o reinicios)."""
    with _lock:
        BUCKET.clear()
