"""Almacén en memoria del proceso (colecciones de documentos `dict`).

Reemplaza a una base de datos real: cada colección es una lista de documentos
indexables por `id`. Los endpoints sync corren en el threadpool de Starlette,
así que las escrituras se serializan con `lock`.
"""
from __future__ import annotations

import logging
import threading
from collections import defaultdict
from typing import Any, Dict, List, Optional

_log = logging.getLogger("cognitia.db")


class MemoryDB(defaultdict):
    """Colecciones por nombre; una colección inexistente se crea vacía al accederla."""

    def __init__(self) -> None:
        super().__init__(list)
        self.lock = threading.RLock()

    def find_one(self, coll: str, **match: Any) -> Optional[Dict[str, Any]]:
        for doc in self[coll]:
            if all(doc.get(k) == v for k, v in match.items()):
                return doc
        return None

    def find(self, coll: str, **match: Any) -> List[Dict[str, Any]]:
        return [d for d in self[coll] if all(d.get(k) == v for k, v in match.items())]


_db: Optional[MemoryDB] = None


def get_db() -> MemoryDB:
    """Devuelve el almacén; lo inicializa lazy una única vez."""
    global _db
    if _db is None:
        _db = MemoryDB()
        _log.info("Almacén en memoria inicializado")
    return _db


def reset_db() -> None:
    """Vacía todas las colecciones (tests y re-seed)."""
    db = get_db()
    with db.lock:
        db.clear()
