"""
Bootstrap del almacén en memoria: carga los datos de demostración.
Se ejecuta al inicio de la app (y en tests) para tener colecciones mínimas.
"""
from __future__ import annotations

import logging
from datetime import datetime, timedelta
from typing import Optional

from app.core.time import now_utc
from app.infrastructure.db import seed_data as data
from app.infrastructure.db.memory import get_db, reset_db
from app.repositories.auth_repo import USER_COLL
from app.repositories.notes_repo import GLOBAL_COLL as GLOBAL_NOTE_COLL, GROUP_COLL, NOTE_COLL
from app.repositories.questions_repo import QUESTION_COLL
from app.repositories.study_repo import SESSION_COLL, TASK_COLL

_log = logging.getLogger("cognitia.db.bootstrap")


def _author(user_id: str) -> dict:
    u = next(u for u in data.USERS if u["id"] == user_id)
    return {"id": u["id"], "name": u["name"]}


def seed_collections(now: Optional[datetime] = None) -> None:
    """
    Vacía el almacén y carga usuarios, grupos, notas, notas globales, preguntas,
    tareas y sesiones de demostración.
    """
    now = now or now_utc()
    reset_db()
    db = get_db()
    with db.lock:
        for u in data.USERS:
            db[USER_COLL].append({**u, "token_version": 0, "created_at": now - timedelta(days=90)})

        for g in data.NOTES_GROUPS:
            db[GROUP_COLL].append({
                "id": g["id"],
                "name": g["name"],
                "description": g["description"],
                "owner_id": data.DEMO_USER_ID,
                "created_at": now - g["created"],
            })

        for n in data.NOTES:
            db[NOTE_COLL].append({
                "id": n["id"],
                "title": n["title"],
                "notes_group_id": n["notes_group_id"],
                "visibility": n["visibility"],
                "rating": n["rating"],
                "owner_id": data.DEMO_USER_ID,
                "tags": [],
                "created_at": now - n["created"],
                "updated_at": now - n["updated"],
            })

        for n in data.GLOBAL_NOTES:
            db[GLOBAL_NOTE_COLL].append({
                "id": n["id"],
                "title": n["title"],
                "notes_group_id": "",
                "group_name": n["group_name"],
                "owner_id": n["author"],
                "author": _author(n["author"]),
                "rating": n["rating"],
                "view_count": n["view_count"],
                "like_count": n["like_count"],
                "dislike_count": n["dislike_count"],
                "created_at": now - n["created"],
                "updated_at": now - n["updated"],
            })

        for q in data.QUESTIONS:
            db[QUESTION_COLL].append({
                "id": q["id"],
                "title": q["title"],
                "body": q["body"],
                "tags": list(q["tags"]),
                "author": _author(q["author"]),
                "vote_count": q["vote_count"],
                "answer_count": q["answer_count"],
                "is_resolved": q["is_resolved"],
                "created_at": now - q["created"],
            })

        for t in data.TASKS:
            db[TASK_COLL].append({
                "id": t["id"],
                "user_id": data.DEMO_USER_ID,
                "title": t["title"],
                "description": t["description"],
                "status": t["status"],
                "due_date": now - t["due"],
                "completed_at": now - t["completed"] if "completed" in t else None,
                "created_at": now - t["created"],
                "updated_at": now - t["created"],
            })

        for s in data.SESSIONS:
            start = now - s["start"]
            db[SESSION_COLL].append({
                "id": s["id"],
                "user_id": data.DEMO_USER_ID,
                "task_id": s["task_id"],
                "start_time": start,
                "end_time": start + timedelta(minutes=s["minutes"]),
                "notes": s["notes"],
                "created_at": now - timedelta(days=4),
                "updated_at": now - timedelta(days=4),
            })

    _log.info(
        "Seed cargado: %d notas, %d notas globales, %d preguntas",
        len(db[NOTE_COLL]), len(db[GLOBAL_NOTE_COLL]), len(db[QUESTION_COLL]),
    )
