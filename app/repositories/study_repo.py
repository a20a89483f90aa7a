"""Repo de tareas y sesiones del plan de estudio."""
from typing import Any, Dict, List, Optional
from uuid import uuid4

from app.domain.study.schemas import StudySession, StudyTask
from app.infrastructure.db.memory import get_db

TASK_COLL = "study_task"
SESSION_COLL = "study_session"


def list_tasks(user_id: str) -> List[StudyTask]:
    return [StudyTask(**d) for d in get_db().find(TASK_COLL, user_id=user_id)]


def get_task(task_id: str) -> Optional[StudyTask]:
    d = get_db().find_one(TASK_COLL, id=task_id)
    return StudyTask(**d) if d else None


def replace_task(task: StudyTask) -> None:
    db = get_db()
    with db.lock:
        coll = db[TASK_COLL]
        for i, d in enumerate(coll):
            if d["id"] == task.id:
                coll[i] = task.model_dump()
                return


def delete_task(task_id: str) -> bool:
    db = get_db()
    with db.lock:
        before = len(db[TASK_COLL])
        db[TASK_COLL][:] = [t for t in db[TASK_COLL] if t["id"] != task_id]
        return len(db[TASK_COLL]) < before


def list_sessions(user_id: str, task_id: Optional[str] = None) -> List[StudySession]:
    filtro: Dict[str, Any] = {"user_id": user_id}
    if task_id:
        filtro["task_id"] = task_id
    items = [StudySession(**d) for d in get_db().find(SESSION_COLL, **filtro)]
    return sorted(items, key=lambda s: s.start_time)


def insert_session(doc: Dict[str, Any]) -> StudySession:
    db = get_db()
    data = dict(doc)
    data.setdefault("id", f"session_{uuid4().hex[:12]}")
    session = StudySession(**data)
    with db.lock:
        db[SESSION_COLL].append(session.model_dump())
    return session


def delete_sessions_for_task(task_id: str) -> int:
    """Elimina las sesiones asociadas a una tarea; devuelve cuántas borró."""
    db = get_db()
    with db.lock:
        before = len(db[SESSION_COLL])
        db[SESSION_COLL][:] = [s for s in db[SESSION_COLL] if s["task_id"] != task_id]
        return before - len(db[SESSION_COLL])
