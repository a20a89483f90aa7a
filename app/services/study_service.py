"""
Plan de estudio: actualización de tareas, borrado en cascada y agenda de sesiones.
"""
import logging
from typing import Any, Dict, List

from app.core.exceptions import NotFoundError
from app.core.time import as_utc, now_utc
from app.domain.study.schemas import StudySession, StudyTask
from app.repositories import study_repo

_log = logging.getLogger("cognitia.study")


def _owned_task(task_id: str, user_id: str) -> StudyTask:
    task = study_repo.get_task(task_id)
    if task is None or task.user_id != user_id:
        raise NotFoundError("Tarea", task_id)
    return task


def list_tasks(user_id: str) -> List[StudyTask]:
    return study_repo.list_tasks(user_id)


def list_sessions(user_id: str, task_id: str | None = None) -> List[StudySession]:
    return study_repo.list_sessions(user_id, task_id=task_id)


def update_task(*, user_id: str, task_id: str, changes: Dict[str, Any]) -> StudyTask:
    """
    Aplica cambios parciales y actualiza `updated_at`.

    - Pasar a `completed` sella `completed_at`.
    - Salir de `completed` limpia `completed_at`.
    """
    task = _owned_task(task_id, user_id)
    data = {k: v for k, v in changes.items() if k not in ("id", "user_id", "created_at", "completed_at")}
    new_status = data.get("status", task.status)
    now = now_utc()
    completed_at = task.completed_at
    if new_status == "completed" and task.status != "completed":
        completed_at = now
    elif new_status != "completed" and task.status == "completed":
        completed_at = None
    updated = StudyTask(**{**task.model_dump(), **data, "completed_at": completed_at, "updated_at": now})
    study_repo.replace_task(updated)
    return updated


def delete_task(*, user_id: str, task_id: str) -> int:
    """Elimina la tarea y sus sesiones; devuelve cuántas sesiones se borraron."""
    _owned_task(task_id, user_id)
    study_repo.delete_task(task_id)
    removed = study_repo.delete_sessions_for_task(task_id)
    _log.info("Tarea eliminada id=%s sesiones=%d", task_id, removed)
    return removed


def schedule_session(*, user_id: str, data: Dict[str, Any]) -> StudySession:
    _owned_task(data.get("task_id", ""), user_id)
    data = {**data, "start_time": as_utc(data["start_time"]), "end_time": as_utc(data["end_time"])}
    if data["end_time"] <= data["start_time"]:
        raise ValueError("La sesión debe terminar después de empezar")
    now = now_utc()
    return study_repo.insert_session({**data, "user_id": user_id, "created_at": now, "updated_at": now})
