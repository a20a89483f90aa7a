"""Endpoints del plan de estudio (tareas y sesiones)."""
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Query, status

from app.api.deps import get_current_user
from app.api.schemas.study import SessionCreate, SessionListOut, TaskDeleteOut, TaskListOut, TaskUpdate
from app.domain.study.schemas import StudySession, StudyTask
from app.domain.users.schemas import User
from app.services import study_service as service

router = APIRouter(prefix="/study", tags=["Study"])


@router.get("/tasks", response_model=TaskListOut, summary="Listar tareas")
def list_tasks(user: User = Depends(get_current_user)) -> TaskListOut:
    return TaskListOut(tasks=service.list_tasks(user.id))


@router.patch("/tasks/{task_id}", response_model=StudyTask, summary="Actualizar tarea")
def update_task(task_id: str, payload: TaskUpdate, user: User = Depends(get_current_user)) -> StudyTask:
    try:
        return service.update_task(user_id=user.id, task_id=task_id, changes=payload.model_dump(exclude_unset=True))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.delete("/tasks/{task_id}", response_model=TaskDeleteOut, summary="Eliminar tarea y sus sesiones")
def delete_task(task_id: str, user: User = Depends(get_current_user)) -> TaskDeleteOut:
    return TaskDeleteOut(sessions_removed=service.delete_task(user_id=user.id, task_id=task_id))


@router.get("/sessions", response_model=SessionListOut, summary="Listar sesiones")
def list_sessions(
    task_id: Optional[str] = Query(default=None),
    user: User = Depends(get_current_user),
) -> SessionListOut:
    return SessionListOut(sessions=service.list_sessions(user.id, task_id=task_id))


@router.post(
    "/sessions",
    status_code=status.HTTP_201_CREATED,
    response_model=StudySession,
    summary="Agendar sesión de estudio",
)
def schedule_session(payload: SessionCreate, user: User = Depends(get_current_user)) -> StudySession:
    try:
        return service.schedule_session(user_id=user.id, data=payload.model_dump())
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
