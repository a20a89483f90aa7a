"""Esquemas para tareas y sesiones del plan de estudio."""
from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel

from app.domain.study.schemas import StudySession, StudyTask, TaskStatus


class TaskUpdate(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    status: Optional[TaskStatus] = None
    due_date: Optional[datetime] = None


class SessionCreate(BaseModel):
    task_id: str
    start_time: datetime
    end_time: datetime
    notes: str = ""


class TaskListOut(BaseModel):
    tasks: List[StudyTask]


class SessionListOut(BaseModel):
    sessions: List[StudySession]


class TaskDeleteOut(BaseModel):
    message: str = "ok"
    sessions_removed: int
