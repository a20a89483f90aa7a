"""Modelos de dominio del plan de estudio: tareas y sesiones."""
from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel


TaskStatus = Literal["pending", "in_progress", "completed"]


class StudyTask(BaseModel):
    id: str
    user_id: str
    title: str
    description: str = ""
    status: TaskStatus = "pending"
    due_date: Optional[datetime] = None
    completed_at: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime


class StudySession(BaseModel):
    id: str
    user_id: str
    task_id: str
    start_time: datetime
    end_time: datetime
    notes: str = ""
    created_at: datetime
    updated_at: datetime
