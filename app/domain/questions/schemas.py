"""Modelos de dominio del feed de preguntas (votos y guardados)."""
from datetime import datetime
from typing import List, Literal

from pydantic import BaseModel, Field

from app.domain.notes.schemas import Author


ItemType = Literal["question", "answer", "note"]


class Question(BaseModel):
    id: str
    title: str
    body: str
    tags: List[str] = Field(default_factory=list)
    author: Author
    vote_count: int = 0
    answer_count: int = 0
    is_resolved: bool = False
    created_at: datetime


class Vote(BaseModel):
    user_id: str
    item_id: str
    item_type: ItemType = "question"
    direction: Literal["up"] = "up"


class SavedItem(BaseModel):
    user_id: str
    item_id: str
    item_type: ItemType = "question"
    saved_at: datetime
