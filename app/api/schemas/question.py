"""Esquemas para el feed de preguntas del dashboard."""
from typing import List, Literal, Optional
from pydantic import BaseModel, Field

from app.api.schemas.note import NoteOut, Notification
from app.domain.questions.schemas import Question


class QuestionCreate(BaseModel):
    title: str = Field(min_length=1, max_length=300)
    body: str = ""
    tags: List[str] = Field(default_factory=list)


class FeedItemOut(BaseModel):
    question: Question
    vote_count: int
    user_vote: Optional[Literal["up"]] = None
    is_saved: bool


class FeedOut(BaseModel):
    questions: List[FeedItemOut]
    recent_notes: List[NoteOut]


class QuestionCreateResponse(BaseModel):
    message: str = "ok"
    data: FeedItemOut
    notification: Notification


class VoteOut(BaseModel):
    question_id: str
    vote_count: int
    user_vote: Optional[Literal["up"]] = None
    notification: Notification


class SaveOut(BaseModel):
    question_id: str
    is_saved: bool
    notification: Notification


class SavedListOut(BaseModel):
    questions: List[FeedItemOut]
