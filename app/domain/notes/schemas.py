"""
Modelos de dominio para notas: nota propia, grupo de notas y nota global.
"""
from datetime import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, Field


Visibility = Literal["public", "private"]


class Author(BaseModel):
    id: str
    name: str


class NotesGroup(BaseModel):
    id: str
    name: str
    description: str = ""
    owner_id: str
    created_at: datetime


class Note(BaseModel):
    id: str
    title: str
    notes_group_id: str
    visibility: Visibility = "private"
    rating: float = Field(0, ge=0, le=5)
    owner_id: str
    tags: List[str] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime


class GlobalNote(Note):
    """Nota pública de la comunidad; `group_name` va desnormalizado."""

    visibility: Visibility = "public"
    author: Author
    group_name: str
    view_count: int = 0
    like_count: int = 0
    dislike_count: int = 0
    thumbnail: Optional[str] = None


class GroupWithNotes(BaseModel):
    group: NotesGroup
    notes: List[Note]


class RecentNote(BaseModel):
    id: str
    title: str
    group_name: Optional[str] = None
    rating: float = 0
    source: Literal["my", "global"]
    last_viewed: datetime
