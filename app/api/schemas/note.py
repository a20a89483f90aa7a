"""
Esquemas Pydantic de entrada/salida para notas y grupos.
"""
from datetime import datetime
from typing import List, Literal, Optional
from pydantic import BaseModel, Field

from app.core.time import format_relative_time
from app.domain.notes.schemas import Author, GlobalNote, Note, NotesGroup, RecentNote


class Notification(BaseModel):
    title: str
    description: str


class NoteCreate(BaseModel):
    title: str = Field(min_length=1, max_length=200)
    notes_group_id: str
    visibility: Literal["public", "private"] = "private"
    tags: List[str] = Field(default_factory=list)


class GroupCreate(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    description: str = ""


class NoteOut(BaseModel):
    id: str
    title: str
    notes_group_id: str
    group_name: Optional[str] = None
    visibility: Literal["public", "private"]
    rating: float
    tags: List[str]
    created_at: datetime
    updated_at: datetime
    updated_ago: str

    @classmethod
    def from_note(cls, note: Note, group_name: Optional[str] = None) -> "NoteOut":
        return cls(
            **note.model_dump(include=set(cls.model_fields) - {"group_name", "updated_ago"}),
            group_name=group_name,
            updated_ago=format_relative_time(note.updated_at),
        )


class GlobalNoteOut(BaseModel):
    id: str
    title: str
    author: Author
    group_name: str
    rating: float
    view_count: int
    like_count: int
    dislike_count: int
    thumbnail: Optional[str] = None
    updated_at: datetime
    updated_ago: str

    @classmethod
    def from_note(cls, note: GlobalNote) -> "GlobalNoteOut":
        return cls(
            **note.model_dump(include=set(cls.model_fields) - {"updated_ago"}),
            updated_ago=format_relative_time(note.updated_at),
        )


class MyNotesListOut(BaseModel):
    notes: List[NoteOut]
    total: int


class GlobalNotesListOut(BaseModel):
    notes: List[GlobalNoteOut]
    total: int
    # Sin resultados: el front distingue "ajusta filtros" de "sé el primero"
    filters_active: bool


class GroupOut(BaseModel):
    id: str
    name: str
    description: str
    created_at: datetime
    notes: List[NoteOut] = Field(default_factory=list)

    @classmethod
    def from_group(cls, group: NotesGroup, notes: List[Note] | None = None) -> "GroupOut":
        return cls(
            id=group.id,
            name=group.name,
            description=group.description,
            created_at=group.created_at,
            notes=[NoteOut.from_note(n, group.name) for n in notes or []],
        )


class GroupListOut(BaseModel):
    groups: List[GroupOut]


class RecentListOut(BaseModel):
    notes: List[RecentNote]


class TagListOut(BaseModel):
    tags: List[str]


class NoteCreateResponse(BaseModel):
    message: str
    data: NoteOut
    notification: Notification


class GroupCreateResponse(BaseModel):
    message: str
    data: GroupOut
    notification: Notification
