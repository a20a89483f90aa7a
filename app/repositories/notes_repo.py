"""Repo de las colecciones `note`, `notes_group` y `global_note`.

Devuelve modelos de dominio (copias); las escrituras sellan timestamps UTC.
"""
from typing import Any, Dict, List, Optional
from uuid import uuid4

from app.core.time import now_utc
from app.domain.notes.schemas import GlobalNote, Note, NotesGroup
from app.infrastructure.db.memory import get_db

NOTE_COLL = "note"
GROUP_COLL = "notes_group"
GLOBAL_COLL = "global_note"


def _new_id(prefix: str) -> str:
    return f"{prefix}_{uuid4().hex[:12]}"


def list_groups(owner_id: Optional[str] = None) -> List[NotesGroup]:
    db = get_db()
    filtro = {"owner_id": owner_id} if owner_id else {}
    return [NotesGroup(**d) for d in db.find(GROUP_COLL, **filtro)]


def get_group(group_id: str) -> Optional[NotesGroup]:
    d = get_db().find_one(GROUP_COLL, id=group_id)
    return NotesGroup(**d) if d else None


def insert_group(doc: Dict[str, Any]) -> NotesGroup:
    """Inserta grupo con defaults y devuelve el modelo creado."""
    db = get_db()
    data = dict(doc)
    data.setdefault("id", _new_id("group"))
    data.setdefault("description", "")
    data.setdefault("created_at", now_utc())
    group = NotesGroup(**data)
    with db.lock:
        db[GROUP_COLL].append(group.model_dump())
    return group


def list_notes(owner_id: Optional[str] = None) -> List[Note]:
    db = get_db()
    filtro = {"owner_id": owner_id} if owner_id else {}
    return [Note(**d) for d in db.find(NOTE_COLL, **filtro)]


def get_note(note_id: str) -> Optional[Note]:
    d = get_db().find_one(NOTE_COLL, id=note_id)
    return Note(**d) if d else None


def insert_note(doc: Dict[str, Any]) -> Note:
    """Inserta nota (rating 0, privada por defecto) y devuelve el modelo creado."""
    db = get_db()
    data = dict(doc)
    now = now_utc()
    data.setdefault("id", _new_id("note"))
    data.setdefault("visibility", "private")
    data.setdefault("rating", 0)
    data.setdefault("tags", [])
    data.setdefault("created_at", now)
    data["updated_at"] = now
    note = Note(**data)
    with db.lock:
        db[NOTE_COLL].append(note.model_dump())
    return note


def list_global_notes() -> List[GlobalNote]:
    return [GlobalNote(**d) for d in get_db()[GLOBAL_COLL]]


def get_global_note(note_id: str) -> Optional[GlobalNote]:
    d = get_db().find_one(GLOBAL_COLL, id=note_id)
    return GlobalNote(**d) if d else None
