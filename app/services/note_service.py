"""
Service layer for notes: creación de notas/grupos y lectura por id.
"""
import logging
from typing import Dict, List, Tuple, Union

from app.core.exceptions import NotFoundError
from app.domain.notes.schemas import GlobalNote, Note, NotesGroup
from app.repositories import notes_repo

_log = logging.getLogger("cognitia.notes")

Notification = Dict[str, str]


def normalize_tags(tags: List[str]) -> List[str]:
    uniq: List[str] = []
    for t in tags or []:
        tt = t.strip().lower()
        if tt and tt not in uniq:
            uniq.append(tt)
    return uniq


def create_group(*, owner_id: str, name: str, description: str = "") -> Tuple[NotesGroup, Notification]:
    name = name.strip()
    if not name:
        raise ValueError("El nombre del grupo es obligatorio")
    group = notes_repo.insert_group({"name": name, "description": description.strip(), "owner_id": owner_id})
    _log.info("Grupo creado id=%s owner=%s", group.id, owner_id)
    return group, {"title": "Group created", "description": f'Group "{group.name}" created successfully!'}


def create_note(
    *,
    owner_id: str,
    title: str,
    notes_group_id: str,
    visibility: str = "private",
    tags: List[str] | None = None,
) -> Tuple[Note, Notification]:
    """Crea una nota dentro de un grupo del propio usuario."""
    title = title.strip()
    if not title:
        raise ValueError("El título de la nota es obligatorio")
    group = notes_repo.get_group(notes_group_id)
    if group is None or group.owner_id != owner_id:
        raise NotFoundError("Grupo", notes_group_id)
    note = notes_repo.insert_note({
        "title": title,
        "notes_group_id": group.id,
        "visibility": visibility,
        "owner_id": owner_id,
        "tags": normalize_tags(tags or []),
    })
    _log.info("Nota creada id=%s group=%s owner=%s", note.id, group.id, owner_id)
    return note, {"title": "Note created", "description": f'Note "{note.title}" created successfully!'}


def get_note(note_id: str, *, user_id: str) -> Union[Note, GlobalNote]:
    """Nota propia del usuario o nota global; las notas privadas ajenas no se exponen."""
    note = notes_repo.get_note(note_id)
    if note is not None and (note.owner_id == user_id or note.visibility == "public"):
        return note
    global_note = notes_repo.get_global_note(note_id)
    if global_note is not None:
        return global_note
    raise NotFoundError("Nota", note_id)
