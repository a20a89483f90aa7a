"""
Endpoints de la biblioteca de notas: mis notas, grupos, notas globales, recientes y tags.
"""
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, Query, status

from app.api.deps import get_current_user
from app.api.schemas.note import (
    GlobalNoteOut,
    GlobalNotesListOut,
    GroupCreate,
    GroupCreateResponse,
    GroupListOut,
    GroupOut,
    MyNotesListOut,
    NoteCreate,
    NoteCreateResponse,
    NoteOut,
    RecentListOut,
    TagListOut,
)
from app.domain.notes.query import GlobalNotesQuery, MyNotesQuery
from app.domain.notes.schemas import GlobalNote
from app.domain.users.schemas import User
from app.repositories import notes_repo
from app.services import note_service
from app.services.notes_view_service import NotesViewModel


router = APIRouter(prefix="/notes", tags=["Notes"])


def _my_query(q: Optional[str], sort_by: Optional[str], sort_order: Optional[str], tag: List[str]) -> MyNotesQuery:
    return MyNotesQuery(search=q, sort_by=sort_by or "recent-edit", sort_order=sort_order, tags=tag)


@router.get(
    "/mine",
    response_model=MyNotesListOut,
    summary="Listar mis notas",
    description="Búsqueda por título, filtro por tags (título/grupo) y orden por recencia o título.",
)
def list_my_notes(
    q: Optional[str] = Query(default=None, description="Texto a buscar en el título"),
    sort_by: Optional[str] = Query(default=None, description="recent-edit | recent-upload | recent-view | title"),
    sort_order: Optional[str] = Query(default=None, description="asc | desc"),
    tag: List[str] = Query(default=[]),
    user: User = Depends(get_current_user),
) -> MyNotesListOut:
    vm = NotesViewModel.for_user(user.id)
    notes = vm.filter_my_notes(_my_query(q, sort_by, sort_order, tag))
    return MyNotesListOut(notes=[NoteOut.from_note(n, vm.group_name(n)) for n in notes], total=len(notes))


@router.get(
    "/mine/groups",
    response_model=GroupListOut,
    summary="Mis grupos con sus notas",
)
def list_my_groups(
    q: Optional[str] = Query(default=None),
    sort_by: Optional[str] = Query(default=None, description="title | (otro: fecha de creación)"),
    sort_order: Optional[str] = Query(default=None),
    tag: List[str] = Query(default=[]),
    user: User = Depends(get_current_user),
) -> GroupListOut:
    vm = NotesViewModel.for_user(user.id)
    groups = vm.filter_groups(_my_query(q, sort_by, sort_order, tag))
    return GroupListOut(groups=[GroupOut.from_group(g.group, g.notes) for g in groups])


@router.get(
    "/global",
    response_model=GlobalNotesListOut,
    summary="Listar notas globales",
    description="Notas públicas de la comunidad con búsqueda, filtro por materia, rating mínimo y orden.",
)
def list_global_notes(
    q: Optional[str] = Query(default=None, description="Busca en título, materia y autor"),
    sort_by: Optional[str] = Query(default=None, description="recent | likes | views | rating | title"),
    sort_order: Optional[str] = Query(default=None, description="asc | desc"),
    subject: List[str] = Query(default=[]),
    min_rating: Optional[str] = Query(default=None, description="0..5"),
) -> GlobalNotesListOut:
    query = GlobalNotesQuery(
        search=q, sort_by=sort_by or "recent", sort_order=sort_order, subjects=subject, min_rating=min_rating
    )
    vm = NotesViewModel(my_notes=[], groups=[], global_notes=notes_repo.list_global_notes())
    notes = vm.filter_global_notes(query)
    return GlobalNotesListOut(
        notes=[GlobalNoteOut.from_note(n) for n in notes],
        total=len(notes),
        filters_active=bool(query.search or query.subjects or query.min_rating > 0),
    )


@router.get("/recent", response_model=RecentListOut, summary="Vistas recientemente (mis notas + globales)")
def list_recent(
    limit: Optional[int] = Query(default=None, ge=0, le=100),
    user: User = Depends(get_current_user),
) -> RecentListOut:
    return RecentListOut(notes=NotesViewModel.for_user(user.id).recently_viewed(limit))


@router.get("/tags", response_model=TagListOut, summary="Tags disponibles para filtrar mis notas")
def list_tags(user: User = Depends(get_current_user)) -> TagListOut:
    return TagListOut(tags=NotesViewModel.for_user(user.id).available_tags())


@router.post(
    "/groups",
    status_code=status.HTTP_201_CREATED,
    response_model=GroupCreateResponse,
    summary="Crear grupo de notas",
)
def create_group(payload: GroupCreate, user: User = Depends(get_current_user)) -> GroupCreateResponse:
    try:
        group, notification = note_service.create_group(
            owner_id=user.id, name=payload.name, description=payload.description
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return GroupCreateResponse(message="ok", data=GroupOut.from_group(group), notification=notification)


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=NoteCreateResponse,
    summary="Crear nota",
    description="Crea una nota en un grupo propio con visibilidad y tags.",
)
def create_note(payload: NoteCreate, user: User = Depends(get_current_user)) -> NoteCreateResponse:
    try:
        note, notification = note_service.create_note(
            owner_id=user.id,
            title=payload.title,
            notes_group_id=payload.notes_group_id,
            visibility=payload.visibility,
            tags=payload.tags,
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    group = notes_repo.get_group(note.notes_group_id)
    return NoteCreateResponse(
        message="ok",
        data=NoteOut.from_note(note, group.name if group else None),
        notification=notification,
    )


@router.get("/{note_id}", response_model=NoteOut | GlobalNoteOut, summary="Detalle de nota")
def get_note(note_id: str, user: User = Depends(get_current_user)):
    note = note_service.get_note(note_id, user_id=user.id)
    if isinstance(note, GlobalNote):
        return GlobalNoteOut.from_note(note)
    group = notes_repo.get_group(note.notes_group_id)
    return NoteOut.from_note(note, group.name if group else None)
