"""Endpoints del feed de preguntas: listar, publicar, votar y guardar."""
from fastapi import APIRouter, Depends, HTTPException, status

from app.api.deps import get_current_user
from app.api.schemas.note import NoteOut
from app.api.schemas.question import (
    FeedOut,
    QuestionCreate,
    QuestionCreateResponse,
    SaveOut,
    SavedListOut,
    VoteOut,
)
from app.domain.users.schemas import User
from app.services import question_service as service
from app.services.notes_view_service import NotesViewModel

router = APIRouter(prefix="/questions", tags=["Questions"])


@router.get("/feed", response_model=FeedOut, summary="Feed del dashboard")
def get_feed(user: User = Depends(get_current_user)) -> FeedOut:
    data = service.feed(user.id)
    vm = NotesViewModel.for_user(user.id)
    return FeedOut(
        questions=data["questions"],
        recent_notes=[NoteOut.from_note(n, vm.group_name(n)) for n in data["recent_notes"]],
    )


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=QuestionCreateResponse,
    summary="Publicar pregunta",
)
def post_question(payload: QuestionCreate, user: User = Depends(get_current_user)) -> QuestionCreateResponse:
    try:
        res = service.post_question(user_id=user.id, title=payload.title, body=payload.body, tags=payload.tags)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return QuestionCreateResponse(data=res["item"], notification=res["notification"])


@router.post("/{question_id}/vote", response_model=VoteOut, summary="Votar / quitar voto")
def vote(question_id: str, user: User = Depends(get_current_user)) -> VoteOut:
    return VoteOut(**service.toggle_vote(user_id=user.id, question_id=question_id))


@router.post("/{question_id}/save", response_model=SaveOut, summary="Guardar / quitar de guardados")
def save(question_id: str, user: User = Depends(get_current_user)) -> SaveOut:
    return SaveOut(**service.toggle_save(user_id=user.id, question_id=question_id))


@router.get("/saved", response_model=SavedListOut, summary="Preguntas guardadas")
def list_saved(user: User = Depends(get_current_user)) -> SavedListOut:
    return SavedListOut(questions=service.list_saved(user.id))
