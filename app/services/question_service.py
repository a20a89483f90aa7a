"""
Feed de preguntas del dashboard: publicar, votar (toggle) y guardar (toggle).
"""
import logging
from typing import Any, Dict, List, Optional

from app.core.config import settings
from app.core.exceptions import NotFoundError
from app.domain.notes.schemas import Author
from app.domain.questions.schemas import Question, Vote
from app.repositories import auth_repo, notes_repo, questions_repo
from app.services.note_service import normalize_tags

_log = logging.getLogger("cognitia.questions")


def _require_question(question_id: str) -> Question:
    q = questions_repo.get_question(question_id)
    if q is None:
        raise NotFoundError("Pregunta", question_id)
    return q


def vote_count(question: Question) -> int:
    """Conteo base del feed más los votos registrados."""
    return question.vote_count + questions_repo.count_votes(question.id)


def user_vote(user_id: str, question_id: str) -> Optional[str]:
    v = questions_repo.get_vote(user_id, question_id)
    return v.direction if v else None


def feed_item(question: Question, user_id: str) -> Dict[str, Any]:
    return {
        "question": question,
        "vote_count": vote_count(question),
        "user_vote": user_vote(user_id, question.id),
        "is_saved": questions_repo.is_saved(user_id, question.id),
    }


def feed(user_id: str) -> Dict[str, Any]:
    """Preguntas (más nuevas primero) con estado del usuario y sus notas recientes."""
    notes = sorted(notes_repo.list_notes(owner_id=user_id), key=lambda n: n.updated_at, reverse=True)
    return {
        "questions": [feed_item(q, user_id) for q in questions_repo.list_questions()],
        "recent_notes": notes[: settings.dashboard_recent_notes],
    }


def post_question(*, user_id: str, title: str, body: str, tags: List[str] | None = None) -> Dict[str, Any]:
    title = title.strip()
    if not title:
        raise ValueError("El título de la pregunta es obligatorio")
    user = auth_repo.get_user_by_id(user_id)
    if user is None:
        raise NotFoundError("Usuario", user_id)
    q = questions_repo.insert_question({
        "title": title,
        "body": body.strip(),
        "tags": normalize_tags(tags or []),
        "author": Author(id=user.id, name=user.name),
    })
    _log.info("Pregunta publicada id=%s user=%s", q.id, user_id)
    return {
        "item": feed_item(q, user_id),
        "notification": {"title": "Question posted", "description": "Your question has been posted successfully"},
    }


def toggle_vote(*, user_id: str, question_id: str) -> Dict[str, Any]:
    """Up-vote si el usuario no había votado; si ya votó, retira el voto."""
    q = _require_question(question_id)
    if questions_repo.toggle_vote(Vote(user_id=user_id, item_id=question_id)):
        notification = {"title": "Upvoted", "description": "You've upvoted this question"}
    else:
        notification = {"title": "Vote removed", "description": "You've removed your vote from this question"}
    _log.info("Voto %s question=%s user=%s", notification["title"], question_id, user_id)
    return {
        "question_id": q.id,
        "vote_count": vote_count(q),
        "user_vote": user_vote(user_id, q.id),
        "notification": notification,
    }


def toggle_save(*, user_id: str, question_id: str) -> Dict[str, Any]:
    q = _require_question(question_id)
    if questions_repo.toggle_saved(user_id, question_id, "question"):
        notification = {"title": "Saved", "description": "Question added to your saved items"}
    else:
        notification = {"title": "Unsaved", "description": "Question removed from your saved items"}
    return {
        "question_id": q.id,
        "is_saved": questions_repo.is_saved(user_id, q.id),
        "notification": notification,
    }


def list_saved(user_id: str) -> List[Dict[str, Any]]:
    """Preguntas guardadas por el usuario (más recientes primero); ignora ids huérfanos."""
    out: List[Dict[str, Any]] = []
    for s in questions_repo.list_saved(user_id, item_type="question"):
        q = questions_repo.get_question(s.item_id)
        if q is not None:
            out.append(feed_item(q, user_id))
    return out
