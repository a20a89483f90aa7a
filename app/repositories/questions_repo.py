"""Repo de preguntas, votos y elementos guardados."""
from typing import Any, Dict, List, Optional
from uuid import uuid4

from app.core.time import now_utc
from app.domain.questions.schemas import Question, SavedItem, Vote
from app.infrastructure.db.memory import get_db

QUESTION_COLL = "question"
VOTE_COLL = "vote"
SAVED_COLL = "saved_item"


def list_questions() -> List[Question]:
    """Preguntas ordenadas por created_at desc."""
    items = [Question(**d) for d in get_db()[QUESTION_COLL]]
    return sorted(items, key=lambda q: q.created_at, reverse=True)


def get_question(question_id: str) -> Optional[Question]:
    d = get_db().find_one(QUESTION_COLL, id=question_id)
    return Question(**d) if d else None


def insert_question(doc: Dict[str, Any]) -> Question:
    db = get_db()
    data = dict(doc)
    data.setdefault("id", f"question_{uuid4().hex[:12]}")
    data.setdefault("created_at", now_utc())
    q = Question(**data)
    with db.lock:
        db[QUESTION_COLL].append(q.model_dump())
    return q


# --- Votos ---

def get_vote(user_id: str, item_id: str) -> Optional[Vote]:
    d = get_db().find_one(VOTE_COLL, user_id=user_id, item_id=item_id)
    return Vote(**d) if d else None


def _toggle(coll: str, doc: Dict[str, Any]) -> bool:
    """Inserta `doc` si no existe el par (user_id, item_id); si existe, lo quita.

    Devuelve True si quedó insertado. Comprobación y cambio van bajo el mismo lock.
    """
    db = get_db()
    with db.lock:
        items = db[coll]
        kept = [d for d in items if not (d["user_id"] == doc["user_id"] and d["item_id"] == doc["item_id"])]
        if len(kept) < len(items):
            items[:] = kept
            return False
        items.append(doc)
        return True


def toggle_vote(vote: Vote) -> bool:
    return _toggle(VOTE_COLL, vote.model_dump())


def count_votes(item_id: str) -> int:
    return len(get_db().find(VOTE_COLL, item_id=item_id))


# --- Guardados ---

def is_saved(user_id: str, item_id: str) -> bool:
    return get_db().find_one(SAVED_COLL, user_id=user_id, item_id=item_id) is not None


def toggle_saved(user_id: str, item_id: str, item_type: str = "question") -> bool:
    item = SavedItem(user_id=user_id, item_id=item_id, item_type=item_type, saved_at=now_utc())
    return _toggle(SAVED_COLL, item.model_dump())


def list_saved(user_id: str, item_type: Optional[str] = None) -> List[SavedItem]:
    filtro: Dict[str, Any] = {"user_id": user_id}
    if item_type:
        filtro["item_type"] = item_type
    items = [SavedItem(**d) for d in get_db().find(SAVED_COLL, **filtro)]
    return sorted(items, key=lambda s: s.saved_at, reverse=True)
