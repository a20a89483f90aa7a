"""
Estado de consulta (búsqueda, filtros y orden) para las vistas de notas.

Vive lo que dura una petición. Valores ausentes o desconocidos se degradan a los
defaults en silencio: nunca es un error de validación.
"""
from typing import List, Literal, Optional

from pydantic import BaseModel, Field, field_validator


SortOrder = Literal["asc", "desc"]

MY_NOTES_SORT_KEYS = ("recent-edit", "recent-upload", "recent-view", "title")
GLOBAL_NOTES_SORT_KEYS = ("recent", "likes", "views", "rating", "title")


def _clean_terms(values: Optional[List[str]]) -> List[str]:
    out: List[str] = []
    for v in values or []:
        vv = (v or "").strip()
        if vv and vv not in out:
            out.append(vv)
    return out


class _BaseQuery(BaseModel):
    search: str = ""
    sort_by: str = ""
    sort_order: SortOrder = "desc"

    @field_validator("search", mode="before")
    @classmethod
    def _norm_search(cls, v: Optional[str]) -> str:
        return v or ""

    @field_validator("sort_by", mode="before")
    @classmethod
    def _norm_sort_by(cls, v: Optional[str]) -> str:
        return (v or "").strip().lower()

    @field_validator("sort_order", mode="before")
    @classmethod
    def _norm_sort_order(cls, v: Optional[str]) -> str:
        vv = (v or "").strip().lower()
        return vv if vv in ("asc", "desc") else "desc"


class MyNotesQuery(_BaseQuery):
    sort_by: str = "recent-edit"
    tags: List[str] = Field(default_factory=list)

    @field_validator("tags", mode="before")
    @classmethod
    def _norm_tags(cls, v: Optional[List[str]]) -> List[str]:
        return _clean_terms(v)


class GlobalNotesQuery(_BaseQuery):
    sort_by: str = "recent"
    subjects: List[str] = Field(default_factory=list)
    min_rating: float = 0

    @field_validator("subjects", mode="before")
    @classmethod
    def _norm_subjects(cls, v: Optional[List[str]]) -> List[str]:
        return _clean_terms(v)

    @field_validator("min_rating", mode="before")
    @classmethod
    def _norm_min_rating(cls, v) -> float:
        try:
            r = float(v or 0)
        except (TypeError, ValueError):
            return 0
        return min(max(r, 0), 5)
