"""
Proyección de lectura de la biblioteca de notas: búsqueda, filtros y orden.

`NotesViewModel` trabaja sobre colecciones ya cargadas ("mis notas", grupos y
notas globales) y no tiene efectos secundarios; cada consulta re-deriva el
resultado completo. Las claves de orden desconocidas caen al orden por
recencia sin error.

Dirección de orden: `asc` = menor primero (más antigua, A..Z, menos likes);
`desc` = mayor primero. El ordenamiento es estable, así que empates conservan
el orden de la colección de origen.
"""
from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence

from app.core.config import settings
from app.domain.notes.query import GlobalNotesQuery, MyNotesQuery
from app.domain.notes.schemas import GlobalNote, GroupWithNotes, Note, NotesGroup, RecentNote
from app.repositories import notes_repo

_log = logging.getLogger("cognitia.notes.view")

SortKey = Callable[[Any], Any]

# Clave -> función de orden (valor "natural": asc = menor primero)
_MY_NOTES_SORTS: Dict[str, SortKey] = {
    "recent-edit": lambda n: n.updated_at,
    "recent-upload": lambda n: n.created_at,
    # Sin tracking de vistas: se aproxima con la última edición
    "recent-view": lambda n: n.updated_at,
    "title": lambda n: (n.title.casefold(), n.title),
}
_MY_NOTES_DEFAULT = "recent-edit"

_GLOBAL_NOTES_SORTS: Dict[str, SortKey] = {
    "recent": lambda n: n.updated_at,
    "likes": lambda n: n.like_count,
    "views": lambda n: n.view_count,
    "rating": lambda n: n.rating,
    "title": lambda n: (n.title.casefold(), n.title),
}
_GLOBAL_NOTES_DEFAULT = "recent"


def _contains(haystack: Optional[str], needle: str) -> bool:
    return bool(haystack) and needle.casefold() in haystack.casefold()


def _sorted(items: Iterable[Any], sorts: Dict[str, SortKey], key: str, default: str, order: str) -> List[Any]:
    fn = sorts.get(key)
    if fn is None:
        if key:
            _log.debug("sort_by desconocido %r; usando %r", key, default)
        fn = sorts[default]
    return sorted(items, key=fn, reverse=(order != "asc"))


class NotesViewModel:
    """Vista filtrada/ordenada de notas propias y globales.

    Se construye con las colecciones del proveedor de datos; `for_user` arma una
    instancia con los datos del almacén para un usuario.
    """

    def __init__(
        self,
        my_notes: Sequence[Note],
        groups: Sequence[NotesGroup],
        global_notes: Sequence[GlobalNote],
    ) -> None:
        self.my_notes = list(my_notes)
        self.groups = list(groups)
        self.global_notes = list(global_notes)
        self._group_names: Dict[str, str] = {g.id: g.name for g in self.groups}

    @classmethod
    def for_user(cls, user_id: str) -> "NotesViewModel":
        return cls(
            my_notes=notes_repo.list_notes(owner_id=user_id),
            groups=notes_repo.list_groups(owner_id=user_id),
            global_notes=notes_repo.list_global_notes(),
        )

    def group_name(self, note: Note) -> Optional[str]:
        return self._group_names.get(note.notes_group_id)

    # --- Mis notas ---

    def _matches_tags(self, note: Note, tags: List[str]) -> bool:
        # Heurística: el título y el nombre del grupo hacen de fuente de tags,
        # además de los tags explícitos de la nota.
        group = self.group_name(note)
        explicit = {t.casefold() for t in note.tags}
        return any(
            _contains(note.title, tag) or _contains(group, tag) or tag.casefold() in explicit
            for tag in tags
        )

    def filter_my_notes(self, query: Optional[MyNotesQuery] = None) -> List[Note]:
        query = query or MyNotesQuery()
        result = self.my_notes
        if query.search:
            result = [n for n in result if _contains(n.title, query.search)]
        if query.tags:
            result = [n for n in result if self._matches_tags(n, query.tags)]
        return _sorted(result, _MY_NOTES_SORTS, query.sort_by, _MY_NOTES_DEFAULT, query.sort_order)

    def filter_groups(self, query: Optional[MyNotesQuery] = None) -> List[GroupWithNotes]:
        """Pestaña "Groups": grupos filtrados por nombre, cada uno con sus notas."""
        query = query or MyNotesQuery()
        groups = self.groups
        if query.search:
            groups = [g for g in groups if _contains(g.name, query.search)]
        if query.tags:
            groups = [g for g in groups if any(_contains(g.name, t) for t in query.tags)]
        if query.sort_by == "title":
            key: SortKey = lambda g: (g.name.casefold(), g.name)
        else:
            key = lambda g: g.created_at
        groups = sorted(groups, key=key, reverse=(query.sort_order != "asc"))
        return [
            GroupWithNotes(group=g, notes=[n for n in self.my_notes if n.notes_group_id == g.id])
            for g in groups
        ]

    def available_tags(self) -> List[str]:
        """Tags ofrecidos en el filtro: palabras largas de títulos, nombres de grupo y tags explícitos."""
        seen: Dict[str, None] = {}
        for n in self.my_notes:
            for word in n.title.split(" "):
                if len(word) >= settings.tag_min_word_length:
                    seen.setdefault(word, None)
        for g in self.groups:
            seen.setdefault(g.name, None)
        for n in self.my_notes:
            for t in n.tags:
                seen.setdefault(t, None)
        return list(seen)

    # --- Notas globales ---

    def filter_global_notes(self, query: Optional[GlobalNotesQuery] = None) -> List[GlobalNote]:
        query = query or GlobalNotesQuery()
        result = self.global_notes
        if query.search:
            s = query.search
            result = [
                n for n in result
                if _contains(n.title, s) or _contains(n.group_name, s) or _contains(n.author.name, s)
            ]
        if query.subjects:
            subjects = set(query.subjects)
            result = [n for n in result if n.group_name in subjects]
        if query.min_rating > 0:
            result = [n for n in result if n.rating >= query.min_rating]
        return _sorted(result, _GLOBAL_NOTES_SORTS, query.sort_by, _GLOBAL_NOTES_DEFAULT, query.sort_order)

    # --- Recientes ---

    def recently_viewed(self, limit: Optional[int] = None) -> List[RecentNote]:
        """Mis notas y notas globales combinadas, más recientes primero."""
        limit = settings.recent_notes_limit if limit is None else limit
        combined = [
            RecentNote(
                id=n.id,
                title=n.title,
                group_name=self.group_name(n),
                rating=n.rating,
                source="my",
                last_viewed=n.updated_at,
            )
            for n in self.my_notes
        ] + [
            RecentNote(
                id=n.id,
                title=n.title,
                group_name=n.group_name,
                rating=n.rating,
                source="global",
                last_viewed=n.updated_at,
            )
            for n in self.global_notes
        ]
        combined.sort(key=lambda r: r.last_viewed, reverse=True)
        return combined[: max(limit, 0)]
