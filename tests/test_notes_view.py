from datetime import datetime, timedelta, timezone

import pytest

from app.domain.notes.query import GlobalNotesQuery, MyNotesQuery
from app.domain.notes.schemas import Author, GlobalNote, Note, NotesGroup
from app.services.notes_view_service import NotesViewModel

T0 = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


def _group(gid, name, days=0):
    return NotesGroup(id=gid, name=name, owner_id="u1", created_at=T0 - timedelta(days=days))


def _note(nid, title, group_id, updated_h=0, created_h=0, rating=0, tags=None):
    return Note(
        id=nid,
        title=title,
        notes_group_id=group_id,
        owner_id="u1",
        rating=rating,
        tags=tags or [],
        created_at=T0 - timedelta(hours=created_h),
        updated_at=T0 - timedelta(hours=updated_h),
    )


def _global(nid, title, group_name, author="Maria Garcia", rating=0.0, likes=0, views=0, updated_h=0):
    return GlobalNote(
        id=nid,
        title=title,
        notes_group_id="",
        owner_id="u2",
        group_name=group_name,
        author=Author(id="u2", name=author),
        rating=rating,
        like_count=likes,
        view_count=views,
        created_at=T0 - timedelta(days=10),
        updated_at=T0 - timedelta(hours=updated_h),
    )


@pytest.fixture
def vm():
    groups = [_group("g1", "Math", days=5), _group("g2", "Physics", days=2)]
    notes = [
        _note("n1", "Derivatives Basics", "g1", updated_h=1, created_h=50),
        _note("n2", "Integrals", "g1", updated_h=5, created_h=10),
        _note("n3", "Newton Laws", "g2", updated_h=3, created_h=30),
        _note("n4", "Waves and Optics", "g2", updated_h=8, created_h=5, tags=["exam"]),
        _note("n5", "Limits", "g1", updated_h=2, created_h=20),
    ]
    global_notes = [
        _global("x1", "Algebra Tricks", "Math", rating=4.5, likes=10, views=300, updated_h=4),
        _global("x2", "Heat Transfer", "Physics", author="Sam Lee", rating=3.0, likes=50, views=100, updated_h=1),
        _global("x3", "Matrix Calculus", "Math", rating=2.0, likes=5, views=900, updated_h=9),
        _global("x4", "Electric Fields", "Physics", author="Sam Lee", rating=5.0, likes=20, views=50, updated_h=2),
        _global("x5", "Set Theory", "Math", rating=4.0, likes=1, views=10, updated_h=6),
    ]
    return NotesViewModel(my_notes=notes, groups=groups, global_notes=global_notes)


def _ids(items):
    return [i.id for i in items]


def test_default_my_notes_sorted_by_last_edit_desc(vm):
    assert _ids(vm.filter_my_notes()) == ["n1", "n5", "n3", "n2", "n4"]


def test_my_notes_asc_puts_oldest_first(vm):
    result = vm.filter_my_notes(MyNotesQuery(sort_by="recent-edit", sort_order="asc"))
    assert _ids(result) == ["n4", "n2", "n3", "n5", "n1"]


def test_recent_upload_uses_created_at(vm):
    result = vm.filter_my_notes(MyNotesQuery(sort_by="recent-upload"))
    assert _ids(result) == ["n4", "n2", "n5", "n3", "n1"]


def test_title_ascending_is_alphabetical():
    g = _group("g1", "Math")
    notes = [_note("a", "Zeta", "g1"), _note("b", "Alpha", "g1"), _note("c", "Mu", "g1")]
    vm = NotesViewModel(my_notes=notes, groups=[g], global_notes=[])
    result = vm.filter_my_notes(MyNotesQuery(sort_by="title", sort_order="asc"))
    assert [n.title for n in result] == ["Alpha", "Mu", "Zeta"]
    result = vm.filter_my_notes(MyNotesQuery(sort_by="title", sort_order="desc"))
    assert [n.title for n in result] == ["Zeta", "Mu", "Alpha"]


def test_search_is_case_insensitive_on_title(vm):
    assert _ids(vm.filter_my_notes(MyNotesQuery(search="newton"))) == ["n3"]
    assert _ids(vm.filter_my_notes(MyNotesQuery(search="INTEGRALS"))) == ["n2"]
    # el término no se recorta: los espacios también cuentan
    assert vm.filter_my_notes(MyNotesQuery(search=" INTEGRALS ")) == []


def test_whitespace_search_matches_no_title(vm):
    assert not any("   " in n.title for n in vm.my_notes)
    assert vm.filter_my_notes(MyNotesQuery(search="   ")) == []
    assert vm.filter_global_notes(GlobalNotesQuery(search="   ")) == []
    assert vm.filter_groups(MyNotesQuery(search="   ")) == []


def test_search_without_match_is_empty(vm):
    assert vm.filter_my_notes(MyNotesQuery(search="thermodynamics")) == []
    assert vm.filter_global_notes(GlobalNotesQuery(search="zzz-no-match")) == []


def test_tag_filter_matches_title_or_group_name(vm):
    # "phys" aparece en el grupo Physics; "limit" en el título de n5
    result = vm.filter_my_notes(MyNotesQuery(tags=["phys", "limit"]))
    assert set(_ids(result)) == {"n3", "n4", "n5"}


def test_tag_filter_matches_explicit_tags(vm):
    assert _ids(vm.filter_my_notes(MyNotesQuery(tags=["EXAM"]))) == ["n4"]


def test_unknown_sort_key_falls_back_to_recent_edit(vm):
    result = vm.filter_my_notes(MyNotesQuery(sort_by="popularity"))
    assert _ids(result) == _ids(vm.filter_my_notes())


def test_unknown_sort_order_falls_back_to_desc():
    q = MyNotesQuery(sort_order="sideways")
    assert q.sort_order == "desc"


def test_subject_filter_returns_exactly_group_notes(vm):
    result = vm.filter_global_notes(GlobalNotesQuery(subjects=["Math"]))
    assert set(_ids(result)) == {"x1", "x3", "x5"}
    assert all(n.group_name == "Math" for n in result)


def test_subject_filter_is_exact_match(vm):
    assert vm.filter_global_notes(GlobalNotesQuery(subjects=["Mat"])) == []


def test_global_search_covers_group_and_author(vm):
    assert set(_ids(vm.filter_global_notes(GlobalNotesQuery(search="sam lee")))) == {"x2", "x4"}
    assert set(_ids(vm.filter_global_notes(GlobalNotesQuery(search="physics")))) == {"x2", "x4"}


@pytest.mark.parametrize("min_rating", [0.5, 3.0, 4.5, 5.0])
def test_min_rating_filter(vm, min_rating):
    result = vm.filter_global_notes(GlobalNotesQuery(min_rating=min_rating))
    assert result
    assert all(n.rating >= min_rating for n in result)


def test_malformed_min_rating_is_ignored(vm):
    result = vm.filter_global_notes(GlobalNotesQuery(min_rating="lots"))
    assert len(result) == 5


@pytest.mark.parametrize(
    "sort_by, expected",
    [
        ("likes", ["x2", "x4", "x1", "x3", "x5"]),
        ("views", ["x3", "x1", "x2", "x4", "x5"]),
        ("rating", ["x4", "x1", "x5", "x2", "x3"]),
        ("recent", ["x2", "x4", "x1", "x5", "x3"]),
        ("nonsense", ["x2", "x4", "x1", "x5", "x3"]),
    ],
)
def test_global_sort_keys_desc(vm, sort_by, expected):
    assert _ids(vm.filter_global_notes(GlobalNotesQuery(sort_by=sort_by))) == expected


def test_global_sort_asc_reverses_order(vm):
    result = vm.filter_global_notes(GlobalNotesQuery(sort_by="likes", sort_order="asc"))
    assert _ids(result) == ["x5", "x3", "x1", "x4", "x2"]


def test_result_is_subset_without_duplicates(vm):
    queries = [
        GlobalNotesQuery(),
        GlobalNotesQuery(search="a", sort_by="title"),
        GlobalNotesQuery(subjects=["Math", "Physics"], min_rating=3),
    ]
    all_ids = set(_ids(vm.global_notes))
    for q in queries:
        ids = _ids(vm.filter_global_notes(q))
        assert len(ids) == len(set(ids))
        assert set(ids) <= all_ids


def test_same_query_twice_gives_same_order():
    g = _group("g1", "Math")
    # empates en rating: el orden estable conserva el de la colección
    notes = [_note(f"n{i}", f"Note {i}", "g1", updated_h=1) for i in range(6)]
    vm = NotesViewModel(my_notes=notes, groups=[g], global_notes=[])
    q = MyNotesQuery(sort_by="recent-edit")
    first = _ids(vm.filter_my_notes(q))
    assert first == _ids(vm.filter_my_notes(q))
    assert first == [f"n{i}" for i in range(6)]


def test_filter_does_not_mutate_source(vm):
    before = _ids(vm.my_notes)
    vm.filter_my_notes(MyNotesQuery(sort_by="title", sort_order="asc"))
    assert _ids(vm.my_notes) == before


def test_groups_tab_filters_and_sorts(vm):
    result = vm.filter_groups(MyNotesQuery(sort_by="title", sort_order="asc"))
    assert [g.group.name for g in result] == ["Math", "Physics"]
    assert {n.id for n in result[0].notes} == {"n1", "n2", "n5"}

    # otro sort: por fecha de creación (desc = más nuevo primero)
    result = vm.filter_groups(MyNotesQuery())
    assert [g.group.name for g in result] == ["Physics", "Math"]

    result = vm.filter_groups(MyNotesQuery(search="phy"))
    assert [g.group.id for g in result] == ["g2"]


def test_groups_tab_tag_filter_uses_group_name(vm):
    result = vm.filter_groups(MyNotesQuery(tags=["phys"]))
    assert [g.group.id for g in result] == ["g2"]
    assert {n.id for n in result[0].notes} == {"n3", "n4"}

    # un tag que solo aparece en títulos de notas no conserva el grupo
    assert vm.filter_groups(MyNotesQuery(tags=["newton"])) == []
    result = vm.filter_groups(MyNotesQuery(tags=["MATH", "phys"]))
    assert {g.group.id for g in result} == {"g1", "g2"}


def test_groups_tab_title_desc(vm):
    result = vm.filter_groups(MyNotesQuery(sort_by="title", sort_order="desc"))
    assert [g.group.name for g in result] == ["Physics", "Math"]


def test_available_tags(vm):
    tags = vm.available_tags()
    assert "Derivatives" in tags
    assert "Newton" in tags
    # palabras de 3 letras o menos no se ofrecen
    assert "and" not in tags
    assert "Math" in tags and "Physics" in tags
    assert "exam" in tags
    assert len(tags) == len(set(tags))


def test_recently_viewed_merges_sources(vm):
    recent = vm.recently_viewed(limit=4)
    assert [r.id for r in recent] == ["n1", "x2", "n5", "x4"]
    assert recent[0].source == "my" and recent[0].group_name == "Math"
    assert recent[1].source == "global" and recent[1].group_name == "Physics"


def test_recently_viewed_default_limit(vm):
    assert len(vm.recently_viewed()) == 10
