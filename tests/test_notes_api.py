from app.infrastructure.db import seed_data


def test_my_notes_requires_token(client):
    r = client.get("/api/notes/mine")
    assert r.status_code == 401
    assert r.json()["message"] == "Falta token"
    assert "request_id" in r.json()


def test_my_notes_default_order(client, auth_headers):
    r = client.get("/api/notes/mine", headers=auth_headers)
    assert r.status_code == 200
    body = r.json()
    assert body["total"] == len(seed_data.NOTES)
    # updated: note_1 hace 2h, note_5 hace 6h, note_2 hace 1 día
    assert [n["id"] for n in body["notes"]][:3] == ["note_1", "note_5", "note_2"]
    first = body["notes"][0]
    assert first["group_name"] == "Mathematics"
    assert first["updated_ago"] == "2 hours ago"


def test_my_notes_search_and_tags(client, auth_headers):
    r = client.get("/api/notes/mine", params={"q": "wave"}, headers=auth_headers)
    assert [n["id"] for n in r.json()["notes"]] == ["note_4"]

    r = client.get("/api/notes/mine", params=[("tag", "Physics"), ("tag", "sorting")], headers=auth_headers)
    assert {n["id"] for n in r.json()["notes"]} == {"note_3", "note_4", "note_5"}


def test_my_notes_title_sort(client, auth_headers):
    r = client.get("/api/notes/mine", params={"sort_by": "title", "sort_order": "asc"}, headers=auth_headers)
    titles = [n["title"] for n in r.json()["notes"]]
    assert titles == sorted(titles, key=str.casefold)


def test_unknown_sort_values_do_not_fail(client, auth_headers):
    r = client.get("/api/notes/mine", params={"sort_by": "bogus", "sort_order": "up"}, headers=auth_headers)
    assert r.status_code == 200
    default = client.get("/api/notes/mine", headers=auth_headers).json()
    assert r.json()["notes"] == default["notes"]


def test_global_notes_are_public_and_filtered(client):
    r = client.get("/api/notes/global", params=[("subject", "Mathematics"), ("min_rating", "4")])
    assert r.status_code == 200
    body = r.json()
    assert body["filters_active"] is True
    assert [n["id"] for n in body["notes"]] == ["global_1"]


def test_global_notes_sort_by_views(client):
    r = client.get("/api/notes/global", params={"sort_by": "views"})
    views = [n["view_count"] for n in r.json()["notes"]]
    assert views == sorted(views, reverse=True)
    assert r.json()["filters_active"] is False


def test_global_notes_empty_result(client):
    r = client.get("/api/notes/global", params={"q": "astrology"})
    assert r.json() == {"notes": [], "total": 0, "filters_active": True}


def test_groups_tab(client, auth_headers):
    r = client.get("/api/notes/mine/groups", params={"sort_by": "title", "sort_order": "asc"}, headers=auth_headers)
    groups = r.json()["groups"]
    assert [g["name"] for g in groups] == ["Computer Science", "Mathematics", "Physics"]
    assert {n["id"] for n in groups[1]["notes"]} == {"note_1", "note_2"}

    r = client.get("/api/notes/mine/groups", params={"tag": "science"}, headers=auth_headers)
    assert [g["name"] for g in r.json()["groups"]] == ["Computer Science"]


def test_recent_and_tags(client, auth_headers):
    r = client.get("/api/notes/recent", headers=auth_headers)
    notes = r.json()["notes"]
    assert len(notes) == 12
    assert notes[0]["id"] == "note_1" and notes[0]["source"] == "my"
    assert notes[1]["id"] == "global_1" and notes[1]["source"] == "global"

    r = client.get("/api/notes/recent", params={"limit": 3}, headers=auth_headers)
    assert len(r.json()["notes"]) == 3

    tags = client.get("/api/notes/tags", headers=auth_headers).json()["tags"]
    assert "Calculus" in tags and "Computer Science" in tags


def test_create_group_and_note(client, auth_headers):
    r = client.post("/api/notes/groups", json={"name": "Chemistry", "description": "Labs"}, headers=auth_headers)
    assert r.status_code == 201
    group = r.json()["data"]
    assert r.json()["notification"]["description"] == 'Group "Chemistry" created successfully!'

    r = client.post(
        "/api/notes",
        json={"title": "Titration Lab", "notes_group_id": group["id"], "visibility": "public", "tags": [" Lab ", "lab"]},
        headers=auth_headers,
    )
    assert r.status_code == 201
    note = r.json()["data"]
    assert note["group_name"] == "Chemistry"
    assert note["tags"] == ["lab"]
    assert note["rating"] == 0

    r = client.get("/api/notes/mine", params={"q": "titration"}, headers=auth_headers)
    assert [n["id"] for n in r.json()["notes"]] == [note["id"]]
    # nota recién creada queda primera por recencia
    r = client.get("/api/notes/mine", headers=auth_headers)
    assert r.json()["notes"][0]["id"] == note["id"]


def test_create_note_in_unknown_group(client, auth_headers):
    r = client.post("/api/notes", json={"title": "X", "notes_group_id": "nope"}, headers=auth_headers)
    assert r.status_code == 404


def test_create_note_blank_title(client, auth_headers):
    r = client.post("/api/notes", json={"title": "   ", "notes_group_id": "group_1"}, headers=auth_headers)
    assert r.status_code == 400


def test_get_note_detail(client, auth_headers):
    r = client.get("/api/notes/note_2", headers=auth_headers)
    assert r.status_code == 200
    assert r.json()["group_name"] == "Mathematics"

    r = client.get("/api/notes/global_3", headers=auth_headers)
    assert r.json()["author"]["name"] == "Maria Garcia"

    r = client.get("/api/notes/missing", headers=auth_headers)
    assert r.status_code == 404
