"""Note Routes — create/list/delete against in-memory SQLite."""

from vyral.models.note import Note


async def test_list_starts_empty(client):
    res = await client.get("/api/v1/notes")
    assert res.status_code == 200
    assert res.json() == {"notes": []}


async def test_create_returns_list_newest_first(client):
    await client.post("/api/v1/notes", json={"text": "first"})
    res = await client.post("/api/v1/notes", json={"text": "  second  "})
    assert res.status_code == 201
    assert [n["text"] for n in res.json()["notes"]] == ["second", "first"]


async def test_blank_note_rejected(client):
    res = await client.post("/api/v1/notes", json={"text": "   "})
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"


async def test_delete_note(client, test_db):
    note = Note(text="to delete")
    test_db.add(note)
    await test_db.commit()
    await test_db.refresh(note)

    res = await client.delete(f"/api/v1/notes/{note.id}")
    assert res.status_code == 200
    assert res.json() == {"notes": []}


async def test_delete_missing_note_returns_404(client):
    res = await client.delete("/api/v1/notes/999")
    assert res.status_code == 404
    assert res.json()["error"]["code"] == "RESOURCE_NOT_FOUND"
