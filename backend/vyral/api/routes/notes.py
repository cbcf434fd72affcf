"""Note Routes — create, list and delete free-text notes.

Invariants:
    - Every response carries the full note list, newest first
    - Blank text is rejected by NoteCreate (400 VALIDATION_ERROR) before the DB is touched
    - Deleting a missing note answers 404 RESOURCE_NOT_FOUND
"""

from fastapi import APIRouter, Depends, status

from vyral.schemas.note import NoteCreate, NoteListResponse
from vyral.core.boundary_protocols import NoteRepository
from vyral.services.note_store import get_note_repository

router = APIRouter(prefix="/api/v1/notes", tags=["notes"])


@router.get("", response_model=NoteListResponse)
async def list_notes(repo: NoteRepository = Depends(get_note_repository)):
    return {"notes": await repo.list_notes()}


@router.post(
    "", response_model=NoteListResponse, status_code=status.HTTP_201_CREATED,
)
async def create_note(
    body: NoteCreate, repo: NoteRepository = Depends(get_note_repository),
):
    return {"notes": await repo.create(body.text)}


@router.delete("/{note_id}", response_model=NoteListResponse)
async def delete_note(
    note_id: int, repo: NoteRepository = Depends(get_note_repository),
):
    return {"notes": await repo.delete(note_id)}
