"""Note Schemas — create validation and list response.

Invariants:
    - NoteCreate.text: 1-5000 chars after stripping, never blank
"""

from pydantic import BaseModel, Field, field_validator


class NoteCreate(BaseModel):
    text: str = Field(min_length=1, max_length=5_000)

    @field_validator("text")
    @classmethod
    def strip_text(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("text cannot be empty or whitespace")
        return v


class NoteResponse(BaseModel):
    id: int
    text: str


class NoteListResponse(BaseModel):
    notes: list[NoteResponse]
