from datetime import datetime
from typing import Optional

from pydantic import BaseModel, StrictStr


class NoteWrite(BaseModel):
    noteText: StrictStr


class Note(BaseModel):
    id: int
    announcement_id: int
    note_text: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class NoteResponse(BaseModel):
    note: Optional[Note] = None


class NoteSaved(BaseModel):
    success: bool
    note: Note
