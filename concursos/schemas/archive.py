from pydantic import BaseModel, StrictBool


class ArchiveWrite(BaseModel):
    isArchived: StrictBool


class ArchiveStatus(BaseModel):
    isArchived: bool
    exists: bool


class ArchiveUpdated(BaseModel):
    success: bool
    isArchived: bool
