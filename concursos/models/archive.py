from sqlalchemy import Column, Integer, Boolean, DateTime, ForeignKey, func
from concursos.models.base import Base

class ArchiveEntry(Base):
    __tablename__ = "archive"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    announcement_id = Column(Integer, ForeignKey("announcements.id", ondelete="CASCADE"), nullable=False, unique=True)
    is_archived = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
