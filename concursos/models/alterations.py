from sqlalchemy import Column, Integer, String, DateTime, func
from concursos.models.base import Base

class Alteration(Base):
    __tablename__ = "alterations"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    internal_id = Column(String, nullable=False)
    previous_internal_id = Column(String, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
