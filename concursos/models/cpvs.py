from sqlalchemy import Column, Integer, String, Numeric, ForeignKey
from concursos.models.base import Base

class Cpv(Base):
    __tablename__ = "cpvs"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    announcement_id = Column(Integer, ForeignKey("announcements.id", ondelete="CASCADE"), nullable=False, index=True)
    code = Column(String, nullable=False, index=True)
    base_price = Column(Numeric(15, 2))
