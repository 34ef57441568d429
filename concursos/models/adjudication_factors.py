from sqlalchemy import Column, Integer, String, Numeric, ForeignKey
from concursos.models.base import Base

class AdjudicationFactor(Base):
    __tablename__ = "adjudication_factors"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    announcement_id = Column(Integer, ForeignKey("announcements.id", ondelete="CASCADE"), nullable=False, index=True)
    factor_name = Column(String)
    other_factor_name = Column(String)
    percentage = Column(Numeric(5, 2))
    sub_factor_name = Column(String)
    sub_factor_percentage = Column(Numeric(5, 2))
