from sqlalchemy import Column, Integer, String, Text, Numeric, Boolean, DateTime, func
from concursos.models.base import Base

class Announcement(Base):
    __tablename__ = "announcements"

    id = Column(Integer, primary_key=True, index=True)
    diario_id = Column(Integer)
    issuer = Column(String)
    number = Column(String)
    pdf_url = Column(String)
    summary = Column(Text)
    processo_tipo = Column(String)
    processo_preco_base_valor = Column(Numeric(15, 2))
    base_price = Column(Numeric(15, 2))
    asset_valuation = Column(Numeric(15, 2))
    internal_id = Column(String, index=True)  # участвует в цепочке ревизий (alterations)
    object_designation = Column(Text)
    object_description = Column(Text)
    object_main_contract_type = Column(String)
    object_contract_type = Column(String)
    object_main_cpv = Column(String)
    entity_designacao = Column(String)
    entity_distrito = Column(String)
    entity_concelho = Column(String)
    publication_date = Column(DateTime(timezone=True))
    application_deadline = Column(String)  # "DD-MM-YYYY HH:MM" или ISO
    expired = Column(Boolean, nullable=True)  # NULL = срок не задан (N/A)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
